"""Delivery of rendered roster files."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Delivery(ABC):
    """Abstract base class for file delivery targets."""

    @abstractmethod
    def deliver(self, filename: str, content: bytes) -> Optional[Path]:
        """Hand a rendered file to the user.

        Args:
            filename: Suggested file name, e.g. "ukg_roster_2025-08-11.csv".
            content: File content.

        Returns:
            Where the file ended up, if the target knows.
        """
        pass


class DirectoryDelivery(Delivery):
    """Writes delivered files into a directory, overwriting same-named files."""

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def deliver(self, filename: str, content: bytes) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / Path(filename).name
        path.write_bytes(content)
        logger.info("Roster exported: %s (%d bytes)", path, len(content))
        return path
