"""Decoding of raw transport frames into JSON roots.

Frames are SockJS style: array frames start with ``a`` and carry a JSON
array whose elements are usually JSON documents encoded as strings. Any
other frame is tried as a single JSON document. Frames that do not parse
are simply not relevant; decoding never raises.
"""

import json
import logging
from typing import Any, Iterable

from ukgroster.extraction.config import DEFAULT_MESSAGE_PREFIX

logger = logging.getLogger(__name__)

ARRAY_FRAME_MARKER = "a"


def frame_to_text(data: Any) -> str:
    """Convert a transport message payload to text.

    Binary payloads are decoded as UTF-8 (undecodable bytes replaced);
    strings pass through; anything else is rendered as JSON.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8", errors="replace")
    if data is None:
        return ""
    return json.dumps(data, default=str)


def is_schedule_message(
    roots: Iterable[Any],
    prefix: str = DEFAULT_MESSAGE_PREFIX,
    name_field: str = "name",
) -> bool:
    """Check if any decoded root is a message whose name has the prefix."""
    for root in roots:
        if isinstance(root, dict):
            name = root.get(name_field)
            if isinstance(name, str) and name.startswith(prefix):
                return True
    return False


class FrameDecoder:
    """Unwraps one raw frame into zero or more JSON roots.

    Example:
        >>> decoder = FrameDecoder()
        >>> decoder.decode('{"name": "x"}')
        [{'name': 'x'}]
        >>> decoder.decode("h")
        []
    """

    def decode(self, text: str) -> list[Any]:
        """Decode a frame.

        Args:
            text: Raw frame text.

        Returns:
            Decoded roots in frame order; empty if the frame is not JSON.
        """
        if not text:
            return []

        if text[0] == ARRAY_FRAME_MARKER:
            return self._decode_array_frame(text[1:])

        try:
            root = json.loads(text)
        except ValueError:
            logger.debug("Ignoring non-JSON frame (%d chars)", len(text))
            return []
        return [] if root is None else [root]

    def _decode_array_frame(self, body: str) -> list[Any]:
        try:
            items = json.loads(body)
        except ValueError:
            logger.debug("Ignoring malformed array frame (%d chars)", len(body))
            return []
        if not isinstance(items, list):
            return []

        roots = []
        for item in items:
            if isinstance(item, str):
                try:
                    parsed = json.loads(item)
                except ValueError:
                    logger.debug("Skipping undecodable array frame element")
                    continue
                if parsed is not None:
                    roots.append(parsed)
            elif isinstance(item, (dict, list)):
                roots.append(item)
        return roots
