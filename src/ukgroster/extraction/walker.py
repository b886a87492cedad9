"""Generic traversal and safe field probing over decoded JSON values."""

from typing import Any, Iterator, Union

JsonContainer = Union[dict, list]


def walk(root: Any) -> Iterator[JsonContainer]:
    """Yield every object and array under root in pre-order.

    Objects are followed into all property values, arrays into all
    elements. Scalars are never yielded.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        yield node
        # Reversed so children pop in document order.
        stack.extend(reversed(children))


def lookup(node: Any, path: tuple[str, ...]) -> Any:
    """Follow a key path through nested objects, None if any step is missing."""
    current = node
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def as_text(value: Any) -> str:
    """Render a scalar for matching or display, "" for anything else."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)
