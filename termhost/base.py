# termhost/base.py
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import UnknownElementTypeError

# Size sentinel: let the layout engine derive the size from content/children.
AUTO = "auto"


class TagKind(str, Enum):
    """The closed set of element tags the host layer knows how to build."""

    BOX = "box"
    GROUP = "group"
    TEXT = "text"
    INPUT = "input"

    @classmethod
    def parse(cls, tag: Any) -> "TagKind":
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise UnknownElementTypeError(tag) from None


class PositionMode(str, Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class Key:
    """
    A stable identifier for a virtual node, used to match children across renders.

    :param value: Any value. Lists and dicts are converted to a hashable form.
    """
    def __init__(self, value: Any):
        try:
            hash(value)
            self.value = value
        except TypeError:
            if isinstance(value, list):
                self.value = tuple(value)
            elif isinstance(value, dict):
                self.value = tuple(sorted(value.items()))
            else:
                self.value = str(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Key) and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.__class__, self.value))

    def __repr__(self) -> str:
        return f"Key({self.value!r})"


@dataclass
class VirtualNode:
    """
    One element of a declarative tree: a tag, an attribute bag and children.

    Virtual nodes are produced fresh on every render and are never mutated by
    the host layer.
    """
    tag: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)
    key: Optional[Key] = None

    def __repr__(self) -> str:
        return f"VirtualNode({self.tag!r}, key={self.key}, children={len(self.children)})"


def flatten_children(children) -> List[Any]:
    """Flattens nested lists (fragments) and drops empty slots (None/False/True)."""
    flat: List[Any] = []
    for child in children:
        if child is None or isinstance(child, bool):
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(flatten_children(child))
        else:
            flat.append(child)
    return flat


def create_element(tag: str, attributes: Optional[Dict[str, Any]] = None, *children) -> VirtualNode:
    """
    Builds a VirtualNode. A ``key`` attribute is lifted out of the bag.

    Example::

        create_element("box", {"id": "main", "width": 40},
            create_element("text", {"content": "hello"}),
        )
    """
    attrs = dict(attributes) if attributes else {}
    key = attrs.pop("key", None)
    if key is not None and not isinstance(key, Key):
        key = Key(key)
    return VirtualNode(tag=tag, attributes=attrs, children=flatten_children(children), key=key)
