# termhost/factory.py

from typing import Any, Dict, Optional

from .attributes import apply_attributes
from .base import TagKind
from .config import get_config
from .events import bind_events
from .renderables import (
    BoxRenderable,
    GroupRenderable,
    InputRenderable,
    Renderable,
    TextRenderable,
)


class IDGenerator:
    def __init__(self):
        self._count = 0

    def next_id(self, prefix: str = "node") -> str:
        self._count += 1
        return f"{prefix}-{self._count}"


def construction_defaults(kind: TagKind) -> Dict[str, Any]:
    """The attribute bag every new instance of ``kind`` starts from."""
    return dict(get_config().get_nested(f"defaults.{kind.value}", {}) or {})


def _construct(kind: TagKind, identity: str) -> Renderable:
    if kind is TagKind.BOX:
        return BoxRenderable(identity)
    elif kind is TagKind.GROUP:
        return GroupRenderable(identity)
    elif kind is TagKind.TEXT:
        return TextRenderable(identity)
    elif kind is TagKind.INPUT:
        return InputRenderable(identity)
    raise TypeError(f"No constructor for {kind!r}")


def create_instance(
    tag: Any,
    attributes: Optional[Dict[str, Any]] = None,
    identity: Optional[str] = None,
    id_generator: Optional[IDGenerator] = None,
) -> Renderable:
    """
    Builds a detached renderable for ``tag``.

    The kind's construction defaults are applied first so that a node with a
    near-empty bag is still visible (a box gets a size, fill and border),
    then the caller's attributes, then its event handlers.

    :raises UnknownElementTypeError: if ``tag`` is not a known element type.
        Nothing is allocated in that case.
    """
    kind = TagKind.parse(tag)
    attributes = attributes or {}

    if identity is None:
        identity = attributes.get("id")
    if identity is None:
        identity = (id_generator or _default_ids).next_id(kind.value)

    instance = _construct(kind, str(identity))
    apply_attributes(instance, construction_defaults(kind))
    apply_attributes(instance, attributes)
    bind_events(instance, attributes)
    return instance


_default_ids = IDGenerator()
