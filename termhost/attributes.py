# termhost/attributes.py

"""
Attribute application.

Writes an attribute bag onto a renderable. Application is a merge: keys that
are missing from the bag, or present with ``None``, leave the current field
alone. Event handlers (``onInput`` etc.) are not touched here; see
``termhost.events``.
"""

from typing import Any, Dict, Optional

from .base import TagKind
from .styles import parse_color
from .renderables import (
    BoxRenderable,
    InputRenderable,
    Renderable,
    TextRenderable,
)

Attributes = Dict[str, Any]

COMMON_ATTRIBUTES = ("x", "y", "width", "height", "visible", "position", "border", "borderStyle")
BOX_ATTRIBUTES = ("backgroundColor", "borderColor")
TEXT_ATTRIBUTES = ("content", "fg", "bg", "selectable")
INPUT_ATTRIBUTES = (
    "placeholder", "value", "maxLength", "textColor",
    "focusedBackgroundColor", "focusedTextColor",
)

KIND_ATTRIBUTES = {
    TagKind.BOX: BOX_ATTRIBUTES,
    TagKind.GROUP: (),
    TagKind.TEXT: TEXT_ATTRIBUTES,
    TagKind.INPUT: INPUT_ATTRIBUTES,
}


def _present(attributes: Attributes, name: str) -> bool:
    return attributes.get(name) is not None


def apply_common_attributes(instance: Renderable, attributes: Attributes) -> None:
    if _present(attributes, "x"):
        instance.x = attributes["x"]
    if _present(attributes, "y"):
        instance.y = attributes["y"]
    if _present(attributes, "width"):
        instance.width = attributes["width"]
    if _present(attributes, "height"):
        instance.height = attributes["height"]
    if _present(attributes, "visible"):
        instance.visible = bool(attributes["visible"])
    if _present(attributes, "position"):
        instance.set_position(attributes["position"])
    if _present(attributes, "border"):
        instance.border = bool(attributes["border"])
    if _present(attributes, "borderStyle"):
        instance.border_style = attributes["borderStyle"]


def apply_box_attributes(instance: BoxRenderable, attributes: Attributes) -> None:
    if _present(attributes, "backgroundColor"):
        instance.background_color = parse_color(attributes["backgroundColor"])
    if _present(attributes, "borderColor"):
        instance.border_color = parse_color(attributes["borderColor"])


def apply_text_attributes(instance: TextRenderable, attributes: Attributes) -> None:
    if _present(attributes, "content"):
        instance.content = str(attributes["content"])
    if _present(attributes, "fg"):
        instance.fg = parse_color(attributes["fg"])
    if _present(attributes, "bg"):
        instance.bg = parse_color(attributes["bg"])
    if _present(attributes, "selectable"):
        instance.selectable = bool(attributes["selectable"])


def apply_input_attributes(instance: InputRenderable, attributes: Attributes) -> None:
    if _present(attributes, "placeholder"):
        instance.placeholder = str(attributes["placeholder"])
    # maxLength first so an incoming value is clipped against the new limit.
    if _present(attributes, "maxLength"):
        instance.max_length = attributes["maxLength"]
    if _present(attributes, "value"):
        instance.value = attributes["value"]
    if _present(attributes, "textColor"):
        instance.text_color = parse_color(attributes["textColor"])
    if _present(attributes, "focusedBackgroundColor"):
        instance.focused_background_color = parse_color(attributes["focusedBackgroundColor"])
    if _present(attributes, "focusedTextColor"):
        instance.focused_text_color = parse_color(attributes["focusedTextColor"])


def apply_attributes(instance: Renderable, attributes: Attributes) -> None:
    """
    Applies the common attributes, then the ones specific to the instance's kind.

    Calling this twice with the same bag leaves the instance exactly as one
    call would. Attributes that belong to another kind are ignored.
    """
    instance.ensure_alive("apply attributes to")
    apply_common_attributes(instance, attributes)

    kind = instance.kind
    if kind is TagKind.BOX:
        apply_box_attributes(instance, attributes)
    elif kind is TagKind.GROUP:
        pass
    elif kind is TagKind.TEXT:
        apply_text_attributes(instance, attributes)
    elif kind is TagKind.INPUT:
        apply_input_attributes(instance, attributes)
    else:
        raise TypeError(f"No attribute applier for {kind!r}")


def diff_attributes(old: Attributes, new: Attributes) -> Optional[Attributes]:
    """Compares attribute bags and returns the changed keys with their new values."""
    changes = {}
    for key in set(old.keys()) | set(new.keys()):
        old_val = old.get(key)
        new_val = new.get(key)
        if old_val is not new_val and old_val != new_val:
            changes[key] = new_val
    return changes if changes else None
