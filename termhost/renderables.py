# termhost/renderables.py

"""
Retained scene-graph nodes.

A renderable is the long-lived, mutable counterpart of a virtual node. The
host layer creates them, edits their fields and moves them around; a painter
(not part of this package) walks the tree and turns it into terminal cells.

Ownership runs strictly parent -> child through ``_children``. The child only
keeps a weak reference back to its parent.
"""

import weakref
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from PySide6.QtCore import QObject, Signal

from .base import AUTO, PositionMode, TagKind
from .errors import InstanceRemovedError, UsageError
from .styles import RGBA, Colors

Size = Union[int, str]


def _validate_size(name: str, value: Size) -> Size:
    if value == AUTO:
        return AUTO
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative int or {AUTO!r}, got {value!r}")
    return value


class Renderable:
    """Common state shared by every kind of on-screen element."""

    kind: TagKind = None

    def __init__(self, id: str):
        self.id = id
        self.x: int = 0
        self.y: int = 0
        self._width: Size = AUTO
        self._height: Size = AUTO
        self.visible: bool = True
        self.position: PositionMode = PositionMode.RELATIVE
        self.border: bool = False
        self.border_style: str = "single"
        # Channel -> callback currently connected. Written only by the event binder.
        self.subscriptions: Dict[Any, Callable] = {}
        self._children: List["Renderable"] = []
        self._parent_ref: Optional[weakref.ref] = None
        self._destroyed = False

    # --- geometry ---
    @property
    def width(self) -> Size:
        return self._width

    @width.setter
    def width(self, value: Size):
        self._width = _validate_size("width", value)

    @property
    def height(self) -> Size:
        return self._height

    @height.setter
    def height(self, value: Size):
        self._height = _validate_size("height", value)

    def set_position(self, mode: Union[PositionMode, str]):
        self.position = PositionMode(mode)

    # --- tree ---
    @property
    def parent(self) -> Optional["Renderable"]:
        return self._parent_ref() if self._parent_ref else None

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def get_children(self) -> List["Renderable"]:
        """Returns a snapshot of the children in paint order."""
        return list(self._children)

    def index_of(self, child: "Renderable") -> int:
        """Position of ``child`` compared by identity, or -1."""
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        return -1

    def add(self, child: "Renderable", index: Optional[int] = None):
        """
        Adds ``child`` at ``index`` (end when None). A child that already
        belongs to this renderable is moved instead of duplicated.
        """
        self.ensure_alive("add children to")
        child.ensure_alive("attach")
        current_parent = child.parent
        if current_parent is not None and current_parent is not self:
            raise UsageError(
                f"{child!r} is still attached to {current_parent!r}; remove it before adding it to {self!r}."
            )
        existing = self.index_of(child)
        if existing != -1:
            del self._children[existing]
            if index is not None and existing < index:
                index -= 1
        if index is None or index >= len(self._children):
            self._children.append(child)
        else:
            self._children.insert(max(index, 0), child)
        child._parent_ref = weakref.ref(self)

    def remove(self, child: "Renderable"):
        """Detaches ``child`` without destroying it."""
        index = self.index_of(child)
        if index == -1:
            raise InstanceRemovedError(child, action=f"remove from {self!r}")
        del self._children[index]
        child._parent_ref = None

    # --- lifecycle ---
    def ensure_alive(self, action: str = "use"):
        if self._destroyed:
            raise InstanceRemovedError(self, action=action)

    def destroy(self):
        """Marks the renderable dead and drops every reference it holds."""
        self.ensure_alive("destroy")
        self._destroyed = True
        self._children = []
        self._parent_ref = None

    # --- debugging ---
    def describe(self) -> str:
        """One-line summary used by the surface outline."""
        parts = [f"{self.kind.value}#{self.id}", self.position.value, f"@{self.x},{self.y}",
                 f"{self.width}x{self.height}"]
        if not self.visible:
            parts.append("hidden")
        return " ".join(str(p) for p in parts)

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id!r})"


class BoxRenderable(Renderable):
    """A filled, optionally bordered rectangle that holds other renderables."""

    kind = TagKind.BOX

    def __init__(self, id: str):
        super().__init__(id)
        self.position = PositionMode.ABSOLUTE
        self.border = True
        self.background_color: Optional[RGBA] = None
        self.border_color: RGBA = Colors.white

    def describe(self) -> str:
        text = super().describe()
        if self.background_color is not None:
            text += f" fill={self.background_color}"
        return text


class GroupRenderable(Renderable):
    """An invisible layout node; only positions and sizes its children."""

    kind = TagKind.GROUP


class TextRenderable(Renderable):
    """A leaf holding styled text."""

    kind = TagKind.TEXT

    def __init__(self, id: str):
        super().__init__(id)
        self.content: str = ""
        self.fg: Optional[RGBA] = None
        self.bg: Optional[RGBA] = None
        self.selectable: bool = True

    def add(self, child, index=None):
        raise UsageError(f"{self!r} is a text leaf and cannot hold children.")

    def describe(self) -> str:
        return f"{super().describe()} {self.content!r}"


class _InputSignals(QObject):
    """Qt signals an input emits; one per event channel."""

    input = Signal(str)
    change = Signal(str)
    enter = Signal(str)


class InputRenderable(Renderable):
    """
    A single-line editable text field.

    Emits ``input`` for every keystroke, ``enter`` when the value is confirmed
    and ``change`` when the field loses focus with a different value than it
    had when it gained focus.
    """

    kind = TagKind.INPUT

    def __init__(self, id: str):
        super().__init__(id)
        self.placeholder: str = ""
        self._value: str = ""
        self._max_length: Optional[int] = None
        self.text_color: Optional[RGBA] = None
        self.focused_background_color: Optional[RGBA] = None
        self.focused_text_color: Optional[RGBA] = None
        self.focused = False
        self._value_at_focus = ""
        self._signals: Optional[_InputSignals] = _InputSignals()
        self._slots: Dict[Tuple[str, int], Callable] = {}
        self._handler_error: Optional[Exception] = None

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str):
        new_value = str(new_value)
        if self._max_length is not None:
            new_value = new_value[:self._max_length]
        self._value = new_value

    @property
    def max_length(self) -> Optional[int]:
        return self._max_length

    @max_length.setter
    def max_length(self, limit: Optional[int]):
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
            raise ValueError(f"maxLength must be a non-negative int, got {limit!r}")
        self._max_length = limit
        self.value = self._value

    def add(self, child, index=None):
        raise UsageError(f"{self!r} is an input and cannot hold children.")

    # --- signal plumbing (used by the event binder) ---
    # Each callback is connected through a slot that records what it raises;
    # ``emit`` re-raises the first recorded error once the signal returns.
    def _signal(self, channel: str):
        self.ensure_alive("subscribe to")
        return getattr(self._signals, channel)

    def _slot_for(self, callback: Callable) -> Callable:
        def slot(value):
            try:
                callback(value)
            except Exception as exc:
                if self._handler_error is None:
                    self._handler_error = exc
        return slot

    def on(self, channel: str, callback: Callable):
        signal = self._signal(channel)
        slot = self._slot_for(callback)
        self._slots[(channel, id(callback))] = slot
        signal.connect(slot)

    def off(self, channel: str, callback: Callable):
        signal = self._signal(channel)
        slot = self._slots.pop((channel, id(callback)))
        signal.disconnect(slot)

    def emit(self, channel: str, value: str):
        """Emits on ``channel``; an exception raised by a handler propagates from here."""
        self._signal(channel).emit(value)
        error, self._handler_error = self._handler_error, None
        if error is not None:
            raise error

    # --- user interaction ---
    def focus(self):
        self.ensure_alive("focus")
        self.focused = True
        self._value_at_focus = self._value

    def blur(self):
        self.ensure_alive("blur")
        was_focused, self.focused = self.focused, False
        if was_focused and self._value != self._value_at_focus:
            self.emit("change", self._value)

    def type_text(self, text: str):
        """Appends ``text`` one character at a time, one ``input`` event each."""
        self.ensure_alive("type into")
        for char in text:
            if self._max_length is not None and len(self._value) >= self._max_length:
                break
            self._value += char
            self.emit("input", self._value)

    def backspace(self):
        self.ensure_alive("type into")
        if self._value:
            self._value = self._value[:-1]
            self.emit("input", self._value)

    def press_enter(self):
        self.emit("enter", self._value)

    def destroy(self):
        super().destroy()
        self.focused = False
        self._slots.clear()
        self._signals = None

    def describe(self) -> str:
        shown = self._value or self.placeholder
        return f"{super().describe()} [{shown}]"


RENDERABLE_CLASSES = {
    TagKind.BOX: BoxRenderable,
    TagKind.GROUP: GroupRenderable,
    TagKind.TEXT: TextRenderable,
    TagKind.INPUT: InputRenderable,
}
