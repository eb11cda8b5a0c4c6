# termhost/surface.py

import logging
from typing import List, Optional

from .config import get_config
from .mutations import remove_child
from .renderables import GroupRenderable, Renderable
from .styles import ColorInput, RGBA, parse_color

logger = logging.getLogger(__name__)


class Surface:
    """
    The thing a root is mounted onto: owns the top-level renderable that a
    painter walks every frame.

    Painting itself happens elsewhere; this class only holds the tree and
    knows when it has been released.
    """

    def __init__(self, background_color: Optional[ColorInput] = None, root_id: str = "root"):
        if background_color is None:
            background_color = get_config().get_nested("surface.backgroundColor", "#000000")
        self.background_color: RGBA = parse_color(background_color)
        self.root: Renderable = GroupRenderable(root_id)
        self._destroyed = False

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def set_background_color(self, color: ColorInput):
        self.background_color = parse_color(color)

    def destroy(self):
        """
        Releases the surface. Safe to call more than once.

        Children still attached to the root are torn down first, so no
        subscription outlives the surface.
        """
        if self._destroyed:
            return
        self._destroyed = True
        if not self.root.is_destroyed:
            for child in self.root.get_children():
                remove_child(self.root, child)
            self.root.destroy()
        logger.debug("Surface %r destroyed", self.root.id)

    def outline(self) -> str:
        """An indented, one-line-per-node dump of the retained tree."""
        lines: List[str] = []

        def walk(node: Renderable, depth: int):
            lines.append("  " * depth + node.describe())
            for child in node.get_children():
                walk(child, depth + 1)

        walk(self.root, 0)
        return "\n".join(lines)

    def __repr__(self):
        state = "destroyed" if self._destroyed else f"{len(self.root.get_children())} children"
        return f"Surface({state})"
