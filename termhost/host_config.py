# termhost/host_config.py

"""
The hook set a reconciliation driver calls to edit the retained tree.

The driver decides *what* changes; these hooks only carry the changes out,
in exactly the order they are called. ``None`` children stand for empty
slots (text nodes are never turned into instances) and are skipped by every
structural hook.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from .attributes import apply_attributes, diff_attributes
from .base import TagKind
from .errors import UsageError
from .events import rebind_events
from .factory import IDGenerator, create_instance
from .mutations import append_child, clear_all, insert_before, remove_child
from .renderables import Renderable

if TYPE_CHECKING:
    from .root import HostContext, RootContainer

logger = logging.getLogger(__name__)


class HostConfig:
    def __init__(self):
        self.id_generator = IDGenerator()

    # --- context ---
    def get_root_host_context(self, container: "RootContainer") -> "HostContext":
        return container.host_context

    def get_child_host_context(self, parent_context: "HostContext", tag: str = None) -> "HostContext":
        return parent_context

    # --- instance creation ---
    def create_instance(self, tag: str, attributes: Dict[str, Any], container: "RootContainer" = None) -> Renderable:
        return create_instance(tag, attributes, id_generator=self.id_generator)

    def create_text_instance(self, text: str, container: "RootContainer" = None) -> None:
        logger.warning(
            "Text nodes are not supported (got %r). Use the content attribute on a text element instead.",
            text,
        )
        return None

    def get_public_instance(self, instance: Optional[Renderable]) -> Optional[Renderable]:
        return instance

    def should_set_text_content(self, tag: str, attributes: Dict[str, Any]) -> bool:
        return False

    def finalize_initial_children(self, instance: Renderable, tag: str, attributes: Dict[str, Any]) -> bool:
        return False

    # --- commit bracketing ---
    def prepare_for_commit(self, container: "RootContainer") -> None:
        return None

    def reset_after_commit(self, container: "RootContainer") -> None:
        return None

    # --- structure ---
    def append_initial_child(self, parent: Optional[Renderable], child: Optional[Renderable]) -> None:
        if parent is not None and child is not None:
            append_child(parent, child)

    def append_child(self, parent: Optional[Renderable], child: Optional[Renderable]) -> None:
        if parent is not None and child is not None:
            append_child(parent, child)

    def append_child_to_container(self, container: "RootContainer", child: Optional[Renderable]) -> None:
        if child is not None:
            append_child(container.root, child)

    def insert_before(self, parent: Optional[Renderable], child: Optional[Renderable],
                      before_child: Optional[Renderable]) -> None:
        if parent is not None and child is not None:
            insert_before(parent, child, before_child)

    def insert_in_container_before(self, container: "RootContainer", child: Optional[Renderable],
                                   before_child: Optional[Renderable]) -> None:
        if child is not None:
            insert_before(container.root, child, before_child)

    def remove_child(self, parent: Optional[Renderable], child: Optional[Renderable]) -> None:
        if parent is not None and child is not None:
            remove_child(parent, child)

    def remove_child_from_container(self, container: "RootContainer", child: Optional[Renderable]) -> None:
        if child is not None:
            remove_child(container.root, child)

    def clear_container(self, container: "RootContainer") -> None:
        clear_all(container.root)

    def detach_deleted_instance(self, instance: Renderable) -> None:
        return None

    # --- updates ---
    def prepare_update(self, instance: Renderable, tag: str, old_attributes: Dict[str, Any],
                       new_attributes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Returns the changed attributes, or None when a commit would change nothing."""
        return diff_attributes(old_attributes, new_attributes)

    def commit_update(self, instance: Renderable, tag: str, prev_attributes: Dict[str, Any],
                      next_attributes: Dict[str, Any]) -> None:
        """
        Brings ``instance`` in line with ``next_attributes``.

        Plain attributes merge (an omitted attribute keeps its value); event
        handlers follow the new bag exactly, channel by channel.
        """
        instance.ensure_alive("update")
        kind = TagKind.parse(tag)
        if kind is not instance.kind:
            raise UsageError(f"commit_update for {tag!r} was issued against {instance!r} ({instance.kind.value})")
        if prev_attributes == next_attributes:
            logger.debug("commit_update on %r carries no change", instance)
            return
        apply_attributes(instance, next_attributes)
        rebind_events(instance, next_attributes)

    def commit_text_update(self, text_instance: None, old_text: str, new_text: str) -> None:
        logger.warning("commit_text_update called for %r -> %r; text nodes are not supported", old_text, new_text)

    # --- visibility ---
    def hide_instance(self, instance: Renderable) -> None:
        instance.ensure_alive("hide")
        instance.visible = False

    def unhide_instance(self, instance: Renderable, attributes: Dict[str, Any] = None) -> None:
        instance.ensure_alive("unhide")
        instance.visible = True

    def hide_text_instance(self, text_instance: None) -> None:
        return None

    def unhide_text_instance(self, text_instance: None, text: str = None) -> None:
        return None
