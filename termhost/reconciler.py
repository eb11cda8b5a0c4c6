# termhost/reconciler.py

"""
A small reference driver for the host hooks.

It keeps, per container, the tree of virtual nodes it committed last time
(as ``Fiber`` records) and turns a new virtual tree into host-hook calls:

- children are matched by Key, or by position when they have none, and must
  also have the same tag to be reused;
- reused nodes get ``prepare_update``/``commit_update``;
- new nodes are built bottom-up with ``append_initial_child``;
- old nodes with no match are removed before anything is placed;
- placement runs right to left, inserting each new or moved node before its
  already placed right-hand sibling.

Any object exposing ``create_container`` and ``update_container`` can stand
in for this class.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .base import VirtualNode, flatten_children
from .host_config import HostConfig
from .renderables import Renderable

if TYPE_CHECKING:
    from .root import HostContext, RootContainer

logger = logging.getLogger(__name__)


@dataclass
class Fiber:
    """What the driver remembers about one committed virtual node."""
    tag: str
    key: Any
    attributes: Dict[str, Any]
    instance: Optional[Renderable]
    children: List["Fiber"] = field(default_factory=list)


class Reconciler:
    def __init__(self, host_config: Optional[HostConfig] = None):
        self.host_config = host_config or HostConfig()

    def create_container(self, host_context: "HostContext") -> "RootContainer":
        from .root import RootContainer
        return RootContainer(host_context)

    def update_container(self, element: Any, container: "RootContainer") -> None:
        """Commits ``element`` (a node, a list of nodes, or None) into ``container``."""
        host = self.host_config
        nodes = flatten_children([element])
        logger.debug("Commit: %d top-level node(s)", len(nodes))

        host.prepare_for_commit(container)
        if not nodes and container.current:
            host.clear_container(container)
            container.current = []
        else:
            container.current = self._reconcile_children(None, container, container.current, nodes)
        host.reset_after_commit(container)

    # --- internals ---
    def _slot_key(self, node_key: Any, index: int) -> Any:
        return node_key if node_key is not None else ("#index", index)

    def _reconcile_children(
        self,
        parent: Optional[Renderable],
        container: Optional["RootContainer"],
        old_fibers: List[Fiber],
        new_nodes: List[Any],
    ) -> List[Fiber]:
        host = self.host_config
        old_by_key: Dict[Any, Tuple[int, Fiber]] = {
            self._slot_key(fiber.key, i): (i, fiber) for i, fiber in enumerate(old_fibers)
        }
        matched = set()
        placed: List[Tuple[Fiber, bool]] = []
        last_matched_old_idx = -1

        for node in new_nodes:
            if not isinstance(node, VirtualNode):
                # Bare text: the host refuses it and the slot stays empty.
                host.create_text_instance(str(node), container)
                continue
            entry = old_by_key.get(self._slot_key(node.key, len(placed)))
            if entry is not None and entry[1].tag == node.tag and entry[0] not in matched:
                old_idx, fiber = entry
                matched.add(old_idx)
                self._update_fiber(fiber, node, container)
                if old_idx < last_matched_old_idx:
                    placed.append((fiber, True))
                else:
                    last_matched_old_idx = old_idx
                    placed.append((fiber, False))
            else:
                placed.append((self._create_fiber(node, container), True))

        for i, fiber in enumerate(old_fibers):
            if i not in matched:
                self._delete_fiber(parent, container, fiber)

        next_sibling: Optional[Renderable] = None
        for fiber, needs_placement in reversed(placed):
            if needs_placement and fiber.instance is not None:
                self._place(parent, container, fiber.instance, next_sibling)
            if fiber.instance is not None:
                next_sibling = fiber.instance

        return [fiber for fiber, _ in placed]

    def _place(self, parent, container, instance, before):
        host = self.host_config
        if parent is None:
            if before is None:
                host.append_child_to_container(container, instance)
            else:
                host.insert_in_container_before(container, instance, before)
        elif before is None:
            host.append_child(parent, instance)
        else:
            host.insert_before(parent, instance, before)

    def _create_fiber(self, node: VirtualNode, container) -> Fiber:
        host = self.host_config
        instance = host.create_instance(node.tag, node.attributes, container)
        fiber = Fiber(tag=node.tag, key=node.key, attributes=dict(node.attributes), instance=instance)
        for child in flatten_children(node.children):
            if not isinstance(child, VirtualNode):
                host.create_text_instance(str(child), container)
                continue
            child_fiber = self._create_fiber(child, container)
            host.append_initial_child(instance, child_fiber.instance)
            fiber.children.append(child_fiber)
        host.finalize_initial_children(instance, node.tag, node.attributes)
        return fiber

    def _update_fiber(self, fiber: Fiber, node: VirtualNode, container) -> None:
        host = self.host_config
        if host.prepare_update(fiber.instance, node.tag, fiber.attributes, node.attributes):
            host.commit_update(fiber.instance, node.tag, fiber.attributes, node.attributes)
        fiber.attributes = dict(node.attributes)
        fiber.children = self._reconcile_children(
            fiber.instance, container, fiber.children, flatten_children(node.children)
        )

    def _delete_fiber(self, parent, container, fiber: Fiber) -> None:
        host = self.host_config
        if parent is None:
            host.remove_child_from_container(container, fiber.instance)
        else:
            host.remove_child(parent, fiber.instance)
        host.detach_deleted_instance(fiber.instance)
