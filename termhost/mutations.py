# termhost/mutations.py

"""
Structural edits on the retained tree.

All operations are synchronous and take effect immediately. ``remove_child``
is the only path that severs a child from its parent, and it always tears
the child down: a removed renderable is never reused.
"""

import logging

from .errors import InstanceRemovedError
from .events import unbind_events
from .renderables import Renderable

logger = logging.getLogger(__name__)


def append_child(parent: Renderable, child: Renderable) -> None:
    """Adds ``child`` as the last child of ``parent`` (moving it if already there)."""
    parent.add(child)
    logger.debug("append %r -> %r", child, parent)


def insert_before(parent: Renderable, child: Renderable, before_child: Renderable) -> None:
    """
    Inserts ``child`` directly before ``before_child``.

    If ``before_child`` is not one of ``parent``'s children the child is
    appended at the end instead. A torn-down ``before_child`` is an error,
    not a missing sibling.
    """
    child.ensure_alive("insert")
    if before_child is not None:
        before_child.ensure_alive("insert before")
    index = parent.index_of(before_child) if before_child is not None else -1
    if before_child is child and index != -1:
        return
    if index == -1:
        logger.debug("insert_before: %r is not a child of %r, appending %r", before_child, parent, child)
        parent.add(child)
        return
    parent.add(child, index)
    logger.debug("insert %r before %r in %r", child, before_child, parent)


def teardown(instance: Renderable) -> None:
    """
    Destroys ``instance`` and its whole subtree, deepest first.

    Every event subscription is disconnected before the renderable is
    destroyed. A second teardown of the same instance raises.
    """
    if instance.is_destroyed:
        raise InstanceRemovedError(instance, action="tear down")
    for child in instance.get_children():
        instance.remove(child)
        teardown(child)
    unbind_events(instance)
    instance.destroy()


def remove_child(parent: Renderable, child: Renderable) -> None:
    """Detaches ``child`` from ``parent`` and tears it down."""
    if child.is_destroyed:
        raise InstanceRemovedError(child, action="remove")
    parent.remove(child)
    teardown(child)
    logger.debug("removed %r from %r", child, parent)


def clear_all(root: Renderable) -> None:
    """Removes and tears down every direct child of ``root``."""
    children = root.get_children()
    for child in children:
        remove_child(root, child)
    logger.debug("cleared %d children from %r", len(children), root)
