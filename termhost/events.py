# termhost/events.py

"""
Event-handler bindings for input renderables.

Each channel holds at most one callback per instance. Callbacks are compared
by identity: a handler that is the same object as last commit stays
connected, a new object replaces the old one (old disconnected first). The
channels are independent, so replacing ``onEnter`` never touches ``onInput``.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .base import TagKind
from .renderables import Renderable

logger = logging.getLogger(__name__)


class Channel(str, Enum):
    INPUT = "input"    # every keystroke
    ENTER = "enter"    # value confirmed
    CHANGE = "change"  # value changed on blur

    @property
    def attribute(self) -> str:
        return CHANNEL_ATTRIBUTES[self]


CHANNEL_ATTRIBUTES = {
    Channel.INPUT: "onInput",
    Channel.ENTER: "onEnter",
    Channel.CHANGE: "onChange",
}

EVENT_ATTRIBUTES = tuple(CHANNEL_ATTRIBUTES.values())


def _supports_events(instance: Renderable) -> bool:
    kind = instance.kind
    if kind is TagKind.INPUT:
        return True
    if kind in (TagKind.BOX, TagKind.GROUP, TagKind.TEXT):
        return False
    raise TypeError(f"No event binder for {kind!r}")


def _attach(instance, channel: Channel, callback: Callable):
    instance.on(channel.value, callback)
    instance.subscriptions[channel] = callback
    logger.debug("Bound %s on %r", channel.value, instance)


def _detach(instance, channel: Channel):
    callback = instance.subscriptions.pop(channel)
    instance.off(channel.value, callback)
    logger.debug("Unbound %s on %r", channel.value, instance)


def _sync_channel(instance, channel: Channel, wanted: Optional[Callable]):
    current = instance.subscriptions.get(channel)
    if current is wanted:
        return
    if wanted is not None and not callable(wanted):
        raise TypeError(f"{channel.attribute} must be callable, got {wanted!r}")
    if current is not None:
        _detach(instance, channel)
    if wanted is not None:
        _attach(instance, channel, wanted)


def bind_events(instance: Renderable, attributes: Dict[str, Any]) -> None:
    """Connects the handlers present in ``attributes``; channels not mentioned are left alone."""
    if not _supports_events(instance):
        return
    for channel, name in CHANNEL_ATTRIBUTES.items():
        wanted = attributes.get(name)
        if wanted is not None:
            _sync_channel(instance, channel, wanted)


def rebind_events(instance: Renderable, attributes: Dict[str, Any]) -> None:
    """
    Makes the connected handlers match ``attributes`` exactly: replaced
    handlers are swapped, handlers missing from the bag are disconnected.
    """
    if not _supports_events(instance):
        return
    for channel, name in CHANNEL_ATTRIBUTES.items():
        _sync_channel(instance, channel, attributes.get(name))


def unbind_events(instance: Renderable, attributes: Optional[Dict[str, Any]] = None) -> None:
    """
    Disconnects the handlers in ``attributes`` that are currently connected,
    or every handler when ``attributes`` is None.
    """
    if not _supports_events(instance):
        return
    for channel, name in CHANNEL_ATTRIBUTES.items():
        current = instance.subscriptions.get(channel)
        if current is None:
            continue
        if attributes is None or attributes.get(name) is current:
            _detach(instance, channel)


def subscription_count(instance: Renderable) -> int:
    return len(instance.subscriptions)
