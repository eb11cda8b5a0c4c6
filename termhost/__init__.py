# termhost/__init__.py

"""
termhost: host bindings between a declarative element tree and a retained
terminal scene graph.

Applications describe their UI with ``create_element`` and hand it to a
root; the root drives a reconciler that turns each new description into
create / update / insert / remove calls on long-lived renderables.
"""

from .base import AUTO, Key, PositionMode, TagKind, VirtualNode, create_element
from .styles import RGBA, Colors, parse_color
from .errors import (
    InstanceRemovedError,
    RootAlreadyMountedError,
    TermHostError,
    UnknownElementTypeError,
    UsageError,
)
from .config import Config, get_config
from .renderables import (
    BoxRenderable,
    GroupRenderable,
    InputRenderable,
    Renderable,
    TextRenderable,
)
from .surface import Surface
from .attributes import apply_attributes, diff_attributes
from .events import Channel, bind_events, rebind_events, subscription_count, unbind_events
from .factory import IDGenerator, create_instance
from .mutations import append_child, clear_all, insert_before, remove_child, teardown
from .host_config import HostConfig
from .reconciler import Fiber, Reconciler
from .root import HostContext, RootContainer, RootHandle, RootLifecycleManager, RootState, create_root

h = create_element

__all__ = [
    "AUTO", "Key", "PositionMode", "TagKind", "VirtualNode", "create_element", "h",
    "RGBA", "Colors", "parse_color",
    "TermHostError", "UnknownElementTypeError", "UsageError", "RootAlreadyMountedError",
    "InstanceRemovedError",
    "Config", "get_config",
    "Renderable", "BoxRenderable", "GroupRenderable", "TextRenderable", "InputRenderable",
    "Surface",
    "apply_attributes", "diff_attributes",
    "Channel", "bind_events", "rebind_events", "unbind_events", "subscription_count",
    "IDGenerator", "create_instance",
    "append_child", "insert_before", "remove_child", "clear_all", "teardown",
    "HostConfig", "Fiber", "Reconciler",
    "HostContext", "RootContainer", "RootHandle", "RootLifecycleManager", "RootState", "create_root",
]
