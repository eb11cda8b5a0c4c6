# termhost/root.py

"""
Root mounting.

A ``RootLifecycleManager`` binds one surface to one retained tree at a time:

    UNMOUNTED -> MOUNTING -> MOUNTED -> UNMOUNTING -> UNMOUNTED

``mount`` and ``unmount`` are the only calls an application makes directly;
everything else is driven by the reconciler the manager hands control to.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from .errors import RootAlreadyMountedError, UsageError
from .reconciler import Reconciler
from .renderables import Renderable
from .surface import Surface

logger = logging.getLogger(__name__)


class RootState(Enum):
    UNMOUNTED = "unmounted"
    MOUNTING = "mounting"
    MOUNTED = "mounted"
    UNMOUNTING = "unmounting"


@dataclass
class HostContext:
    surface: Optional[Surface] = None


class RootContainer:
    """The binding between a host context and the top level of the retained tree."""

    def __init__(self, host_context: HostContext):
        self.host_context = host_context
        # Driver bookkeeping for the committed top-level nodes.
        self.current: List[Any] = []

    @property
    def root(self) -> Renderable:
        surface = self.host_context.surface
        if surface is None:
            raise UsageError("The root container has no surface; it has been unmounted.")
        return surface.root


@dataclass
class RootHandle:
    """What ``mount`` returns: the surface that now shows the tree."""
    surface: Surface
    container: RootContainer = field(repr=False)


class RootLifecycleManager:
    """
    Owns the host context and root container and guarantees that at most
    one root is mounted through it.

    :param reconciler: Any object with ``create_container(host_context)`` and
        ``update_container(element, container)``. Defaults to the bundled
        ``Reconciler``.
    """

    _instance = None

    @classmethod
    def instance(cls) -> "RootLifecycleManager":
        """The process-wide manager used by ``create_root``."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, reconciler=None):
        self.reconciler = reconciler or Reconciler()
        self._state = RootState.UNMOUNTED
        self._host_context: Optional[HostContext] = None
        self._container: Optional[RootContainer] = None

    @property
    def state(self) -> RootState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._state is RootState.MOUNTED

    @property
    def surface(self) -> Optional[Surface]:
        return self._host_context.surface if self._host_context else None

    @property
    def container(self) -> Optional[RootContainer]:
        return self._container

    def mount(self, element: Any, surface: Surface) -> RootHandle:
        """
        Mounts ``element`` onto ``surface`` and performs the initial commit.

        If the initial commit raises, the error propagates and the manager
        goes back to UNMOUNTED; the surface is left to the caller.
        """
        if self._state is not RootState.UNMOUNTED:
            raise RootAlreadyMountedError(
                f"Cannot mount: a root is already {self._state.value}. Unmount it first."
            )
        if surface.is_destroyed:
            raise UsageError("Cannot mount onto a destroyed surface.")

        self._state = RootState.MOUNTING
        self._host_context = HostContext(surface=surface)
        try:
            self._container = self.reconciler.create_container(self._host_context)
            self.reconciler.update_container(element, self._container)
        except Exception:
            logger.debug("Initial commit failed; root left unmounted")
            self._release()
            raise

        self._state = RootState.MOUNTED
        logger.info("Root mounted on %r", surface)
        return RootHandle(surface=surface, container=self._container)

    def update(self, element: Any) -> None:
        """Commits a new tree into the mounted root."""
        if self._state is not RootState.MOUNTED:
            raise UsageError(f"Cannot update: root is {self._state.value}.")
        self.reconciler.update_container(element, self._container)

    def unmount(self) -> None:
        """
        Tears the whole tree down and releases the surface.

        Does nothing when no root is mounted.
        """
        if self._state is RootState.UNMOUNTED:
            logger.debug("unmount() called with no mounted root; nothing to do")
            return
        if self._state is not RootState.MOUNTED:
            raise UsageError(f"Cannot unmount while the root is {self._state.value}.")

        self._state = RootState.UNMOUNTING
        surface = self._host_context.surface
        try:
            self.reconciler.update_container(None, self._container)
        finally:
            surface.destroy()
            self._release()
        logger.info("Root unmounted")

    def _release(self):
        self._host_context = None
        self._container = None
        self._state = RootState.UNMOUNTED


def create_root() -> RootLifecycleManager:
    """Returns the shared root manager."""
    return RootLifecycleManager.instance()
