# termhost/errors.py


class TermHostError(Exception):
    """Base class for every error raised by termhost."""


class UnknownElementTypeError(TermHostError, ValueError):
    """Raised when a virtual node names a tag outside the supported set."""

    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Unknown element type: {tag!r}")


class UsageError(TermHostError, RuntimeError):
    """The host layer was driven in an order it does not allow."""


class RootAlreadyMountedError(UsageError):
    """Only one root may be mounted at a time."""


class InstanceRemovedError(UsageError):
    """An instance was used after it had been removed and torn down."""

    def __init__(self, instance, action: str = "use"):
        self.instance = instance
        super().__init__(f"Cannot {action} {instance!r}: it has already been removed from the tree.")
