"""Exception hierarchy for Stasis.

None of the persistence errors are fatal: the state system catches them at its
boundary so a fresh session can always start. Wiring errors raised by the system
loader are programming errors and propagate.
"""


class StasisError(Exception):
    """Base class for all Stasis errors."""


class SnapshotDecodeError(StasisError):
    """A persisted snapshot blob is corrupt or in an incompatible format."""


class StoreUnavailableError(StasisError):
    """The persistence backend could not be read or written."""


class SystemLoadError(StasisError):
    """Systems could not be loaded or ordered."""


class MissingDependencyError(SystemLoadError):
    """A system depends on a system that is not registered."""


class CircularDependencyError(SystemLoadError):
    """System dependencies form a cycle."""
