"""Error taxonomy for framecast.

Every fatal error is raised synchronously at the offending call. Nothing
here is retried: all inputs are static, so a retry would fail the same way.
"""


class FramecastError(Exception):
    """Base class for all framecast errors."""


class ConfigurationError(FramecastError, ValueError):
    """Raised when static input is malformed.

    Examples: an empty segment plan, decreasing interpolation breakpoints,
    or input/output ranges of different lengths.
    """


class OutOfRangeError(FramecastError, ValueError):
    """Raised when a negative frame index reaches the timeline."""


class RegistryError(FramecastError):
    """Base class for composition registry misuse."""


class DuplicateIdError(RegistryError):
    """Raised when a composition id is registered twice."""


class NotFoundError(RegistryError, KeyError):
    """Raised when resolving a composition id that was never registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class RegistryFrozenError(RegistryError):
    """Raised when registering after the registry has been frozen."""
