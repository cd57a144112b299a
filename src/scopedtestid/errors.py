from __future__ import annotations


class ScopedTestIdError(Exception):
    """Base class for every error raised by scopedtestid."""


class ConfigurationError(ScopedTestIdError, TypeError):
    pass


class StructureError(ScopedTestIdError, ValueError):
    """Raised when a switch receives a malformed branch set."""


class ChildValidationError(ScopedTestIdError, TypeError):
    """Raised when a boundary is given content that cannot carry an attribute."""


class InvalidChildError(ChildValidationError):
    pass


class MultipleChildrenError(ChildValidationError):
    pass


class FragmentNotAllowedError(ChildValidationError):
    pass
