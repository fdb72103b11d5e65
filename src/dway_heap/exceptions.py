class HeapError(Exception):
    """Base class for all d-ary heap failures."""


class HeapUnderflowError(HeapError, RuntimeError):
    """Raised when reading or removing the minimum of an empty heap."""


class InvalidConfigurationError(HeapError, ValueError):
    """Raised when a heap is constructed with invalid arguments."""


class InvalidIndexError(InvalidConfigurationError, IndexError):
    """
    Raised by the index arithmetic for an index outside its domain.

    This signals a broken internal invariant rather than bad caller input,
    and is never caught by the heap itself.
    """
