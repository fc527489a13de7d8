"""
Cause chain traversal.

Python links exceptions through ``__cause__`` (``raise ... from ...``) and
``__context__`` (raised while handling another). Each node is followed by
at most one next cause, the same one the traceback module would print.
"""

from typing import Iterator, Optional, Type, TypeVar

DEFAULT_MAX_DEPTH = 64

E = TypeVar("E", bound=BaseException)


def next_cause(error: BaseException) -> Optional[BaseException]:
    """Return the exception ``error`` was caused by, if any."""
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def iter_causes(
    error: BaseException, max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[BaseException]:
    """Yield ``error`` followed by each wrapped cause.

    Stops after ``max_depth`` nodes or when a node repeats.

    Args:
        error: The outermost exception.
        max_depth: Maximum number of nodes yielded.

    Yields:
        Exceptions from outermost to innermost.
    """
    seen: set[int] = set()
    current: Optional[BaseException] = error
    depth = 0
    while current is not None and depth < max_depth:
        if id(current) in seen:
            return
        seen.add(id(current))
        yield current
        depth += 1
        current = next_cause(current)


def find_error_source(
    error: BaseException, kind: Type[E], max_depth: int = DEFAULT_MAX_DEPTH
) -> Optional[E]:
    """Return the first exception in the chain that is a ``kind``.

    Args:
        error: The outermost exception. It is checked first.
        kind: Exception class to look for.
        max_depth: Maximum number of nodes inspected.

    Returns:
        The matching exception, or None when no node matches.
    """
    for cause in iter_causes(error, max_depth):
        if isinstance(cause, kind):
            return cause
    return None
