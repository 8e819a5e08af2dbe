"""Flatten an exception and everything it wraps into a readable report."""

import traceback
from typing import List, Optional

# Keeps each report entry on a single line
STACK_TRACE_SEPARATOR = "\t\t"


def _write_details(exception: BaseException, lines: List[str]) -> None:
    exception_type = type(exception)
    lines.append(f"Error Type: {exception_type.__module__}.{exception_type.__qualname__}.")
    lines.append(f"Error Message: {exception}.")

    if exception.__traceback__ is not None:
        frames = "".join(traceback.format_tb(exception.__traceback__)).rstrip()
        frames = frames.replace("\n", STACK_TRACE_SEPARATOR)
        lines.append(f"Stack Trace: {frames}.")


def _inner_exceptions(exception: BaseException) -> List[BaseException]:
    # Exception groups expose their children as ``exceptions``
    grouped = getattr(exception, "exceptions", None)
    if isinstance(grouped, (list, tuple)):
        return [e for e in grouped if isinstance(e, BaseException)]

    inner = exception.__cause__
    if inner is None and not exception.__suppress_context__:
        inner = exception.__context__
    return [inner] if inner is not None else []


def unwrap(exception: Optional[BaseException]) -> Optional[str]:
    """Describe ``exception`` and, recursively, the exceptions inside it.

    Each exception contributes its type, message and stack trace. Exception
    groups contribute every child; other exceptions contribute their explicit
    cause or, failing that, the exception they were raised while handling.

    Returns:
        Multi-line report, or None when ``exception`` is None
    """
    if exception is None:
        return None

    lines: List[str] = []
    _write_details(exception, lines)

    for inner in _inner_exceptions(exception):
        report = unwrap(inner)
        if report:
            lines.append(report)

    return "\n".join(lines)
