"""Error types raised by the zipline engine.

All errors are deterministic precondition violations: the same inputs always
fail the same way, so none of them are retryable. Callers surface them as
validation messages.
"""


class ZiplineError(ValueError):
    """Base class for zipline calculation errors."""


class InvalidGeometryError(ZiplineError):
    """Span is not positive, or a position falls outside the span."""


class InvalidTargetError(ZiplineError):
    """Target sag ratio (or span) passed to the optimal tension solver is not positive."""


class DegenerateTensionError(ZiplineError):
    """Tension after thermal correction is zero or negative (slack line)."""
