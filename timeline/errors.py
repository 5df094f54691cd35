"""Error hierarchy for the operating-day timeline.

Boundary errors (OutOfOperatingWindow, InvalidInterval) also subclass
ValueError so request validators can reject them like any bad input.
OutOfRange signals a caller bug and is meant to propagate.
"""


class TimelineError(Exception):
    """Base exception for all timeline errors."""

    pass


class OutOfOperatingWindow(TimelineError, ValueError):
    """A time point falls outside business hours (06:00-09:59 by default).

    Must be rejected at the boundary (form or request validation) before
    reaching the engines.
    """

    pass


class OutOfRange(TimelineError):
    """A computed offset or slot index falls outside the grid.

    Indicates a bad granularity or offset supplied by the caller.
    """

    pass


class InvalidInterval(TimelineError, ValueError):
    """An interval ends before it starts after duration resolution."""

    pass
