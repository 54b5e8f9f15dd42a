"""Exceptions raised by yeewave."""


class YeeWaveError(Exception):
    """Base class for all yeewave errors."""


class InvalidConfiguration(YeeWaveError, ValueError):
    """A simulation was configured with values the scheme cannot run with.

    Raised once, when a grid, config or field state is constructed. Stepping a
    validly constructed state never raises it.
    """


class IndexOutOfBounds(YeeWaveError, IndexError):
    """A grid cell outside ``[0, width) x [0, height)`` was accessed."""
