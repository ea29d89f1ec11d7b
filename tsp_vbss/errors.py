class VBSSError(Exception):
    """Base class for errors raised by tsp_vbss."""


class InvalidInput(VBSSError, ValueError):
    pass


class DegenerateDistribution(VBSSError, RuntimeError):
    """A selection distribution cannot place every remaining city."""
