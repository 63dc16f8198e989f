"""Exception types raised by the Mastermind engine."""


class MastermindError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MastermindError, ValueError):
    """Game settings outside the supported range, or with no valid code."""


class CodeWidthError(MastermindError, ValueError):
    """Two codes of different width were compared."""


class SolverCancelled(MastermindError):
    """The caller asked a running solver to stop."""


class NoFeasibleCodeError(MastermindError, RuntimeError):
    """
    The genetic solver used up its attempt cap without finding a code
    consistent with the history. Only raised when an attempt cap is set.
    """
