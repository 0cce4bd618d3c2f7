class ScoringError(Exception):
    """Base class for failures raised by the gram scoring engine."""


class InvalidParameterError(ScoringError, ValueError):
    """Gram size or scoring method outside the accepted range."""


class NumericDomainError(ScoringError, ArithmeticError):
    """A logarithm or division was asked for outside its domain."""


class ConceptMapInconsistency(ScoringError, RuntimeError):
    """Frequency maps built from the same corpora disagree with each other."""
