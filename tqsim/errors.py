"""
Exceptions raised when constructing invalid quantum or classical values.
"""


class TqsimError(Exception):
    """Base class of tqsim errors."""


class NormalizationError(TqsimError, ValueError):
    """Amplitudes of a qubit or register do not sum to probability 1."""


class UnitarityError(TqsimError, ValueError):
    """Gate matrix is not unitary (U @ U^dagger != I)."""


class RegisterOverflowError(TqsimError, OverflowError):
    """Classical register cannot hold the requested number of bits."""
