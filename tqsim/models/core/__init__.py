from tqsim.models.core.complex import Complex
from tqsim.models.core.matrix import Matrix2x2, Numeric, conj_transpose, matrix_approx_eq
from tqsim.models.core.state import ATOL, AmplitudeVector

__all__ = [
    "ATOL",
    "AmplitudeVector",
    "Complex",
    "Matrix2x2",
    "Numeric",
    "conj_transpose",
    "matrix_approx_eq",
]
