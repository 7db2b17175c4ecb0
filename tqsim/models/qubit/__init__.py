from tqsim.models.qubit.qubit import FRAC_1_SQRT_2, Qubit

__all__ = [
    "FRAC_1_SQRT_2",
    "Qubit",
]
