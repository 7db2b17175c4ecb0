from tqsim.utils.logger import log
from tqsim.utils.random import FixedRng, random_f32, rng, set_seed

__all__ = [
    "FixedRng",
    "log",
    "random_f32",
    "rng",
    "set_seed",
]
