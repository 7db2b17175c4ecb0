"""
Empirical measurement statistics over repeated collapses.
"""

import numpy.random as npr
import pandas as pd

from tqsim.registers import QuantumRegister


def sample_counts(register: QuantumRegister, shots: int, gen: npr.Generator | None = None) -> pd.Series:
    """
    Collapse a register repeatedly and count the outcomes.

    Args:
        register: quantum register, which is not modified.
        shots: number of collapses.
        gen: random number generator, defaults to the global rng.

    Returns:
        Counts indexed by basis state bit string (e.g. ``"01"``), covering every basis state in index order.
    """
    n = register.n_qubits
    counts = [0] * (2**n)
    for _ in range(shots):
        counts[register.collapse(gen).bits] += 1
    index = pd.Index([format(k, f"0{n}b") for k in range(2**n)], name="state")
    return pd.Series(counts, index=index, name="count")


def histogram(register: QuantumRegister, shots: int, gen: npr.Generator | None = None) -> pd.DataFrame:
    """
    Compare empirical frequencies with Born-rule probabilities.

    Returns:
        DataFrame indexed by basis state bit string with columns ``count``, ``frequency``, ``probability``.
    """
    counts = sample_counts(register, shots, gen)
    df = counts.to_frame()
    df["frequency"] = counts / shots if shots > 0 else 0.0
    df["probability"] = register.probabilities().astype(float)
    return df
