import matplotlib.pyplot as plt
import pandas as pd
from tap import Tap

from tqsim.gates import GATE_CNOT, GATE_H
from tqsim.models.qubit import Qubit
from tqsim.registers import QuantumRegister
from tqsim.utils import log, set_seed
from tqsim.utils.stats import histogram


# Command line arguments
class Args(Tap):
    shots: int = 1000  # number of collapses per input
    seed: int = -1  # random seed, negative for unseeded
    csv: str = ""  # save results as CSV file
    plt: str = ""  # save plot as image file


args = Args().parse_args()

log.set_default_level("INFO")

if args.seed >= 0:
    set_seed(args.seed)


def entangle_qubits(ket_a: Qubit, ket_b: Qubit) -> QuantumRegister:
    """Apply H on the first qubit, then CNOT controlled by the first qubit."""
    ket_a = GATE_H.run(ket_a)
    merged = QuantumRegister.from_qubits(ket_a, ket_b)
    return GATE_CNOT.apply(merged)


########################### Main #########################
inputs = {
    "00": (Qubit.zero(), Qubit.zero()),
    "01": (Qubit.zero(), Qubit.one()),
    "10": (Qubit.one(), Qubit.zero()),
    "11": (Qubit.one(), Qubit.one()),
}

frames: list[pd.DataFrame] = []
for label, (ket_a, ket_b) in inputs.items():
    log.install(f"|{label}>")
    df = histogram(entangle_qubits(ket_a, ket_b), args.shots)
    log.info(f"collapsed {args.shots} times")
    print(f"|{label}> becomes")
    for state, row in df.iterrows():
        print(f"|{state}> * {row['frequency']:.3f}")
    print()
    frames.append(df.reset_index().assign(input=label))
log.install(None)

results = pd.concat(frames, ignore_index=True)
if args.csv:
    results.to_csv(args.csv, index=False)

if args.plt:
    table = results.pivot(index="input", columns="state", values="frequency")
    table.plot.bar(figsize=(6, 4))
    plt.xlabel("input")
    plt.ylabel("frequency")
    plt.title("Bell state measurement")
    plt.grid(True, axis="y", ls="--", lw=0.5)
    plt.tight_layout()
    plt.savefig(args.plt, dpi=300, transparent=True)
