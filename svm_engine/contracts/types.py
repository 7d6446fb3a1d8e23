from __future__ import annotations

"""Tag enums and Literal choice sets shared across contracts.

The integer values are stable and follow libsvm's numbering, so a tag can be
compared directly with the integers used by other libsvm front-ends.
"""

from enum import IntEnum
from typing import Literal, TypeAlias


class KernelType(IntEnum):
    LINEAR = 0
    POLY = 1
    RBF = 2
    SIGMOID = 3


class SvmType(IntEnum):
    C_SVC = 0
    NU_SVC = 1
    ONE_CLASS = 2
    EPSILON_SVR = 3
    NU_SVR = 4


# What a fitted model produces for one input.
TaskName: TypeAlias = Literal["classification", "regression", "one_class"]

# Which metric family a report carries.
ProblemKind: TypeAlias = Literal["classification", "regression"]


def task_to_problem_kind(task: TaskName) -> ProblemKind:
    """One-class outputs are scored like labels (+1 / -1)."""
    return "regression" if task == "regression" else "classification"
