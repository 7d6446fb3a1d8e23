from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

from svm_engine.contracts.types import TaskName


def _optional_array(v: Any) -> Optional[np.ndarray]:
    if v is None:
        return None
    arr = np.asarray(v, dtype=float)
    return arr if arr.size else None


@dataclass(frozen=True)
class FittedParameters:
    """Everything a trained model needs to predict.

    ``estimator`` is the fitted libsvm handle. It belongs to exactly one model
    and is never shared; the arrays are read-only copies of its parameters.
    """

    estimator: Any
    task: TaskName
    n_features: int
    support_vectors: np.ndarray
    support: np.ndarray
    dual_coef: np.ndarray
    intercept: np.ndarray
    labels: Tuple[float, ...] = ()
    n_support: Optional[np.ndarray] = None
    prob_a: Optional[np.ndarray] = None
    prob_b: Optional[np.ndarray] = None

    @property
    def n_support_vectors(self) -> int:
        return int(self.support_vectors.shape[0])

    @property
    def has_probability_model(self) -> bool:
        return self.prob_a is not None and self.prob_b is not None

    @classmethod
    def from_estimator(cls, est: Any, *, task: TaskName, n_features: int) -> "FittedParameters":
        labels: Tuple[float, ...] = ()
        if task == "classification":
            labels = tuple(float(c) for c in np.sort(np.asarray(est.classes_, dtype=float)))

        def frozen(v: Any) -> np.ndarray:
            arr = np.array(v, dtype=float, copy=True)
            arr.setflags(write=False)
            return arr

        n_support = getattr(est, "n_support_", None)
        return cls(
            estimator=est,
            task=task,
            n_features=int(n_features),
            support_vectors=frozen(est.support_vectors_),
            support=np.asarray(est.support_, dtype=int),
            dual_coef=frozen(est.dual_coef_),
            intercept=frozen(np.atleast_1d(est.intercept_)),
            labels=labels,
            n_support=None if n_support is None else np.asarray(n_support, dtype=int),
            prob_a=_optional_array(getattr(est, "probA_", None)),
            prob_b=_optional_array(getattr(est, "probB_", None)),
        )
