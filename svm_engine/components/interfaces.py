from __future__ import annotations
from typing import Any, Iterator, Optional, Protocol

import numpy as np

from svm_engine.components.solver.params import FittedParameters
from svm_engine.components.splitters.types import Split
from svm_engine.contracts.kernels import Kernel
from svm_engine.contracts.results import Report
from svm_engine.contracts.svm_configs import SvmConfig


class EstimatorBuilder(Protocol):
    def make_estimator(self) -> Any:
        """Return a configured, unfitted libsvm-backed estimator."""
        ...


class Solver(Protocol):
    def fit(
        self,
        cfg: SvmConfig,
        kernel: Kernel,
        X: np.ndarray,
        y: np.ndarray,
        *,
        seed: Optional[int] = None,
    ) -> FittedParameters:
        """Fit the formulation on (X, y) and return immutable fitted parameters.

        Must raise :class:`svm_engine.errors.SolverFailure` when the optimizer
        cannot produce a model (non-convergence, infeasible parameters).
        """
        ...


class Splitter(Protocol):
    def split(self, X: np.ndarray, y: np.ndarray) -> Iterator[Split]:
        """Yield train/test splits as :class:`Split`."""
        ...


class Evaluator(Protocol):
    def evaluate(self, model: Any, dataset: Any) -> Report:
        """Score a trained model against a labelled dataset."""
        ...

    def perform_n_fold_cross_validation(self, model: Any, dataset: Any, n: int) -> Report:
        """Score the model's configuration with out-of-fold predictions."""
        ...
