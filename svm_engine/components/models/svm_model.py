from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from svm_engine.components.interfaces import Solver
from svm_engine.components.prediction import decision_values, predict_probabilities, predict_values
from svm_engine.components.solver.libsvm_solver import LibsvmSolver
from svm_engine.components.solver.params import FittedParameters
from svm_engine.contracts.kernels import Kernel, KernelBase
from svm_engine.contracts.results import Report
from svm_engine.contracts.svm_configs import SvmConfig, SvmConfigBase
from svm_engine.core.datasets import Dataset, coerce_dataset, coerce_features, coerce_rows
from svm_engine.errors import (
    InvalidConfiguration,
    InvalidDataset,
    Untrained,
    UnsupportedOperation,
)
from svm_engine.registries.options import kernel_from_options, svm_config_from_options
from svm_engine.runtime.runner import BackgroundRunner, DoneCallback, default_runner

logger = logging.getLogger(__name__)


def _check_class_labels(y: np.ndarray) -> None:
    if not np.all(np.mod(y, 1.0) == 0.0):
        raise InvalidDataset("classification labels must be integer valued")


class SVM:
    """A kernel SVM: configuration + kernel, and fitted parameters once trained.

    The model starts untrained. ``train`` is the only transition to the trained
    state; a successful retrain replaces the fitted parameters as a whole and a
    failed one leaves the previous state untouched.

    Parameters
    ----------
    config : SvmConfig
        Formulation and its parameters (e.g. :class:`CSVCConfig`).
    kernel : Kernel
        Kernel function (e.g. :class:`RadialBasisFunctionKernel`).
    solver : Solver, optional
        Adapter that fits the parameters; libsvm via scikit-learn by default.
    runner : BackgroundRunner, optional
        Where ``*_async`` calls execute; the shared default runner otherwise.
    seed : int, optional
        Seed for libsvm's probability calibration.
    """

    def __init__(
        self,
        config: SvmConfig,
        kernel: Kernel,
        *,
        solver: Optional[Solver] = None,
        runner: Optional[BackgroundRunner] = None,
        seed: Optional[int] = None,
    ) -> None:
        if not isinstance(config, SvmConfigBase) or not hasattr(type(config), "svm_type"):
            raise InvalidConfiguration(f"expected an SVM configuration; got {config!r}")
        if not isinstance(kernel, KernelBase):
            raise InvalidConfiguration(f"expected a kernel; got {kernel!r}")

        self._config = config
        self._kernel = kernel
        self._solver: Solver = solver if solver is not None else LibsvmSolver()
        self._runner = runner
        self._seed = seed
        self._fitted: Optional[FittedParameters] = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any], **kwargs: Any) -> "SVM":
        """Build from a flat option dict, e.g.
        ``{"type": "NU_SVC", "kernel": SigmoidKernel(2), "nu": 0.4}``.
        """
        kernel = options.get("kernel")
        if kernel is None:
            raise InvalidConfiguration("options need a 'kernel' entry")
        if isinstance(kernel, Mapping):
            kernel = kernel_from_options(kernel)
        return cls(svm_config_from_options(options), kernel, **kwargs)

    def __repr__(self) -> str:
        state = "trained" if self.is_trained() else "untrained"
        return f"SVM({self.get_svm_type()}, {self.get_kernel_type()}, {state})"

    # ------------------------------------------------------------------
    # configuration / state
    # ------------------------------------------------------------------

    @property
    def config(self) -> SvmConfig:
        return self._config

    @property
    def kernel(self) -> Kernel:
        return self._kernel

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def fitted(self) -> Optional[FittedParameters]:
        return self._fitted

    @property
    def labels(self) -> Tuple[float, ...]:
        """Sorted distinct training labels (classification only)."""
        return self._fitted.labels if self._fitted is not None else ()

    @property
    def n_features(self) -> Optional[int]:
        return self._fitted.n_features if self._fitted is not None else None

    @property
    def n_support(self) -> int:
        return self._fitted.n_support_vectors if self._fitted is not None else 0

    def is_trained(self) -> bool:
        return self._fitted is not None

    def get_kernel_type(self) -> str:
        return self._kernel.name

    def get_svm_type(self) -> str:
        return self._config.name

    def spawn(self) -> "SVM":
        """A fresh, untrained model with the same configuration."""
        return SVM(
            self._config,
            self._kernel,
            solver=self._solver,
            runner=self._runner,
            seed=self._seed,
        )

    def _get_runner(self) -> BackgroundRunner:
        return self._runner if self._runner is not None else default_runner()

    def _require_fitted(self) -> FittedParameters:
        fitted = self._fitted
        if fitted is None:
            raise Untrained(f"{self.get_svm_type()} model has not been trained")
        return fitted

    # ------------------------------------------------------------------
    # training
    # ------------------------------------------------------------------

    def train(self, dataset: Dataset) -> "SVM":
        X, y = coerce_dataset(dataset)
        return self.train_arrays(X, y)

    def train_arrays(self, X: np.ndarray, y: np.ndarray) -> "SVM":
        """Train on already-coerced arrays (X 2D, y 1D)."""
        if self._config.task == "classification":
            _check_class_labels(y)

        logger.debug(
            "training %s/%s on %d examples x %d features",
            self.get_svm_type(),
            self.get_kernel_type(),
            X.shape[0],
            X.shape[1],
        )
        fitted = self._solver.fit(self._config, self._kernel, X, y, seed=self._seed)
        self._fitted = fitted
        logger.debug("trained %s: %d support vectors", self.get_svm_type(), fitted.n_support_vectors)
        return self

    def train_async(self, dataset: Dataset, callback: Optional[DoneCallback] = None) -> Future:
        return self._get_runner().submit(self.train, dataset, callback=callback)

    # ------------------------------------------------------------------
    # prediction
    # ------------------------------------------------------------------

    def predict(self, features: Any) -> float:
        fitted = self._require_fitted()
        x = coerce_features(features, n_features=fitted.n_features)
        return float(predict_values(fitted, x)[0])

    def predict_many(self, rows: Any) -> List[float]:
        fitted = self._require_fitted()
        X = coerce_rows(rows, n_features=fitted.n_features)
        return [float(v) for v in predict_values(fitted, X)]

    def predict_async(self, features: Any, callback: Optional[DoneCallback] = None) -> Future:
        return self._get_runner().submit(self.predict, features, callback=callback)

    def predict_probabilities(self, features: Any) -> Dict[float, float]:
        fitted = self._require_fitted()
        if not self._config.supports_probability or not fitted.has_probability_model:
            raise UnsupportedOperation(
                f"{self.get_svm_type()} model was not configured for probability estimates"
            )
        x = coerce_features(features, n_features=fitted.n_features)
        return predict_probabilities(fitted, x)[0]

    def predict_probabilities_async(
        self,
        features: Any,
        callback: Optional[DoneCallback] = None,
    ) -> Future:
        return self._get_runner().submit(self.predict_probabilities, features, callback=callback)

    def decision_values(self, features: Any) -> List[float]:
        """Raw decision value(s): one for binary/regression/one-class, one per label pair otherwise."""
        fitted = self._require_fitted()
        x = coerce_features(features, n_features=fitted.n_features)
        return [float(v) for v in np.ravel(decision_values(fitted, x))]

    # ------------------------------------------------------------------
    # evaluation shortcuts
    # ------------------------------------------------------------------

    def _evaluator(self, evaluator: Any) -> Any:
        if evaluator is not None:
            return evaluator
        from svm_engine.components.evaluation.evaluators import SvmEvaluator

        return SvmEvaluator(runner=self._runner)

    def evaluate(self, dataset: Dataset, *, evaluator: Any = None) -> Report:
        return self._evaluator(evaluator).evaluate(self, dataset)

    def evaluate_async(
        self,
        dataset: Dataset,
        callback: Optional[DoneCallback] = None,
        *,
        evaluator: Any = None,
    ) -> Future:
        return self._evaluator(evaluator).evaluate_async(self, dataset, callback=callback)

    def perform_n_fold_cross_validation(self, dataset: Dataset, n: int, *, evaluator: Any = None) -> Report:
        return self._evaluator(evaluator).perform_n_fold_cross_validation(self, dataset, n)

    def perform_n_fold_cross_validation_async(
        self,
        dataset: Dataset,
        n: int,
        callback: Optional[DoneCallback] = None,
        *,
        evaluator: Any = None,
    ) -> Future:
        return self._evaluator(evaluator).perform_n_fold_cross_validation_async(
            self, dataset, n, callback=callback
        )
