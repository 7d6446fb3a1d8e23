from __future__ import annotations

import logging
import warnings
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

import numpy as np

from svm_engine.components.interfaces import Solver
from svm_engine.components.solver.params import FittedParameters
from svm_engine.contracts.kernels import Kernel
from svm_engine.contracts.svm_configs import SvmConfig
from svm_engine.errors import SolverFailure
from svm_engine.registries.estimators import make_estimator_builder

logger = logging.getLogger(__name__)

# scikit-learn 1.9 deprecates the libsvm Platt calibration surface
# (``probability``, ``probA_``, ``probB_``); it still backs predict_proba.
_PROBABILITY_DEPRECATION = r".*\b(probability|probA_|probB_)\b"


@contextmanager
def _quiet_probability_deprecations() -> Iterator[None]:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=_PROBABILITY_DEPRECATION, category=FutureWarning)
        yield


def _check_iterations(est: Any, cfg: SvmConfig) -> None:
    """libsvm stops silently at max_iter; treat that as non-convergence."""
    if cfg.max_iter == -1:
        return
    n_iter = np.atleast_1d(np.asarray(getattr(est, "n_iter_", 0)))
    if np.any(n_iter >= cfg.max_iter):
        raise SolverFailure(
            f"{cfg.name} did not converge within max_iter={cfg.max_iter} iterations"
        )


@dataclass
class LibsvmSolver(Solver):
    """Solver adapter over scikit-learn's libsvm bindings.

    Every call builds a fresh estimator, so two models never share solver
    state and folds can be fitted concurrently.
    """

    def fit(
        self,
        cfg: SvmConfig,
        kernel: Kernel,
        X: np.ndarray,
        y: np.ndarray,
        *,
        seed: Optional[int] = None,
    ) -> FittedParameters:
        with _quiet_probability_deprecations():
            est = make_estimator_builder(cfg, kernel, seed=seed).make_estimator()

            try:
                if cfg.task == "one_class":
                    est.fit(X)
                else:
                    est.fit(X, y)
            except ValueError as exc:
                logger.debug("%s solver failed on %d examples: %s", cfg.name, X.shape[0], exc)
                raise SolverFailure(f"{cfg.name} training failed: {exc}") from exc

            _check_iterations(est, cfg)

            return FittedParameters.from_estimator(est, task=cfg.task, n_features=X.shape[1])
