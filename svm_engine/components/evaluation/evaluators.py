from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from svm_engine.components.evaluation.scoring import build_report
from svm_engine.components.interfaces import Evaluator
from svm_engine.components.splitters.cv_split import check_n_folds
from svm_engine.components.splitters.splitters import ContiguousKFoldSplitter
from svm_engine.components.splitters.types import Split
from svm_engine.contracts.eval_configs import CrossValidationConfig, EvaluationConfig
from svm_engine.contracts.results import Report
from svm_engine.contracts.types import task_to_problem_kind
from svm_engine.core.datasets import coerce_dataset
from svm_engine.errors import Untrained
from svm_engine.runtime.runner import BackgroundRunner, DoneCallback, default_runner

logger = logging.getLogger(__name__)


@dataclass
class SvmEvaluator(Evaluator):
    """
    Scores SVM models.

    - ``evaluate`` predicts every example with a trained model.
    - ``perform_n_fold_cross_validation`` trains one fresh model per
      contiguous fold and pools the out-of-fold predictions in dataset order.
    """

    config: EvaluationConfig = field(default_factory=EvaluationConfig)
    cv: CrossValidationConfig = field(default_factory=CrossValidationConfig)
    runner: Optional[BackgroundRunner] = None

    def _get_runner(self) -> BackgroundRunner:
        return self.runner if self.runner is not None else default_runner()

    def _report(self, model: Any, y_true: np.ndarray, y_pred: Any) -> Report:
        return build_report(
            task_to_problem_kind(model.config.task),
            y_true,
            y_pred,
            include_class_metrics=self.config.include_class_metrics,
        )

    def evaluate(self, model: Any, dataset: Any) -> Report:
        if not model.is_trained():
            raise Untrained(f"cannot evaluate an untrained {model.get_svm_type()} model")
        X, y = coerce_dataset(dataset)
        y_pred = model.predict_many(X)
        return self._report(model, y, y_pred)

    def evaluate_async(
        self,
        model: Any,
        dataset: Any,
        callback: Optional[DoneCallback] = None,
    ) -> Future:
        return self._get_runner().submit(self.evaluate, model, dataset, callback=callback)

    def _run_fold(self, template: Any, index: int, n_folds: int, split: Split) -> List[float]:
        sub = template.spawn()
        sub.train_arrays(split.Xtr, split.ytr)
        logger.debug(
            "fold %d/%d: trained on %d, predicting %d",
            index + 1,
            n_folds,
            split.Xtr.shape[0],
            split.Xte.shape[0],
        )
        return sub.predict_many(split.Xte)

    def perform_n_fold_cross_validation(self, model: Any, dataset: Any, n: int) -> Report:
        """Contiguous n-fold cross-validation using ``model`` as a template.

        The template itself is never trained or modified.
        """
        X, y = coerce_dataset(dataset)
        n_folds = check_n_folds(n, X.shape[0])
        splits = list(ContiguousKFoldSplitter(n_splits=n_folds).split(X, y))

        if self.cv.max_workers > 1:
            with ThreadPoolExecutor(max_workers=min(self.cv.max_workers, n_folds)) as pool:
                fold_preds = list(
                    pool.map(
                        lambda i: self._run_fold(model, i, n_folds, splits[i]),
                        range(n_folds),
                    )
                )
        else:
            fold_preds = [self._run_fold(model, i, n_folds, s) for i, s in enumerate(splits)]

        y_pred = np.empty_like(y)
        for split, preds in zip(splits, fold_preds):
            y_pred[split.idx_te] = preds

        report = self._report(model, y, y_pred)
        report.n_folds = n_folds
        report.fold_sizes = [int(s.idx_te.shape[0]) for s in splits]
        return report

    def perform_n_fold_cross_validation_async(
        self,
        model: Any,
        dataset: Any,
        n: int,
        callback: Optional[DoneCallback] = None,
    ) -> Future:
        return self._get_runner().submit(
            self.perform_n_fold_cross_validation, model, dataset, n, callback=callback
        )
