from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from svm_engine.contracts.types import ProblemKind

from .common import Label, ResultModel


class ClassMetrics(ResultModel):
    label: Label
    precision: float
    recall: float
    f1: float
    support: int


class Report(ResultModel):
    """Scoring of a model against labelled examples.

    Exactly one metric family is populated: ``accuracy`` for classification
    (and one-class) models, ``mse`` / ``squared_correlation`` for regression.
    ``y_true`` / ``y_pred`` keep the per-example results in dataset order so
    either metric can be recomputed.
    """

    kind: ProblemKind
    n_examples: int
    y_true: List[float]
    y_pred: List[float]

    # classification
    accuracy: Optional[float] = None
    labels: Optional[List[Label]] = None
    confusion: Optional[List[List[int]]] = None
    per_class: Optional[List[ClassMetrics]] = None

    # regression
    mse: Optional[float] = None
    squared_correlation: Optional[float] = None

    # cross-validation
    n_folds: Optional[int] = None
    fold_sizes: List[int] = Field(default_factory=list)
