from __future__ import annotations

from pydantic import Field

from .common import ContractModel


class EvaluationConfig(ContractModel):
    # confusion matrix and per-class precision/recall/f1 on classification reports
    include_class_metrics: bool = True


class CrossValidationConfig(ContractModel):
    # >1 trains folds concurrently; fold membership and report order do not change
    max_workers: int = Field(default=1, ge=1)
