from .common import ResultModel, Label
from .report import ClassMetrics, Report

__all__ = ["ResultModel", "Label", "ClassMetrics", "Report"]
