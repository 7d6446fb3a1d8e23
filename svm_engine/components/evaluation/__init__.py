from .evaluators import SvmEvaluator
from .scoring import build_report, squared_correlation

__all__ = ["SvmEvaluator", "build_report", "squared_correlation"]
