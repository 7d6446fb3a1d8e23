"""Configuration and result contracts.

Keep module imports explicit in most of the codebase:
    from svm_engine.contracts.kernels import RadialBasisFunctionKernel
The names re-exported here are convenience imports for callers that prefer a
single namespace.
"""

from .types import KernelType, SvmType, ProblemKind, TaskName
from .kernels import (
    Kernel,
    LinearKernel,
    PolynomialKernel,
    RadialBasisFunctionKernel,
    SigmoidKernel,
)
from .svm_configs import (
    CSVCConfig,
    EpsilonSVRConfig,
    NuSVCConfig,
    NuSVRConfig,
    OneClassConfig,
    SvmConfig,
)
from .eval_configs import CrossValidationConfig, EvaluationConfig
from .results import ClassMetrics, Report

__all__ = [
    "KernelType",
    "SvmType",
    "ProblemKind",
    "TaskName",
    "Kernel",
    "LinearKernel",
    "PolynomialKernel",
    "RadialBasisFunctionKernel",
    "SigmoidKernel",
    "CSVCConfig",
    "NuSVCConfig",
    "OneClassConfig",
    "EpsilonSVRConfig",
    "NuSVRConfig",
    "SvmConfig",
    "EvaluationConfig",
    "CrossValidationConfig",
    "ClassMetrics",
    "Report",
]
