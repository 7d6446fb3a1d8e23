"""Public façade.

The sanctioned import surface for callers::

    from svm_engine.api import SVM, CSVCConfig, RadialBasisFunctionKernel

    svm = SVM(CSVCConfig(C=1, probability=True), RadialBasisFunctionKernel(0.5))
    svm.train(dataset)
    svm.predict([1, -1])
"""

from __future__ import annotations

from svm_engine.components.evaluation import SvmEvaluator
from svm_engine.components.models import SVM
from svm_engine.contracts import (
    ClassMetrics,
    CrossValidationConfig,
    CSVCConfig,
    EpsilonSVRConfig,
    EvaluationConfig,
    Kernel,
    KernelType,
    LinearKernel,
    NuSVCConfig,
    NuSVRConfig,
    OneClassConfig,
    PolynomialKernel,
    RadialBasisFunctionKernel,
    Report,
    SigmoidKernel,
    SvmConfig,
    SvmType,
)
from svm_engine.core.datasets import Example
from svm_engine.errors import (
    DimensionMismatch,
    InconsistentDimensions,
    InvalidArgument,
    InvalidConfiguration,
    InvalidDataset,
    SolverFailure,
    SvmError,
    Untrained,
    UnsupportedOperation,
)
from svm_engine.registries.options import kernel_from_options, svm_config_from_options
from svm_engine.runtime import BackgroundRunner, default_runner, shutdown_default_runner

__all__ = [
    "SVM",
    "SvmEvaluator",
    "Example",
    "KernelType",
    "SvmType",
    "Kernel",
    "LinearKernel",
    "PolynomialKernel",
    "RadialBasisFunctionKernel",
    "SigmoidKernel",
    "SvmConfig",
    "CSVCConfig",
    "NuSVCConfig",
    "OneClassConfig",
    "EpsilonSVRConfig",
    "NuSVRConfig",
    "EvaluationConfig",
    "CrossValidationConfig",
    "Report",
    "ClassMetrics",
    "kernel_from_options",
    "svm_config_from_options",
    "BackgroundRunner",
    "default_runner",
    "shutdown_default_runner",
    "SvmError",
    "InvalidConfiguration",
    "InvalidDataset",
    "DimensionMismatch",
    "InconsistentDimensions",
    "InvalidArgument",
    "Untrained",
    "UnsupportedOperation",
    "SolverFailure",
]
