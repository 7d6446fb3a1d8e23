from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from sklearn.svm import SVC, SVR, NuSVC, NuSVR, OneClassSVM

from svm_engine.components.interfaces import EstimatorBuilder
from svm_engine.contracts.kernels import Kernel
from svm_engine.contracts.svm_configs import (
    CSVCConfig,
    EpsilonSVRConfig,
    NuSVCConfig,
    NuSVRConfig,
    OneClassConfig,
)

from .common import _filtered_kwargs, _maybe_set_random_state, kernel_kwargs


@dataclass
class _LibsvmBuilder(EstimatorBuilder):
    cfg: Any
    kernel: Kernel
    seed: Optional[int] = None

    estimator_cls: ClassVar[type]

    def _kwargs(self) -> dict:
        kw = _filtered_kwargs(self.estimator_cls, self.cfg)
        kw.update(kernel_kwargs(self.kernel))
        _maybe_set_random_state(self.estimator_cls, kw, self.seed)
        return kw

    def make_estimator(self) -> Any:
        return self.estimator_cls(**self._kwargs())


@dataclass
class _ClassifierBuilder(_LibsvmBuilder):
    def _kwargs(self) -> dict:
        kw = super()._kwargs()
        # raw one-vs-one decision values, as libsvm reports them
        kw["decision_function_shape"] = "ovo"
        return kw


@dataclass
class CSVCBuilder(_ClassifierBuilder):
    cfg: CSVCConfig
    estimator_cls: ClassVar[type] = SVC


@dataclass
class NuSVCBuilder(_ClassifierBuilder):
    cfg: NuSVCConfig
    estimator_cls: ClassVar[type] = NuSVC


@dataclass
class OneClassBuilder(_LibsvmBuilder):
    cfg: OneClassConfig
    estimator_cls: ClassVar[type] = OneClassSVM


@dataclass
class EpsilonSVRBuilder(_LibsvmBuilder):
    cfg: EpsilonSVRConfig
    estimator_cls: ClassVar[type] = SVR


@dataclass
class NuSVRBuilder(_LibsvmBuilder):
    cfg: NuSVRConfig
    estimator_cls: ClassVar[type] = NuSVR
