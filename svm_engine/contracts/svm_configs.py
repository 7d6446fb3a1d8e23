from __future__ import annotations

"""SVM variant configurations.

One model per libsvm formulation. Field names follow libsvm / scikit-learn
(``C``, ``nu``, ``epsilon``, ``tol``...) so they can be forwarded to the solver
without renaming.
"""

from typing import ClassVar, Dict, Optional, Union

from pydantic import Field, field_validator

from .common import ContractModel
from .types import SvmType, TaskName


class SvmConfigBase(ContractModel):
    svm_type: ClassVar[SvmType]
    task: ClassVar[TaskName]

    # solver knobs shared by every formulation
    tol: float = Field(default=1e-3, gt=0, allow_inf_nan=False)
    cache_size: float = Field(default=200.0, gt=0, allow_inf_nan=False)
    shrinking: bool = True
    max_iter: int = -1

    @field_validator("max_iter")
    @classmethod
    def _check_max_iter(cls, v: int) -> int:
        if v == -1 or v >= 1:
            return v
        raise ValueError("max_iter must be -1 (no limit) or a positive integer")

    @property
    def name(self) -> str:
        return self.svm_type.name

    @property
    def supports_probability(self) -> bool:
        return False


class ClassifierConfigBase(SvmConfigBase):
    task: ClassVar[TaskName] = "classification"

    probability: bool = False
    # per-class multiplier of C, keyed by label
    class_weight: Optional[Dict[float, float]] = None

    @field_validator("class_weight")
    @classmethod
    def _check_class_weight(cls, v: Optional[Dict[float, float]]) -> Optional[Dict[float, float]]:
        if v is None:
            return v
        bad = [label for label, w in v.items() if not w > 0]
        if bad:
            raise ValueError(f"class weights must be > 0; offending labels: {bad}")
        return v

    @property
    def supports_probability(self) -> bool:
        return self.probability


class CSVCConfig(ClassifierConfigBase):
    svm_type: ClassVar[SvmType] = SvmType.C_SVC

    C: float = Field(default=1.0, gt=0, allow_inf_nan=False)


class NuSVCConfig(ClassifierConfigBase):
    svm_type: ClassVar[SvmType] = SvmType.NU_SVC

    nu: float = Field(default=0.5, gt=0, lt=1)


class OneClassConfig(SvmConfigBase):
    svm_type: ClassVar[SvmType] = SvmType.ONE_CLASS
    task: ClassVar[TaskName] = "one_class"

    nu: float = Field(default=0.5, gt=0, lt=1)


class EpsilonSVRConfig(SvmConfigBase):
    svm_type: ClassVar[SvmType] = SvmType.EPSILON_SVR
    task: ClassVar[TaskName] = "regression"

    C: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    epsilon: float = Field(default=0.1, ge=0, allow_inf_nan=False)


class NuSVRConfig(SvmConfigBase):
    svm_type: ClassVar[SvmType] = SvmType.NU_SVR
    task: ClassVar[TaskName] = "regression"

    C: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    nu: float = Field(default=0.5, gt=0, lt=1)


SvmConfig = Union[CSVCConfig, NuSVCConfig, OneClassConfig, EpsilonSVRConfig, NuSVRConfig]

SVM_CONFIG_CLASSES = (CSVCConfig, NuSVCConfig, OneClassConfig, EpsilonSVRConfig, NuSVRConfig)
