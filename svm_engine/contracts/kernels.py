from __future__ import annotations

"""Kernel contracts.

A kernel is a pure value: its tag plus the parameters that apply to it.
Parameters that do not belong to a kernel are simply absent (accessing them
raises ``AttributeError``); nothing is silently defaulted.
"""

from typing import Any, ClassVar, Union

from pydantic import Field

from .common import ContractModel
from .types import KernelType


class KernelBase(ContractModel):
    kernel_type: ClassVar[KernelType]

    @property
    def name(self) -> str:
        return self.kernel_type.name


class LinearKernel(KernelBase):
    """u'v"""

    kernel_type: ClassVar[KernelType] = KernelType.LINEAR


class PolynomialKernel(KernelBase):
    """(gamma*u'v + r)^degree"""

    kernel_type: ClassVar[KernelType] = KernelType.POLY

    degree: int = Field(ge=1)
    gamma: float = Field(allow_inf_nan=False)
    r: float = Field(default=0.0, allow_inf_nan=False)

    def __init__(self, degree: int, gamma: float, r: float = 0.0, **data: Any) -> None:
        super().__init__(degree=degree, gamma=gamma, r=r, **data)


class RadialBasisFunctionKernel(KernelBase):
    """exp(-gamma*|u-v|^2)"""

    kernel_type: ClassVar[KernelType] = KernelType.RBF

    gamma: float = Field(gt=0, allow_inf_nan=False)

    def __init__(self, gamma: float, **data: Any) -> None:
        super().__init__(gamma=gamma, **data)


class SigmoidKernel(KernelBase):
    """tanh(gamma*u'v + r)"""

    kernel_type: ClassVar[KernelType] = KernelType.SIGMOID

    gamma: float = Field(allow_inf_nan=False)
    r: float = Field(default=0.0, allow_inf_nan=False)

    def __init__(self, gamma: float, r: float = 0.0, **data: Any) -> None:
        super().__init__(gamma=gamma, r=r, **data)


Kernel = Union[LinearKernel, PolynomialKernel, RadialBasisFunctionKernel, SigmoidKernel]

KERNEL_CLASSES = (LinearKernel, PolynomialKernel, RadialBasisFunctionKernel, SigmoidKernel)
