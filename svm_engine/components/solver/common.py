from __future__ import annotations

import inspect
from typing import Any, Dict, Optional

from svm_engine.contracts.kernels import Kernel
from svm_engine.contracts.types import KernelType
from svm_engine.errors import InvalidConfiguration


def _filtered_kwargs(estimator_cls: type, cfg_obj: Any, *, exclude: Optional[set[str]] = None) -> Dict[str, Any]:
    """Dump cfg to dict and drop None; every remaining field must be an estimator kwarg."""
    raw = cfg_obj.model_dump(exclude=exclude, exclude_none=True)
    sig = inspect.signature(estimator_cls)
    rejected = sorted(k for k in raw if k not in sig.parameters)
    if rejected:
        raise InvalidConfiguration(
            f"{estimator_cls.__name__} does not accept {', '.join(rejected)}"
        )
    return raw


def _maybe_set_random_state(estimator_cls: type, kw: Dict[str, Any], seed: Optional[int]) -> None:
    if seed is None:
        return
    sig = inspect.signature(estimator_cls)
    if "random_state" in sig.parameters and "random_state" not in kw:
        kw["random_state"] = int(seed)


_SKLEARN_KERNEL_NAMES = {
    KernelType.LINEAR: "linear",
    KernelType.POLY: "poly",
    KernelType.RBF: "rbf",
    KernelType.SIGMOID: "sigmoid",
}


def kernel_kwargs(kernel: Kernel) -> Dict[str, Any]:
    """Translate a kernel contract into libsvm keyword arguments (r -> coef0)."""
    kt = kernel.kernel_type
    kw: Dict[str, Any] = {"kernel": _SKLEARN_KERNEL_NAMES[kt]}
    if kt == KernelType.POLY:
        kw.update(degree=kernel.degree, gamma=kernel.gamma, coef0=kernel.r)
    elif kt == KernelType.RBF:
        kw.update(gamma=kernel.gamma)
    elif kt == KernelType.SIGMOID:
        kw.update(gamma=kernel.gamma, coef0=kernel.r)
    return kw
