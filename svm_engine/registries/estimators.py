from __future__ import annotations

from typing import Callable, Optional

from svm_engine.components.interfaces import EstimatorBuilder
from svm_engine.contracts.kernels import Kernel
from svm_engine.contracts.svm_configs import SvmConfig
from svm_engine.contracts.types import SvmType
from svm_engine.registries.base import Registry

# Factory takes (cfg, kernel, seed) and returns an EstimatorBuilder.
EstimatorBuilderFactory = Callable[[SvmConfig, Kernel, Optional[int]], EstimatorBuilder]


_BUILDERS: Registry[SvmType, EstimatorBuilderFactory] = Registry(_name="estimator_builders")

_BUILTINS_LOADED = False


def register_estimator_builder(
    svm_type: SvmType,
) -> Callable[[EstimatorBuilderFactory], EstimatorBuilderFactory]:
    """Decorator registering the estimator builder for one SVM formulation."""

    def deco(factory: EstimatorBuilderFactory) -> EstimatorBuilderFactory:
        _BUILDERS.register(SvmType(svm_type))(factory)
        return factory

    return deco


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from svm_engine.registries.builtins import estimators as _  # noqa: F401

    _BUILTINS_LOADED = True


def make_estimator_builder(
    cfg: SvmConfig,
    kernel: Kernel,
    *,
    seed: Optional[int] = None,
) -> EstimatorBuilder:
    """Return the EstimatorBuilder for the provided configuration."""

    _ensure_builtins()

    factory = _BUILDERS.try_get(cfg.svm_type)
    if factory is None:
        raise ValueError(f"Unsupported SVM type: {cfg.svm_type!r} ({type(cfg).__name__})")

    return factory(cfg, kernel, seed)


def list_svm_types() -> list[str]:
    _ensure_builtins()
    return [t.name for t in sorted(_BUILDERS.keys())]
