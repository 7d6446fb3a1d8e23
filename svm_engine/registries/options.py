from __future__ import annotations

"""Build contracts from flat option mappings.

Accepts the option dictionaries of the classic libsvm front-ends, e.g.::

    {"type": "C_SVC", "C": 1, "probability": True}
    {"type": "RBF", "gamma": 0.5}

``type`` may be the tag name or its integer value.
"""

from enum import IntEnum
from typing import Any, Mapping, Type, TypeVar

from svm_engine.contracts.kernels import KERNEL_CLASSES, Kernel, KernelBase
from svm_engine.contracts.svm_configs import SVM_CONFIG_CLASSES, SvmConfig, SvmConfigBase
from svm_engine.contracts.types import KernelType, SvmType
from svm_engine.errors import InvalidConfiguration
from svm_engine.registries.base import Registry

E = TypeVar("E", bound=IntEnum)

KERNELS: Registry[KernelType, Type[KernelBase]] = Registry(_name="kernels")
SVM_CONFIGS: Registry[SvmType, Type[SvmConfigBase]] = Registry(_name="svm_configs")

for _cls in KERNEL_CLASSES:
    KERNELS.register(_cls.kernel_type)(_cls)
for _cls in SVM_CONFIG_CLASSES:
    SVM_CONFIGS.register(_cls.svm_type)(_cls)


def parse_tag(enum_cls: Type[E], value: Any) -> E:
    """Resolve a tag given as enum member, integer, or (case-insensitive) name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    names = ", ".join(m.name for m in enum_cls)
    raise InvalidConfiguration(f"unknown {enum_cls.__name__} {value!r}; expected one of {names}")


def kernel_from_options(options: Mapping[str, Any]) -> Kernel:
    opts = dict(options)
    if "type" not in opts:
        raise InvalidConfiguration("kernel options need a 'type' entry")
    kernel_cls = KERNELS.get(parse_tag(KernelType, opts.pop("type")))
    try:
        return kernel_cls(**opts)
    except TypeError as exc:
        # positional kernel parameters missing or duplicated
        raise InvalidConfiguration(f"{kernel_cls.__name__}: {exc}") from exc


def svm_config_from_options(options: Mapping[str, Any]) -> SvmConfig:
    """Build an SVM configuration; a ``kernel`` entry, if present, is ignored."""
    opts = dict(options)
    opts.pop("kernel", None)
    if "type" not in opts:
        raise InvalidConfiguration("SVM options need a 'type' entry")
    config_cls = SVM_CONFIGS.get(parse_tag(SvmType, opts.pop("type")))
    return config_cls(**opts)
