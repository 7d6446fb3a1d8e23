"""Built-in estimator builder registrations.

This module is imported for side-effects by :mod:`svm_engine.registries.estimators`.
"""

from __future__ import annotations

from svm_engine.components.solver.builders import (
    CSVCBuilder,
    EpsilonSVRBuilder,
    NuSVCBuilder,
    NuSVRBuilder,
    OneClassBuilder,
)
from svm_engine.contracts.types import SvmType
from svm_engine.registries.estimators import register_estimator_builder


register_estimator_builder(SvmType.C_SVC)(CSVCBuilder)
register_estimator_builder(SvmType.NU_SVC)(NuSVCBuilder)
register_estimator_builder(SvmType.ONE_CLASS)(OneClassBuilder)
register_estimator_builder(SvmType.EPSILON_SVR)(EpsilonSVRBuilder)
register_estimator_builder(SvmType.NU_SVR)(NuSVRBuilder)
