"""Engine registries.

Registries map variant tags to implementations so that adding a formulation is
a registration, not an if/else edit.
"""

from .estimators import make_estimator_builder, register_estimator_builder, list_svm_types
from .options import kernel_from_options, svm_config_from_options, parse_tag
