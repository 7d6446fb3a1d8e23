"""Kernel SVM models: training, prediction, probability estimates and evaluation."""

from svm_engine.api import *  # noqa: F401,F403
from svm_engine.api import __all__  # noqa: F401

__version__ = "0.1.0"
