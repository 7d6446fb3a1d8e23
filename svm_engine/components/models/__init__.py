from .svm_model import SVM

__all__ = ["SVM"]
