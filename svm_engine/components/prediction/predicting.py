from __future__ import annotations

from typing import Dict, List

import numpy as np

from svm_engine.components.solver.params import FittedParameters


def predict_values(fitted: FittedParameters, X: np.ndarray) -> np.ndarray:
    """
    Predict one value per row.

    Returns
    -------
    y_pred : ndarray of shape (n_samples,), dtype float
        A recorded label for classification, a real value for regression,
        +1.0 / -1.0 (inlier / outlier) for one-class.
    """
    X = np.asarray(X, dtype=float)
    if X.ndim != 2:
        raise ValueError(f"X must be 2D; got {X.shape}.")
    if X.shape[0] == 0:
        return np.empty(0, dtype=float)
    return np.asarray(fitted.estimator.predict(X), dtype=float)


def predict_probabilities(fitted: FittedParameters, X: np.ndarray) -> List[Dict[float, float]]:
    """
    Per-row mapping label -> probability, keys in ascending label order.

    The calibrated probabilities come straight from libsvm's pairwise
    coupling; they are not renormalized here.
    """
    X = np.asarray(X, dtype=float)
    proba = np.asarray(fitted.estimator.predict_proba(X), dtype=float)
    classes = [float(c) for c in fitted.estimator.classes_]
    order = np.argsort(classes)
    return [
        {classes[j]: float(row[j]) for j in order}
        for row in proba
    ]


def decision_values(fitted: FittedParameters, X: np.ndarray) -> np.ndarray:
    """
    Raw decision function.

    Shape (n_samples,) for binary classification, regression and one-class;
    (n_samples, n_labels * (n_labels - 1) / 2) one-vs-one values otherwise.
    """
    X = np.asarray(X, dtype=float)
    est = fitted.estimator
    if hasattr(est, "decision_function"):
        return np.asarray(est.decision_function(X), dtype=float)
    # regressors: the decision value is the prediction
    return np.asarray(est.predict(X), dtype=float)
