from .predicting import decision_values, predict_probabilities, predict_values

__all__ = ["predict_values", "predict_probabilities", "decision_values"]
