"""Forecast output writers."""

from nbamatchup.reporting.output import format_prediction, write_prediction_json, write_predictions_csv

__all__ = ["format_prediction", "write_prediction_json", "write_predictions_csv"]
