"""Console, CSV and JSON output for forecasts."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence
import csv
import json

from nbamatchup.models.engine import Prediction


def _pct(value: float) -> str:
    return f"{value * 100:.1f}%"


def format_prediction(prediction: Prediction) -> str:
    """Plain-text forecast card."""
    spread = f"{prediction.spread_line:+.1f}" if prediction.spread_line else "PK"
    lines = [
        f"{prediction.away_name} ({prediction.away_code}) @ "
        f"{prediction.home_name} ({prediction.home_code})",
        f"  Winner:     {prediction.winner_name} ({_pct(prediction.win_probability)}, "
        f"{prediction.confidence_tier.value} confidence)",
        f"  Score:      {prediction.home_code} {prediction.home_score} - "
        f"{prediction.away_code} {prediction.away_score}",
        f"  Total:      {prediction.total_points} vs O/U {prediction.over_under_line:.1f} "
        f"(over {_pct(prediction.over_probability)})",
        f"  Spread:     {prediction.home_code} {spread}, "
        f"{prediction.spread_cover_code} to cover ({_pct(prediction.spread_probability)})",
    ]
    return "\n".join(lines)


def write_predictions_csv(predictions: Sequence[Prediction], output_path: str) -> None:
    """Write forecasts to CSV, one row each."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows: List[Dict] = [prediction.to_dict() for prediction in predictions]
    if not rows:
        path.write_text("", encoding="utf-8")
        return

    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)


def write_prediction_json(prediction: Prediction, output_path: str,
                          run_id: Optional[str] = None) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = prediction.to_dict()
    if run_id:
        payload = {"run_id": run_id, "prediction": payload}
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
