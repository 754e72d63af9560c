"""Logic helpers for the **Overview** tab."""
from typing import Any, Dict, Optional, Tuple

import gradio as gr

from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML, image_html, safe_load_table, stat_cards_html

__all__ = ["OVERVIEW_IMAGES", "create_overview_tab", "get_overview_stats", "load_overview"]

DEFAULT_STAT = "-"

# (element id, logical path, caption)
OVERVIEW_IMAGES = [
    ("rocCurves", "roc_curves_patient_level.png", "ROC Curves (patient level)"),
    ("prCurves", "pr_curves_patient_level.png", "Precision-Recall Curves"),
    ("confusionMatrices", "confusion_matrices_patient_level.png", "Confusion Matrices"),
    ("coverageCurve", "coverage_curve.png", "Coverage Curve"),
]


def get_overview_stats(session: DashboardSession) -> Dict[str, Any]:
    """Headline numbers; each falls back to a placeholder when its source is missing."""
    stats = {
        "Total Patients": DEFAULT_STAT,
        "MASLD Cases": DEFAULT_STAT,
        "Healthy Cases": DEFAULT_STAT,
        "Run Date": DEFAULT_STAT,
    }

    rows = safe_load_table(session, "patient_metrics_summary.csv")
    if rows:
        first = rows[0]
        stats["Total Patients"] = first.get("n_patients") or len(rows)
        stats["MASLD Cases"] = first.get("n_pos") or "N/A"
        stats["Healthy Cases"] = first.get("n_neg") or "N/A"

    config = session.load_json("run_config.json")
    if isinstance(config, dict) and config.get("timestamp"):
        stats["Run Date"] = str(config["timestamp"])[:10]

    return stats


def load_overview(session: Optional[DashboardSession]) -> Tuple[str, ...]:
    """Return the stat cards followed by one HTML block per overview image."""
    if session is None:
        return (NO_SESSION_HTML,) * (1 + len(OVERVIEW_IMAGES))

    images = tuple(
        image_html(session, element_id, path, alt=caption)
        for element_id, path, caption in OVERVIEW_IMAGES
    )
    return (stat_cards_html(get_overview_stats(session)),) + images


def create_overview_tab() -> Tuple[gr.HTML, ...]:
    stats_display = gr.HTML(NO_SESSION_HTML)
    image_displays = []
    for i in range(0, len(OVERVIEW_IMAGES), 2):
        with gr.Row():
            for _, _, caption in OVERVIEW_IMAGES[i:i + 2]:
                with gr.Column():
                    gr.Markdown(f"#### {caption}")
                    image_displays.append(gr.HTML(NO_SESSION_HTML))
    return (stats_display, *image_displays)
