"""Logic for the **Metrics** tab – summary, confusion and model comparison tables."""
from typing import Optional, Tuple

import gradio as gr

from ..core.session import DashboardSession
from .utils import NO_SESSION_HTML, image_html, table_html

__all__ = ["create_metrics_tab", "load_metrics"]


def load_metrics(session: Optional[DashboardSession]) -> Tuple[str, str, str, str]:
    return (
        table_html(session, "patient_metrics_summary.csv"),
        table_html(session, "patient_confusion_matrices.csv"),
        image_html(session, "confusionImage", "confusion_matrices_patient_level.png", alt="Confusion matrices"),
        table_html(session, "model_comparison_stats.csv"),
    )


def create_metrics_tab() -> Tuple[gr.HTML, gr.HTML, gr.HTML, gr.HTML]:
    gr.Markdown("### Patient-level Metrics Summary")
    metrics_table = gr.HTML(NO_SESSION_HTML)
    gr.Markdown("### Confusion Matrices")
    with gr.Row():
        with gr.Column():
            confusion_table = gr.HTML(NO_SESSION_HTML)
        with gr.Column():
            confusion_image = gr.HTML(NO_SESSION_HTML)
    gr.Markdown("### Model Comparison (statistical tests)")
    comparison_table = gr.HTML(NO_SESSION_HTML)
    return metrics_table, confusion_table, confusion_image, comparison_table
