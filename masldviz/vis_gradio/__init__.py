"""Gradio-based dashboard for MASLD model-evaluation results.

This module provides a Gradio interface for browsing metric tables,
calibration and SHAP plots, AI case reports and the run configuration of
an evaluation export.

Usage:
    from masldviz.vis_gradio import launch_app
    launch_app(local_dir="path/to/results")
"""

from .app import launch_app, create_app

__all__ = ["launch_app", "create_app"]
