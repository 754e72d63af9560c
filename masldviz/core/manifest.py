"""Expected contents of a results export, used by the File Checker page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from .session import DashboardSession

__all__ = [
    "CALIBRATION_MODELS",
    "CALIBRATION_TYPES",
    "EXPECTED_FILES",
    "calibration_plot_path",
    "check_expected_files",
]

CALIBRATION_MODELS = ["RF", "XGB", "CNN"]
CALIBRATION_TYPES = ["raw", "calibrated"]


def calibration_plot_path(model: str, plot_type: str) -> str:
    return f"calibration_plots/calibration_plot_patientlevel_{model}_{plot_type}.png"


EXPECTED_FILES: Dict[str, List[str]] = {
    "CSV Files": [
        "patient_metrics_summary.csv",
        "patient_confusion_matrices.csv",
        "model_comparison_stats.csv",
        "coverage_vs_performance.csv",
        "calibration_summary.csv",
        "cnn_uncertainty_patientlevel.csv",
    ],
    "Images": [
        "roc_curves_patient_level.png",
        "pr_curves_patient_level.png",
        "confusion_matrices_patient_level.png",
        "coverage_curve.png",
    ],
    "Configuration": ["run_config.json"],
    "Calibration Plots": [
        calibration_plot_path(model, plot_type)
        for model in CALIBRATION_MODELS
        for plot_type in CALIBRATION_TYPES
    ],
    "SHAP Plots": ["shap_plots/shap_global_summary.png"],
    "AI Reports": ["ai_reports/index.csv"],
}


def check_expected_files(session: "DashboardSession") -> Dict[str, List[Tuple[str, bool]]]:
    """Return ``{category: [(path, present), ...]}`` in manifest order."""
    return {
        category: [(path, session.exists(path)) for path in paths]
        for category, paths in EXPECTED_FILES.items()
    }
