"""Public package interface for scam-guard."""

from .analysis import (
    HYPERPARAMETERS,
    AnalysisMode,
    AnalysisResult,
    Category,
    DetectedTrigger,
    Hyperparameters,
    RiskLevel,
    Severity,
)
from .cli import cli_main
from .engine import analyze
from .metrics import Message, MetricsResult, compute_metrics, pes_label, usp_label
from .rules import Pipeline
from .sanitize import sanitize
from .server import check_message, check_message_file, conversation_metrics, main

__all__ = [
    "HYPERPARAMETERS",
    "AnalysisMode",
    "AnalysisResult",
    "Category",
    "DetectedTrigger",
    "Hyperparameters",
    "Message",
    "MetricsResult",
    "Pipeline",
    "RiskLevel",
    "Severity",
    "analyze",
    "check_message",
    "check_message_file",
    "cli_main",
    "compute_metrics",
    "conversation_metrics",
    "main",
    "pes_label",
    "sanitize",
    "usp_label",
]
