"""Suicide Risk Detector -- TF-IDF screening of text for suicide-risk language."""

__version__ = "1.0.0"

from .classifier import (
    ClassificationMetrics,
    HeuristicClassifier,
    RiskClassifier,
    TfidfVectorizer,
    build_preview,
    compute_metrics,
    estimate_confidence,
    risk_level_for,
    vector_stats,
)
from .exceptions import DependencyMissingError, DetectorError, ValidationError
from .info import CRISIS_RESOURCES, crisis_resources
from .models import CrisisResource, ModelInfo, PredictionResult, RiskLevel, VectorStats
from .preprocessing import (
    STOP_WORDS,
    TextPreprocessor,
    clean_text,
    remove_stop_words,
    tokenize,
)
from .resources import ModelResources, load_resources

__all__ = [
    # Core
    "RiskClassifier",
    "PredictionResult",
    "RiskLevel",
    # Resources
    "ModelResources",
    "load_resources",
    # Preprocessing
    "TextPreprocessor",
    "STOP_WORDS",
    "clean_text",
    "tokenize",
    "remove_stop_words",
    # Classification
    "TfidfVectorizer",
    "HeuristicClassifier",
    "VectorStats",
    "vector_stats",
    "estimate_confidence",
    "risk_level_for",
    "build_preview",
    # Evaluation
    "ClassificationMetrics",
    "compute_metrics",
    # Info
    "ModelInfo",
    "CrisisResource",
    "CRISIS_RESOURCES",
    "crisis_resources",
    # Errors
    "DetectorError",
    "ValidationError",
    "DependencyMissingError",
]
