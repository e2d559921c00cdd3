"""Data models for suicide-risk text classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class RiskLevel(str, Enum):
    """Risk tiers attached to a prediction."""

    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"


@dataclass(frozen=True)
class VectorStats:
    """Summary statistics of a TF-IDF vector."""

    total: float
    magnitude: float
    non_zero: int


@dataclass
class PredictionResult:
    """Outcome of classifying a single piece of text."""

    label: str
    risk_level: RiskLevel
    confidence: float
    tokens_processed: int = 0
    preview: str = ""
    original_text: str = ""
    message: Optional[str] = None

    @property
    def is_at_risk(self) -> bool:
        return self.risk_level in (RiskLevel.HIGH, RiskLevel.MODERATE)

    def to_dict(self) -> dict:
        data = {
            "original_text": self.original_text,
            "prediction": self.label,
            "risk_level": self.risk_level.value,
            "confidence": self.confidence,
            "tokens_processed": self.tokens_processed,
            "preprocessed_text": self.preview,
        }
        if self.message:
            data["message"] = self.message
        return data


@dataclass
class ModelInfo:
    """Descriptive metadata about the exported model."""

    model: str
    accuracy: float
    vocabulary_size: int
    classes: list[str] = field(default_factory=list)
    training_size: int = 0
    testing_size: int = 0
    total_samples: int = 0

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "accuracy": self.accuracy,
            "vocabulary_size": self.vocabulary_size,
            "classes": list(self.classes),
            "training_size": self.training_size,
            "testing_size": self.testing_size,
            "total_samples": self.total_samples,
        }


@dataclass(frozen=True)
class CrisisResource:
    """A crisis hotline or directory a user can be pointed to."""

    name: str
    number: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    available: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"name": self.name}
        for key in ("number", "website", "description", "available"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data
