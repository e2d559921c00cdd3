"""Tests for data models."""

from __future__ import annotations

import pytest

from suicide_risk_detector.info import CRISIS_RESOURCES, crisis_resources
from suicide_risk_detector.models import (
    CrisisResource,
    ModelInfo,
    PredictionResult,
    RiskLevel,
    VectorStats,
)


class TestRiskLevel:
    def test_values(self):
        assert RiskLevel.HIGH.value == "high"
        assert RiskLevel.MODERATE.value == "moderate"
        assert RiskLevel.LOW.value == "low"

    def test_str_enum(self):
        assert RiskLevel.MODERATE == "moderate"


class TestPredictionResult:
    def test_to_dict(self):
        result = PredictionResult(
            label="suicide",
            risk_level=RiskLevel.HIGH,
            confidence=0.91,
            tokens_processed=12,
            preview="hopeless alone",
            original_text="I am hopeless and alone",
        )
        d = result.to_dict()
        assert d == {
            "original_text": "I am hopeless and alone",
            "prediction": "suicide",
            "risk_level": "high",
            "confidence": 0.91,
            "tokens_processed": 12,
            "preprocessed_text": "hopeless alone",
        }

    def test_message_included_when_set(self):
        result = PredictionResult(
            label="non-suicide",
            risk_level=RiskLevel.LOW,
            confidence=0.5,
            message="Text too short for accurate prediction",
        )
        assert result.to_dict()["message"] == "Text too short for accurate prediction"

    @pytest.mark.parametrize("level, expected", [
        (RiskLevel.HIGH, True),
        (RiskLevel.MODERATE, True),
        (RiskLevel.LOW, False),
    ])
    def test_is_at_risk(self, level, expected):
        result = PredictionResult(label="x", risk_level=level, confidence=0.8)
        assert result.is_at_risk is expected


class TestVectorStats:
    def test_frozen(self):
        stats = VectorStats(total=1.0, magnitude=1.0, non_zero=1)
        with pytest.raises(AttributeError):
            stats.total = 2.0  # type: ignore[misc]


class TestModelInfo:
    def test_to_dict(self):
        info = ModelInfo(
            model="Linear SVM",
            accuracy=0.9315,
            vocabulary_size=5000,
            classes=["non-suicide", "suicide"],
            training_size=185659,
            testing_size=46415,
            total_samples=232074,
        )
        d = info.to_dict()
        assert d["vocabulary_size"] == 5000
        assert d["classes"] == ["non-suicide", "suicide"]
        assert d["total_samples"] == d["training_size"] + d["testing_size"]


class TestCrisisResources:
    def test_omits_unset_fields(self):
        resource = CrisisResource(name="Line", number="123")
        assert resource.to_dict() == {"name": "Line", "number": "123"}

    def test_hotlines(self):
        hotlines = crisis_resources()
        assert len(hotlines) == 3
        assert hotlines[0].number == "988"
        assert any(h.website and "iasp" in h.website for h in hotlines)

    def test_returns_copy(self):
        hotlines = crisis_resources()
        hotlines.clear()
        assert len(crisis_resources()) == len(CRISIS_RESOURCES)
