"""Shared test fixtures for suicide-risk-detector tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from suicide_risk_detector.classifier import RiskClassifier
from suicide_risk_detector.resources import ModelResources

# A tiny stand-in for the exported vocabulary. "meeting" has no IDF weight.
VOCABULARY = {
    "suicide": 0,
    "hopeless": 1,
    "burden": 2,
    "happy": 3,
    "love": 4,
    "family": 5,
    "pain": 6,
    "today": 7,
    "work": 8,
    "meeting": 9,
}

IDF_VALUES = {
    "suicide": 3.2,
    "hopeless": 2.9,
    "burden": 2.7,
    "happy": 1.8,
    "love": 1.5,
    "family": 1.6,
    "pain": 2.4,
    "today": 1.2,
    "work": 1.1,
}

CLASS_LABELS = {"0": "non-suicide", "1": "suicide"}


@pytest.fixture
def resources() -> ModelResources:
    """Validated in-memory model resources."""
    return ModelResources.from_mappings(VOCABULARY, IDF_VALUES, CLASS_LABELS)


@pytest.fixture
def classifier(resources: ModelResources) -> RiskClassifier:
    """Classifier over the in-memory resources."""
    return RiskClassifier(resources)


@pytest.fixture
def model_dir(tmp_path: Path) -> Path:
    """Directory containing the three exported model files."""
    directory = tmp_path / "model_files"
    directory.mkdir()
    (directory / "vocabulary.json").write_text(json.dumps(VOCABULARY), encoding="utf-8")
    (directory / "idf_values.json").write_text(json.dumps(IDF_VALUES), encoding="utf-8")
    (directory / "class_labels.json").write_text(json.dumps(CLASS_LABELS), encoding="utf-8")
    return directory


@pytest.fixture
def distress_text() -> str:
    """Text dominated by risk keywords."""
    return "I feel hopeless, like a burden to everyone. I think about suicide."


@pytest.fixture
def positive_text() -> str:
    """Text dominated by positive keywords."""
    return "So happy today! I love my family and my friends."
