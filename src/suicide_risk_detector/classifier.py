"""Suicide-risk classification pipeline over a fixed TF-IDF vocabulary.

Scores free text against the vocabulary and IDF weights exported from the
original model, then applies a keyword/magnitude decision rule to produce a
binary class, a confidence estimate, and a risk tier. Pure Python, no
sklearn or numpy required.

Features:
- Dense TF-IDF vectorization against a fixed vocabulary
- Keyword-weighted heuristic decision rule
- Confidence and risk-tier estimation from token counts
- Precision, recall, F1, and confusion matrix evaluation

The decision rule is a closed-form heuristic, not a learned model: its
thresholds, multipliers, and rule order define the whole decision boundary.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from .exceptions import DependencyMissingError, ValidationError
from .info import MODEL_METADATA
from .models import ModelInfo, PredictionResult, RiskLevel, VectorStats
from .preprocessing import TextPreprocessor
from .resources import ModelResources

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SUICIDE = 1
NON_SUICIDE = 0

SHORT_TEXT_LABEL = "non-suicide"
SHORT_TEXT_CONFIDENCE = 0.5
SHORT_TEXT_MESSAGE = "Text too short for accurate prediction"
EMPTY_TEXT_MESSAGE = "Please provide text for analysis"

PREVIEW_TOKENS = 20
PREVIEW_ELLIPSIS = "..."

RISK_KEYWORDS: frozenset[str] = frozenset({
    "suicide", "kill", "die", "death", "end", "life", "worthless", "hopeless",
    "alone", "pain", "hurt", "hate", "depressed", "sad", "crying", "tired",
    "give", "anymore", "cant", "help", "lost", "goodbye", "sorry", "burden",
})

POSITIVE_KEYWORDS: frozenset[str] = frozenset({
    "happy", "great", "good", "love", "blessed", "excited", "amazing",
    "wonderful", "joy", "hope", "better", "forward", "family", "friends",
})

RISK_KEYWORD_WEIGHT = 2.0
POSITIVE_KEYWORD_WEIGHT = 1.5


# ---------------------------------------------------------------------------
# TF-IDF Vectorizer
# ---------------------------------------------------------------------------

@dataclass
class TfidfVectorizer:
    """Dense TF-IDF vectorizer over a fixed, pre-exported vocabulary.

    Term frequency is the relative frequency of a term within the given
    tokens; it is multiplied by the term's IDF weight (0 when the term has
    none). Tokens outside the vocabulary are dropped silently.

    Args:
        vocabulary: Mapping of term to vector index.
        idf: Mapping of term to IDF weight.
    """

    vocabulary: Mapping[str, int] = field(repr=False)
    idf: Mapping[str, float] = field(repr=False)

    @property
    def size(self) -> int:
        """Length of every vector this vectorizer produces."""
        return len(self.vocabulary)

    def transform(self, tokens: list[str]) -> list[float]:
        """Build the TF-IDF vector for one filtered token sequence.

        Args:
            tokens: Filtered tokens. Callers pass a non-empty list; an
                empty one yields the zero vector.

        Returns:
            Dense vector of length :attr:`size`.
        """
        vector = [0.0] * self.size
        if not tokens:
            return vector

        total = len(tokens)
        for term, count in Counter(tokens).items():
            idx = self.vocabulary.get(term)
            if idx is None:
                continue
            tf = count / total
            vector[idx] = tf * self.idf.get(term, 0)

        return vector


# ---------------------------------------------------------------------------
# Heuristic Classifier
# ---------------------------------------------------------------------------

def vector_stats(vector: list[float]) -> VectorStats:
    """Compute sum, Euclidean norm, and positive-cell count of a vector."""
    return VectorStats(
        total=sum(vector),
        magnitude=math.sqrt(sum(v * v for v in vector)),
        non_zero=sum(1 for v in vector if v > 0),
    )


@dataclass
class HeuristicClassifier:
    """Keyword and vector-magnitude decision rule.

    Rules, checked in order:

    1. risk score above 1.2x the positive score -> suicide
    2. positive score above 1.5x the risk score -> non-suicide
    3. magnitude > 0.3 and sum > 0.5 -> suicide if risk >= positive
    4. otherwise suicide if sum > 0.2
    """

    risk_keywords: frozenset[str] = RISK_KEYWORDS
    positive_keywords: frozenset[str] = POSITIVE_KEYWORDS

    def keyword_scores(self, tokens: list[str]) -> tuple[float, float]:
        """Return ``(risk_score, positive_score)`` for a token sequence.

        Every occurrence counts, so repeated tokens add up.
        """
        risk_score = 0.0
        positive_score = 0.0
        for token in tokens:
            if token in self.risk_keywords:
                risk_score += RISK_KEYWORD_WEIGHT
            if token in self.positive_keywords:
                positive_score += POSITIVE_KEYWORD_WEIGHT
        return risk_score, positive_score

    def predict(self, vector: list[float], tokens: list[str]) -> int:
        """Return 1 for suicide-risk text, 0 otherwise."""
        stats = vector_stats(vector)
        risk_score, positive_score = self.keyword_scores(tokens)

        logger.debug(
            "risk=%.1f positive=%.1f sum=%.4f magnitude=%.4f non_zero=%d",
            risk_score, positive_score, stats.total, stats.magnitude, stats.non_zero,
        )

        if risk_score > positive_score * 1.2:
            return SUICIDE
        elif positive_score > risk_score * 1.5:
            return NON_SUICIDE
        elif stats.magnitude > 0.3 and stats.total > 0.5:
            return SUICIDE if risk_score >= positive_score else NON_SUICIDE
        else:
            return SUICIDE if stats.total > 0.2 else NON_SUICIDE


# ---------------------------------------------------------------------------
# Confidence Estimation
# ---------------------------------------------------------------------------

def estimate_confidence(token_count: int) -> float:
    """Confidence grows with the number of filtered tokens, capped at 0.95."""
    base = 0.85 if token_count > 10 else 0.70
    return min(0.95, base + token_count * 0.005)


def risk_level_for(predicted: int, confidence: float) -> RiskLevel:
    """Map a class and unrounded confidence to a risk tier."""
    if predicted != SUICIDE:
        return RiskLevel.LOW
    if confidence > 0.85:
        return RiskLevel.HIGH
    if confidence > 0.70:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def build_preview(tokens: list[str], limit: int = PREVIEW_TOKENS) -> str:
    """Join the first ``limit`` tokens, marking truncation with ``...``."""
    preview = " ".join(tokens[:limit])
    if len(tokens) > limit:
        preview += PREVIEW_ELLIPSIS
    return preview


# ---------------------------------------------------------------------------
# Evaluation Metrics
# ---------------------------------------------------------------------------

@dataclass
class ClassificationMetrics:
    """Accuracy, per-label precision/recall/F1, and a confusion matrix.

    ``confusion_matrix`` is keyed ``{true: {predicted: count}}``.
    """

    accuracy: float = 0.0
    per_class: dict[str, dict[str, float]] = field(default_factory=dict)
    macro_f1: float = 0.0
    confusion_matrix: dict[str, dict[str, int]] = field(default_factory=dict)
    support: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_f1": round(self.macro_f1, 4),
            "per_class": {
                label: {k: round(v, 4) for k, v in scores.items()}
                for label, scores in self.per_class.items()
            },
            "confusion_matrix": self.confusion_matrix,
            "support": self.support,
        }

    def summary(self) -> str:
        lines = [f"Accuracy: {self.accuracy:.2%}", f"Macro F1: {self.macro_f1:.4f}", ""]
        for label, m in sorted(self.per_class.items()):
            lines.append(
                f"{label:<14} P={m['precision']:.3f}  R={m['recall']:.3f}  "
                f"F1={m['f1']:.3f}  n={self.support.get(label, 0)}"
            )
        return "\n".join(lines)


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def compute_metrics(y_true: list[str], y_pred: list[str]) -> ClassificationMetrics:
    """Score predicted labels against expected ones.

    Raises:
        ValueError: If the two lists differ in length.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    pairs = Counter(zip(y_true, y_pred))
    expected = Counter(y_true)
    predicted = Counter(y_pred)
    labels = sorted(expected | predicted)

    per_class: dict[str, dict[str, float]] = {}
    for label in labels:
        hits = pairs[(label, label)]
        precision = _ratio(hits, predicted[label])
        recall = _ratio(hits, expected[label])
        f1 = _ratio(2 * precision * recall, precision + recall)
        per_class[label] = {"precision": precision, "recall": recall, "f1": f1}

    return ClassificationMetrics(
        accuracy=_ratio(sum(pairs[(label, label)] for label in labels), len(y_true)),
        per_class=per_class,
        macro_f1=_ratio(sum(m["f1"] for m in per_class.values()), len(labels)),
        confusion_matrix={t: {p: pairs[(t, p)] for p in labels} for t in labels},
        support={label: expected[label] for label in labels},
    )


# ---------------------------------------------------------------------------
# Classification Pipeline (High-Level API)
# ---------------------------------------------------------------------------

class RiskClassifier:
    """High-level suicide-risk classification pipeline.

    Wraps preprocessing, TF-IDF vectorization, the heuristic decision rule,
    and confidence estimation behind a single ``classify()`` call.

    Example::

        resources = load_resources("model_files")
        classifier = RiskClassifier(resources)

        result = classifier.classify("I feel hopeless")
        print(result.label)       # "suicide"
        print(result.risk_level)  # RiskLevel.MODERATE
        print(result.confidence)  # 0.71

    Args:
        resources: Loaded vocabulary, IDF, and label tables.
        preprocessor: Custom TextPreprocessor instance (optional).
        heuristic: Custom HeuristicClassifier instance (optional).
    """

    def __init__(
        self,
        resources: Optional[ModelResources],
        preprocessor: Optional[TextPreprocessor] = None,
        heuristic: Optional[HeuristicClassifier] = None,
    ) -> None:
        if resources is None:
            raise DependencyMissingError("Model resources are not loaded")
        self._resources = resources
        self._preprocessor = preprocessor or TextPreprocessor()
        self._vectorizer = TfidfVectorizer(resources.vocabulary, resources.idf)
        self._heuristic = heuristic or HeuristicClassifier()

    @property
    def resources(self) -> ModelResources:
        return self._resources

    @property
    def vectorizer(self) -> TfidfVectorizer:
        return self._vectorizer

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(self, text: Optional[str]) -> PredictionResult:
        """Classify a single piece of text.

        Args:
            text: Raw user text.

        Returns:
            PredictionResult with label, risk tier, and confidence.

        Raises:
            ValidationError: If the text is missing or blank.
        """
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(EMPTY_TEXT_MESSAGE)

        tokens = self._preprocessor.process(text)

        if not tokens:
            return PredictionResult(
                label=SHORT_TEXT_LABEL,
                risk_level=RiskLevel.LOW,
                confidence=SHORT_TEXT_CONFIDENCE,
                original_text=text,
                message=SHORT_TEXT_MESSAGE,
            )

        vector = self._vectorizer.transform(tokens)
        predicted = self._heuristic.predict(vector, tokens)
        label = self._resources.label_for(predicted)

        confidence = estimate_confidence(len(tokens))
        risk_level = risk_level_for(predicted, confidence)

        logger.debug(
            "Classified %d tokens as %s (%s)", len(tokens), label, risk_level.value
        )

        return PredictionResult(
            label=label,
            risk_level=risk_level,
            confidence=round(confidence, 2),
            tokens_processed=len(tokens),
            preview=build_preview(tokens),
            original_text=text,
        )

    def classify_batch(self, texts: Iterable[str]) -> list[PredictionResult]:
        """Classify several texts; raises on the first blank one."""
        return [self.classify(text) for text in texts]

    def evaluate(
        self,
        texts: list[str],
        labels: list[str],
    ) -> ClassificationMetrics:
        """Score labeled texts and compare predictions to ground truth.

        Blank texts are predicted as the short-text label rather than
        raising, so a dataset with empty rows can still be evaluated.

        Args:
            texts: Raw texts.
            labels: Expected display labels (e.g. ``"suicide"``).

        Returns:
            ClassificationMetrics over the whole set.
        """
        predictions = []
        for text in texts:
            try:
                predictions.append(self.classify(text).label)
            except ValidationError:
                predictions.append(SHORT_TEXT_LABEL)
        return compute_metrics(labels, predictions)

    def model_info(self) -> ModelInfo:
        """Describe the loaded model and its published figures."""
        return ModelInfo(
            model=MODEL_METADATA["model"],
            accuracy=MODEL_METADATA["accuracy"],
            vocabulary_size=self._resources.vocabulary_size,
            classes=self._resources.class_names,
            training_size=MODEL_METADATA["training_size"],
            testing_size=MODEL_METADATA["testing_size"],
            total_samples=MODEL_METADATA["total_samples"],
        )
