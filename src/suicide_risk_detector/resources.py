"""Loading and validation of the exported model resources.

The classifier depends on three JSON artifacts exported alongside the
original model:

- ``vocabulary.json``: ``{term: index}``
- ``idf_values.json``: ``{term: idf_weight}``
- ``class_labels.json``: ``{"0": "non-suicide", "1": "suicide"}``

They are loaded once at startup into an immutable :class:`ModelResources`
and shared read-only by every request. Any problem with them is fatal and
surfaces as :class:`~suicide_risk_detector.exceptions.DependencyMissingError`.
"""

from __future__ import annotations

import json
import math
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .exceptions import DependencyMissingError

logger = logging.getLogger(__name__)

VOCABULARY_FILE = "vocabulary.json"
IDF_FILE = "idf_values.json"
CLASS_LABELS_FILE = "class_labels.json"

REQUIRED_CLASS_IDS = ("0", "1")


@dataclass(frozen=True)
class ModelResources:
    """Read-only vocabulary, IDF and label tables.

    Construct through :meth:`from_mappings` or :func:`load_resources` so
    the tables are validated and wrapped in read-only views.
    """

    vocabulary: Mapping[str, int]
    idf: Mapping[str, float]
    class_labels: Mapping[str, str]

    @property
    def vocabulary_size(self) -> int:
        return len(self.vocabulary)

    @property
    def class_names(self) -> list[str]:
        return list(self.class_labels.values())

    def label_for(self, class_id: int) -> str:
        """Return the display label for a numeric class id."""
        return self.class_labels[str(class_id)]

    @classmethod
    def from_mappings(
        cls,
        vocabulary: Mapping[str, Any],
        idf: Mapping[str, Any],
        class_labels: Mapping[str, Any],
    ) -> "ModelResources":
        """Validate raw tables and freeze them.

        Raises:
            DependencyMissingError: If any table is malformed.
        """
        return cls(
            vocabulary=MappingProxyType(_validate_vocabulary(vocabulary)),
            idf=MappingProxyType(_validate_idf(idf)),
            class_labels=MappingProxyType(_validate_class_labels(class_labels)),
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_vocabulary(data: Any, source: str = VOCABULARY_FILE) -> dict[str, int]:
    if not isinstance(data, Mapping) or not data:
        raise DependencyMissingError(
            f"{source} must be a non-empty object of term -> index", source
        )

    size = len(data)
    seen: set[int] = set()
    for term, index in data.items():
        if not isinstance(index, int) or isinstance(index, bool):
            raise DependencyMissingError(
                f"{source}: index for {term!r} is not an integer", source
            )
        if not 0 <= index < size:
            raise DependencyMissingError(
                f"{source}: index {index} for {term!r} outside [0, {size})", source
            )
        if index in seen:
            raise DependencyMissingError(
                f"{source}: index {index} assigned to more than one term", source
            )
        seen.add(index)
    return dict(data)


def _validate_idf(data: Any, source: str = IDF_FILE) -> dict[str, float]:
    if not isinstance(data, Mapping):
        raise DependencyMissingError(
            f"{source} must be an object of term -> weight", source
        )

    weights: dict[str, float] = {}
    for term, weight in data.items():
        if not _is_number(weight) or not math.isfinite(weight) or weight < 0:
            raise DependencyMissingError(
                f"{source}: weight for {term!r} must be a finite non-negative number", source
            )
        weights[term] = float(weight)
    return weights


def _validate_class_labels(data: Any, source: str = CLASS_LABELS_FILE) -> dict[str, str]:
    if not isinstance(data, Mapping):
        raise DependencyMissingError(
            f"{source} must be an object of class id -> label", source
        )

    labels = {str(k): v for k, v in data.items()}
    missing = [cid for cid in REQUIRED_CLASS_IDS if cid not in labels]
    if missing:
        raise DependencyMissingError(
            f"{source}: missing class ids {', '.join(missing)}", source
        )
    for cid, label in labels.items():
        if not isinstance(label, str) or not label:
            raise DependencyMissingError(
                f"{source}: label for class {cid} must be a non-empty string", source
            )
    if len(labels) != len(REQUIRED_CLASS_IDS):
        logger.warning(
            "%s has %d entries; only classes %s are used",
            source, len(labels), "/".join(REQUIRED_CLASS_IDS),
        )
    return labels


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DependencyMissingError(f"Model file not found: {path}", str(path)) from e
    except json.JSONDecodeError as e:
        raise DependencyMissingError(f"Invalid JSON in {path}: {e}", str(path)) from e
    except OSError as e:
        raise DependencyMissingError(f"Cannot read {path}: {e}", str(path)) from e


def load_resources(model_dir: str | Path) -> ModelResources:
    """Load and validate the three model files from a directory.

    Args:
        model_dir: Directory containing ``vocabulary.json``,
            ``idf_values.json`` and ``class_labels.json``.

    Returns:
        Validated, read-only ModelResources.

    Raises:
        DependencyMissingError: If a file is missing, unreadable, or malformed.
    """
    model_dir = Path(model_dir)
    if not model_dir.is_dir():
        raise DependencyMissingError(
            f"Model directory not found: {model_dir}", str(model_dir)
        )

    vocabulary = _validate_vocabulary(
        _read_json(model_dir / VOCABULARY_FILE), str(model_dir / VOCABULARY_FILE)
    )
    idf = _validate_idf(_read_json(model_dir / IDF_FILE), str(model_dir / IDF_FILE))
    class_labels = _validate_class_labels(
        _read_json(model_dir / CLASS_LABELS_FILE), str(model_dir / CLASS_LABELS_FILE)
    )

    resources = ModelResources(
        vocabulary=MappingProxyType(vocabulary),
        idf=MappingProxyType(idf),
        class_labels=MappingProxyType(class_labels),
    )
    logger.info("Model files loaded from %s", model_dir)
    logger.info("Vocabulary size: %d", resources.vocabulary_size)
    logger.info("Classes: %s", ", ".join(resources.class_names))
    return resources
