"""Static model metadata and crisis hotline listings."""

from __future__ import annotations

from .models import CrisisResource

# Published figures for the model the vocabulary and IDF tables were exported from
MODEL_METADATA: dict = {
    "model": "Linear SVM",
    "accuracy": 0.9315,
    "training_size": 185659,
    "testing_size": 46415,
    "total_samples": 232074,
}

CRISIS_RESOURCES: tuple[CrisisResource, ...] = (
    CrisisResource(
        name="National Suicide Prevention Lifeline (US)",
        number="988",
        available="24/7",
    ),
    CrisisResource(
        name="Crisis Text Line",
        number="Text HOME to 741741",
        available="24/7",
    ),
    CrisisResource(
        name="International Association for Suicide Prevention",
        website="https://www.iasp.info/resources/Crisis_Centres/",
        description="Find crisis centers worldwide",
    ),
)

DISCLAIMER = (
    "This tool is for educational purposes only. "
    "Always seek professional help for mental health concerns."
)


def crisis_resources() -> list[CrisisResource]:
    """Return the crisis hotlines shown alongside every prediction."""
    return list(CRISIS_RESOURCES)
