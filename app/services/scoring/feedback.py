from app.models.pydantic import FeedbackLabel, FeedbackSet, ScoreMetrics

# (untere Grenze inklusive, Label), absteigend sortiert
FEEDBACK_TIERS: tuple[tuple[float, FeedbackLabel], ...] = (
    (9.0, "Excellent"),
    (7.0, "Good"),
    (5.0, "Average"),
)
FALLBACK_LABEL: FeedbackLabel = "Needs Improvement"


def feedback_label(score: float) -> FeedbackLabel:
    """Ordnet einem Score (0-10) eine Feedback-Stufe zu."""
    for lower_bound, label in FEEDBACK_TIERS:
        if score >= lower_bound:
            return label
    return FALLBACK_LABEL


def feedback_for(scores: ScoreMetrics) -> FeedbackSet:
    return FeedbackSet(
        coherence=feedback_label(scores.coherence),
        vocabulary=feedback_label(scores.vocabulary),
        overall=feedback_label(scores.overall),
    )
