from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

FeedbackLabel = Literal["Excellent", "Good", "Average", "Needs Improvement"]


class ScoreMetrics(BaseModel):
    """
    Ergebnis des Essay-Scorers: drei Scores auf der Skala 0-10,
    jeweils auf eine Nachkommastelle gerundet.
    """
    coherence: float = Field(ge=0.0, le=10.0)
    vocabulary: float = Field(ge=0.0, le=10.0)
    overall: float = Field(ge=0.0, le=10.0)

    @classmethod
    def zero(cls) -> "ScoreMetrics":
        return cls(coherence=0.0, vocabulary=0.0, overall=0.0)


class FeedbackSet(BaseModel):
    """Feedback-Label pro Dimension."""
    coherence: FeedbackLabel
    vocabulary: FeedbackLabel
    overall: FeedbackLabel


class EssayAnalysis(BaseModel):
    """
    Vollständiges Ergebnis einer Analyse (Scores + Feedback).
    `features` enthält optional die Rohmerkmale für Debug-Ansichten.
    """
    scores: ScoreMetrics
    feedback: FeedbackSet
    features: Optional[Dict[str, Any]] = None


class AnalyzeRequest(BaseModel):
    """
    Request-Body für den /analyze-Endpoint.
    """
    text: str
    include_features: bool = False


class FeedbackResponse(BaseModel):
    score: float
    label: FeedbackLabel
