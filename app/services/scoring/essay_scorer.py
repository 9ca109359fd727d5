"""
EssayScorer: heuristische Bewertung eines Essays auf den Achsen
Coherence und Vocabulary (Skala 0-10) plus deren Mittelwert.

- Holt Sätze, Terme und POS-Zählungen von einem TextAnnotator
  (standardmäßig SpacyAnnotator, in Tests ein Stub).
- Kombiniert die Merkmale aus essay_features mit festen Gewichten.
- Leerer, nur aus Whitespace bestehender oder degenerierter Text
  (keine Sätze / keine Terme) ergibt den Null-Score.

Fehler des Annotators werden nicht abgefangen, sondern an den Aufrufer
weitergereicht (API -> HTTP 500, UI -> Fehlermeldung).
"""

from dataclasses import asdict
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
import logging

from app.models.pydantic import EssayAnalysis, ScoreMetrics
from app.services.annotation.text_annotator import TextAnnotator
from app.services.scoring.essay_features import EssayFeatures, extract_features
from app.services.scoring.feedback import feedback_for

logger = logging.getLogger(__name__)

MAX_SCORE = 10.0

# Coherence: Übergänge bis ~3, Satzlänge bis 4, Satztypen bis 3 Punkte
TRANSITION_WEIGHT = 3.0
LENGTH_WEIGHT = 4.0
VARIETY_WEIGHT = 3.0

# Vocabulary: Type-Token-Ratio und POS-Dichte je 5 Punkte
DIVERSITY_WEIGHT = 5.0
POS_DENSITY_WEIGHT = 5.0


def round_score(value: float) -> float:
    """
    Rundet auf eine Nachkommastelle, exakte Hälften werden aufgerundet
    (5.25 -> 5.3). Decimal(value) arbeitet auf dem exakten Binärwert.
    """
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def coherence_score(features: EssayFeatures) -> float:
    raw = (
        (features.transition_count / features.sentence_count) * TRANSITION_WEIGHT
        + (1.0 - features.length_variation) * LENGTH_WEIGHT
        + features.sentence_variety * VARIETY_WEIGHT
    )
    return min(raw, MAX_SCORE)


def vocabulary_score(features: EssayFeatures) -> float:
    raw = (
        features.type_token_ratio * DIVERSITY_WEIGHT
        + features.pos_density * POS_DENSITY_WEIGHT
    )
    return min(raw, MAX_SCORE)


class EssayScorer:
    def __init__(self, annotator: TextAnnotator | None = None):
        """
        Ohne expliziten Annotator wird beim ersten Aufruf ein SpacyAnnotator
        erzeugt, damit der Import dieses Moduls kein Modell lädt.
        """
        self._annotator = annotator

    @property
    def annotator(self) -> TextAnnotator:
        if self._annotator is None:
            from app.services.annotation.spacy_annotator import SpacyAnnotator

            self._annotator = SpacyAnnotator()
        return self._annotator

    def analyze(self, text: str) -> ScoreMetrics:
        scores, _ = self.analyze_with_features(text)
        return scores

    def analyze_with_features(self, text: str) -> tuple[ScoreMetrics, EssayFeatures | None]:
        if not text.strip():
            return ScoreMetrics.zero(), None

        annotations = self.annotator.annotate(text)
        features = extract_features(text, annotations)
        if features is None:
            logger.debug(
                "No sentences or terms found (sentences=%d, terms=%d), returning zero scores",
                len(annotations.sentences),
                len(annotations.terms),
            )
            return ScoreMetrics.zero(), None

        coherence = round_score(coherence_score(features))
        vocabulary = round_score(vocabulary_score(features))
        overall = round_score((coherence + vocabulary) / 2)

        logger.debug("Essay features: %s", features)

        return ScoreMetrics(coherence=coherence, vocabulary=vocabulary, overall=overall), features

    def evaluate(self, text: str, include_features: bool = False) -> EssayAnalysis:
        """Scores + Feedback-Labels, optional mit Rohmerkmalen."""
        scores, features = self.analyze_with_features(text)
        return EssayAnalysis(
            scores=scores,
            feedback=feedback_for(scores),
            features=asdict(features) if include_features and features is not None else None,
        )


@lru_cache
def get_default_scorer() -> EssayScorer:
    return EssayScorer()


def analyze_essay(text: str, annotator: TextAnnotator | None = None) -> ScoreMetrics:
    scorer = EssayScorer(annotator) if annotator is not None else get_default_scorer()
    return scorer.analyze(text)
