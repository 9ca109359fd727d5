"""
Dieses Modul berechnet die Rohmerkmale eines Essays aus einem AnnotationSet.

Analog zum Readability-Extractor trifft der Feature-Extractor keine
Bewertungs- oder Scoring-Entscheidungen. Er liefert Zählungen und Quotienten
(Satzlänge, Satztypen, Übergangswörter, Type-Token-Ratio, POS-Dichte), die
der EssayScorer zu den Scores Coherence und Vocabulary kombiniert.

Für Sätze ohne Inhalt oder Texte ohne Terme liefert `extract_features`
None, damit der Scorer keine Division durch Null ausführt.
"""

from dataclasses import dataclass, field
import re

from app.services.annotation.annotation_models import CONTENT_POS_TAGS, AnnotationSet

TRANSITION_WORDS = (
    "however",
    "therefore",
    "furthermore",
    "moreover",
    "consequently",
    "additionally",
)

IDEAL_SENTENCE_LENGTH = 15
# ab dieser Abweichung (in Wörtern) ist die Längen-Strafe maximal
SENTENCE_LENGTH_SPAN = 10

# ASCII-Wortgrenzen: "howeverü" zählt, da "ü" kein Wortzeichen ist
_TRANSITION_PATTERNS = [
    re.compile(rf"\b{re.escape(w)}\b", re.ASCII) for w in TRANSITION_WORDS
]


@dataclass
class EssayFeatures:
    sentence_count: int
    term_count: int
    unique_term_count: int
    avg_sentence_length: float
    length_variation: float
    question_count: int
    statement_count: int
    sentence_variety: float
    transition_count: int
    type_token_ratio: float
    pos_density: float
    pos_counts: dict[str, int] = field(default_factory=dict)


def count_transition_words(text: str) -> int:
    """
    Zählt Übergangswörter als ganze Wörter, unabhängig von Groß-/Kleinschreibung,
    global über den gesamten Text (nicht pro Satz).
    """
    lowered = text.lower()
    return sum(len(pattern.findall(lowered)) for pattern in _TRANSITION_PATTERNS)


def sentence_length_variation(avg_sentence_length: float) -> float:
    deviation = abs(avg_sentence_length - IDEAL_SENTENCE_LENGTH) / SENTENCE_LENGTH_SPAN
    return min(deviation, 1.0)


def extract_features(text: str, annotations: AnnotationSet) -> EssayFeatures | None:
    sentences = annotations.sentences
    terms = annotations.terms
    if not sentences or not terms:
        return None

    sentence_count = len(sentences)
    term_count = len(terms)

    avg_sentence_length = sum(len(s.split()) for s in sentences) / sentence_count

    question_count = annotations.question_count
    statement_count = annotations.statement_count
    sentence_variety = min((question_count + statement_count) / sentence_count, 1.0)

    unique_term_count = len({t.lower() for t in terms})

    pos_counts = {tag: annotations.pos_count(tag) for tag in CONTENT_POS_TAGS}
    # Tags sind nicht zwingend disjunkt, die Dichte kann daher > 1 werden
    pos_density = sum(pos_counts.values()) / term_count

    return EssayFeatures(
        sentence_count=sentence_count,
        term_count=term_count,
        unique_term_count=unique_term_count,
        avg_sentence_length=avg_sentence_length,
        length_variation=sentence_length_variation(avg_sentence_length),
        question_count=question_count,
        statement_count=statement_count,
        sentence_variety=sentence_variety,
        transition_count=count_transition_words(text),
        type_token_ratio=unique_term_count / term_count,
        pos_density=pos_density,
        pos_counts=pos_counts,
    )
