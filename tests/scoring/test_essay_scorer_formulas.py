"""
Formel-Tests für den EssayScorer mit einem regelbasierten Stub-Annotator.

Der Stub zerlegt an . ! ? in Sätze, nimmt Buchstabenfolgen als Terme und
vergibt POS-Tags nur über ein explizites Wörterbuch. Dadurch sind die
erwarteten Scores von Hand nachrechenbar.
"""

import re

import pytest

from app.services.annotation.annotation_models import AnnotationSet
from app.services.scoring.essay_scorer import EssayScorer, analyze_essay, round_score


class StubAnnotator:
    """Deterministischer Annotator ohne NLP-Bibliothek."""

    def __init__(self, pos: dict[str, tuple[str, ...]] | None = None):
        self.pos = pos or {}

    def annotate(self, text: str) -> AnnotationSet:
        sentences = [s.strip() for s in re.findall(r"[^.!?]+[.!?]?", text) if s.strip()]
        terms = re.findall(r"[A-Za-z']+", text)
        pos_counts: dict[str, int] = {}
        for term in terms:
            for tag in self.pos.get(term.lower(), ()):
                pos_counts[tag] = pos_counts.get(tag, 0) + 1
        return AnnotationSet(
            sentences=sentences,
            question_flags=[s.endswith("?") for s in sentences],
            terms=terms,
            pos_counts=pos_counts,
        )


ANIMAL_POS = {
    "cat": ("noun",),
    "dog": ("noun",),
    "sat": ("verb",),
    "ran": ("verb",),
}

FIFTEEN_WORDS = (
    "However the committee reviewed every single proposal carefully "
    "before the final vote was taken today."
)


def test_short_declarative_sentences():
    """Zwei kurze Aussagesätze ohne Übergangswörter (Beispiel aus der Doku)."""
    scorer = EssayScorer(StubAnnotator(ANIMAL_POS))
    scores = scorer.analyze("The cat sat. The dog ran.")

    # Satzlänge 3 -> maximale Längen-Strafe, nur die Satztypen zählen (3 Punkte)
    assert scores.coherence == 3.0
    # TTR 5/6 und POS-Dichte 4/6 -> 7.5
    assert scores.vocabulary == 7.5
    assert scores.overall == round_score((scores.coherence + scores.vocabulary) / 2)
    # (3.0 + 7.5) / 2 = 5.25 ist eine exakte Hälfte und wird aufgerundet
    assert scores.overall == 5.3


def test_ideal_sentence_length_with_transition_hits_ceiling():
    """15 Wörter + ein Übergangswort pro Satz ergeben 3 + 4 + 3 = 10."""
    scores = EssayScorer(StubAnnotator()).analyze(FIFTEEN_WORDS)

    assert scores.coherence == 10.0


def test_length_penalty_is_linear_in_deviation():
    """14 Wörter -> Abweichung 1 -> Längenanteil 3.6."""
    text = FIFTEEN_WORDS.replace("However ", "")
    scores = EssayScorer(StubAnnotator()).analyze(text)

    assert scores.coherence == 6.6


def test_vocabulary_without_pos_tags_uses_type_token_ratio_only():
    """15 Terme, 14 davon verschieden ("the" doppelt) -> 14/15 * 5."""
    scores = EssayScorer(StubAnnotator()).analyze(FIFTEEN_WORDS)

    assert scores.vocabulary == 4.7


def test_type_token_ratio_is_case_insensitive():
    scorer = EssayScorer(StubAnnotator())
    _, features = scorer.analyze_with_features("Rain rain RAIN falls.")

    assert features.term_count == 4
    assert features.unique_term_count == 2
    assert features.type_token_ratio == 0.5


def test_coherence_is_clamped_at_ten():
    """Mehr Übergangswörter als Sätze -> Rohwert > 10, Score bleibt 10."""
    text = "However, moreover, therefore, furthermore, the vote was taken. Consequently it passed."
    scores = EssayScorer(StubAnnotator()).analyze(text)

    assert scores.coherence == 10.0


def test_pos_density_may_exceed_one():
    """Mehrfach-Tags pro Token werden nicht korrigiert, der Score aber bei 10 gedeckelt."""
    pos = {w: ("noun", "verb") for w in ("walks", "talks", "runs")}
    scorer = EssayScorer(StubAnnotator(pos))
    scores, features = scorer.analyze_with_features("Walks talks runs.")

    assert features.pos_density == 2.0
    assert scores.vocabulary == 10.0


def test_questions_and_statements_count_as_variety():
    scorer = EssayScorer(StubAnnotator())
    _, features = scorer.analyze_with_features("Is it raining? It is. Take an umbrella!")

    assert features.question_count == 1
    assert features.statement_count == 2
    assert features.sentence_variety == 1.0


def test_inconsistent_question_flags_reduce_variety():
    """Liefert der Annotator weniger Flags als Sätze, sinkt der Satztyp-Anteil."""

    class InconsistentAnnotator:
        def annotate(self, text: str) -> AnnotationSet:
            return AnnotationSet(
                sentences=["One two three.", "Four five six."],
                question_flags=[False],
                terms=["One", "two", "three", "Four", "five", "six"],
            )

    scorer = EssayScorer(InconsistentAnnotator())
    scores, features = scorer.analyze_with_features("One two three. Four five six.")

    assert features.sentence_variety == 0.5
    # Längenanteil 0 (Satzlänge 3), Satztypen 0.5 * 3
    assert scores.coherence == 1.5


def test_transition_words_raise_coherence():
    """Gleiche Satzstruktur, einmal mit "However,"/"Therefore," -> strikt höher."""
    scorer = EssayScorer(StubAnnotator())
    plain = scorer.analyze("The results were surprising. Further study is needed.")
    with_transitions = scorer.analyze(
        "However, the results were surprising. Therefore, further study is needed."
    )

    assert with_transitions.coherence > plain.coherence


@pytest.mark.parametrize("n_transitions", [0, 1, 2, 3, 4])
def test_adding_transitions_never_decreases_coherence(n_transitions):
    """Monotonie: ein zusätzliches Übergangswort senkt den Score nie."""
    scorer = EssayScorer(StubAnnotator())
    base = "The committee reviewed every proposal before the vote"
    before = scorer.analyze(" ".join(["moreover"] * n_transitions + [base]) + ".")
    after = scorer.analyze(" ".join(["moreover"] * (n_transitions + 1) + [base]) + ".")

    assert after.coherence >= before.coherence or after.coherence == 10.0


def test_analyze_essay_with_explicit_annotator():
    scores = analyze_essay("The cat sat. The dog ran.", annotator=StubAnnotator(ANIMAL_POS))

    assert scores.coherence == 3.0
    assert scores.vocabulary == 7.5
