"""
Datenmodelle für die Annotationen, die der Essay-Scorer von einem
TextAnnotator erhält.

Ein AnnotationSet enthält ausschließlich Rohinformationen (Sätze, Terme,
Fragesatz-Markierungen und POS-Zählungen). Bewertungs- oder Scoring-
Entscheidungen werden hier nicht getroffen; das passiert im Scorer.
"""

from dataclasses import dataclass, field
from typing import Literal

PosTag = Literal["adjective", "adverb", "noun", "verb"]

CONTENT_POS_TAGS: tuple[PosTag, ...] = ("adjective", "adverb", "noun", "verb")


@dataclass
class AnnotationSet:
    sentences: list[str]
    # ein Flag pro Satz, True = Fragesatz
    question_flags: list[bool]
    terms: list[str]
    # Zählung pro Tag; ein Token kann in mehreren Tags auftauchen
    pos_counts: dict[str, int] = field(default_factory=dict)

    @property
    def question_count(self) -> int:
        return sum(1 for flag in self.question_flags if flag)

    @property
    def statement_count(self) -> int:
        return sum(1 for flag in self.question_flags if not flag)

    def pos_count(self, tag: PosTag) -> int:
        return self.pos_counts.get(tag, 0)
