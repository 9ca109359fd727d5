from typing import Protocol

from app.services.annotation.annotation_models import AnnotationSet


class AnnotatorUnavailableError(RuntimeError):
    """Die NLP-Pipeline (z.B. ein spaCy-Modell) ist nicht installiert."""


class TextAnnotator(Protocol):
    def annotate(self, text: str) -> AnnotationSet:
        """
        Liefert Sätze, Fragesatz-Flags, Terme und POS-Zählungen für `text`.
        Fehler der zugrunde liegenden Bibliothek werden nicht abgefangen.
        """
        ...
