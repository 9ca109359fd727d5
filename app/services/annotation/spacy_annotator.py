"""
spaCy-basierter TextAnnotator.

Zerlegt einen Essay in Sätze (doc.sents), Terme (Tokens ohne Interpunktion,
Whitespace und Symbole) und zählt die inhaltstragenden Wortarten anhand der
Universal-POS-Tags. Fragesätze werden über das abschließende "?" erkannt, da
spaCy selbst keinen Satztyp-Klassifikator mitbringt.
"""

import logging

import spacy

from app.core.config import settings
from app.services.annotation.annotation_models import AnnotationSet
from app.services.annotation.text_annotator import AnnotatorUnavailableError

logger = logging.getLogger(__name__)

# Universal POS -> grobe Wortart des Scorers
UPOS_TO_TAG = {
    "ADJ": "adjective",
    "ADV": "adverb",
    "NOUN": "noun",
    "PROPN": "noun",
    "PRON": "noun",
    "VERB": "verb",
    "AUX": "verb",
}


class SpacyAnnotator:
    def __init__(self, model_name: str | None = None, nlp=None):
        """
        Lädt die spaCy-Pipeline einmalig pro Instanz.

        `nlp` erlaubt es, eine bereits geladene Pipeline zu übergeben.
        """
        self.model_name = model_name or settings.spacy_model
        self.nlp = nlp if nlp is not None else self._load(self.model_name)

    @staticmethod
    def _load(model_name: str):
        try:
            nlp = spacy.load(model_name)
        except OSError as e:
            raise AnnotatorUnavailableError(
                f"spaCy model '{model_name}' is not installed. "
                f"Install it with: python -m spacy download {model_name}"
            ) from e
        logger.info("Loaded spaCy pipeline %s", model_name)
        return nlp

    def annotate(self, text: str) -> AnnotationSet:
        # spaCy lehnt Texte über max_length ab (E088), Essays haben aber keine Längengrenze
        if len(text) > self.nlp.max_length:
            logger.debug("Raising spaCy max_length from %d to %d", self.nlp.max_length, len(text))
            self.nlp.max_length = len(text)
        doc = self.nlp(text)

        sentences: list[str] = []
        question_flags: list[bool] = []
        for sent in doc.sents:
            sentence = sent.text.strip()
            if not sentence:
                continue
            sentences.append(sentence)
            question_flags.append(sentence.endswith("?"))

        terms: list[str] = []
        pos_counts: dict[str, int] = {}
        for token in doc:
            if token.is_punct or token.is_space or token.pos_ == "SYM":
                continue
            terms.append(token.text)
            tag = UPOS_TO_TAG.get(token.pos_)
            if tag:
                pos_counts[tag] = pos_counts.get(tag, 0) + 1

        return AnnotationSet(
            sentences=sentences,
            question_flags=question_flags,
            terms=terms,
            pos_counts=pos_counts,
        )
