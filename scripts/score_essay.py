"""
Bewertet einen einzelnen Essay aus einer Datei (oder stdin) und gibt
Coherence, Vocabulary und Overall samt Feedback-Label aus.

Beispiel:
    python scripts/score_essay.py essay.txt
    cat essay.txt | python scripts/score_essay.py - --json
"""

import argparse
import json
import logging
from pathlib import Path
import sys

from app.services.annotation.text_annotator import AnnotatorUnavailableError
from app.services.scoring.essay_scorer import EssayScorer


def read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with Path(source).open("r", encoding="utf-8") as f:
        return f.read()


def main() -> int:
    ap = argparse.ArgumentParser(description="Bewertet einen Essay (Coherence/Vocabulary)")
    ap.add_argument("source", type=str, help="Pfad zur Textdatei oder '-' für stdin")
    ap.add_argument("--json", action="store_true", help="Ergebnis als JSON ausgeben")
    ap.add_argument("--features", action="store_true", help="Rohmerkmale mit ausgeben")
    ap.add_argument("--spacy_model", type=str, default=None, help="spaCy-Modell überschreiben")
    ap.add_argument("--verbose", action="store_true", help="Debug-Logging aktivieren")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        text = read_text(args.source)
    except FileNotFoundError:
        ap.error(f"Datei nicht gefunden: {args.source}")

    annotator = None
    if args.spacy_model:
        from app.services.annotation.spacy_annotator import SpacyAnnotator

        try:
            annotator = SpacyAnnotator(model_name=args.spacy_model)
        except AnnotatorUnavailableError as e:
            print(f"✗ {e}", file=sys.stderr)
            return 1

    try:
        analysis = EssayScorer(annotator).evaluate(text, include_features=args.features)
    except AnnotatorUnavailableError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(analysis.model_dump(), indent=2, ensure_ascii=False))
        return 0

    for key in ("coherence", "vocabulary", "overall"):
        score = getattr(analysis.scores, key)
        label = getattr(analysis.feedback, key)
        print(f"{key.capitalize():<11} {score:>4.1f}/10  {label}")

    if analysis.features:
        print()
        for key, value in analysis.features.items():
            print(f"  {key}: {value}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
