"""Rendering-Funktionen für Score-Karten und Feature-Tabelle."""

from typing import Any

import streamlit as st

# Streamlit-Markdown-Farben pro Feedback-Stufe
FEEDBACK_COLORS = {
    "Excellent": "green",
    "Good": "blue",
    "Average": "orange",
    "Needs Improvement": "red",
}

SCORE_CARDS = [
    ("coherence", "🧠 Coherence"),
    ("vocabulary", "🏅 Vocabulary"),
    ("overall", "📊 Overall"),
]

FEATURE_LABELS = {
    "sentence_count": "Sentences",
    "term_count": "Terms",
    "unique_term_count": "Unique terms",
    "avg_sentence_length": "Avg. sentence length",
    "length_variation": "Length variation",
    "question_count": "Questions",
    "statement_count": "Statements",
    "sentence_variety": "Sentence variety",
    "transition_count": "Transition words",
    "type_token_ratio": "Type-token ratio",
    "pos_density": "POS density",
}


def feedback_color(label: str) -> str:
    return FEEDBACK_COLORS.get(label, "red")


def format_score(score: float) -> str:
    """Formatiert einen Score als "x.y/10"."""
    return f"{score:.1f}/10"


def feature_rows(features: dict[str, Any]) -> list[dict[str, Any]]:
    """Wandelt das Feature-Dict in Tabellenzeilen (Merkmal, Wert) um."""
    rows = []
    for key, label in FEATURE_LABELS.items():
        if key not in features:
            continue
        value = features[key]
        if isinstance(value, float):
            value = round(value, 3)
        rows.append({"Feature": label, "Value": value})
    for tag, count in (features.get("pos_counts") or {}).items():
        rows.append({"Feature": f"POS: {tag}", "Value": count})
    return rows


def render_score_card(title: str, score: float, label: str) -> None:
    with st.container(border=True):
        st.markdown(f"**{title}**")
        st.metric(title, format_score(score), label_visibility="collapsed")
        st.markdown(f":{feedback_color(label)}[{label}]")


def render_scores(result: dict[str, Any]) -> None:
    """Rendert die drei Score-Karten nebeneinander."""
    scores = result.get("scores", {})
    feedback = result.get("feedback", {})

    columns = st.columns(len(SCORE_CARDS))
    for col, (key, title) in zip(columns, SCORE_CARDS):
        with col:
            render_score_card(
                title,
                scores.get(key, 0.0),
                feedback.get(key, "Needs Improvement"),
            )


def render_features(result: dict[str, Any]) -> None:
    """Rendert die Rohmerkmale als Tabelle (Debug-Ansicht)."""
    features = result.get("features")
    if not features:
        st.info("Keine Merkmale verfügbar (leerer oder degenerierter Text).")
        return

    import pandas as pd

    df = pd.DataFrame(feature_rows(features))
    st.dataframe(df, use_container_width=True, hide_index=True)
