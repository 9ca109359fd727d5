"""Streamlit-Oberfläche für das Essay-Scoring."""

from pathlib import Path
import sys

import streamlit as st

# Add ui directory to path
UI_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(UI_DIR))

import api_client
import render

from app.services.annotation.text_annotator import AnnotatorUnavailableError
from app.services.scoring.essay_scorer import EssayScorer

BACKEND_LOCAL = "Local"
BACKEND_API = "API"


# spaCy-Pipeline nur einmal pro Prozess laden
@st.cache_resource
def get_scorer() -> EssayScorer:
    scorer = EssayScorer()
    # Modell direkt laden statt beim ersten Tastendruck
    _ = scorer.annotator
    return scorer


def analyze_local(text: str) -> dict:
    try:
        analysis = get_scorer().evaluate(text, include_features=True)
    except AnnotatorUnavailableError as e:
        return {"success": False, "error": str(e)}
    except Exception as e:
        return {"success": False, "error": f"Analyse fehlgeschlagen: {e}"}
    return {"success": True, "data": analysis.model_dump()}


# Page config
st.set_page_config(
    page_title="Essay Scoring",
    page_icon="📖",
    layout="wide",
)

# Sidebar
with st.sidebar:
    st.title("📖 Essay Scoring")

    backend = st.radio(
        "Backend",
        options=[BACKEND_LOCAL, BACKEND_API],
        key="backend",
        help="Local: Scorer im Streamlit-Prozess, API: POST /analyze",
    )

    if backend == BACKEND_API:
        st.subheader("API Status")
        api_health = api_client.health_check()
        if api_health.get("available"):
            st.success(f"✅ API: {api_client.API_BASE_URL}")
        else:
            st.error(f"❌ API: {api_client.API_BASE_URL}")
            st.caption(f"Fehler: {api_health.get('message', 'Unknown')}")

    st.divider()

    # Debug Toggle
    show_debug = st.checkbox(
        "Show debug", value=False, key="show_debug", help="Zeige die Rohmerkmale an"
    )


st.header("Essay Scoring System using NLP")

if "essay_text" not in st.session_state:
    st.session_state["essay_text"] = ""

# Jede Änderung am Text löst einen Rerun aus -> Scores werden neu berechnet.
# Eingabe ist nach unten verschoben, die Karten werden aber zuerst gerendert.
scores_placeholder = st.container()

# WICHTIG: Nur key= verwenden, kein value= Parameter!
essay_text = st.text_area(
    "Enter your essay",
    height=300,
    placeholder="Start writing your essay here...",
    key="essay_text",
)

if not essay_text:
    st.warning("Enter your essay to see the automated scoring results.", icon="⚠️")

if backend == BACKEND_API:
    result = api_client.analyze(essay_text, include_features=show_debug)
else:
    result = analyze_local(essay_text)

with scores_placeholder:
    if result.get("success"):
        render.render_scores(result["data"])
    else:
        st.error(f"❌ Fehler: {result.get('error', 'Unknown error')}")

if show_debug and result.get("success"):
    with st.expander("Debug Panel", expanded=True):
        st.caption("Rohmerkmale der letzten Analyse")
        render.render_features(result["data"])
