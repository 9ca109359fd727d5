"""API Client für das Essay-Scoring Backend."""

import os
from typing import Any

import requests

API_BASE_URL = os.getenv("ESSAY_API_BASE_URL", "http://localhost:8000")
TIMEOUT = 30


def health_check() -> dict[str, Any]:
    """Prüft ob API erreichbar ist."""
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=5)
        if response.status_code == 200:
            return {"status": "ok", "available": True}
        return {"status": "error", "available": False, "message": f"Status {response.status_code}"}
    except requests.exceptions.RequestException as e:
        return {"status": "error", "available": False, "message": str(e)}


def analyze(text: str, include_features: bool = False) -> dict[str, Any]:
    """
    Sendet einen Essay an /analyze.

    Args:
        text: Essay-Text
        include_features: Ob die Rohmerkmale mitgeliefert werden sollen

    Returns:
        dict mit Response-Daten oder Error-Info
    """
    url = f"{API_BASE_URL}/analyze"
    payload = {"text": text, "include_features": include_features}

    try:
        response = requests.post(url, json=payload, timeout=TIMEOUT)
        response.raise_for_status()
        return {"success": True, "data": response.json()}
    except requests.exceptions.HTTPError:
        return {
            "success": False,
            "error": f"HTTP {response.status_code}: {response.text}",
            "status_code": response.status_code,
        }
    except requests.exceptions.RequestException as e:
        return {"success": False, "error": str(e)}
