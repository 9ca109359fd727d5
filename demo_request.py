#!/usr/bin/env python3
"""Demo-Request gegen den /analyze-Endpoint"""

import json
import sys

import requests

BASE_URL = "http://localhost:8000"

payload = {
    "text": (
        "Many cities are investing in public transport. However, the results were surprising. "
        "Ridership grew slowly in the first two years, and several new lines stayed half empty. "
        "Therefore, further study is needed before other regions copy the model. "
        "Should planners focus on frequency rather than coverage?"
    ),
    "include_features": True,
}

print("=" * 70)
print("INPUT:")
print("=" * 70)
print(json.dumps(payload, indent=2, ensure_ascii=False))
print()

try:
    response = requests.post(f"{BASE_URL}/analyze", json=payload, timeout=60)
    response.raise_for_status()
    result = response.json()
except requests.exceptions.ConnectionError:
    print(f"❌ Server nicht erreichbar unter {BASE_URL}")
    print("   Bitte starten Sie den Server mit: uvicorn app.server:app")
    sys.exit(1)
except Exception as e:
    print(f"❌ Fehler: {e}")
    sys.exit(1)

print("=" * 70)
print("OUTPUT: SCORES (0-10)")
print("=" * 70)
for key in ("coherence", "vocabulary", "overall"):
    print(f"  {key.capitalize():<11} {result['scores'][key]:>4.1f}/10  ({result['feedback'][key]})")
print()

print("=" * 70)
print("OUTPUT: MERKMALE")
print("=" * 70)
features = result.get("features") or {}
if features:
    for key, value in features.items():
        print(f"  {key}: {value}")
else:
    print("  Keine Merkmale (leerer oder degenerierter Text)")

print("=" * 70)
print("✅ Demo abgeschlossen")
print("=" * 70)
