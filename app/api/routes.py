import logging

from fastapi import APIRouter, HTTPException, Path

from app.models.pydantic import AnalyzeRequest, EssayAnalysis, FeedbackResponse
from app.services.scoring.essay_scorer import EssayScorer
from app.services.scoring.feedback import feedback_label

logger = logging.getLogger(__name__)

router = APIRouter()
# spaCy wird erst beim ersten /analyze geladen
essay_scorer = EssayScorer()


# einfacher Health-Check
@router.get("/health")
async def health():
    return {"status": "ok"}


# bewertet einen Essay und liefert Scores + Feedback
@router.post("/analyze", response_model=EssayAnalysis)
def analyze(req: AnalyzeRequest):
    try:
        return essay_scorer.evaluate(req.text, include_features=req.include_features)
    except Exception as e:
        logger.exception("Essay analysis failed (len=%d)", len(req.text))
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/feedback/{score}", response_model=FeedbackResponse)
def feedback(score: float = Path(ge=0.0, le=10.0)):
    return FeedbackResponse(score=score, label=feedback_label(score))
