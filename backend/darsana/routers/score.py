import logging
from typing import Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from darsana.config import settings
from darsana.schemas import ScoreRequest
from darsana.services.grams import score
from darsana.services.grams.normalize import normalize_corpus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Scoring"])


def _prepare(text: str) -> str:
    if len(text) > settings.max_corpus_length:
        logger.warning("Rejected corpus of %d characters", len(text))
        raise HTTPException(
            status_code=413,
            detail=f"Corpus exceeds {settings.max_corpus_length} characters",
        )
    if settings.normalize_input:
        return normalize_corpus(text)
    return text


def _score_grams(request: ScoreRequest) -> Dict[str, float]:
    logger.debug("Scoring request: scoreBy=%s size=%s", request.scoreBy, request.size)
    return score(
        _prepare(request.src),
        _prepare(request.dst),
        request.scoreBy,
        request.size,
    )


@router.get("/test", response_class=PlainTextResponse)
async def test():
    return "Oh hi"


@router.get("/score/grams", response_model=Dict[str, float])
def score_grams(src: str, dst: str, scoreBy: int, size: int):
    """Score grams shared by two corpora passed as query parameters."""
    return _score_grams(ScoreRequest(src=src, dst=dst, scoreBy=scoreBy, size=size))


@router.post("/score/grams", response_model=Dict[str, float])
def score_grams_body(request: ScoreRequest):
    """Score grams shared by two corpora passed in a JSON body."""
    return _score_grams(request)
