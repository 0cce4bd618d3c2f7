import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from darsana.config import settings
from darsana.errors import (
    ConceptMapInconsistency,
    InvalidParameterError,
    NumericDomainError,
    ScoringError,
)
from darsana.routers import score_router
from darsana.schemas import ApiResponse

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger("darsana")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Shared n-gram scoring API",
    version="1.0.0",
    debug=settings.debug,
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(
            success=False,
            data=None,
            message=message,
        ).model_dump(),
    )


# Global exception handler for HTTPException
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error_response(exc.status_code, exc.detail)


_SCORING_STATUS = {
    InvalidParameterError: status.HTTP_400_BAD_REQUEST,
    NumericDomainError: 422,
    ConceptMapInconsistency: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@app.exception_handler(ScoringError)
async def scoring_exception_handler(request: Request, exc: ScoringError):
    status_code = _SCORING_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("Scoring failed for %s: %s", request.url.path, exc)
    else:
        logger.warning("Scoring rejected for %s: %s", request.url.path, exc)
    return _error_response(status_code, str(exc))


# Include routers
app.include_router(score_router)


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name}

