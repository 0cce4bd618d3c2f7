from typing import Any, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None


class ScoreRequest(BaseModel):
    src: str
    dst: str
    scoreBy: int = Field(..., description="Scoring method: 0 raw, 1 relative, 2 string distance, 3 tf-idf")
    size: int = Field(..., description="Gram size")
