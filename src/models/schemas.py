from pydantic import BaseModel, Field
from typing import Optional


SENTIMENT_LABELS = ("Positive", "Negative", "Neutral")
DEFAULT_SENTIMENT = "Neutral"
ERROR_SENTIMENT = "Error"
ERROR_SUMMARY = "AI analysis failed"


class FeedbackRecord(BaseModel):
    """Stored customer feedback with its classification."""
    id: int
    customer_text: str = Field(..., min_length=1)
    sentiment: Optional[str] = None
    summary: Optional[str] = None

    @property
    def is_classified(self) -> bool:
        return self.sentiment is not None


class SentimentCounts(BaseModel):
    """Per-label totals for the dashboard. Derived, never persisted."""
    positive: int = Field(0, ge=0)
    negative: int = Field(0, ge=0)
    neutral: int = Field(0, ge=0)


class ModelResponse(BaseModel):
    """Outcome of a single classification call."""
    text: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
