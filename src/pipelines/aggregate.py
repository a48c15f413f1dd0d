"""
Sentiment totals for the dashboard, computed fresh from the stored records.
"""

from typing import Iterable, Optional

from src.models.schemas import FeedbackRecord, SentimentCounts


def sentiment_matches(sentiment: Optional[str], label: str) -> bool:
    """True if the label appears anywhere in the sentiment (case-sensitive)."""
    return label in (sentiment or "")


def summarize(records: Iterable[FeedbackRecord]) -> SentimentCounts:
    """
    Count records per sentiment bucket.

    Buckets are not exclusive: a malformed label such as "Positive/Negative"
    counts toward both, while "Error" or an unclassified record counts toward
    none.

    Args:
        records: Feedback records to count

    Returns:
        SentimentCounts with the positive, negative and neutral totals
    """
    positive = negative = neutral = 0
    for record in records:
        if sentiment_matches(record.sentiment, "Positive"):
            positive += 1
        if sentiment_matches(record.sentiment, "Negative"):
            negative += 1
        if sentiment_matches(record.sentiment, "Neutral"):
            neutral += 1

    return SentimentCounts(positive=positive, negative=negative, neutral=neutral)
