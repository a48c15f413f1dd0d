"""
Extract the sentiment label and summary from a raw classification reply.

The model is asked for ``<label> | <summary>``. Replies that do not follow the
format are kept rather than discarded: the label falls back to ``Neutral`` and
the summary falls back to the whole raw reply.
"""

from typing import Optional, Tuple

from src.models.schemas import DEFAULT_SENTIMENT

SEPARATOR = "|"


def parse_response(raw: Optional[str]) -> Tuple[str, str]:
    """
    Split a raw model reply into (sentiment, summary).

    Only the first separator is significant; anything after it, including
    further separators, is summary text.

    Args:
        raw: Raw completion text. None is treated as an empty reply.

    Returns:
        Tuple of (sentiment, summary). Never raises.
    """
    raw = raw or ""
    parts = raw.split(SEPARATOR, 1)

    label = parts[0].strip()
    sentiment = label if label else DEFAULT_SENTIMENT

    summary = parts[1].strip() if len(parts) > 1 else ""
    if not summary:
        summary = raw

    return sentiment, summary
