"""
Console report over the stored feedback.

Usage:
    python -m src.pipelines.report
    python -m src.pipelines.report --sentiment Negative
    python -m src.pipelines.report --export feedback.csv
"""

from typing import List, Optional
import logging
import argparse

import pandas as pd

from src.config.settings import Settings
from src.data_access.feedback_store import FeedbackStore
from src.models.schemas import FeedbackRecord
from src.pipelines.aggregate import sentiment_matches, summarize

COLUMNS = ["id", "customer_text", "sentiment", "summary"]


def records_to_frame(records: List[FeedbackRecord], sentiment: Optional[str] = None) -> pd.DataFrame:
    """
    Build a DataFrame of feedback records, optionally filtered by label.

    Args:
        records: Feedback records, most recent first
        sentiment: Keep only records whose sentiment contains this label

    Returns:
        DataFrame with one row per record
    """
    if sentiment:
        records = [r for r in records if sentiment_matches(r.sentiment, sentiment)]
    return pd.DataFrame([r.model_dump() for r in records], columns=COLUMNS)


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(description="Report on stored customer feedback")
    parser.add_argument("--sentiment", help="Filter by sentiment label (substring match)")
    parser.add_argument("--export", help="Export to CSV file")
    args = parser.parse_args()

    store = FeedbackStore(Settings())
    try:
        print("Fetching feedback...")
        records = store.list_all()
    finally:
        store.close()

    counts = summarize(records)
    df = records_to_frame(records, sentiment=args.sentiment)

    print(f"\nFound {len(records)} feedback records\n")
    print("=" * 80)
    print(f"Positive: {counts.positive}  Negative: {counts.negative}  Neutral: {counts.neutral}")
    print(f"Unclassified: {sum(1 for r in records if not r.is_classified)}")
    print("=" * 80)

    if len(df) > 0:
        print("\nMost recent feedback:\n")
        for _, row in df.head(10).iterrows():
            label = row['sentiment'] if pd.notna(row['sentiment']) else 'Pending'
            print(f"#{row['id']} [{label}] {row['customer_text'][:100]}")
            if pd.notna(row["summary"]) and row["summary"]:
                print(f"  Summary: {row['summary']}")
            print()

    if args.export:
        df.to_csv(args.export, index=False)
        print(f"\nExported {len(df)} records to {args.export}")


if __name__ == "__main__":
    main()
