"""
Ingestion pipeline for customer feedback.
Classifies each submission with the language model and stores exactly one
record per non-empty submission, falling back to an error record when
classification fails.
"""

from typing import List, Optional
import logging
import argparse

from src.config.settings import Settings
from src.data_access.feedback_store import FeedbackStore
from src.agents.llm_agent import FeedbackClassifier
from src.agents.response_parser import parse_response
from src.models.schemas import ERROR_SENTIMENT, ERROR_SUMMARY


logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Pipeline for classifying and storing individual feedback submissions."""

    def __init__(self, store: FeedbackStore, classifier: FeedbackClassifier):
        """
        Initialize the ingestion pipeline.

        Args:
            store: Feedback store the records are written to
            classifier: Sentiment classifier used for each submission
        """
        self.store = store
        self.classifier = classifier

    def ingest(self, text: Optional[str]) -> None:
        """
        Classify and store a single feedback submission.

        Never raises. Empty or missing text is ignored. Any failure while
        classifying or writing the result is recorded as an error record.

        Args:
            text: Customer feedback text
        """
        if not text:
            logger.info("Ignoring empty feedback submission")
            return

        self._ingest(text)

    def _ingest(self, text: str) -> bool:
        """
        Classify and store one non-empty submission.

        Returns:
            True if a record (classified or error) was stored, False if the
            submission was dropped
        """
        try:
            response = self.classifier.classify(text)
            if response.ok:
                sentiment, summary = parse_response(response.text)
                self.store.create(text, sentiment, summary)
                logger.info(f"Stored feedback classified as '{sentiment}'")
                return True
            logger.error(f"Feedback analysis failed, storing error record: {response.error}")
        except Exception as e:
            logger.error(f"Feedback analysis failed, storing error record: {e}")

        return self._write_error_record(text)

    def ingest_many(self, texts: List[str]) -> dict:
        """
        Ingest several submissions one at a time.

        Args:
            texts: Feedback texts to ingest

        Returns:
            Dictionary with processing statistics
        """
        submitted = 0
        stored = 0
        skipped = 0

        for i, text in enumerate(texts, start=1):
            if not text:
                skipped += 1
                continue
            logger.info(f"Ingesting feedback {i}/{len(texts)}")
            submitted += 1
            if self._ingest(text):
                stored += 1

        dropped = submitted - stored
        logger.info(
            f"Ingestion complete: {stored} stored, {dropped} dropped, {skipped} skipped"
        )

        return {
            "total_records": len(texts),
            "submitted": submitted,
            "stored": stored,
            "dropped": dropped,
            "skipped": skipped
        }

    def _write_error_record(self, text: str) -> bool:
        """
        Best-effort write of the error sentinel record.

        Returns:
            True if the record was written, False if the write failed
        """
        try:
            self.store.create(text, ERROR_SENTIMENT, ERROR_SUMMARY)
            return True
        except Exception as e:
            logger.error(f"Could not store error record, dropping submission: {e}")
            return False


def _read_texts(args) -> List[str]:
    texts = list(args.text or [])
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            texts.extend(line.strip() for line in f)
    return texts


def main():
    """Main entry point for ingesting feedback from the command line."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Parse command-line arguments
    parser = argparse.ArgumentParser(
        description='Classify customer feedback with the language model and store the results.'
    )
    parser.add_argument(
        '--text',
        action='append',
        help='Feedback text to ingest (can be given more than once)'
    )
    parser.add_argument(
        '--file',
        type=str,
        help='Path to a text file with one feedback entry per line'
    )
    parser.add_argument(
        '--init-schema',
        action='store_true',
        help='Create the feedback table before ingesting'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Insert demo unclassified rows when creating the schema'
    )

    args = parser.parse_args()

    if args.seed and not args.init_schema:
        parser.error("--seed requires --init-schema")

    texts = _read_texts(args)
    if not texts and not args.init_schema:
        parser.error("Provide feedback with --text or --file")

    # Load configuration
    config = Settings()
    store = FeedbackStore(config)

    try:
        if args.init_schema:
            store.initialize_schema(seed=args.seed)

        pipeline = IngestionPipeline(store, FeedbackClassifier(config))
        stats = pipeline.ingest_many(texts)
    finally:
        store.close()

    # Print results
    print("\n" + "="*60)
    print("INGESTION RESULTS")
    print("="*60)
    print(f"Feedback entries read: {stats['total_records']}")
    print(f"Submitted for analysis: {stats['submitted']}")
    print(f"Stored: {stats['stored']}")
    print(f"Dropped (store unavailable): {stats['dropped']}")
    print(f"Skipped (empty): {stats['skipped']}")
    print("="*60)


if __name__ == "__main__":
    main()
