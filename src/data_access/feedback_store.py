# src/data_access/feedback_store.py
"""
PostgreSQL store for classified customer feedback.
"""

import psycopg2
from psycopg2.extras import RealDictCursor
from typing import List
from src.config.settings import Settings
from src.models.errors import StoreFailure
from src.models.schemas import FeedbackRecord
import logging

logger = logging.getLogger(__name__)


SEED_FEEDBACK = [
    "The login page keeps crashing when I use Firefox. It is super frustrating!",
    "I love the new dark mode, it looks amazing. Great job team!",
    "The API documentation is outdated and very confusing.",
]


class FeedbackStore:
    """Append-and-scan PostgreSQL store for feedback records."""

    def __init__(self, config: Settings):
        self.config = config
        self.conn = None

    def connect(self) -> None:
        """Establish database connection."""
        try:
            self.conn = psycopg2.connect(
                host=self.config.postgres_host,
                port=self.config.postgres_port,
                database=self.config.postgres_database,
                user=self.config.postgres_username,
                password=self.config.postgres_password,
                sslmode=self.config.postgres_sslmode
            )
        except psycopg2.Error as e:
            raise StoreFailure(f"Could not connect to feedback database: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None

    def _ensure_connection(self) -> None:
        if self.conn is None or self.conn.closed:
            self.connect()

    def _rollback(self) -> None:
        # A dropped connection cannot be rolled back; it is discarded instead.
        if self.conn is None:
            return
        if self.conn.closed:
            self.conn = None
        else:
            self.conn.rollback()

    def initialize_schema(self, seed: bool = False) -> None:
        """
        Create the feedback table if it doesn't exist.

        Args:
            seed: Also insert a few unclassified demo rows
        """
        self._ensure_connection()

        schema_sql = """
        CREATE TABLE IF NOT EXISTS feedback (
            id SERIAL PRIMARY KEY,
            customer_text TEXT NOT NULL,
            sentiment TEXT,
            summary TEXT
        );
        """

        try:
            with self.conn.cursor() as cursor:
                cursor.execute(schema_sql)
                if seed:
                    for text in SEED_FEEDBACK:
                        cursor.execute(
                            "INSERT INTO feedback (customer_text) VALUES (%s)",
                            (text,)
                        )
                self.conn.commit()
        except psycopg2.Error as e:
            self._rollback()
            raise StoreFailure(f"Could not initialize feedback schema: {e}") from e

        logger.info(f"Feedback schema ready (seeded={seed})")

    def create(self, customer_text: str, sentiment: str, summary: str) -> None:
        """
        Insert one feedback record in a single transaction.

        Args:
            customer_text: Original submitted text
            sentiment: Sentiment label (or the error sentinel)
            summary: Short summary (or the error sentinel)

        Raises:
            StoreFailure: If the insert fails
        """
        self._ensure_connection()

        query = """
            INSERT INTO feedback (customer_text, sentiment, summary)
            VALUES (%s, %s, %s)
        """

        try:
            with self.conn.cursor() as cursor:
                cursor.execute(query, (customer_text, sentiment, summary))
                self.conn.commit()
        except psycopg2.Error as e:
            self._rollback()
            raise StoreFailure(f"Could not insert feedback: {e}") from e

    def list_all(self) -> List[FeedbackRecord]:
        """
        Retrieve every feedback record, most recent first.

        Returns:
            List of FeedbackRecord ordered by id descending

        Raises:
            StoreFailure: If the query fails
        """
        self._ensure_connection()

        query = """
            SELECT id, customer_text, sentiment, summary
            FROM feedback
            ORDER BY id DESC
        """

        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cursor:
                cursor.execute(query)
                rows = cursor.fetchall()
        except psycopg2.Error as e:
            self._rollback()
            raise StoreFailure(f"Could not read feedback: {e}") from e

        return [
            FeedbackRecord(
                id=row['id'],
                customer_text=row['customer_text'],
                sentiment=row.get('sentiment'),
                summary=row.get('summary')
            )
            for row in rows
        ]

    # Collaborator interface names
    insert = create
    select_all_ordered_by_id_descending = list_all
