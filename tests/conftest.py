"""Shared fixtures for the feedback pipeline tests."""
import pytest
from unittest.mock import Mock
from src.config.settings import Settings
from src.models.errors import StoreFailure
from src.models.schemas import FeedbackRecord, ModelResponse


class FakeFeedbackStore:
    """In-memory stand-in for FeedbackStore."""

    def __init__(self, fail_writes: int = 0, fail_reads: bool = False):
        self.records = []
        self.write_attempts = 0
        self.fail_writes = fail_writes
        self.fail_reads = fail_reads
        self.closed = False
        self._next_id = 1

    def create(self, customer_text, sentiment, summary):
        self.write_attempts += 1
        if self.fail_writes:
            self.fail_writes -= 1
            raise StoreFailure("write failed")
        self.records.append(
            FeedbackRecord(
                id=self._next_id,
                customer_text=customer_text,
                sentiment=sentiment,
                summary=summary
            )
        )
        self._next_id += 1

    def list_all(self):
        if self.fail_reads:
            raise StoreFailure("read failed")
        return sorted(self.records, key=lambda r: r.id, reverse=True)

    def close(self):
        self.closed = True


@pytest.fixture
def mock_config():
    """Create a mock configuration."""
    config = Mock(spec=Settings)
    config.openai_api_key = "test-api-key"
    config.openai_base_url = None
    config.openai_llm_model = "gpt-5-nano"
    config.llm_timeout_seconds = 30.0
    config.postgres_host = "localhost"
    config.postgres_port = 5432
    config.postgres_database = "feedback_test"
    config.postgres_username = "test-user"
    config.postgres_password = "test-pass"
    config.postgres_sslmode = "disable"
    return config


@pytest.fixture
def fake_store():
    return FakeFeedbackStore()


@pytest.fixture
def mock_classifier():
    """Classifier double returning a well-formed positive reply."""
    classifier = Mock()
    classifier.classify.return_value = ModelResponse(text="Positive | User loved the login flow")
    return classifier


@pytest.fixture
def make_fake_store():
    """Factory for fake stores with injected failures."""
    return FakeFeedbackStore
