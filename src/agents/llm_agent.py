# src/agents/llm_agent.py
from openai import OpenAI, OpenAIError
from typing import List
from src.config.settings import Settings
from src.models.errors import ProviderFailure
from src.models.schemas import ModelResponse
import logging

logger = logging.getLogger(__name__)

class ChatAgent:
    """OpenAI-compatible chat completion client."""

    def __init__(self, config: Settings):
        self.config = config
        # One attempt per call; the provider timeout bounds latency.
        self.client = OpenAI(
            api_key=config.openai_api_key,
            base_url=config.openai_base_url,
            timeout=config.llm_timeout_seconds,
            max_retries=0,
        )
        self.model = config.openai_llm_model

    def chat(self, messages: List[dict]) -> str:
        """
        Send a list of messages to the chat model and get the response.

        Args:
            messages: List of message dicts (e.g., [{"role": "user", "content": "Hello"}])

        Returns:
            The assistant's reply as a string ("" if the model returned no content).

        Raises:
            ProviderFailure: If the request fails or the response has no choices.
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages
            )
        except OpenAIError as e:
            raise ProviderFailure(f"Chat completion failed: {e}") from e

        if not response.choices:
            raise ProviderFailure("Chat completion returned no choices")
        return response.choices[0].message.content or ""

    def complete(self, system_instruction: str, user_text: str) -> str:
        """
        Run a completion with a system directive and separate user content.

        The user text is never merged into the instruction string.
        """
        messages = [
            {"role": "system", "content": system_instruction},
            {"role": "user", "content": user_text},
        ]
        return self.chat(messages)


class FeedbackClassifier:
    """Classify customer feedback into a sentiment label and short summary."""

    SYSTEM_PROMPT = (
        'Analyze the sentiment of the user text. Reply with ONLY "Positive", '
        '"Negative", or "Neutral", followed by a pipe character "|", followed '
        'by a 5-word summary. Example: "Positive | User loved the login flow"'
    )

    def __init__(self, config: Settings):
        """
        Initialize the feedback classifier.

        Args:
            config: Settings object with OpenAI configuration
        """
        self.agent = ChatAgent(config)

    def classify(self, text: str) -> ModelResponse:
        """
        Classify a single piece of customer feedback.

        Never raises: any provider or transport error is returned as a
        failed ModelResponse.

        Args:
            text: Customer feedback text

        Returns:
            ModelResponse holding the raw model output or the failure reason
        """
        try:
            raw = self.agent.complete(self.SYSTEM_PROMPT, text)
        except ProviderFailure as e:
            logger.warning(f"Sentiment classification failed: {e}")
            return ModelResponse(error=str(e))
        except Exception as e:
            logger.exception("Unexpected error during sentiment classification")
            return ModelResponse(error=f"{type(e).__name__}: {e}")

        return ModelResponse(text=raw)
