import requests
import structlog

from soar.analyzer.base import LLMClient
from soar.schema.errors import AnalysisError, ConfigurationError

logger = structlog.get_logger()

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicClient(LLMClient):
    """Anthropic Messages API over plain HTTP."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://api.anthropic.com",
        max_tokens: int = 8192,
        timeout: float = 300,
    ):
        if not api_key:
            raise ConfigurationError(
                "ANTHROPIC_API_KEY",
                "set it with: export ANTHROPIC_API_KEY=your-api-key",
            )
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.max_tokens = max_tokens
        self.timeout = timeout

    def generate(self, messages, system: str = "") -> str:
        payload = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": messages,
        }
        if system:
            payload["system"] = system

        logger.info("anthropic_request", model=self.model, max_tokens=self.max_tokens)
        response = requests.post(
            f"{self.base_url}/v1/messages",
            json=payload,
            headers={
                "x-api-key": self.api_key,
                "anthropic-version": ANTHROPIC_VERSION,
                "content-type": "application/json",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

        return first_text_block(response.json())


def first_text_block(data: dict) -> str:
    """Text of the first text block in a Messages API response."""
    for block in data.get("content", []):
        if block.get("type") == "text":
            return block.get("text", "")

    raise AnalysisError("No text response from model")
