import requests
import structlog

from soar.analyzer.base import LLMClient
from soar.utils.json_extract import strip_fences

logger = structlog.get_logger()


class ChatCompletionsClient(LLMClient):
    """Any OpenAI-compatible /chat/completions endpoint."""

    def __init__(
        self,
        base_url: str,
        model: str,
        temperature: float = 0.2,
        api_key: str = "",
        timeout: float = 300,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.api_key = api_key
        self.timeout = timeout

    def generate(self, messages, system: str = "") -> str:
        url = f"{self.base_url}/chat/completions"

        if system:
            messages = [{"role": "system", "content": system}, *messages]

        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        logger.info("chat_completion_request", model=self.model, messages=len(messages))
        response = requests.post(
            url,
            json={
                "model": self.model,
                "messages": messages,
                "temperature": self.temperature,
            },
            headers=headers,
            timeout=self.timeout,
        )
        response.raise_for_status()

        content = response.json()["choices"][0]["message"]["content"]
        return strip_fences(content)
