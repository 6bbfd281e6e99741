from soar import config
from soar.analyzer.anthropic_client import AnthropicClient
from soar.analyzer.base import LLMClient
from soar.analyzer.chat_completions_client import ChatCompletionsClient
from soar.analyzer.vertex_client import VertexClient

PROVIDERS = ("anthropic", "vertex", "chat_completions")


def get_llm_client(provider: str = None) -> LLMClient:
    provider = provider or config.LLM_PROVIDER

    if provider == "anthropic":
        return AnthropicClient(
            api_key=config.ANTHROPIC_API_KEY,
            model=config.ANTHROPIC_MODEL,
            base_url=config.ANTHROPIC_BASE_URL,
            max_tokens=config.ANTHROPIC_MAX_TOKENS,
            timeout=config.LLM_TIMEOUT,
        )

    if provider == "vertex":
        return VertexClient(
            project_id=config.GOOGLE_CLOUD_PROJECT,
            model=config.VERTEX_MODEL,
            region=config.GOOGLE_CLOUD_REGION,
            max_tokens=config.ANTHROPIC_MAX_TOKENS,
            timeout=config.LLM_TIMEOUT,
        )

    if provider == "chat_completions":
        return ChatCompletionsClient(
            base_url=config.LLM_BASE_URL,
            model=config.LLM_MODEL,
            api_key=config.LLM_API_KEY,
            timeout=config.LLM_TIMEOUT,
        )

    raise ValueError(f"Unknown LLM provider '{provider}' (expected one of {', '.join(PROVIDERS)})")
