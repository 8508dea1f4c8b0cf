"""Anthropic API client for letter generation, with cost tracking.

The client is built once from an explicit ``CompletionConfig``.
``create_completion_client`` returns a ``ConfigurationError`` instead of a
client when credentials are missing; callers check for it before first use.
"""

import logging
from dataclasses import dataclass

import anthropic

from ..config import settings
from ..generation.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

MODELS = {
    "haiku": "claude-haiku-4-5-20251001",
    "sonnet": "claude-sonnet-4-5-20250929",
}

PRICING = {
    "claude-haiku-4-5-20251001": {"input": 0.80, "output": 4.00},
    "claude-sonnet-4-5-20250929": {"input": 3.00, "output": 15.00},
}


@dataclass(frozen=True)
class CompletionConfig:
    api_key: str
    model_id: str = MODELS["haiku"]
    max_tokens: int = 2048
    timeout: float = 60.0

    @classmethod
    def from_settings(cls) -> "CompletionConfig":
        return cls(
            api_key=settings.anthropic_api_key,
            model_id=MODELS.get(settings.anthropic_model, settings.anthropic_model),
            max_tokens=settings.completion_max_tokens,
            timeout=settings.completion_timeout_seconds,
        )


@dataclass
class CompletionResult:
    text: str
    model_id: str
    tokens_input: int = 0
    tokens_output: int = 0
    cost_usd: float = 0.0


def _calculate_cost(usage, model_id: str) -> float:
    if usage is None:
        return 0.0
    pricing = PRICING.get(model_id, PRICING[MODELS["haiku"]])
    input_cost = (usage.input_tokens / 1_000_000) * pricing["input"]
    output_cost = (usage.output_tokens / 1_000_000) * pricing["output"]
    return round(input_cost + output_cost, 6)


def _first_text(message) -> str:
    """Text of the first text block of a response, or "" when there is none."""
    for block in getattr(message, "content", None) or []:
        if getattr(block, "type", "text") == "text":
            return getattr(block, "text", "") or ""
    return ""


class CompletionClient:
    """Sends a prompt as a single user message to a fixed model."""

    def __init__(self, config: CompletionConfig, client: anthropic.Anthropic | None = None) -> None:
        self.config = config
        self._client = client or anthropic.Anthropic(api_key=config.api_key, timeout=config.timeout)

    def complete(self, prompt: str) -> CompletionResult:
        try:
            message = self._client.messages.create(
                model=self.config.model_id,
                max_tokens=self.config.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            logger.error("Completion call failed (model=%s): %s", self.config.model_id, exc)
            raise UpstreamError() from exc

        usage = getattr(message, "usage", None)
        result = CompletionResult(
            text=_first_text(message),
            model_id=self.config.model_id,
            tokens_input=getattr(usage, "input_tokens", 0) or 0,
            tokens_output=getattr(usage, "output_tokens", 0) or 0,
            cost_usd=_calculate_cost(usage, self.config.model_id),
        )
        logger.info(
            "Completion ok: model=%s, tokens=%d/%d, cost=$%.6f",
            result.model_id, result.tokens_input, result.tokens_output, result.cost_usd,
        )
        return result


def create_completion_client(config: CompletionConfig) -> CompletionClient | ConfigurationError:
    """Build the client, or return (not raise) the configuration failure."""
    if not config.api_key:
        logger.error("ANTHROPIC_API_KEY is not set; letter generation is disabled")
        return ConfigurationError()
    return CompletionClient(config)
