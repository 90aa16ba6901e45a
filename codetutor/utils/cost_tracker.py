"""LLM cost estimation, logged after every completion."""

import logging

logger = logging.getLogger(__name__)

# Price per 1K tokens (USD), approximate
MODEL_PRICING: dict[str, dict[str, float]] = {
    "llama-3.3-70b-versatile": {"input": 0.00059, "output": 0.00079},
    "llama-3.1-8b-instant": {"input": 0.00005, "output": 0.00008},
    "gemini-1.5-flash": {"input": 0.000075, "output": 0.0003},
    "gemini-1.5-pro": {"input": 0.00125, "output": 0.005},
}

# Fallback pricing for unknown models
DEFAULT_PRICING = {"input": 0.0005, "output": 0.001}


def estimate_cost(input_tokens: int, output_tokens: int, model: str) -> float:
    """Estimate cost in USD for a single LLM call."""
    pricing = MODEL_PRICING.get(model, DEFAULT_PRICING)
    cost = (input_tokens / 1000) * pricing["input"] + (output_tokens / 1000) * pricing["output"]
    return round(cost, 8)


def log_cost(input_tokens: int | None, output_tokens: int | None, model: str) -> float:
    cost = estimate_cost(input_tokens or 0, output_tokens or 0, model)
    logger.info(
        "LLM usage: model=%s input_tokens=%d output_tokens=%d cost=$%.6f",
        model, input_tokens or 0, output_tokens or 0, cost,
    )
    return cost
