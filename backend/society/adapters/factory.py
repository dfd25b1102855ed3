"""Factory for creating advice adapters."""
from society.adapters.base import AdviceAdapter
from society.adapters.mock import MockAdviceAdapter
from society.adapters.openai_adapter import OpenAIAdapter
from society.adapters.anthropic_adapter import AnthropicAdapter
from society.adapters.gemini_adapter import GeminiAdapter


def get_advice_adapter(model_id: str, **kwargs) -> AdviceAdapter:
    """
    Factory function to create appropriate adapter based on model_id.

    Args:
        model_id: Model identifier (e.g., "mock:advisor", "gemini-1.5-flash", "gpt-4o-mini", "claude-3-5-haiku-latest")
        **kwargs: Additional configuration for the adapter

    Returns:
        AdviceAdapter instance
    
    Raises:
        ValueError: If the provider's API key is not configured
    """
    if model_id.startswith("mock:"):
        return MockAdviceAdapter(model_id, **kwargs)
    elif model_id.startswith("gpt-") or model_id.startswith("o1-") or "openai" in model_id.lower():
        return OpenAIAdapter(model_id, **kwargs)
    elif "claude" in model_id.lower() or "anthropic" in model_id.lower():
        return AnthropicAdapter(model_id, **kwargs)
    elif "gemini" in model_id.lower() or "google" in model_id.lower():
        return GeminiAdapter(model_id, **kwargs)
    else:
        # Default to mock for unknown models
        return MockAdviceAdapter(f"mock:{model_id}", **kwargs)
