from .base import AdviceAdapter
from .mock import MockAdviceAdapter
from .openai_adapter import OpenAIAdapter
from .anthropic_adapter import AnthropicAdapter
from .gemini_adapter import GeminiAdapter
from .factory import get_advice_adapter

__all__ = [
    "AdviceAdapter",
    "MockAdviceAdapter",
    "OpenAIAdapter",
    "AnthropicAdapter",
    "GeminiAdapter",
    "get_advice_adapter",
]
