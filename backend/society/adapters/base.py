"""Base LLM adapter interface."""
from abc import ABC, abstractmethod


class AdviceAdapter(ABC):
    """Abstract base class for advice text providers."""
    
    def __init__(self, model_id: str, **kwargs):
        """
        Initialize the adapter.
        
        Args:
            model_id: Identifier for the model (e.g., "gemini-1.5-flash", "gpt-4o-mini")
            **kwargs: Additional provider-specific configuration
        """
        self.model_id = model_id
        self.config = kwargs
    
    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        system_instruction: str,
        temperature: float = 0.7,
    ) -> str:
        """
        Send one prompt and return the model's plain-text answer.
        
        Args:
            prompt: The user prompt
            system_instruction: Persona / behaviour instruction
            temperature: Sampling temperature
            
        Returns:
            Response text; may be empty if the model returned nothing
        """
        pass
