"""Mock LLM adapter for running without API calls."""
from society.adapters.base import AdviceAdapter


class MockAdviceAdapter(AdviceAdapter):
    """Returns canned advice so the dashboard works offline and in tests."""
    
    RESPONSES = {
        "mock:advisor": (
            "1. Keep monthly savings collection on a fixed date to grow the fund steadily.\n"
            "2. Track loan repayments weekly and follow up early on missed installments.\n"
            "3. Keep loan disbursements below half of the fund balance.\n"
            "4. Share a short monthly statement with members to encourage participation."
        ),
        "mock:empty": "",
    }
    
    def __init__(self, model_id: str = "mock:advisor", **kwargs):
        super().__init__(model_id, **kwargs)
        self.calls = []
    
    async def generate_text(
        self,
        prompt: str,
        system_instruction: str,
        temperature: float = 0.7,
    ) -> str:
        """Return the canned response for this model id."""
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "temperature": temperature,
        })
        if self.model_id == "mock:error":
            raise RuntimeError("Mock advice provider failure")
        return self.RESPONSES.get(self.model_id, self.RESPONSES["mock:advisor"])
