"""Advice service: short financial tips from a language model."""
import json
import logging
from typing import Any, Dict, List, Optional, Sequence
from society.adapters.base import AdviceAdapter
from society.adapters.factory import get_advice_adapter
from society.config import settings
from society.models.preferences import Language
from society.models.transaction import Transaction

logger = logging.getLogger(__name__)

ADVICE_TEMPERATURE = 0.7

LANGUAGE_NAMES = {
    Language.BENGALI: "Bengali (বাংলা)",
    Language.ENGLISH: "English",
}

SYSTEM_INSTRUCTIONS = {
    Language.BENGALI: "আপনি একজন অভিজ্ঞ আর্থিক সমিতি উপদেষ্টা। আপনি সঞ্চয় বৃদ্ধি এবং ঋণ ঝুঁকি হ্রাসের পরামর্শ দেন।",
    Language.ENGLISH: "You are an experienced savings society advisor. You provide advice on fund growth and loan risk mitigation.",
}

NO_INSIGHTS = {
    Language.BENGALI: "এই মুহূর্তে কোনো আর্থিক ইনসাইট পাওয়া যায়নি।",
    Language.ENGLISH: "No financial insights available at this moment.",
}

ADVICE_FAILED = {
    Language.BENGALI: "পরামর্শ পেতে সমস্যা হচ্ছে। অনুগ্রহ করে আপনার ইন্টারনেট সংযোগ চেক করুন।",
    Language.ENGLISH: "Error getting society advice. Please check your internet connection.",
}

PROMPT_TEMPLATE = """Analyze these community savings society transactions and provide 3-4 professional financial tips in {language_name}.
Focus on fund growth, loan management risks, and encouraging member participation. Keep it under 100 words.

Transactions Data: {transactions_json}"""


def summarize_for_advice(transactions: Sequence[Transaction]) -> List[Dict[str, Any]]:
    """Reduce each transaction to the fields the model needs."""
    return [
        {
            "type": t.type.value,
            "totalAmount": t.total_amount,
            "date": t.date,
            "itemCount": len(t.items),
            "items": ", ".join(item.title for item in t.items),
        }
        for t in transactions
    ]


class AdviceService:
    """Builds the advice prompt and always returns displayable text."""

    def __init__(self, model_id: Optional[str] = None, adapter: Optional[AdviceAdapter] = None):
        self.model_id = model_id or settings.advice_model
        self._adapter = adapter

    def build_prompt(self, transactions: Sequence[Transaction], language: Language) -> str:
        return PROMPT_TEMPLATE.format(
            language_name=LANGUAGE_NAMES[language],
            transactions_json=json.dumps(summarize_for_advice(transactions), ensure_ascii=False),
        )

    async def get_advice(self, transactions: Sequence[Transaction], language: Language) -> str:
        """
        Ask the configured model for advice.

        Any failure is logged and replaced with a localized message; the raw
        error never reaches the caller.

        Raises:
            ValueError: If there are no transactions to analyze
        """
        if not transactions:
            raise ValueError("No transactions to analyze")

        prompt = self.build_prompt(transactions, language)
        try:
            adapter = self._adapter or get_advice_adapter(self.model_id)
            text = await adapter.generate_text(
                prompt,
                SYSTEM_INSTRUCTIONS[language],
                temperature=ADVICE_TEMPERATURE,
            )
        except Exception as e:
            logger.error("AI insight error", extra={"model_id": self.model_id, "error": str(e)})
            return ADVICE_FAILED[language]

        text = (text or "").strip()
        return text or NO_INSIGHTS[language]
