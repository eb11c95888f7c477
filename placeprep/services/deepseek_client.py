"""
DeepSeek API Client

DeepSeek uses OpenAI-compatible API, so we use the openai library.

Used ONLY by the placement assistant, and only when an API key is set.
Without a key the assistant answers from its scripted replies.
"""
from typing import List, Optional
from openai import OpenAI
from placeprep.core.config import get_settings

settings = get_settings()

COACH_SYSTEM_PROMPT = """You are a placement preparation coach for engineering students.
Give short, practical advice on interviews, DSA practice, resumes, aptitude and
company-specific preparation. Use numbered lists where it helps.
Stay on the topic of placements and career preparation."""


class DeepSeekClient:
    """
    Wrapper for DeepSeek chat completions.
    """

    def __init__(self):
        self.client = OpenAI(
            api_key=settings.deepseek_api_key,
            base_url=settings.deepseek_base_url
        )
        # Use the cheapest model
        self.model = "deepseek-chat"

    def _call_api(
        self,
        system_prompt: str,
        user_content: str,
        history: Optional[List[dict]] = None,
        max_tokens: int = 600
    ) -> str:
        """
        Internal method to call DeepSeek API.
        Returns raw text response.
        """
        messages = [{"role": "system", "content": system_prompt}]
        messages.extend(history or [])
        messages.append({"role": "user", "content": user_content})

        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=0.7
        )
        return response.choices[0].message.content

    def coach_reply(self, message: str, history: Optional[List[dict]] = None) -> str:
        """Answer a student's question as the placement coach."""
        return self._call_api(COACH_SYSTEM_PROMPT, message, history=history)

    def test_connection(self) -> bool:
        """Test if DeepSeek API is reachable"""
        try:
            response = self._call_api(
                "You are a test assistant.",
                "Reply with exactly: OK",
                max_tokens=10
            )
            return "OK" in response.upper()
        except Exception as e:
            print(f"DeepSeek connection failed: {e}")
            return False


# Singleton instance
_deepseek_client: DeepSeekClient = None


def get_deepseek_client() -> DeepSeekClient:
    """Get or create DeepSeek client (singleton pattern)"""
    global _deepseek_client
    if _deepseek_client is None:
        _deepseek_client = DeepSeekClient()
    return _deepseek_client
