"""
Placement Assistant

Answers student questions about placement preparation.

HOW IT ANSWERS:
1. If a DeepSeek key is configured, ask the model (with recent history)
2. If that fails, or no key is set, use the scripted keyword replies

Scripted rules are checked in order and the first keyword hit wins.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from openai import OpenAIError

from placeprep.core.config import get_settings

GREETING = (
    "Hello! I'm your AI placement assistant. I can help you with:\n\n"
    "• Study tips and guidance\n"
    "• Interview preparation\n"
    "• Technical questions\n"
    "• Career advice\n"
    "• Mock test strategies\n\n"
    "How can I help you today?"
)

INTERVIEW_REPLY = (
    "For interview preparation, I recommend:\n\n"
    "1. Practice STAR method for behavioral questions\n"
    "2. Research the company thoroughly\n"
    "3. Prepare questions to ask the interviewer\n"
    "4. Review your resume and be ready to explain each experience\n"
    "5. Practice common interview questions\n\n"
    "Would you like specific tips for technical or HR interviews?"
)

DSA_REPLY = (
    "Data Structures & Algorithms tips:\n\n"
    "1. Start with basics: Arrays, LinkedLists, Stacks, Queues\n"
    "2. Practice problems on LeetCode, HackerRank\n"
    "3. Focus on time and space complexity analysis\n"
    "4. Master common patterns: Two Pointers, Sliding Window, Binary Search\n"
    "5. Practice at least 2-3 problems daily\n\n"
    "Would you like resources for any specific topic?"
)

RESUME_REPLY = (
    "Resume building tips:\n\n"
    "1. Keep it to 1-2 pages maximum\n"
    "2. Use action verbs (Led, Developed, Managed)\n"
    "3. Quantify achievements with numbers\n"
    "4. Tailor it for each job application\n"
    "5. Include: Education, Experience, Projects, Skills\n"
    "6. Proofread for errors\n\n"
    "Would you like help with any specific section?"
)

PLACEMENT_REPLY = (
    "Placement preparation strategy:\n\n"
    "1. Build a strong foundation in core subjects\n"
    "2. Complete at least 3-4 significant projects\n"
    "3. Practice coding problems regularly\n"
    "4. Improve communication skills\n"
    "5. Stay updated with industry trends\n"
    "6. Network with alumni and professionals\n\n"
    "What specific area would you like to focus on?"
)

DEFAULT_REPLY = (
    "I'm here to help with your placement preparation! You can ask me about:\n\n"
    "• Interview tips and common questions\n"
    "• DSA and coding practice\n"
    "• Resume building\n"
    "• Placement strategies\n"
    "• Company-specific preparation\n"
    "• Aptitude and reasoning\n\n"
    "What would you like to know?"
)

# (keywords, reply) in priority order
SCRIPTED_RULES = (
    (("interview", "hr"), INTERVIEW_REPLY),
    (("dsa", "data structure", "algorithm"), DSA_REPLY),
    (("resume", "cv"), RESUME_REPLY),
    (("placement", "job"), PLACEMENT_REPLY),
)


def scripted_reply(message: str) -> str:
    """Keyword-matched canned answer. Matching is substring and case-insensitive."""
    lower_message = message.lower()
    for keywords, reply in SCRIPTED_RULES:
        if any(keyword in lower_message for keyword in keywords):
            return reply
    return DEFAULT_REPLY


@dataclass(frozen=True)
class AssistantReply:
    content: str
    source: str  # "ai" | "scripted"


class PlacementAssistant:
    """
    Chat front door. The model call is injectable so callers (and tests)
    can swap it; by default it is the DeepSeek client when a key exists.
    """

    def __init__(self, ai_reply: Optional[Callable[[str, List[dict]], str]] = None):
        if ai_reply is None and get_settings().assistant_ai_enabled:
            from placeprep.services.deepseek_client import get_deepseek_client
            ai_reply = get_deepseek_client().coach_reply
        self.ai_reply = ai_reply

    def reply(self, message: str, history: Optional[List[dict]] = None) -> AssistantReply:
        if self.ai_reply is not None:
            try:
                content = self.ai_reply(message, history or [])
                if content:
                    return AssistantReply(content=content.strip(), source="ai")
            except OpenAIError as e:
                print(f"⚠️ Assistant AI call failed, using scripted reply: {e}")

        return AssistantReply(content=scripted_reply(message), source="scripted")


_assistant: PlacementAssistant = None


def get_placement_assistant() -> PlacementAssistant:
    """Get or create the assistant (singleton pattern)"""
    global _assistant
    if _assistant is None:
        _assistant = PlacementAssistant()
    return _assistant
