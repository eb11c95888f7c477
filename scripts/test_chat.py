#!/usr/bin/env python3
"""
Placement Assistant Test Script

Tests:
1. Scripted keyword routing
2. AI reply used when available
3. Fallback to scripted reply when the AI call fails

The AI call is injected, so no API key or network is needed.

Run: python scripts/test_chat.py   (or: pytest scripts)
"""
import sys
sys.path.insert(0, '.')

from openai import APIConnectionError
import httpx

from placeprep.services.chat_service import (
    PlacementAssistant,
    scripted_reply,
    INTERVIEW_REPLY,
    DSA_REPLY,
    RESUME_REPLY,
    PLACEMENT_REPLY,
    DEFAULT_REPLY,
    GREETING
)


def test_scripted_keywords():
    print("\n[1] Testing scripted replies...")

    assert scripted_reply("How do I prepare for an INTERVIEW?") == INTERVIEW_REPLY
    assert scripted_reply("hr round tips") == INTERVIEW_REPLY
    assert scripted_reply("Best DSA sheet?") == DSA_REPLY
    assert scripted_reply("which data structure first") == DSA_REPLY
    assert scripted_reply("greedy algorithm help") == DSA_REPLY
    assert scripted_reply("review my resume") == RESUME_REPLY
    assert scripted_reply("cv format") == RESUME_REPLY
    assert scripted_reply("placement strategy") == PLACEMENT_REPLY
    assert scripted_reply("first job advice") == PLACEMENT_REPLY
    assert scripted_reply("hello") == DEFAULT_REPLY
    print("    ✅ Keywords routed")


def test_scripted_priority_order():
    # interview rule is checked before resume and placement
    assert scripted_reply("resume questions in the interview") == INTERVIEW_REPLY
    assert scripted_reply("algorithm for my resume") == DSA_REPLY
    assert scripted_reply("resume for a job") == RESUME_REPLY


def test_greeting_mentions_interview_preparation():
    assert "Interview preparation" in GREETING


def test_ai_reply_used_when_available():
    print("\n[2] Testing AI reply...")

    calls = []

    def fake_ai(message, history):
        calls.append((message, history))
        return "  Practice mock interviews weekly.  "

    assistant = PlacementAssistant(ai_reply=fake_ai)
    reply = assistant.reply("interview tips", [{"role": "user", "content": "hi"}])

    assert reply.source == "ai"
    assert reply.content == "Practice mock interviews weekly."
    assert calls == [("interview tips", [{"role": "user", "content": "hi"}])]
    print("    ✅ AI reply returned")


def test_fallback_when_ai_fails():
    print("\n[3] Testing fallback...")

    def broken_ai(message, history):
        raise APIConnectionError(request=httpx.Request("POST", "https://api.deepseek.com/v1/chat/completions"))

    reply = PlacementAssistant(ai_reply=broken_ai).reply("resume help")
    assert reply.source == "scripted"
    assert reply.content == RESUME_REPLY
    print("    ✅ Scripted reply on AI failure")


def test_fallback_when_ai_returns_nothing():
    reply = PlacementAssistant(ai_reply=lambda message, history: "").reply("dsa")
    assert reply.source == "scripted"
    assert reply.content == DSA_REPLY


def main():
    print("=" * 50)
    print("PLACEMENT ASSISTANT TESTS")
    print("=" * 50)

    test_scripted_keywords()
    test_scripted_priority_order()
    test_greeting_mentions_interview_preparation()
    test_ai_reply_used_when_available()
    test_fallback_when_ai_fails()
    test_fallback_when_ai_returns_nothing()

    print("\n" + "=" * 50)
    print("All assistant tests passed!")
    print("=" * 50)


if __name__ == "__main__":
    main()
