"""
Mock Test Service

Question bank for the technical mock test and answer grading.
Answers are option indexes; the stored score is the number of correct ones.
"""

from typing import List, Optional, Sequence

DEFAULT_TEST_NAME = "Technical Mock Test"
DEFAULT_DURATION_MINUTES = 15

QUESTION_BANK = (
    {
        "question": "What is the time complexity of binary search?",
        "options": ["O(n)", "O(log n)", "O(n²)", "O(1)"],
        "correct": 1
    },
    {
        "question": "Which data structure uses LIFO?",
        "options": ["Queue", "Stack", "Array", "Tree"],
        "correct": 1
    },
    {
        "question": "What does SQL stand for?",
        "options": [
            "Simple Query Language",
            "Structured Query Language",
            "System Query Language",
            "Standard Query Language"
        ],
        "correct": 1
    },
)


def public_questions(questions: Sequence[dict] = QUESTION_BANK) -> List[dict]:
    """Questions as shown to the student (no answer key)."""
    return [
        {"index": i, "question": q["question"], "options": list(q["options"])}
        for i, q in enumerate(questions)
    ]


def grade_answers(answers: Sequence[Optional[int]], questions: Sequence[dict] = QUESTION_BANK) -> int:
    """
    Count correct answers.

    Unanswered questions (missing or None) score zero and answers beyond
    the last question are ignored.
    """
    score = 0
    for i, question in enumerate(questions):
        if i < len(answers) and answers[i] is not None and answers[i] == question["correct"]:
            score += 1
    return score
