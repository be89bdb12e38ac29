"""Offline pattern-matched tutor replies."""
from typing import Iterable

from study_assistant.models.subject import Subject

USAGE_HINT = "Try: `explain dynamic programming`, `quiz transformers`, or type a subject name."


def local_tutor(message: str, subjects: Iterable[Subject] = ()) -> str:
    """Answer a chat message with canned study guidance."""
    text = message.strip().lower()

    if text.startswith("explain "):
        topic = text[len("explain "):].strip()
        return (
            f"Explanation for {topic}: define inputs → process → outputs. "
            "Show a tiny example, test one edge case, then summarize in 3 bullets."
        )

    if text.startswith("quiz "):
        topic = text[len("quiz "):].strip()
        return "\n".join([
            f"1) Define {topic} in one sentence.",
            f"2) Give a real-world example of {topic}.",
            f"3) List two common pitfalls with {topic}.",
        ])

    if "motivate" in text:
        return "Do a 25/5 focus sprint. Progress > perfection. Do the next tiny step right now."

    for subject in subjects:
        name = subject.name.lower()
        if name and name in text:
            return f"For {name}: write 3 key ideas, a 15-line demo, and 3 flashcards (definition, application, trap)."

    return USAGE_HINT
