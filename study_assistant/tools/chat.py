"""Chat assistant backed by Gemini, with the offline tutor as fallback."""
import logging
import os
from typing import Iterable, Optional

from google import genai
from google.genai import types

from study_assistant.models.state import ChatMessage
from study_assistant.models.subject import Subject
from study_assistant.tools.tutor import USAGE_HINT, local_tutor

logger = logging.getLogger(__name__)

CHAT_MODEL = "gemini-2.5-flash"
SYSTEM_PROMPT = "You are a concise, helpful study assistant."


def chat_reply(
    messages: list[ChatMessage],
    subjects: Iterable[Subject] = (),
    api_key: Optional[str] = None,
) -> str:
    """
    Reply to the latest message of a conversation.

    Uses Gemini when GOOGLE_API_KEY (or `api_key`) is set. Without a key, or
    when the request fails, answers with the offline tutor instead.

    Args:
        messages: Conversation so far, oldest first
        subjects: Current subjects, used by the offline tutor
        api_key: Overrides GOOGLE_API_KEY

    Returns:
        Reply text
    """
    subjects = list(subjects)
    last_user = next((m.text for m in reversed(messages) if m.role == "user"), "")
    if not last_user.strip():
        return USAGE_HINT

    api_key = api_key or os.getenv("GOOGLE_API_KEY")
    if not api_key:
        return local_tutor(last_user, subjects)

    client = genai.Client(api_key=api_key)
    contents = [
        types.Content(
            role="model" if m.role == "assistant" else "user",
            parts=[types.Part(text=m.text)],
        )
        for m in messages
    ]

    try:
        response = client.models.generate_content(
            model=CHAT_MODEL,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_PROMPT,
                temperature=0.4,
            ),
        )
        text = (response.text or "").strip()
    except Exception as e:
        logger.warning(f"Chat request failed, using offline tutor: {e}")
        return local_tutor(last_user, subjects)

    return text or local_tutor(last_user, subjects)
