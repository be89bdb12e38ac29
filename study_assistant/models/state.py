"""Persisted assistant state: subjects, preferences and chat history."""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from study_assistant.models.subject import Preferences, Subject


class ChatMessage(BaseModel):
    """Single chat turn."""
    role: Literal["user", "assistant"] = "user"
    text: str

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: str) -> str:
        """Older state files use "bot" for assistant turns."""
        return "assistant" if v in ("assistant", "bot") else "user"


class StudyState(BaseModel):
    """Everything the assistant keeps between runs."""
    version: int = 1
    subjects: list[Subject] = Field(default_factory=list)
    preferences: Preferences = Field(default_factory=Preferences)
    chat: list[ChatMessage] = Field(default_factory=list)
    updated_at: str | None = None  # ISO timestamp
