"""
Chat-related Pydantic schemas.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator


DEFAULT_PARTNER_ROLE = "ceo"


class ChatRole(str, Enum):
    """Speaker of a chat turn."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """A single turn of the interview transcript."""
    role: ChatRole
    content: str

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value):
        # Any speaker other than system or user (e.g. "model") is the persona
        if isinstance(value, str) and value not in (ChatRole.SYSTEM.value, ChatRole.USER.value):
            return ChatRole.ASSISTANT
        return value


class ChatRequest(BaseModel):
    """Request for the persona's next reply. Carries the full transcript."""
    scenario_id: str
    partner_role: Optional[str] = DEFAULT_PARTNER_ROLE
    messages: List[ChatTurn] = []

    @field_validator("partner_role", mode="before")
    @classmethod
    def default_partner_role(cls, value):
        if value is None:
            return DEFAULT_PARTNER_ROLE
        return value


class ChatResponse(BaseModel):
    """Persona reply."""
    reply: str
    status: str
