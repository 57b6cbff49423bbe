"""Chat message models supplied by the chat session layer."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatSource(BaseModel):
    """A citation attached to an assistant answer.

    Attributes:
        text: Quoted passage from the source
        source: Where the passage came from (document name, URL)
        score: Retrieval relevance score, if the backend reports one
    """

    text: str
    source: str
    score: Optional[float] = None


class ChatMessage(BaseModel):
    """One message in a chat conversation.

    Attributes:
        id: Message identifier
        role: Who wrote the message
        content: Raw message body
        created_at: When the message was created
        sources: Citations (assistant messages only)
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    role: ChatRole
    content: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    sources: list[ChatSource] = Field(default_factory=list)

    @property
    def is_assistant(self) -> bool:
        return self.role is ChatRole.ASSISTANT
