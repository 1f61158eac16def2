"""Chat history persistence."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from diabetes_nutrition.domain.meals import ChatExchange


class ChatMessageRepository(Protocol):
    """Persistence interface for chat messages."""

    def create(
        self, user_id: str, message: str, is_from_user: bool, created_at: datetime
    ) -> ChatExchange:
        """Store a chat message and return it with its id."""

    def list_by_user(self, user_id: str) -> list[ChatExchange]:
        """Return a user's chat messages in insertion order."""


@dataclass
class ChatHistoryService:
    """Service that records chat turns for identified users."""

    repository: ChatMessageRepository

    def record_turn(
        self, user_id: str, message: str, answer: str
    ) -> tuple[ChatExchange, ChatExchange]:
        """Store the user message and the assistant answer."""
        now = datetime.now(tz=UTC)
        question = self.repository.create(user_id, message, True, now)
        reply = self.repository.create(user_id, answer, False, now)
        return question, reply

    def history(self, user_id: str) -> list[ChatExchange]:
        """Return the user's messages oldest first."""
        messages = self.repository.list_by_user(user_id)
        return sorted(messages, key=lambda message: (message.created_at, message.id))
