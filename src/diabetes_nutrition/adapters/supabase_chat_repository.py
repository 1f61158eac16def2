"""Supabase repository for chat messages."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from diabetes_nutrition.domain.meals import ChatExchange
from diabetes_nutrition.services.chat_history import ChatMessageRepository


@dataclass
class SupabaseChatMessageRepository(ChatMessageRepository):
    """Supabase implementation for chat messages."""

    client: Client

    def create(
        self, user_id: str, message: str, is_from_user: bool, created_at: datetime
    ) -> ChatExchange:
        """Insert a chat message row and return it."""
        response = (
            self.client.table("chat_messages")
            .insert(
                {
                    "user_id": user_id,
                    "message": message,
                    "is_user": is_from_user,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store chat message")
        return _parse_message(response.data[0])

    def list_by_user(self, user_id: str) -> list[ChatExchange]:
        """Return a user's chat messages oldest first."""
        response = (
            self.client.table("chat_messages")
            .select("id, user_id, message, is_user, created_at")
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_message(row) for row in response.data or []]


def _parse_message(row: dict[str, object]) -> ChatExchange:
    return ChatExchange(
        id=int(row["id"]),
        user_id=str(row["user_id"]),
        message=str(row.get("message", "")),
        is_from_user=bool(row.get("is_user")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
