"""Models for food recognition results."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

OUTCOME_OK = "ok"
OUTCOME_PARSE_ERROR = "parse_error"
OUTCOME_NETWORK_ERROR = "network_error"


class RecognizedItem(BaseModel):
    """Single food detected in an image."""

    name: str
    confidence: float = Field(ge=0.0, le=1.0)


@dataclass(frozen=True)
class EncodedImage:
    """Image payload encoded once and shared by every provider."""

    raw: bytes
    base64: str
    mime_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


@dataclass(frozen=True)
class ProviderOutcome:
    """Tagged result of a single recognition provider call."""

    provider: str
    status: str
    items: list[RecognizedItem] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == OUTCOME_OK
