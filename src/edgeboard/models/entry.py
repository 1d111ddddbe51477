from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from ulid import ULID


class ContentKind(str, Enum):
    TEXT = "TEXT"
    URL = "URL"
    CODE = "CODE"
    PATH = "PATH"
    DOCUMENT = "DOCUMENT"


def new_entry_id(created_at: Optional[datetime] = None) -> str:
    return f"i_{ULID.from_datetime(created_at or datetime.now())}"


@dataclass(frozen=True)
class ClipboardEntry:
    """Immutable record of one clipboard capture."""
    content: str
    kind: ContentKind
    created_at: datetime = field(default_factory=datetime.now)
    id: str = ""
    byte_size: int = -1
    sensitive: bool = False

    def __post_init__(self) -> None:
        # frozen dataclass: derived fields are filled through object.__setattr__
        if not self.id:
            object.__setattr__(self, "id", new_entry_id(self.created_at))
        if self.byte_size < 0:
            object.__setattr__(self, "byte_size", len(self.content.encode("utf-8")))

    @classmethod
    def create(
        cls,
        content: str,
        kind: ContentKind,
        *,
        sensitive_keywords: Iterable[str] = (),
    ) -> "ClipboardEntry":
        lowered = content.lower()
        sensitive = any(word and word.lower() in lowered for word in sensitive_keywords)
        return cls(content=content, kind=kind, sensitive=sensitive)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "kind": self.kind.value,
            "createdAt": self.created_at.isoformat(),
            "byteSize": self.byte_size,
            "sensitive": self.sensitive,
        }
