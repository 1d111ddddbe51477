from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


class PublishedEntry(BaseModel):
    """Wire shape of one history row handed to the presentation layer."""
    id: str
    content: str
    kind: str
    relativeTime: str
    byteSizeLabel: str
    preview: str
    sensitive: bool = False


class HistoryStats(BaseModel):
    totalItems: int = 0
    byKind: Dict[str, int] = Field(default_factory=dict)
    totalBytes: int = 0
    oldest: Optional[datetime] = None
    newest: Optional[datetime] = None
