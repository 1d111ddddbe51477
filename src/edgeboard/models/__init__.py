from edgeboard.models.entry import ClipboardEntry, ContentKind, new_entry_id
from edgeboard.models.schemas import HistoryStats, PublishedEntry

__all__ = [
    'ClipboardEntry',
    'ContentKind',
    'HistoryStats',
    'PublishedEntry',
    'new_entry_id',
]
