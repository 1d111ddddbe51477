from datetime import datetime
from typing import Optional


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def relative_time(created_at: datetime, now: Optional[datetime] = None) -> str:
    diff = ((now or datetime.now()) - created_at).total_seconds()
    if diff < 1:
        return "just now"
    if diff < 60:
        return _plural(int(diff), "second")
    if diff < 3600:
        return _plural(int(diff // 60), "minute")
    if diff < 86400:
        return _plural(int(diff // 3600), "hour")
    if diff < 172800:
        return "yesterday"
    return _plural(int(diff // 86400), "day")


def byte_size_label(size: int) -> str:
    return f"{size} bytes"
