from edgeboard.config import PREVIEW_CODE_LIMIT, PREVIEW_TEXT_LIMIT
from edgeboard.models.entry import ClipboardEntry, ContentKind

ELLIPSIS = "…"

_LINK_STYLE = "color:#8b5cf6;text-decoration:underline;"
_CODE_STYLE = (
    "background:rgba(99,102,241,0.08);padding:8px 12px;"
    "border-radius:8px;font-size:12px;overflow-x:auto;"
)
_PATH_STYLE = "color:#34C759;"
_THUMBNAIL_STYLE = (
    "max-width:60px;max-height:40px;border-radius:6px;"
    "box-shadow:0 2px 8px rgba(0,0,0,0.12);"
)


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def _text_preview(content: str, limit: int) -> str:
    return f"<span>{truncate(content, limit)}</span>"


def render_preview(
    entry: ClipboardEntry,
    text_limit: int = PREVIEW_TEXT_LIMIT,
    code_limit: int = PREVIEW_CODE_LIMIT,
) -> str:
    """Markup snippet shown for ``entry`` in the history panel."""
    content = entry.content
    kind = entry.kind

    if kind == ContentKind.URL:
        return f"<a href='{content}' target='_blank' style='{_LINK_STYLE}'>{content}</a>"
    if kind == ContentKind.CODE:
        code = content.replace("<", "&lt;").replace(">", "&gt;")
        return f"<pre style='{_CODE_STYLE}'>{code[:code_limit]}</pre>"
    if kind in (ContentKind.TEXT, ContentKind.DOCUMENT):
        return _text_preview(content, text_limit)
    if kind == ContentKind.PATH:
        return f"<span style='{_PATH_STYLE}'>{content}</span>"

    if content.startswith("data:image/"):
        return f"<img src='{content}' style='{_THUMBNAIL_STYLE}' />"
    return _text_preview(content, text_limit)
