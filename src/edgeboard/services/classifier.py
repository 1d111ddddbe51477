from edgeboard.models.entry import ContentKind

_CODE_MARKERS = ("import ", "func ", "{")


def classify(content: str) -> ContentKind:
    """Tag clipboard text with a content kind.

    Rules are checked in order and the first match wins, so code snippets
    containing ``/`` or short code never fall through to PATH or TEXT.
    """
    if content.startswith(("http://", "https://")):
        return ContentKind.URL
    if any(marker in content for marker in _CODE_MARKERS):
        return ContentKind.CODE
    if "/" in content and "." in content and not any(ch.isspace() for ch in content):
        return ContentKind.PATH
    if len(content) < 20 and "\n" not in content:
        return ContentKind.TEXT
    return ContentKind.DOCUMENT
