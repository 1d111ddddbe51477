import pytest

from edgeboard.models.entry import ContentKind
from edgeboard.services.classifier import classify


@pytest.mark.parametrize(
    "content, expected",
    [
        ("https://example.com", ContentKind.URL),
        ("http://localhost:8000/path", ContentKind.URL),
        ("import os", ContentKind.CODE),
        ("func main() -> Int", ContentKind.CODE),
        ("x = {'a': 1}", ContentKind.CODE),
        ("/usr/local/bin/python3.12", ContentKind.PATH),
        ("src/edgeboard/main.py", ContentKind.PATH),
        ("hello world", ContentKind.TEXT),
        ("", ContentKind.TEXT),
        ("a much longer sentence that keeps going", ContentKind.DOCUMENT),
        ("two\nlines", ContentKind.DOCUMENT),
    ],
)
def test_classify_rules(content, expected):
    assert classify(content) == expected


def test_url_rule_wins_over_code_and_path():
    assert classify("https://a.com/import func{}") == ContentKind.URL


def test_code_rule_wins_over_path():
    assert classify("lib/{name}.py") == ContentKind.CODE


def test_path_requires_no_whitespace():
    # has "/" and "." but a space, and is short
    assert classify("a/b. c") == ContentKind.TEXT
    assert classify("a/b.md\tx") == ContentKind.TEXT


def test_url_prefix_must_be_at_start():
    assert classify(" https://example.com") != ContentKind.URL


def test_classify_is_stable():
    samples = ["https://x.y", "import re", "a/b.c", "short", "x" * 40]
    first = [classify(s) for s in samples]
    for _ in range(3):
        assert [classify(s) for s in samples] == first
