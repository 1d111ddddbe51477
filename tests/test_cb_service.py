import time

from conftest import FakeClipboard, RecordingSink

from edgeboard.config import EdgeBoardConfig
from edgeboard.models.entry import ContentKind
from edgeboard.services.clipboard_service import ClipboardService
from edgeboard.services.history import HistoryStore
from edgeboard.services.sink import CallbackSink


def make_service(clipboard, sink=None, **config):
    return ClipboardService(
        backend=clipboard,
        sink=sink,
        config=EdgeBoardConfig(**config),
    )


def test_tick_records_url_and_publishes(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()
    assert service.store.count() == 0

    clipboard.copy("https://example.com")
    assert clipboard.count == 6
    assert service.tick() is True

    head = service.store.snapshot(1)[0]
    assert head.content == "https://example.com"
    assert head.kind == ContentKind.URL

    published = sink.published[-1]
    assert published[0].kind == "URL"
    assert "<a href='https://example.com'" in published[0].preview
    assert published[0].byteSizeLabel == "19 bytes"
    assert published[0].relativeTime == "just now"


def test_unchanged_counter_is_a_noop(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()

    clipboard.text = "changed without a counter bump"
    assert service.tick() is False
    assert service.store.count() == 0
    assert sink.published == []


def test_empty_change_updates_counter_without_insert(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()

    clipboard.copy("")
    assert service.tick() is False
    clipboard.text = "late text"
    assert service.tick() is False
    assert service.store.count() == 0

    clipboard.copy(None)
    assert service.tick() is False
    assert service.store.count() == 0


def test_read_failure_is_skipped_and_retried(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()

    clipboard.copy("hello")
    clipboard.fail = True
    assert service.tick() is False
    assert service.store.count() == 0

    clipboard.fail = False
    assert service.tick() is True
    assert service.store.count() == 1


def test_bootstrap_stores_text_kind_by_default():
    clipboard = FakeClipboard(count=3, text="https://example.com")
    service = make_service(clipboard)

    entry_id = service.bootstrap()

    assert service.store.get(entry_id).kind == ContentKind.TEXT
    assert service.tick() is False


def test_bootstrap_can_classify():
    clipboard = FakeClipboard(count=3, text="https://example.com")
    service = make_service(clipboard, classify_on_startup=True)

    entry_id = service.bootstrap()

    assert service.store.get(entry_id).kind == ContentKind.URL


def test_bootstrap_read_failure_is_tolerated():
    clipboard = FakeClipboard(count=3, text="hello")
    clipboard.fail = True
    service = make_service(clipboard)

    assert service.bootstrap() is None

    clipboard.fail = False
    assert service.tick() is True
    assert service.store.snapshot(1)[0].content == "hello"


def test_oversized_content_is_skipped(clipboard):
    service = make_service(clipboard, max_content_bytes=10)
    service.bootstrap()

    clipboard.copy("x" * 11)
    assert service.tick() is False
    clipboard.copy("x" * 10)
    assert service.tick() is True


def test_hidden_sink_is_not_published(clipboard):
    sink = RecordingSink(visible=False)
    service = make_service(clipboard, sink)
    service.bootstrap()

    clipboard.copy("hello")
    assert service.tick() is True
    assert sink.published == []

    service.show_panel()
    assert [e.content for e in sink.published[-1]] == ["hello"]

    service.hide_panel()
    clipboard.copy("again")
    service.tick()
    assert len(sink.published) == 1


def test_publish_is_limited_to_top_entries(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()

    for i in range(12):
        clipboard.copy(f"entry {i}")
        service.tick()

    latest = sink.published[-1]
    assert len(latest) == 10
    assert latest[0].content == "entry 11"


def test_clear_history_publishes_empty_snapshot(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()
    for text in ("a", "b", "c"):
        clipboard.copy(text)
        service.tick()

    service.clear_history()

    assert service.store.count() == 0
    assert service.store.snapshot(10) == []
    assert sink.published[-1] == []


def test_copy_entry_writes_back_and_moves_to_head(clipboard, sink):
    service = make_service(clipboard, sink)
    service.bootstrap()
    clipboard.copy("first")
    service.tick()
    clipboard.copy("second")
    service.tick()
    first = service.store.snapshot()[1]

    assert service.copy_entry(first.id) is True
    assert clipboard.writes == ["first"]

    assert service.tick() is True
    assert [e.content for e in service.store.snapshot()] == ["first", "second"]
    assert service.copy_entry("i_missing") is False


def test_failing_sink_does_not_break_polling(clipboard):
    def explode(entries):
        raise RuntimeError("webview gone")

    service = make_service(clipboard, CallbackSink(explode))
    service.bootstrap()

    clipboard.copy("hello")
    assert service.tick() is True
    assert service.store.count() == 1


def test_background_polling_start_stop(clipboard):
    service = make_service(clipboard, poll_interval=0.01)

    with service:
        assert service.is_running
        clipboard.copy("from another app")
        deadline = time.time() + 2.0
        while service.store.count() == 0 and time.time() < deadline:
            time.sleep(0.01)

    assert not service.is_running
    assert service.store.snapshot(1)[0].content == "from another app"

    clipboard.copy("after stop")
    time.sleep(0.05)
    assert service.store.count() == 1


def test_injected_empty_store_is_used(clipboard):
    store = HistoryStore(max_history=5)
    service = ClipboardService(backend=clipboard, store=store)

    assert service.store is store

    service.bootstrap()
    for i in range(7):
        clipboard.copy(f"entry {i}")
        service.tick()

    assert store.count() == 5
    assert store.snapshot(1)[0].content == "entry 6"
