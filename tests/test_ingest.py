from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List

import pytest
import requests

from statsbomb_eventlog import config
from statsbomb_eventlog.errors import DecodeError, FetchError
from statsbomb_eventlog.ingest import (
    collect_match_results,
    download_all_events,
    fetch_events,
    resolve_source,
)
from statsbomb_eventlog.ingest import fetch as fetch_module


def _document(event_factory, prefix: str, count: int) -> bytes:
    return json.dumps(
        [event_factory(f"{prefix}-{index}", index, "Pressure") for index in range(1, count + 1)]
    ).encode("utf-8")


class _FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


def test_resolve_source_uses_configured_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.EVENTS_BASE_URL_ENV, "https://example.org/events/")

    assert resolve_source(3775620) == "https://example.org/events/3775620.json"
    assert resolve_source(" 42 ") == "https://example.org/events/42.json"
    assert resolve_source("https://host/x.json") == "https://host/x.json"
    assert resolve_source(Path("data/1.json")) == str(Path("data/1.json"))


def test_resolve_source_default_points_at_open_data(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(config.EVENTS_BASE_URL_ENV, raising=False)

    assert resolve_source(7) == f"{config.DEFAULT_EVENTS_BASE_URL}/7.json"


def test_fetch_events_reads_local_files(match_file: Path) -> None:
    assert fetch_events(match_file) == match_file.read_bytes()
    assert fetch_events(str(match_file)) == match_file.read_bytes()


def test_fetch_events_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FetchError) as excinfo:
        fetch_events(tmp_path / "missing.json")

    assert isinstance(excinfo.value, ConnectionError)


def test_fetch_events_downloads_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: List[Dict[str, Any]] = []

    def fake_get(url: str, **kwargs: Any) -> _FakeResponse:
        calls.append({"url": url, **kwargs})
        return _FakeResponse(b"[]")

    monkeypatch.setattr(fetch_module.requests, "get", fake_get)
    monkeypatch.setenv(config.EVENTS_BASE_URL_ENV, "https://example.org/events")
    monkeypatch.setenv(config.HTTP_TIMEOUT_ENV, "5")
    monkeypatch.setenv(config.GITHUB_TOKEN_ENV, "secret")

    assert fetch_events(15946) == b"[]"
    assert calls[0]["url"] == "https://example.org/events/15946.json"
    assert calls[0]["timeout"] == 5.0
    assert calls[0]["headers"]["Authorization"] == "Bearer secret"


@pytest.mark.parametrize(
    "failure",
    [
        requests.ConnectionError("connection refused"),
        requests.Timeout("timed out"),
    ],
)
def test_fetch_events_wraps_transport_errors(
    monkeypatch: pytest.MonkeyPatch, failure: Exception
) -> None:
    def fake_get(url: str, **kwargs: Any) -> _FakeResponse:
        raise failure

    monkeypatch.setattr(fetch_module.requests, "get", fake_get)

    with pytest.raises(FetchError) as excinfo:
        fetch_events("https://example.org/events/1.json")

    assert excinfo.value.source == "https://example.org/events/1.json"
    assert excinfo.value.__cause__ is failure


def test_fetch_events_wraps_http_status_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        fetch_module.requests, "get", lambda url, **kwargs: _FakeResponse(b"", status_code=404)
    )

    with pytest.raises(FetchError, match="404"):
        fetch_events("https://example.org/events/1.json")


def test_download_all_events_joins_in_submission_order(event_factory) -> None:
    documents = {"slow": _document(event_factory, "slow", 3), "fast": _document(event_factory, "fast", 2)}
    fast_done = threading.Event()

    def fetcher(source: str) -> bytes:
        if source == "slow":
            assert fast_done.wait(timeout=5)
        else:
            fast_done.set()
        return documents[source]

    log = download_all_events(["slow", "fast"], fetcher=fetcher, max_workers=2)

    assert [event.id for event in log] == ["slow-1", "slow-2", "slow-3", "fast-1", "fast-2"]


def test_download_all_events_completion_order_keeps_each_match_intact(event_factory) -> None:
    documents = {"a": _document(event_factory, "a", 3), "b": _document(event_factory, "b", 3)}

    log = download_all_events(["a", "b"], fetcher=documents.__getitem__, ordered=False)
    ids = [event.id for event in log]

    assert sorted(ids) == ["a-1", "a-2", "a-3", "b-1", "b-2", "b-3"]
    assert [i for i in ids if i.startswith("a")] == ["a-1", "a-2", "a-3"]
    assert [i for i in ids if i.startswith("b")] == ["b-1", "b-2", "b-3"]


def test_download_all_events_aborts_on_first_failure(event_factory) -> None:
    def fetcher(source: str) -> bytes:
        if source == "broken":
            raise FetchError("unavailable", source=source)
        return _document(event_factory, source, 1)

    with pytest.raises(FetchError, match="unavailable"):
        download_all_events(["ok", "broken", "ok-2"], fetcher=fetcher)


def test_download_all_events_aborts_on_decode_failure(event_factory) -> None:
    documents = {"ok": _document(event_factory, "ok", 1), "bad": b"{not json"}

    with pytest.raises(DecodeError):
        download_all_events(["ok", "bad"], fetcher=documents.__getitem__)


def test_download_all_events_can_skip_failed_sources(
    event_factory, caplog: pytest.LogCaptureFixture
) -> None:
    documents = {"ok": _document(event_factory, "ok", 2), "bad": b"{not json"}

    with caplog.at_level(logging.INFO, logger="statsbomb_eventlog.ingest.loader"):
        log = download_all_events(["ok", "bad"], fetcher=documents.__getitem__, stop_on_error=False)

    assert [event.id for event in log] == ["ok-1", "ok-2"]
    assert "Failed for bad" in caplog.text
    assert "Matches loaded: 1" in caplog.text


def test_download_all_events_with_no_sources() -> None:
    assert len(download_all_events([])) == 0


def test_collect_match_results_reports_every_source(event_factory) -> None:
    def fetcher(source: str) -> bytes:
        if source == "missing":
            raise FetchError("not found", source=source)
        return _document(event_factory, source, 1)

    results = collect_match_results(["m1", "missing", "m2"], fetcher=fetcher, max_workers=3)

    assert [result.source for result in results] == ["m1", "missing", "m2"]
    assert [result.ok for result in results] == [True, False, True]
    assert isinstance(results[1].error, FetchError)
    assert results[0].log is not None and len(results[0].log) == 1


def test_collect_match_results_keeps_going_after_unexpected_errors(event_factory) -> None:
    def fetcher(source: str) -> bytes:
        if source == "flaky":
            raise OSError("disk gone")
        return _document(event_factory, source, 1)

    results = collect_match_results(["m1", "flaky", "m2"], fetcher=fetcher, max_workers=3)

    assert [result.ok for result in results] == [True, False, True]
    assert isinstance(results[1].error, OSError)
    assert str(results[1].error) == "disk gone"


def test_download_all_events_skips_unexpected_errors_when_asked(event_factory) -> None:
    def fetcher(source: str) -> bytes:
        if source == "flaky":
            raise OSError("disk gone")
        return _document(event_factory, source, 1)

    log = download_all_events(["m1", "flaky", "m2"], fetcher=fetcher, stop_on_error=False)

    assert [event.id for event in log] == ["m1-1", "m2-1"]

    with pytest.raises(OSError, match="disk gone"):
        download_all_events(["m1", "flaky"], fetcher=fetcher)


def test_download_all_events_from_local_files(match_file: Path, tmp_path: Path, event_factory) -> None:
    second = tmp_path / "second.json"
    second.write_bytes(_document(event_factory, "second", 2))

    log = download_all_events([match_file, second])

    assert len(log) == 9
    assert log[-1].id == "second-2"


def test_config_rejects_invalid_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.HTTP_TIMEOUT_ENV, "soon")
    monkeypatch.setenv(config.MAX_WORKERS_ENV, "0")

    with pytest.raises(ValueError, match=config.HTTP_TIMEOUT_ENV):
        config.get_request_timeout()
    with pytest.raises(ValueError, match=config.MAX_WORKERS_ENV):
        config.get_max_workers()


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(config.HTTP_TIMEOUT_ENV, raising=False)
    monkeypatch.delenv(config.MAX_WORKERS_ENV, raising=False)
    monkeypatch.delenv(config.GITHUB_TOKEN_ENV, raising=False)

    assert config.get_request_timeout() == config.DEFAULT_TIMEOUT_SECONDS
    assert 4 <= config.get_max_workers() <= 32
    assert "Authorization" not in config.request_headers()
