"""Environment-driven settings for fetching StatsBomb event files."""

from __future__ import annotations

import os

EVENTS_BASE_URL_ENV = "STATSBOMB_EVENTS_BASE_URL"
HTTP_TIMEOUT_ENV = "STATSBOMB_HTTP_TIMEOUT"
MAX_WORKERS_ENV = "STATSBOMB_MAX_WORKERS"
GITHUB_TOKEN_ENV = "GITHUB_TOKEN"

DEFAULT_EVENTS_BASE_URL = (
    "https://raw.githubusercontent.com/statsbomb/open-data/master/data/events"
)
DEFAULT_TIMEOUT_SECONDS = 30.0
USER_AGENT = "statsbomb-eventlog/ingest"


def get_events_base_url() -> str:
    """Return the directory URL that match ids are resolved against."""
    return os.getenv(EVENTS_BASE_URL_ENV, DEFAULT_EVENTS_BASE_URL).rstrip("/")


def get_request_timeout() -> float:
    value = os.getenv(HTTP_TIMEOUT_ENV)
    if value is None or not value.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ValueError(f"{HTTP_TIMEOUT_ENV} must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"{HTTP_TIMEOUT_ENV} must be positive, got {value!r}")
    return timeout


def default_worker_count() -> int:
    cpu_count = os.cpu_count() or 1
    return max(4, min(32, cpu_count * 2))


def get_max_workers() -> int:
    value = os.getenv(MAX_WORKERS_ENV)
    if value is None or not value.strip():
        return default_worker_count()
    try:
        workers = int(value)
    except ValueError as exc:
        raise ValueError(f"{MAX_WORKERS_ENV} must be an integer, got {value!r}") from exc
    if workers < 1:
        raise ValueError(f"{MAX_WORKERS_ENV} must be at least 1, got {value!r}")
    return workers


def request_headers(extra: dict[str, str] | None = None) -> dict[str, str]:
    headers = {"User-Agent": USER_AGENT}
    token = os.environ.get(GITHUB_TOKEN_ENV)
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if extra:
        headers.update(extra)
    return headers


__all__ = [
    "DEFAULT_EVENTS_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "EVENTS_BASE_URL_ENV",
    "GITHUB_TOKEN_ENV",
    "HTTP_TIMEOUT_ENV",
    "MAX_WORKERS_ENV",
    "default_worker_count",
    "get_events_base_url",
    "get_max_workers",
    "get_request_timeout",
    "request_headers",
]
