from __future__ import annotations

from pathlib import Path
from typing import Union
from urllib.parse import urlparse

import requests

from statsbomb_eventlog.config import get_events_base_url, get_request_timeout, request_headers
from statsbomb_eventlog.errors import FetchError

MatchIdentifier = Union[int, str, Path]


def is_url(value: str) -> bool:
    return urlparse(value).scheme in {"http", "https"}


def resolve_source(identifier: MatchIdentifier) -> str:
    """Map a match id, URL or path to the location it is read from.

    Bare match ids are resolved against the configured events directory, e.g.
    ``3775620`` becomes ``<base>/3775620.json``.
    """

    if isinstance(identifier, bool):
        raise TypeError("match identifiers must be ints, strings or paths")
    if isinstance(identifier, int):
        return f"{get_events_base_url()}/{identifier}.json"
    if isinstance(identifier, Path):
        return str(identifier)
    text = identifier.strip()
    if text.isdigit():
        return f"{get_events_base_url()}/{text}.json"
    return text


def fetch_events(identifier: MatchIdentifier) -> bytes:
    """Return the raw bytes of one match's events file.

    Any transport or availability problem raises :class:`FetchError`; nothing
    is retried.
    """

    source = resolve_source(identifier)
    if is_url(source):
        return _download(source)
    return _read_local(Path(source).expanduser())


def _download(url: str) -> bytes:
    try:
        response = requests.get(url, headers=request_headers(), timeout=get_request_timeout())
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(
            f"Could not download StatsBomb events from {url}: {exc}", source=url
        ) from exc
    return response.content


def _read_local(path: Path) -> bytes:
    if not path.is_file():
        raise FetchError(f"Event file not found: {path}", source=str(path))
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FetchError(f"Could not read event file {path}: {exc}", source=str(path)) from exc


__all__ = ["MatchIdentifier", "fetch_events", "is_url", "resolve_source"]
