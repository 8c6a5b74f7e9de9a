"""Concurrent fetch-and-decode of several match documents into one log."""

from __future__ import annotations

import contextlib
import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from tqdm import tqdm

from statsbomb_eventlog.config import get_max_workers
from statsbomb_eventlog.events.decode import decode
from statsbomb_eventlog.events.log import EventLog
from statsbomb_eventlog.ingest.fetch import MatchIdentifier, fetch_events

logger = logging.getLogger(__name__)

Fetcher = Callable[[MatchIdentifier], bytes]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of loading one source: a decoded log or the error that stopped it."""

    source: MatchIdentifier
    log: EventLog | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_match(
    identifier: MatchIdentifier, *, fetcher: Fetcher = fetch_events, strict: bool = True
) -> EventLog:
    return decode(fetcher(identifier), strict=strict)


def _load_one(identifier: MatchIdentifier, fetcher: Fetcher, strict: bool) -> MatchResult:
    try:
        return MatchResult(identifier, log=load_match(identifier, fetcher=fetcher, strict=strict))
    except Exception as exc:
        return MatchResult(identifier, error=exc)


def _iter_results(
    identifiers: Iterable[MatchIdentifier],
    *,
    fetcher: Fetcher,
    max_workers: int | None,
    ordered: bool,
    strict: bool,
    show_progress: bool,
) -> Iterator[MatchResult]:
    sources = list(identifiers)
    if not sources:
        return

    workers = min(max_workers or get_max_workers(), len(sources))
    executor = ThreadPoolExecutor(max_workers=workers)
    try:
        futures: dict[Future, MatchIdentifier] = {
            executor.submit(_load_one, source, fetcher, strict): source for source in sources
        }
        pending: Iterable[Future] = list(futures) if ordered else as_completed(futures)
        with tqdm(
            total=len(futures), desc="Loading events", unit="match", disable=not show_progress
        ) as progress:
            for future in pending:
                result = future.result()
                progress.update(1)
                yield result
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


def collect_match_results(
    identifiers: Iterable[MatchIdentifier],
    *,
    fetcher: Fetcher = fetch_events,
    max_workers: int | None = None,
    ordered: bool = True,
    strict: bool = True,
    show_progress: bool = False,
) -> list[MatchResult]:
    """Load every source and report each one's log or error.

    Failures never stop the batch. With ``ordered`` the results follow the
    order of ``identifiers``; otherwise they come back as loads complete.
    """

    return list(
        _iter_results(
            identifiers,
            fetcher=fetcher,
            max_workers=max_workers,
            ordered=ordered,
            strict=strict,
            show_progress=show_progress,
        )
    )


def download_all_events(
    identifiers: Iterable[MatchIdentifier],
    *,
    fetcher: Fetcher = fetch_events,
    max_workers: int | None = None,
    ordered: bool = True,
    stop_on_error: bool = True,
    strict: bool = True,
    show_progress: bool = False,
) -> EventLog:
    """Fetch and decode several matches concurrently and concatenate their events.

    Each match's events stay in feed order. With ``ordered`` (the default) the
    matches are concatenated in the order given, so the result is the same on
    every run; ``ordered=False`` concatenates them as their loads complete.

    With ``stop_on_error`` the first failed source aborts the whole load and its
    error is raised. Otherwise failures are logged and left out.
    """

    events = EventLog()
    loaded = 0
    failures: list[str] = []

    results = _iter_results(
        identifiers,
        fetcher=fetcher,
        max_workers=max_workers,
        ordered=ordered,
        strict=strict,
        show_progress=show_progress,
    )
    with contextlib.closing(results):
        for result in results:
            if result.ok and result.log is not None:
                events.extend(result.log)
                loaded += 1
                continue

            msg = f"✗ Failed for {result.source}: {result.error}"
            logger.error(msg)
            if stop_on_error and result.error is not None:
                raise result.error
            failures.append(msg)

    logger.info("Done. Matches loaded: %s. Events: %s", loaded, len(events))
    if failures:
        logger.error("Some matches failed:")
        for failure in failures:
            logger.error("- %s", failure)
    return events


__all__ = [
    "Fetcher",
    "MatchResult",
    "collect_match_results",
    "download_all_events",
    "load_match",
]
