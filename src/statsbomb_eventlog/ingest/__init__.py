from __future__ import annotations

from .fetch import fetch_events, resolve_source
from .loader import MatchResult, collect_match_results, download_all_events, load_match

__all__ = [
    "MatchResult",
    "collect_match_results",
    "download_all_events",
    "fetch_events",
    "load_match",
    "resolve_source",
]
