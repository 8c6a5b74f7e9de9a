from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, TextIO

from statsbomb_eventlog.errors import EventLogError
from statsbomb_eventlog.events.enums import feed_name, parse_event_category
from statsbomb_eventlog.events.log import EventLog
from statsbomb_eventlog.ingest.loader import download_all_events

logger = logging.getLogger(__name__)


def apply_filters(
    events: EventLog,
    *,
    category: str | None = None,
    team: str | None = None,
    player: str | None = None,
) -> EventLog:
    if category is not None:
        events = events.filter_by_category(parse_event_category(category))
    if team is not None:
        events = events.filter_by_team(team)
    if player is not None:
        events = events.filter_by_player(player)
    return events


def print_summary(events: EventLog, out: TextIO) -> None:
    out.write(f"{len(events)} events\n")
    counts = events.category_counts()
    for category, count in sorted(counts.items(), key=lambda item: (-item[1], feed_name(item[0]))):
        out.write(f"{count:>8}  {feed_name(category)}\n")


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="statsbomb-eventlog",
        description=(
            "Load StatsBomb open-data event files (match ids, URLs or local paths), "
            "filter them and print a per-category summary."
        ),
    )
    parser.add_argument(
        "matches",
        nargs="+",
        help="Match id (resolved against STATSBOMB_EVENTS_BASE_URL), events URL or JSON file",
    )
    parser.add_argument("--category", help="Keep only events of this type, e.g. 'Pass' or '50/50'")
    parser.add_argument("--team", help="Keep only events by this team")
    parser.add_argument("--player", help="Keep only events by this player")
    parser.add_argument(
        "--completion-order",
        action="store_true",
        help="Concatenate matches as their downloads finish instead of in the order given.",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip matches that fail to load instead of aborting (default: abort).",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip malformed event records instead of rejecting the whole match.",
    )
    parser.add_argument("--workers", type=int, default=None, help="Concurrent downloads")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        events = download_all_events(
            args.matches,
            max_workers=args.workers,
            ordered=not args.completion_order,
            stop_on_error=not args.keep_going,
            strict=not args.skip_invalid,
            show_progress=args.progress,
        )
    except EventLogError as exc:
        logger.error("Loading failed: %s", exc)
        return 1

    events = apply_filters(events, category=args.category, team=args.team, player=args.player)
    print_summary(events, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
