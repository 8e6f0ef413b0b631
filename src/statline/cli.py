"""Command-line interface for parsing stat sheets and building display rows."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from statline.config import Settings, get_sport
from statline.fetch import fetch_first_valid, has_min_text
from statline.ingest import load_players
from statline.models import STAT_RECORD_LIST
from statline.parsers import ParseResult, fetch_payload, fetch_team_id
from statline.pdf import is_pdf
from statline.pipeline import DisplayRow, build_display, parse_document, parse_payload
from statline.summary import format_cat_value


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse a stat sheet and reconcile it against a roster")
    parser.add_argument("sport", help="Sport key (e.g., baseball, mens-basketball, football)")
    parser.add_argument(
        "sources",
        nargs="*",
        default=[],
        help="Local PDF path, or candidate URLs tried in order",
    )
    parser.add_argument("--family", default="sidearm", help="Document family (sidearm or fused)")
    parser.add_argument("--wmt", default=None, help="WMT team id, API URL or stats page URL")
    parser.add_argument("--wmt-payload", type=Path, default=None, help="Saved WMT API JSON payload")
    parser.add_argument("--roster", type=Path, default=None, help="Roster CSV or JSON file")
    parser.add_argument(
        "--roster-column",
        action="append",
        default=[],
        help="Mapping for roster columns (e.g., name=First Name|Last Name)",
    )
    parser.add_argument("--min-gap", type=int, default=None, help="Collapse runs of this many empty slots")
    parser.add_argument("--output", type=Path, default=None, help="Write parsed records as JSON")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write a parse and match summary JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args()


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _load_result(args: argparse.Namespace, settings: Settings) -> tuple[ParseResult, str]:
    sport = get_sport(args.sport)
    if args.wmt_payload:
        payload = json.loads(args.wmt_payload.read_text(encoding="utf-8"))
        return parse_payload(sport.key, payload), str(args.wmt_payload)
    if args.wmt:
        team_id = args.wmt if args.wmt.isdigit() else fetch_team_id(args.wmt, settings=settings)
        return parse_payload(sport.key, fetch_payload(team_id, settings=settings)), f"wmt:{team_id}"
    if not args.sources:
        raise SystemExit("Provide a PDF path, candidate URLs, --wmt or --wmt-payload")
    if all(_is_url(source) for source in args.sources):
        validator = has_min_text(sport.min_text_length) if sport.min_text_length else is_pdf
        fetched = fetch_first_valid(args.sources, validator, settings=settings)
        return parse_document(sport.key, fetched.content, args.family, settings=settings), fetched.url
    path = Path(args.sources[0])
    return parse_document(sport.key, path.read_bytes(), args.family, settings=settings), str(path)


def _describe(row: DisplayRow) -> str:
    name = row.athlete.roster.full_name if row.athlete is not None else ""
    stats = "  ".join(text for text in (format_cat_value(stat) for stat in row.cat_stats) if text)
    return f"{row.slot:>3}  #{row.display_jersey:<3} {name:<28} {stats}".rstrip()


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    settings = Settings.from_env()

    result, source = _load_result(args, settings)
    print(f"Parsed {len(result.records)} record(s) from {source}")
    for warning in result.warnings:
        print(f"Warning: {warning}")
    if result.info is not None and result.info.team_name:
        record = f" ({result.info.record})" if result.info.record else ""
        print(f"Team: {result.info.team_name}{record}")

    if args.output:
        args.output.write_bytes(STAT_RECORD_LIST.dump_json(list(result.records), indent=2))
        print(f"Wrote records to {args.output}")

    report_payload: dict[str, object] = {
        "source": source,
        "records": len(result.records),
        "warnings": list(result.warnings),
    }

    if args.roster:
        roster = load_players(args.roster, mapping=_parse_mapping(args.roster_column) or None)
        display = build_display(args.sport, roster, result.records, min_gap=args.min_gap, settings=settings)
        print(f"Matched {display.matched_count}/{len(roster)} roster players with stats")
        for item in display.items:
            if isinstance(item, DisplayRow):
                print(_describe(item))
            else:
                print(f"      ... {item.count} empty slots from {item.start_row} ...")
        if display.inactive:
            names = ", ".join(athlete.roster.full_name for athlete in display.inactive)
            print(f"Inactive: {names}")
        if display.unmatched_names:
            preview = ", ".join(display.unmatched_names[:5])
            more = len(display.unmatched_names) - 5
            suffix = f", +{more} more" if more > 0 else ""
            print(f"Stat rows without roster players: {preview}{suffix}")
        report_payload.update(
            {
                "roster_players": len(roster),
                "matched_players": display.matched_count,
                "inactive": [athlete.roster.full_name for athlete in display.inactive],
                "unmatched_records": display.unmatched_names,
            }
        )

    if args.report:
        args.report.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")
        print(f"Wrote report to {args.report}")


if __name__ == "__main__":
    main()
