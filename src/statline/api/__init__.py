"""REST API for parsing stat sheets and building display rows."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from statline.config import Settings, iter_sports
from statline.errors import SourceUnavailable, UnsupportedSport
from statline.parsers import ParseResult, fetch_payload, fetch_team_id
from statline.pipeline import DisplayReport, DisplayRow, build_display, parse_document, parse_payload
from statline.summary import format_cat_value

from .schemas import (
    DisplayRequest,
    DisplayResponse,
    DisplayRowResponse,
    DocumentInfoResponse,
    GapRowResponse,
    ParseResponse,
    SportResponse,
    WmtParseRequest,
)


logger = logging.getLogger(__name__)


def _parse_response(sport: str, source: str, result: ParseResult) -> ParseResponse:
    info = None
    if result.info is not None:
        info = DocumentInfoResponse(
            team_name=result.info.team_name,
            record=result.info.record,
            as_of=result.info.as_of,
        )
    return ParseResponse(
        sport=sport,
        source=source,
        records=list(result.records),
        warnings=list(result.warnings),
        info=info,
    )


def _row_response(row: DisplayRow) -> DisplayRowResponse:
    return DisplayRowResponse(
        slot=row.slot,
        display_jersey=row.display_jersey,
        player=row.athlete.roster if row.athlete is not None else None,
        has_stats=row.has_stats,
        cat_stats=row.cat_stats,
        formatted=[format_cat_value(stat) for stat in row.cat_stats],
    )


def _display_response(report: DisplayReport) -> DisplayResponse:
    items: list[DisplayRowResponse | GapRowResponse] = []
    for item in report.items:
        if isinstance(item, DisplayRow):
            items.append(_row_response(item))
        else:
            items.append(GapRowResponse(count=item.count, start_row=item.start_row))
    return DisplayResponse(
        sport=report.sport,
        items=items,
        inactive=[athlete.roster for athlete in report.inactive],
        unmatched_names=report.unmatched_names,
        matched_count=report.matched_count,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="statline")
    app.state.settings = settings or Settings.from_env()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/sports", response_model=list[SportResponse])
    async def sports() -> list[SportResponse]:
        return [
            SportResponse(
                key=sport.key,
                name=sport.name,
                family=sport.family,
                document_families=list(sport.document_families),
                supports_wmt=sport.supports_wmt,
                summary_columns=sport.summary_columns,
            )
            for sport in iter_sports()
        ]

    @app.post("/parse", response_model=ParseResponse)
    async def parse(
        document: UploadFile = File(...),
        sport: str = Form(...),
        family: str = Form("sidearm"),
    ) -> ParseResponse:
        data = await document.read()
        if not data:
            raise HTTPException(status_code=400, detail="document is empty")
        try:
            result = parse_document(sport, data, family, settings=app.state.settings)
        except (UnsupportedSport, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _parse_response(sport, document.filename or "upload", result)

    @app.post("/parse/wmt", response_model=ParseResponse)
    async def parse_wmt(request: WmtParseRequest) -> ParseResponse:
        payload: dict[str, Any] | None = request.payload
        source = "payload"
        try:
            if payload is None:
                team_id = request.team_id or fetch_team_id(request.url or "", settings=app.state.settings)
                payload = fetch_payload(team_id, settings=app.state.settings)
                source = f"wmt:{team_id}"
            result = parse_payload(request.sport, payload)
        except SourceUnavailable as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except (UnsupportedSport, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _parse_response(request.sport, source, result)

    @app.post("/display", response_model=DisplayResponse)
    async def display(request: DisplayRequest) -> DisplayResponse:
        try:
            report = build_display(
                request.sport,
                request.roster,
                request.records,
                min_gap=request.min_gap,
                settings=app.state.settings,
            )
        except (UnsupportedSport, ValueError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _display_response(report)

    return app

