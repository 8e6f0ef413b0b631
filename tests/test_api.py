import pytest
from httpx import ASGITransport, AsyncClient

from statline.api import create_app
from statline.config import Settings
from tests.pdf_builder import build_pdf


@pytest.fixture
async def client():
    app = create_app(Settings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _football_pdf() -> bytes:
    lines = [
        "2025 Riverton College Football",
        "# Rushing",
        "22 Brown, Tom 10 120 600 20 580 4.8 6 45 58.0",
    ]
    return build_pdf([[(40, 740 - 14 * index, line) for index, line in enumerate(lines)]])


def _wmt_player(first, last, jersey, stats):
    return {
        "first_name": first,
        "last_name": last,
        "jersey_no": jersey,
        "statistic": {"data": {"season": {"columns": [{"statistic": stats}]}}},
    }


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_sports_lists_configuration(client: AsyncClient):
    resp = await client.get("/sports")
    assert resp.status_code == 200
    sports = {item["key"]: item for item in resp.json()}
    assert sports["football"]["summary_columns"] == 5
    assert sports["baseball"]["document_families"] == ["sidearm", "fused"]
    assert sports["mens-soccer"]["supports_wmt"] is False


@pytest.mark.anyio
async def test_parse_endpoint_reads_pdf(client: AsyncClient):
    files = {"document": ("stats.pdf", _football_pdf(), "application/pdf")}
    resp = await client.post("/parse", files=files, data={"sport": "football"})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["source"] == "stats.pdf"
    assert payload["info"]["team_name"] == "Riverton College"
    (record,) = payload["records"]
    assert record["sport"] == "football"
    assert record["name"] == "Brown, Tom"
    assert record["rushing"]["att"] == 120


@pytest.mark.anyio
async def test_parse_endpoint_rejects_bad_input(client: AsyncClient):
    empty = await client.post("/parse", files={"document": ("stats.pdf", b"", "application/pdf")}, data={"sport": "football"})
    assert empty.status_code == 400

    unknown = await client.post(
        "/parse",
        files={"document": ("stats.pdf", _football_pdf(), "application/pdf")},
        data={"sport": "curling"},
    )
    assert unknown.status_code == 400
    assert "curling" in unknown.json()["detail"]

    wrong_family = await client.post(
        "/parse",
        files={"document": ("stats.pdf", _football_pdf(), "application/pdf")},
        data={"sport": "football", "family": "fused"},
    )
    assert wrong_family.status_code == 400


@pytest.mark.anyio
async def test_parse_wmt_inline_payload(client: AsyncClient):
    payload = {"data": [_wmt_player("Mary", "Lee", "7", {"sSets": 50, "sKills": 100, "sPoints": 120})]}

    resp = await client.post("/parse/wmt", json={"sport": "womens-volleyball", "payload": payload})

    assert resp.status_code == 200
    body = resp.json()
    assert body["source"] == "payload"
    assert body["records"][0]["name"] == "Mary Lee"
    assert body["records"][0]["k_per_set"] == pytest.approx(2.0)


@pytest.mark.anyio
async def test_parse_wmt_validation(client: AsyncClient):
    missing = await client.post("/parse/wmt", json={"sport": "womens-volleyball"})
    assert missing.status_code == 422

    soccer = await client.post("/parse/wmt", json={"sport": "mens-soccer", "payload": {"data": []}})
    assert soccer.status_code == 400


@pytest.mark.anyio
async def test_display_endpoint(client: AsyncClient):
    body = {
        "sport": "womens-basketball",
        "roster": [
            {"number": "12", "first_name": "John", "last_name": "Smith"},
            {"number": "0", "first_name": "Zed", "last_name": "Zero"},
        ],
        "records": [
            {"sport": "basketball", "jersey": "12", "name": "Smith, John", "gp": 20, "pts_avg": 13.0, "fg_pct": 0.5},
        ],
        "min_gap": 5,
    }

    resp = await client.post("/display", json=body)

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["matched_count"] == 1
    rows = [item for item in payload["items"] if item["type"] == "row"]
    assert [row["slot"] for row in rows] == [12, 90]
    smith = rows[0]
    assert smith["has_stats"] is True
    assert smith["formatted"] == ["13.0 PPG", "50% FG", ""]
    zero = rows[1]
    assert zero["display_jersey"] == "0"
    assert zero["player"]["last_name"] == "Zero"
    gaps = [item for item in payload["items"] if item["type"] == "gap"]
    assert gaps[0] == {"type": "gap", "count": 11, "start_row": 1}


@pytest.mark.anyio
async def test_display_endpoint_unknown_sport(client: AsyncClient):
    resp = await client.post("/display", json={"sport": "curling", "roster": []})
    assert resp.status_code == 400
