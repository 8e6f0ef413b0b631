import httpx
import pytest

from statline.config import Settings
from statline.errors import SourceUnavailable
from statline.fetch import fetch_first_valid, has_min_text
from tests.pdf_builder import build_pdf

PDF = build_pdf([[(40, 700, "2025 Riverton College Baseball")]])


def _client(responses, seen):
    def handler(request):
        url = str(request.url)
        seen.append(url)
        status, content = responses[url]
        return httpx.Response(status, content=content)

    return httpx.Client(transport=httpx.MockTransport(handler))


def test_first_valid_candidate_wins_and_later_ones_are_skipped():
    seen = []
    responses = {
        "https://a.test/stats.pdf": (404, b""),
        "https://b.test/stats.pdf": (200, b"<html>login</html>"),
        "https://c.test/stats.pdf": (200, PDF),
        "https://d.test/stats.pdf": (200, PDF),
    }

    with _client(responses, seen) as client:
        result = fetch_first_valid(list(responses), client=client, settings=Settings())

    assert result.url == "https://c.test/stats.pdf"
    assert result.content == PDF
    assert result.attempted == seen == list(responses)[:3]


def test_all_candidates_failing_raises_with_attempts():
    seen = []
    responses = {
        "https://a.test/stats.pdf": (500, b""),
        "https://b.test/stats.pdf": (200, b"not a pdf"),
    }

    with _client(responses, seen) as client:
        with pytest.raises(SourceUnavailable) as excinfo:
            fetch_first_valid(list(responses), client=client, settings=Settings())

    assert excinfo.value.attempted == list(responses)
    assert "failed validation" in excinfo.value.reason


def test_empty_candidate_list_raises():
    with pytest.raises(SourceUnavailable) as excinfo:
        fetch_first_valid([])
    assert excinfo.value.attempted == []


def test_has_min_text_checks_extracted_length():
    assert has_min_text(10)(PDF)
    assert not has_min_text(500)(PDF)
    assert not has_min_text(0)(b"<html></html>")


def test_custom_validator_is_applied():
    seen = []
    responses = {
        "https://a.test/stats.pdf": (200, PDF),
        "https://b.test/long.pdf": (200, build_pdf([[(40, 700 - 12 * i, "x" * 40) for i in range(5)]])),
    }

    with _client(responses, seen) as client:
        result = fetch_first_valid(list(responses), has_min_text(100), client=client, settings=Settings())

    assert result.url == "https://b.test/long.pdf"
