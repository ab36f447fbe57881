import httpx
import pytest

from skypulse.ingestors.geocoding import GeocodingIngestor, country_flag, display_name


def _ingestor(handler) -> GeocodingIngestor:
    return GeocodingIngestor(
        base_url="http://test-geocoding", transport=httpx.MockTransport(handler)
    )


@pytest.mark.anyio
async def test_geocoding_search_parses_results():
    payload = {
        "results": [
            {
                "name": "Varanasi",
                "latitude": 25.31668,
                "longitude": 83.01041,
                "country": "India",
                "country_code": "IN",
                "admin1": "Uttar Pradesh",
            },
            {
                "name": "Varanasi",
                "latitude": 13.0,
                "longitude": 77.0,
                "country": "Atlantis",
                "country_code": "ZZ",
            },
        ]
    }

    def handler(request: httpx.Request):
        params = request.url.params
        assert params["name"] == "Varanasi"
        assert params["count"] == "6"
        assert params["language"] == "en"
        assert params["format"] == "json"
        return httpx.Response(200, json=payload)

    result = await _ingestor(handler).search("  Varanasi ")

    assert result.status == "ok"
    assert result.query == "Varanasi"
    assert len(result.results) == 2
    first, second = result.results
    assert first.display_name == "Varanasi, Uttar Pradesh, India"
    assert first.flag == "🇮🇳"
    assert second.display_name == "Varanasi, Atlantis"
    assert second.flag == "🌍"


@pytest.mark.anyio
async def test_geocoding_search_reports_no_results():
    result = await _ingestor(
        lambda request: httpx.Response(200, json={"generationtime_ms": 0.4})
    ).search("Nowhereville")

    assert result.status == "no_results"
    assert result.results == []


@pytest.mark.anyio
async def test_geocoding_search_reports_error_on_http_failure():
    result = await _ingestor(lambda request: httpx.Response(503, text="down")).search("Paris")

    assert result.status == "error"
    assert result.results == []


@pytest.mark.anyio
async def test_geocoding_search_reports_error_on_timeout():
    def handler(request: httpx.Request):
        raise httpx.ConnectTimeout("timeout", request=request)

    result = await _ingestor(handler).search("Paris")

    assert result.status == "error"


def test_display_helpers():
    assert display_name("Paris", None, "France") == "Paris, France"
    assert country_flag("us") == "🇺🇸"
    assert country_flag(None) == "🌍"
