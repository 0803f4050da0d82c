import pytest
from unittest.mock import AsyncMock, patch
from app.core.errors import CoordinatesNotFoundError, MissingUrlError, UpstreamFetchError
from app.resolver import MapsResolver


@pytest.mark.asyncio
@pytest.mark.parametrize("url", [None, "", "   "])
async def test_missing_url_fails_fast(url):
    with patch(
        "app.fetch.maps_client.MapsClient.fetch_html", new_callable=AsyncMock
    ) as mock_fetch:
        with pytest.raises(MissingUrlError):
            await MapsResolver().resolve(url)
    mock_fetch.assert_not_called()


@pytest.mark.asyncio
async def test_single_fetch_for_plain_url():
    url = "https://www.google.com/maps/search/somewhere"
    with patch(
        "app.fetch.maps_client.MapsClient.fetch_html", new_callable=AsyncMock
    ) as mock_fetch, patch(
        "app.fetch.maps_client.MapsClient.resolve_redirect", new_callable=AsyncMock
    ) as mock_probe:
        mock_fetch.return_value = '<meta content="x" property="og:image"> data=!3d51.5!4d-0.12'
        result = await MapsResolver().resolve(url)

    assert result == {"lat": 51.5, "lng": -0.12, "image": "x"}
    assert mock_fetch.await_count == 1
    mock_probe.assert_not_called()


@pytest.mark.asyncio
async def test_place_info_discarded_without_coordinates():
    with patch(
        "app.fetch.maps_client.MapsClient.fetch_html", new_callable=AsyncMock
    ) as mock_fetch:
        mock_fetch.return_value = "<title>Example Place - Google Maps</title>"
        with pytest.raises(CoordinatesNotFoundError):
            await MapsResolver().resolve("https://www.google.com/maps/search/x")


@pytest.mark.asyncio
async def test_fetch_error_propagates():
    with patch(
        "app.fetch.maps_client.MapsClient.fetch_html", new_callable=AsyncMock
    ) as mock_fetch:
        mock_fetch.side_effect = UpstreamFetchError("timeout")
        with pytest.raises(UpstreamFetchError):
            await MapsResolver().resolve("https://www.google.com/maps/search/x")
    assert mock_fetch.await_count == 1


@pytest.mark.asyncio
async def test_url_is_stripped_before_matching():
    result = await MapsResolver().resolve("  https://maps.google.com/?q=-6.2,106.816  ")
    assert result == {"lat": -6.2, "lng": 106.816}
