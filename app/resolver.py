import logging
from app.core.errors import CoordinatesNotFoundError, MissingUrlError
from app.extract.coordinates import coordinate_extractor
from app.extract.place_info import place_extractor, place_name_from_url
from app.fetch.maps_client import maps_client

logger = logging.getLogger(__name__)


class MapsResolver:
    async def resolve(self, url: str, details: bool = False) -> dict:
        """
        Resolve a Google Maps link into a flat dict of coordinates and place info.

        1. Shortlinks are probed once for their redirect target.
        2. Coordinates are read from the URL when it carries them.
        3. Otherwise (or when details are requested) the page is fetched once
           and both coordinates and place info are read from the markup.
        """
        if not url or not url.strip():
            raise MissingUrlError()
        url = url.strip()

        final_url = url
        if maps_client.is_shortlink(url):
            final_url = await maps_client.resolve_redirect(url)

        coords = coordinate_extractor.from_url(final_url)
        info = {}

        if coords is None or details:
            html = await maps_client.fetch_html(final_url)
            if coords is None:
                coords = coordinate_extractor.from_html(html)
            info = place_extractor.extract(html)

        if coords is None:
            logger.info(f"No coordinates found for {final_url}")
            raise CoordinatesNotFoundError()

        if "name" not in info:
            name = place_name_from_url(final_url)
            if name:
                info["name"] = name

        logger.info(
            f"Resolved {url} via {coords.source}: {coords.lat},{coords.lng} "
            f"({len(info)} place fields)"
        )
        return {**coords.model_dump(), **info}


resolver = MapsResolver()
