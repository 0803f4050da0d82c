import asyncio
import aiohttp
import logging
from urllib.parse import urljoin, urlparse
from app.core.config import settings
from app.core.errors import UpstreamFetchError

logger = logging.getLogger(__name__)


class MapsClient:
    """
    Outbound HTTP for the resolver: a shortlink redirect probe and a page fetch.
    Each call opens its own session; nothing is shared between requests.
    """

    def __init__(self):
        self.timeout = aiohttp.ClientTimeout(total=settings.FETCH_TIMEOUT_SECONDS)
        # aiohttp gives up once the redirect count reaches max_redirects
        self.max_redirects = settings.FETCH_MAX_REDIRECTS + 1
        self.shortlink_hosts = settings.SHORTLINK_HOSTS
        self.headers = {
            "User-Agent": settings.FETCH_USER_AGENT,
            "Accept-Language": settings.FETCH_ACCEPT_LANGUAGE,
        }

    def is_shortlink(self, url: str) -> bool:
        parsed = urlparse(url)
        host = parsed.hostname
        if host is None and not parsed.scheme:
            # "goo.gl/xyz" without a scheme
            host = urlparse("//" + url).hostname
        host = (host or "").lower()
        return any(host == h or host.endswith("." + h) for h in self.shortlink_hosts)

    async def resolve_redirect(self, url: str) -> str:
        """
        Probe a shortlink without following redirects and return its Location.
        Falls back to the original URL when there is no Location to read.
        """
        location = None
        try:
            async with aiohttp.ClientSession(
                timeout=self.timeout, headers=self.headers
            ) as session:
                async with session.get(url, allow_redirects=False) as resp:
                    location = resp.headers.get("Location")
        except aiohttp.ClientResponseError as e:
            # Redirect reported as an error still carries the response headers
            if e.headers:
                location = e.headers.get("Location")
            if not location:
                logger.warning(f"Redirect probe error for {url}: {e}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Redirect probe failed for {url}: {e!r}")

        if not location:
            logger.warning(f"No redirect location for {url}, using it unchanged")
            return url

        resolved = urljoin(url, location)
        logger.info(f"Resolved shortlink {url} -> {resolved}")
        return resolved

    async def fetch_html(self, url: str) -> str:
        try:
            async with aiohttp.ClientSession(
                timeout=self.timeout, headers=self.headers
            ) as session:
                async with session.get(
                    url, allow_redirects=True, max_redirects=self.max_redirects
                ) as resp:
                    resp.raise_for_status()
                    return await resp.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Content fetch failed for {url}: {e!r}")
            raise UpstreamFetchError(repr(e)) from e


maps_client = MapsClient()
