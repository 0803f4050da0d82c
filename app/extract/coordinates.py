import re
import logging
from typing import Optional
from app.models import Coordinates

logger = logging.getLogger(__name__)

# Optional minus, digits, a literal dot, digits. Integer-only values never match.
DECIMAL = r"(-?\d+\.\d+)"


class CoordinatePattern:
    """
    A named regex together with the capture groups holding latitude and longitude.
    Group assignment travels with the pattern because some page shapes store
    longitude before latitude.
    """

    def __init__(self, name: str, regex: str, lat_group: int = 1, lng_group: int = 2, flags: int = 0):
        self.name = name
        self.regex = re.compile(regex, flags)
        self.lat_group = lat_group
        self.lng_group = lng_group

    def match(self, text: str) -> Optional[Coordinates]:
        m = self.regex.search(text)
        if not m:
            return None
        return Coordinates(
            lat=float(m.group(self.lat_group)),
            lng=float(m.group(self.lng_group)),
            source=self.name,
        )


# !3d<lat> ... !4d<lng>, markers in order inside one URL token, never spanning another !3d
PIN_MARKER = r"!3d" + DECIMAL + r"(?:(?!!3d)[^\s\"'<>])*?!4d" + DECIMAL

INIT_STATE = r"window\.APP_INITIALIZATION_STATE\s*=\s*"

URL_PATTERNS = [
    CoordinatePattern("pin_marker", PIN_MARKER),
    CoordinatePattern("viewport", r"@" + DECIMAL + r"," + DECIMAL),
    CoordinatePattern("query", r"[?&]q=" + DECIMAL + r"," + DECIMAL),
]

HTML_PATTERNS = [
    CoordinatePattern("html_pin_marker", PIN_MARKER),
    # [[[x, lat, lng], ...
    CoordinatePattern(
        "init_state_viewport",
        INIT_STATE + r"\[\[\[" + DECIMAL + r"," + DECIMAL + r"," + DECIMAL,
        lat_group=2,
        lng_group=3,
    ),
    CoordinatePattern(
        "init_state_loose",
        INIT_STATE + r".*?" + DECIMAL + r"," + DECIMAL,
        flags=re.DOTALL,
    ),
]


class CoordinateExtractor:
    def _first_match(self, patterns, text: str) -> Optional[Coordinates]:
        if not text:
            return None
        for pattern in patterns:
            coords = pattern.match(text)
            if coords is not None:
                logger.debug(f"Coordinates matched by {coords.source}: {coords.lat},{coords.lng}")
                return coords
        return None

    def from_url(self, url: str) -> Optional[Coordinates]:
        return self._first_match(URL_PATTERNS, url)

    def from_html(self, html: str) -> Optional[Coordinates]:
        return self._first_match(HTML_PATTERNS, html)


coordinate_extractor = CoordinateExtractor()
