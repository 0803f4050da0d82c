import re
import html as html_lib
from urllib.parse import unquote_plus

TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
META_TAG_RE = re.compile(r"<meta\b[^>]*>", re.IGNORECASE)
ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

# "Place - Google Maps" / "Place · Google Maps"
GOOGLE_MAPS_SUFFIX_RE = re.compile(r"\s*(?:-|·)\s*Google Maps\s*$")

# "★★★★☆ · Corporate office"
RATING_CATEGORY_RE = re.compile(r"^(★+☆?) · (.+)$", re.DOTALL)

PLACE_PATH_RE = re.compile(r"/maps/place/([^/?#]+)")


def _strip_suffix(title: str):
    name = GOOGLE_MAPS_SUFFIX_RE.sub("", title.strip()).strip()
    if not name or name == "Google Maps":
        return None
    return name


def place_name_from_url(url: str):
    """Extract the place name from a "/maps/place/<Name>/" URL path segment."""
    if not url:
        return None
    match = PLACE_PATH_RE.search(url)
    if not match:
        return None
    name = unquote_plus(match.group(1)).strip()
    return name or None


class PlaceInfoExtractor:
    """
    Pull place metadata out of a Google Maps page.

    Every field is matched on its own; a field that does not match is left out
    of the result instead of being set to None or "".

    - name: <title> minus the " - Google Maps" suffix, else og:title
    - description: og:description
    - full_address: meta itemprop="name" (Google puts the address there)
    - image: og:image
    - rating + category: a "★★★★☆ · Category" meta content, both or neither
    """

    def _scan_meta(self, html: str) -> list[dict]:
        """Read every <meta> tag into a dict of lower-cased attribute names."""
        metas = []
        for tag in META_TAG_RE.findall(html):
            attrs = {}
            for key, dq_value, sq_value in ATTR_RE.findall(tag):
                value = dq_value if dq_value else sq_value
                attrs.setdefault(key.lower(), html_lib.unescape(value))
            metas.append(attrs)
        return metas

    def _meta_content(self, metas: list[dict], attr: str, value: str):
        for meta in metas:
            if meta.get(attr) == value and meta.get("content"):
                return meta["content"]
        return None

    def _name(self, html: str, metas: list[dict]):
        match = TITLE_RE.search(html)
        if match:
            name = _strip_suffix(html_lib.unescape(match.group(1)))
            if name:
                return name
        og_title = self._meta_content(metas, "property", "og:title")
        if og_title:
            return _strip_suffix(og_title)
        return None

    def extract(self, html: str) -> dict:
        info = {}
        if not html:
            return info

        metas = self._scan_meta(html)

        name = self._name(html, metas)
        if name:
            info["name"] = name

        description = self._meta_content(metas, "property", "og:description")
        if description:
            info["description"] = description

        full_address = self._meta_content(metas, "itemprop", "name")
        if full_address:
            info["full_address"] = full_address

        image = self._meta_content(metas, "property", "og:image")
        if image:
            info["image"] = image

        for meta in metas:
            match = RATING_CATEGORY_RE.match(meta.get("content", ""))
            if match:
                info["rating"] = match.group(1)
                info["category"] = match.group(2)
                break

        return info


place_extractor = PlaceInfoExtractor()
