import asyncio
import json
import os
import sys

# Add the project root directory to the python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.extract.coordinates import coordinate_extractor
from app.extract.place_info import place_extractor, place_name_from_url
from app.fetch.maps_client import maps_client
from app.core.config import settings
from app.core.errors import UpstreamFetchError


# Setup logging to file and console
class Tee(object):
    def __init__(self, *files):
        self.files = files

    def write(self, obj):
        for f in self.files:
            f.write(obj)
            f.flush()

    def flush(self):
        for f in self.files:
            f.flush()


LOG_FILE = settings.TRACE_LOG_PATH


async def trace_url(url: str):
    print(f"\n{'='*60}", flush=True)
    print(f"URL: {url}", flush=True)
    print(f"{'='*60}", flush=True)

    # 1. Shortlink Phase
    print("\n--- [Phase 1] Shortlink Probe ---", flush=True)
    final_url = url
    if maps_client.is_shortlink(url):
        final_url = await maps_client.resolve_redirect(url)
        print(f"Redirect target: {final_url}", flush=True)
    else:
        print("Not a shortlink, skipping probe.", flush=True)

    # 2. URL Phase
    print("\n--- [Phase 2] URL Patterns ---", flush=True)
    coords = coordinate_extractor.from_url(final_url)
    if coords:
        print(f"Matched by {coords.source}: {coords.lat}, {coords.lng}", flush=True)
    else:
        print("No URL pattern matched.", flush=True)
    print(f"Place name from path: {place_name_from_url(final_url)}", flush=True)

    # 3. Page Phase (always fetched here, to show what the markup offers)
    print("\n--- [Phase 3] Page Fetch ---", flush=True)
    try:
        html = await maps_client.fetch_html(final_url)
    except UpstreamFetchError as e:
        print(f"Fetch failed: {e}", flush=True)
        return
    print(f"Fetched {len(html)} characters.", flush=True)

    html_coords = coordinate_extractor.from_html(html)
    if html_coords:
        print(
            f"HTML matched by {html_coords.source}: {html_coords.lat}, {html_coords.lng}",
            flush=True,
        )
    else:
        print("No HTML pattern matched.", flush=True)

    info = place_extractor.extract(html)
    print(
        f"Place Info:\n{json.dumps(info, indent=2, ensure_ascii=False)}", flush=True
    )


async def main():
    urls = sys.argv[1:] or [
        "https://www.google.com/maps/@-6.2,106.816,15z",
        "https://maps.app.goo.gl/",
    ]
    for url in urls:
        await trace_url(url)


if __name__ == "__main__":
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        sys.stdout = Tee(sys.__stdout__, f)
        try:
            asyncio.run(main())
        finally:
            sys.stdout = sys.__stdout__
