from app.extract.place_info import place_extractor, place_name_from_url

PLACE_HTML = """
<html><head>
<title>Example Place - Google Maps</title>
<meta content="Example Place · Jl. Sudirman No. 1, Jakarta" property="og:title">
<meta content="Jl. Sudirman No. 1, Jakarta, Indonesia" itemprop="name">
<meta content="★★★★☆ · Restaurant" itemprop="description">
<meta content="Open 24 hours &amp; family friendly" property="og:description">
<meta content="https://lh5.googleusercontent.com/p/abc=w900-h900" property="og:image">
</head><body></body></html>
"""


def test_extracts_all_fields():
    info = place_extractor.extract(PLACE_HTML)
    assert info == {
        "name": "Example Place",
        "description": "Open 24 hours & family friendly",
        "full_address": "Jl. Sudirman No. 1, Jakarta, Indonesia",
        "image": "https://lh5.googleusercontent.com/p/abc=w900-h900",
        "rating": "★★★★☆",
        "category": "Restaurant",
    }


def test_title_suffix_variants():
    assert place_extractor.extract("<title>Cafe Luna · Google Maps  </title>") == {"name": "Cafe Luna"}
    assert place_extractor.extract("<title>Cafe Luna - Google Maps\n</title>") == {"name": "Cafe Luna"}
    assert place_extractor.extract("<title>Cafe Luna</title>") == {"name": "Cafe Luna"}


def test_bare_google_maps_title_falls_back_to_og_title():
    html = '<title>Google Maps</title><meta property="og:title" content="Monas · Jakarta">'
    assert place_extractor.extract(html) == {"name": "Monas · Jakarta"}


def test_bare_google_maps_title_yields_no_name():
    assert place_extractor.extract("<title> Google Maps </title>") == {}


def test_attribute_order_and_quotes_do_not_matter():
    html = "<meta property='og:image' content='https://example.com/a.png' />"
    assert place_extractor.extract(html) == {"image": "https://example.com/a.png"}


def test_rating_and_category_together():
    info = place_extractor.extract('<meta content="★★★ · Corporate office" itemprop="description">')
    assert info == {"rating": "★★★", "category": "Corporate office"}


def test_non_glyph_rating_yields_neither():
    info = place_extractor.extract('<title>Example Place - Google Maps</title><meta content="5 stars · Restaurant" itemprop="description">')
    assert info == {"name": "Example Place"}
    assert "rating" not in info and "category" not in info


def test_rating_without_category_yields_neither():
    info = place_extractor.extract('<meta content="★★★★ · " itemprop="description">')
    assert "rating" not in info and "category" not in info


def test_empty_content_is_absent():
    html = '<meta content="" property="og:description"><meta content="" itemprop="name">'
    assert place_extractor.extract(html) == {}
    assert place_extractor.extract("") == {}


def test_place_name_from_url():
    url = "https://www.google.com/maps/place/Monumen+Nasional/@-6.1753924,106.8271528,17z"
    assert place_name_from_url(url) == "Monumen Nasional"
    assert place_name_from_url("https://www.google.com/maps/place/Caf%C3%A9+Luna?hl=en") == "Café Luna"
    assert place_name_from_url("https://www.google.com/maps/@-6.2,106.816,15z") is None
    assert place_name_from_url("") is None
