import pytest

from content_builder.media import MediaCatalog, resolve


@pytest.mark.parametrize("reference", ["asset-hero", "uploads/lisbon.jpg", "/static/a.png"])
def test_resolve_with_empty_asset_list_returns_reference(reference):
    assert resolve(reference, []) == reference


@pytest.mark.parametrize(
    "reference",
    [
        "https://x/y.png",
        "http://cdn.example.com/a.jpg",
        "data:image/png;base64,iVBORw0KGgo=",
    ],
)
def test_absolute_references_pass_through(reference, media_assets):
    assets = media_assets + [{"id": reference, "url": "https://elsewhere/z.png"}]
    assert resolve(reference, assets) == reference


def test_asset_ids_resolve_to_urls(media_assets):
    assert resolve("asset-hero", media_assets) == "https://cdn.example.com/uploads/lisbon.jpg"
    assert resolve("asset-missing", media_assets) == "asset-missing"


def test_empty_reference_resolves_to_empty_string(media_assets):
    assert resolve(None, media_assets) == ""
    assert resolve("", media_assets) == ""


def test_catalog_lookup(media_assets):
    catalog = MediaCatalog(media_assets)

    assert len(catalog) == 2
    assert catalog.get("asset-video").size_kb == 20480
    assert [a.id for a in catalog.images()] == ["asset-hero"]
    assert catalog.resolve("asset-hero") == "https://cdn.example.com/uploads/lisbon.jpg"


def test_stale_refresh_is_discarded(media_assets):
    catalog = MediaCatalog()

    slow = catalog.begin_refresh()
    fast = catalog.begin_refresh()

    assert catalog.apply_refresh(fast, media_assets) is True
    assert catalog.apply_refresh(slow, []) is False

    assert len(catalog) == 2
    assert catalog.applied_token == fast


def test_refreshes_apply_in_order(media_assets):
    catalog = MediaCatalog()

    first = catalog.begin_refresh()
    assert catalog.apply_refresh(first, media_assets[:1]) is True

    second = catalog.begin_refresh()
    assert catalog.apply_refresh(second, media_assets) is True
    assert len(catalog) == 2
