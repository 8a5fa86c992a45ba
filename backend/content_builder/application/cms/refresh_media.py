from typing import Optional
from flask import current_app
from content_builder.media.catalog import MediaCatalog
from content_builder.models.media_asset import MediaAsset
from content_builder.normalizers.media import normalize_media_asset


def fetch_media_assets():
    assets = MediaAsset.query.order_by(MediaAsset.uploaded_at.desc()).all()
    return [normalize_media_asset(a) for a in assets]


def refresh_media_catalog(*, catalog: Optional[MediaCatalog] = None) -> bool:
    """
    Reload the asset list into the media catalog.

    Returns False when a newer refresh landed first and this one was
    discarded.
    """
    if catalog is None:
        catalog = current_app.extensions["media_catalog"]

    token = catalog.begin_refresh()
    assets = fetch_media_assets()
    applied = catalog.apply_refresh(token, assets)

    current_app.logger.info(
        "media.refresh token=%s assets=%d applied=%s", token, len(assets), applied
    )
    return applied
