from content_builder.schemas.media import MediaAssetSchema


def normalize_media_asset(asset) -> MediaAssetSchema:
    return MediaAssetSchema.model_validate(asset)
