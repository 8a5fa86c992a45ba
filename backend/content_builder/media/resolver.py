from collections.abc import Mapping
from typing import Iterable, Optional

URL_PREFIXES = ("http://", "https://", "//", "data:")


def is_absolute(reference: str) -> bool:
    return reference.lower().startswith(URL_PREFIXES)


def _asset_field(asset, name):
    if isinstance(asset, Mapping):
        return asset.get(name)
    return getattr(asset, name, None)


def resolve(reference: Optional[str], assets: Iterable = ()) -> str:
    """
    Turn a media reference into something an <img> can load.

    Fully-qualified URLs and data URIs come back unchanged. Anything else
    is looked up as an asset id; unknown ids are treated as literal paths,
    since pages may reference assets before the asset list has loaded.
    """
    if not reference:
        return ""

    if is_absolute(reference):
        return reference

    for asset in assets or ():
        if _asset_field(asset, "id") == reference:
            return _asset_field(asset, "url") or reference

    return reference
