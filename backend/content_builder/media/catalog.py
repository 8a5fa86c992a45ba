import itertools
import logging
from typing import Iterable, List, Optional, Tuple

from content_builder.schemas.media import MediaAssetSchema
from .resolver import resolve

logger = logging.getLogger(__name__)


class MediaCatalog:
    """
    The asset list media references are resolved against.

    Refreshes are tagged with a monotonically increasing token. A response
    is installed only if no newer refresh has been applied before it, so a
    slow, stale fetch can never overwrite a fresher asset list.
    """

    def __init__(self, assets: Iterable = ()):
        self._counter = itertools.count(1)
        self._applied_token = 0
        self._install(assets)

    def _install(self, assets: Iterable) -> None:
        self._assets: Tuple[MediaAssetSchema, ...] = tuple(
            asset if isinstance(asset, MediaAssetSchema) else MediaAssetSchema.model_validate(asset)
            for asset in assets or ()
        )
        self._by_id = {asset.id: asset for asset in self._assets}

    @property
    def assets(self) -> Tuple[MediaAssetSchema, ...]:
        return self._assets

    @property
    def applied_token(self) -> int:
        return self._applied_token

    def begin_refresh(self) -> int:
        return next(self._counter)

    def apply_refresh(self, token: int, assets: Iterable) -> bool:
        if token <= self._applied_token:
            logger.info(
                "Discarding stale media refresh %s (already applied %s)",
                token,
                self._applied_token,
            )
            return False

        self._install(assets)
        self._applied_token = token
        logger.debug("Media catalog refreshed with %d assets", len(self._assets))
        return True

    def get(self, asset_id: str) -> Optional[MediaAssetSchema]:
        return self._by_id.get(asset_id)

    def resolve(self, reference: Optional[str]) -> str:
        return resolve(reference, self._assets)

    def images(self) -> List[MediaAssetSchema]:
        return [asset for asset in self._assets if asset.type == "image"]

    def __len__(self):
        return len(self._assets)
