from .media_asset import MediaAsset
from .page import Page
