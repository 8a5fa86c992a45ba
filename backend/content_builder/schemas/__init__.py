from .media import MediaAssetSchema
from .sections import (
    SECTION_MODELS,
    BreadcrumbSection,
    ContentSection,
    GallerySection,
    HeroSection,
    ImageSection,
    PopularPostsSection,
    TextSection,
)
