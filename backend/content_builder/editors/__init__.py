from .base import deep_merge, update_animation, update_section
from .breadcrumb import (
    add_breadcrumb_item,
    move_breadcrumb_item,
    remove_breadcrumb_item,
    set_enabled,
    update_breadcrumb,
    update_breadcrumb_item,
    update_breadcrumb_style,
)
from .gallery import (
    add_gallery_image,
    add_media_assets,
    move_gallery_image,
    remove_gallery_image,
    update_gallery,
    update_gallery_animation,
    update_gallery_image,
    update_hover_effects,
    update_responsive,
)
from .hero import (
    select_background,
    set_height,
    set_title_size,
    toggle_platform,
    update_hero,
    update_hero_animation,
    update_social_sharing,
)
from .image import select_media, set_dimensions, update_image
from .popular_posts import (
    add_side_post,
    clear_featured_post,
    remove_side_post,
    select_post_image,
    update_featured_post,
    update_popular_posts,
    update_side_post,
)
from .text import (
    set_content,
    toggle_drop_cap,
    update_drop_cap,
    update_text,
    update_text_animation,
)
