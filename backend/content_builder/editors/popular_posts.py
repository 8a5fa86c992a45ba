from .base import (
    add_item,
    asset_url,
    remove_item,
    require_type,
    update_item,
    update_nested,
    update_section,
)

EMPTY_SIDE_POST = {
    "title": "",
    "excerpt": "",
    "imageUrl": "",
    "readTime": "",
    "publishDate": "",
}


def update_popular_posts(section, updates):
    require_type(section, "popular-posts")
    return update_section(section, updates)


def update_featured_post(section, updates):
    """Merge into the featured post, creating it on first edit."""
    require_type(section, "popular-posts")
    return update_nested(section, "featuredPost", updates)


def clear_featured_post(section):
    require_type(section, "popular-posts")
    return update_section(section, {"featuredPost": None})


def add_side_post(section, post=None):
    require_type(section, "popular-posts")
    return add_item(section, "sidePosts", post if post is not None else dict(EMPTY_SIDE_POST))


def update_side_post(section, index: int, updates):
    require_type(section, "popular-posts")
    return update_item(section, "sidePosts", index, updates)


def remove_side_post(section, index: int):
    require_type(section, "popular-posts")
    return remove_item(section, "sidePosts", index)


def select_post_image(section, asset, index=None):
    """
    Set a post image from the media library.

    ``index=None`` targets the featured post, an integer targets a side post.
    """
    if index is None:
        return update_featured_post(section, {"imageUrl": asset_url(asset)})
    return update_side_post(section, index, {"imageUrl": asset_url(asset)})
