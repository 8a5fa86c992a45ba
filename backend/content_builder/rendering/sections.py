"""
Section previews.

``render_section`` maps any section to a visual tree. It is total: every
variant has a renderer, missing media renders a placeholder, and payloads
that fail validation render an "Invalid section" card instead of raising.
"""
import logging
from collections.abc import Mapping
from typing import Callable, Iterable, List, Optional

from pydantic import BaseModel

from content_builder.domain.exceptions import InvariantViolation
from content_builder.domain.validation import validate_section
from content_builder.media.catalog import MediaCatalog
from content_builder.media.resolver import resolve
from content_builder.schemas.sections import SECTION_MODELS
from . import styles
from .nodes import Node, cx, el

logger = logging.getLogger(__name__)

GALLERY_PREVIEW_LIMIT = 6
TEXT_PLACEHOLDER = "Enter your text content here..."

Resolver = Callable[[Optional[str]], str]


def make_resolver(media=None) -> Resolver:
    """Accept a MediaCatalog, an asset list, a callable or None."""
    if media is None:
        return lambda reference: resolve(reference, ())
    if isinstance(media, MediaCatalog):
        return media.resolve
    if callable(media):
        return media
    assets = list(media)
    return lambda reference: resolve(reference, assets)


def _placeholder(message: str, height: str = "h-48") -> Node:
    return el(
        "div",
        el("div", el("p", message), cls="text-center text-muted-foreground"),
        cls=cx("w-full", height, "bg-muted rounded-lg flex items-center justify-center"),
        data_role="placeholder",
    )


def _animation_attrs(animation) -> dict:
    if animation is None or not animation.enabled or animation.type == "none":
        return {}
    return {
        "data_animation": animation.type,
        "data_animation_duration": f"{animation.duration}s",
        "data_animation_delay": f"{animation.delay}s",
    }


# -------------------------------------------------
# Hero
# -------------------------------------------------

def render_hero(section, resolve_media: Resolver) -> Node:
    background = resolve_media(section.background_image)

    if background:
        media = el(
            "img",
            src=background,
            alt="Hero background",
            cls="w-full h-full object-cover",
            style={
                "object-position": section.background_position,
                "object-fit": section.background_size,
            },
        )
    else:
        media = _placeholder("No background image selected", height="h-full")

    meta = []
    if section.author:
        meta.append(el("span", f"By {section.author}"))
    if section.publish_date:
        meta.append(el("span", f"• {section.publish_date}"))
    if section.read_time:
        meta.append(el("span", f"• {section.read_time}"))

    content = el(
        "div",
        el(
            "div",
            el(
                "h1",
                section.title or "Hero Title",
                cls=cx(
                    "font-bold mb-4 leading-tight",
                    section.title_size.mobile,
                    f"md:{section.title_size.tablet}",
                    f"lg:{section.title_size.desktop}",
                ),
            ),
            el("p", section.subtitle, cls="text-lg md:text-xl mb-4") if section.subtitle else None,
            el(
                "div",
                *meta,
                cls="flex flex-col md:flex-row items-center justify-center gap-4 text-lg",
            ) if meta else None,
            cls="text-center text-white max-w-4xl px-4",
        ),
        cls="absolute inset-0 flex items-center justify-center",
    )

    sharing = None
    if section.social_sharing.enabled and section.social_sharing.platforms:
        button_style = styles.SOCIAL_STYLE.get(section.social_sharing.style, styles.SOCIAL_STYLE["glass"])
        sharing = el(
            "div",
            *[
                el(
                    "button",
                    platform,
                    cls=cx(
                        "w-10 h-10 rounded-full flex items-center justify-center transition-colors",
                        button_style,
                    ),
                    aria_label=f"Share on {platform}",
                    data_platform=platform,
                )
                for platform in section.social_sharing.platforms
            ],
            cls=cx(
                "absolute flex gap-3",
                styles.SOCIAL_POSITION.get(section.social_sharing.position, styles.SOCIAL_POSITION["bottom-right"]),
            ),
            data_role="social-sharing",
        )

    return el(
        "section",
        media,
        el("div", cls="absolute inset-0 bg-black", style={"opacity": section.overlay_opacity}),
        content,
        sharing,
        cls="relative rounded-lg overflow-hidden",
        style={
            "height": section.height.desktop,
            "min-height": "400px",
        },
        data_section="hero",
        data_parallax=str(section.parallax_speed) if section.parallax_enabled else None,
        **_animation_attrs(section.animation),
    )


# -------------------------------------------------
# Text
# -------------------------------------------------

def render_text(section, resolve_media: Resolver) -> Node:
    content = section.content or ""
    line_height = styles.LINE_HEIGHT.get(section.line_height, "leading-relaxed")
    drop_cap = section.drop_cap

    if drop_cap.enabled and content:
        paragraph = el(
            "p",
            el(
                "span",
                content[0],
                cls=cx(
                    "float-left mr-2 leading-none" if drop_cap.float else "mr-1 leading-none",
                    drop_cap.size,
                    styles.FONT_WEIGHT.get(drop_cap.font_weight),
                    drop_cap.color,
                ),
                data_role="drop-cap",
            ),
            content[1:],
            cls=cx("leading-relaxed", line_height),
        )
    else:
        paragraph = el("p", content or TEXT_PLACEHOLDER, cls=cx("leading-relaxed", line_height))

    return el(
        "section",
        paragraph,
        cls=cx(
            "prose max-w-none",
            styles.TEXT_ALIGNMENT.get(section.alignment),
            styles.FONT_SIZE.get(section.font_size),
            styles.FONT_FAMILY.get(section.font_family),
            line_height,
        ),
        data_section="text",
        **_animation_attrs(section.animation),
    )


# -------------------------------------------------
# Image
# -------------------------------------------------

def render_image(section, resolve_media: Resolver) -> Node:
    src = resolve_media(section.image_url)

    if src:
        image = el(
            "img",
            src=src,
            alt=section.alt_text or "Image",
            cls=cx(
                "max-w-full h-auto object-contain",
                section.rounded and "rounded-lg",
                section.shadow and "shadow-lg",
            ),
            style={
                "width": f"{section.width}px" if section.width else "auto",
                "height": f"{section.height}px" if section.height else "auto",
            },
        )
    else:
        image = _placeholder("No image selected")

    return el(
        "figure",
        image,
        el("figcaption", section.caption, cls="text-sm text-muted-foreground italic")
        if section.caption else None,
        cls=cx("space-y-2", styles.TEXT_ALIGNMENT.get(section.alignment)),
        data_section="image",
    )


# -------------------------------------------------
# Gallery
# -------------------------------------------------

def _gallery_tile(image, index: int, section, resolve_media: Resolver) -> Node:
    src = resolve_media(image.url)
    hover = section.hover_effects

    if src:
        picture = el(
            "img",
            src=src,
            alt=image.alt_text or f"Gallery image {index + 1}",
            cls=cx(
                "w-full h-32 object-cover rounded-lg",
                hover.enabled and hover.zoom and "group-hover:scale-105 transition-transform",
            ),
        )
    else:
        picture = _placeholder("No image selected", height="h-32")

    caption = None
    if image.caption and (not hover.enabled or hover.show_caption):
        caption = el(
            "div",
            image.caption,
            cls="absolute bottom-0 left-0 right-0 bg-black/70 text-white text-xs p-2 rounded-b-lg",
        )

    overlay = None
    if hover.enabled and hover.overlay:
        overlay = el("div", cls="absolute inset-0 bg-black/0 group-hover:bg-black/30 transition-colors")

    return el(
        "div",
        picture,
        overlay,
        caption,
        cls="relative group",
        data_role="gallery-tile",
    )


def render_gallery(section, resolve_media: Resolver, limit: int = GALLERY_PREVIEW_LIMIT) -> Node:
    images = list(section.images or ())

    if not images:
        return el(
            "section",
            _placeholder("No images in gallery"),
            data_section="gallery",
        )

    shown = images[:limit]
    hidden = len(images) - len(shown)

    tiles = [_gallery_tile(image, i, section, resolve_media) for i, image in enumerate(shown)]
    if hidden > 0:
        tiles.append(
            el(
                "div",
                f"+{hidden} more",
                cls="flex items-center justify-center h-32 rounded-lg bg-muted text-muted-foreground font-medium",
                data_role="gallery-more",
            )
        )

    responsive = section.responsive
    return el(
        "section",
        *tiles,
        cls=cx(
            "grid",
            styles.GRID_COLUMNS.get(responsive.mobile.columns),
            f"md:{styles.GRID_COLUMNS.get(section.columns, 'grid-cols-3')}",
            f"lg:{styles.GRID_COLUMNS.get(responsive.desktop.columns, 'grid-cols-3')}",
            styles.GAP.get(section.spacing, "gap-4"),
        ),
        data_section="gallery",
        data_layout=section.layout,
        **_animation_attrs(section.animation),
    )


# -------------------------------------------------
# Popular posts
# -------------------------------------------------

def _post_meta(post) -> Optional[Node]:
    parts = [p for p in (post.read_time, post.publish_date) if p]
    if not parts:
        return None
    return el("div", " | ".join(parts), cls="flex items-center text-sm text-gray-500")


def _featured_post(post, resolve_media: Resolver) -> Node:
    src = resolve_media(post.image_url)
    picture = (
        el("img", src=src, alt="Featured article", cls="w-full h-full object-cover rounded-[24px]")
        if src
        else _placeholder("No image selected", height="h-full")
    )

    return el(
        "article",
        picture,
        el(
            "div",
            el("span", post.category, cls="bg-white/20 text-white px-3 py-1 rounded-full text-sm")
            if post.category else None,
            el("h3", post.title or "Featured Post Title", cls="text-3xl font-bold text-white mb-3"),
            el("p", post.excerpt or "Featured post excerpt...", cls="text-white/90 mb-4 text-lg"),
            _post_meta(post),
            cls="absolute inset-0 bg-gradient-to-t from-black/60 via-transparent to-transparent",
        ),
        cls="relative w-full h-[500px] overflow-hidden shadow-lg rounded-[24px]",
        data_role="featured-post",
    )


def _side_post(post, resolve_media: Resolver) -> Node:
    src = resolve_media(post.image_url)
    picture = (
        el("img", src=src, alt=post.title or "Side article", cls="w-full h-48 object-cover")
        if src
        else _placeholder("No image selected")
    )

    return el(
        "article",
        picture,
        el(
            "div",
            el("h4", post.title or "Post Title", cls="text-xl font-bold text-gray-900 mb-2"),
            el("p", post.excerpt, cls="text-gray-600 mb-3") if post.excerpt else None,
            _post_meta(post),
            cls="p-6",
        ),
        cls="bg-white rounded-xl shadow-lg overflow-hidden",
        data_role="side-post",
    )


def render_popular_posts(section, resolve_media: Resolver) -> Node:
    return el(
        "section",
        el(
            "div",
            el(
                "div",
                el("h2", section.title, cls="text-4xl font-bold text-gray-900 mb-4"),
                el("p", section.description, cls="text-gray-600") if section.description else None,
                cls="mb-6",
            ),
            _featured_post(section.featured_post, resolve_media) if section.featured_post else None,
            cls="lg:col-span-2",
        ),
        el(
            "div",
            *[_side_post(post, resolve_media) for post in section.side_posts],
            cls="lg:col-span-3 space-y-6",
        ),
        cls="grid lg:grid-cols-5 gap-8",
        data_section="popular-posts",
    )


# -------------------------------------------------
# Breadcrumb
# -------------------------------------------------

def render_breadcrumb(section, resolve_media: Resolver) -> Node:
    style = section.style
    text_size = styles.BREADCRUMB_TEXT_SIZE.get(style.text_size, "text-sm")
    color = styles.BREADCRUMB_COLOR.get(style.color, styles.BREADCRUMB_COLOR["gray"])

    if not section.enabled:
        return el("nav", aria_label="Breadcrumb", hidden=True, data_section="breadcrumb")

    children: List[Node] = []
    last = len(section.items) - 1

    for index, item in enumerate(section.items):
        if index > 0:
            children.append(
                el("span", style.separator, cls=cx("text-gray-400", text_size), data_role="separator")
            )

        home = None
        if index == 0 and style.show_home_icon:
            home = el("span", cls="w-4 h-4 inline mr-1", data_role="home-icon", aria_hidden="true")

        if item.href:
            children.append(el("a", home, item.label, href=item.href, cls=cx("transition-colors", color)))
        else:
            children.append(
                el(
                    "span",
                    home,
                    item.label,
                    cls="text-gray-900 font-medium" if index == last else color,
                )
            )

    return el(
        "nav",
        *children,
        cls=cx("flex items-center space-x-2", text_size),
        aria_label="Breadcrumb",
        data_section="breadcrumb",
    )


RENDERERS = {
    "hero": render_hero,
    "text": render_text,
    "image": render_image,
    "gallery": render_gallery,
    "popular-posts": render_popular_posts,
    "breadcrumb": render_breadcrumb,
}

SECTION_CLASSES = tuple(SECTION_MODELS.values())


def _invalid(message: str) -> Node:
    return el(
        "div",
        el("p", "Invalid section", cls="font-medium"),
        el("p", message, cls="text-xs"),
        cls="p-4 border border-destructive rounded-lg text-destructive",
        data_role="invalid-section",
    )


def render_section(section, media=None) -> Node:
    """Render one section; never raises for bad section data."""
    resolve_media = make_resolver(media)

    if not isinstance(section, SECTION_CLASSES):
        if isinstance(section, BaseModel):
            return _invalid(f"Not a content section: {type(section).__name__}")
        if not isinstance(section, Mapping):
            return _invalid("Section must be an object")
        try:
            section = validate_section(section)
        except InvariantViolation as exc:
            logger.warning("Rendering placeholder for invalid section: %s", exc)
            return _invalid(str(exc))

    return RENDERERS[section.type](section, resolve_media)


def render_sections(sections: Iterable, media=None) -> Node:
    resolve_media = make_resolver(media)
    return el(
        "div",
        *[render_section(section, resolve_media) for section in sections],
        cls="space-y-8",
        data_role="page-preview",
    )
