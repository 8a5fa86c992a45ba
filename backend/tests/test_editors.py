import pytest

from content_builder import editors
from content_builder.domain.exceptions import IndexOutOfRange, SectionValidationError
from content_builder.domain.factory import create_section
from content_builder.schemas.media import MediaAssetSchema


def test_animation_duration_update_keeps_siblings(hero):
    updated = editors.update_hero_animation(hero, {"duration": 1.5})

    assert updated.animation.duration == 1.5
    assert updated.animation.type == hero.animation.type
    assert updated.animation.delay == hero.animation.delay
    assert updated.animation.enabled == hero.animation.enabled


def test_generic_update_merges_nested_objects(hero):
    updated = editors.update_section(
        hero,
        {"title": "Sintra day trip", "socialSharing": {"style": "solid"}},
    )

    assert updated.title == "Sintra day trip"
    assert updated.social_sharing.style == "solid"
    assert updated.social_sharing.position == "bottom-right"
    assert updated.social_sharing.platforms == hero.social_sharing.platforms


def test_update_returns_new_instance(hero):
    updated = editors.update_hero(hero, {"subtitle": "Palaces and fog"})

    assert updated is not hero
    assert hero.subtitle is None
    assert updated.subtitle == "Palaces and fog"


def test_snake_case_updates(hero):
    updated = editors.update_hero(hero, {"overlay_opacity": 0.6})
    assert updated.overlay_opacity == 0.6


def test_invalid_update_raises_and_keeps_original(hero):
    with pytest.raises(SectionValidationError) as exc_info:
        editors.update_hero(hero, {"overlayOpacity": 2})

    assert exc_info.value.paths == ["overlayOpacity"]
    assert hero.overlay_opacity == 0.3


def test_type_cannot_change(hero):
    with pytest.raises(SectionValidationError) as exc_info:
        editors.update_section(hero, {"type": "text"})

    assert exc_info.value.paths == ["type"]


def test_variant_editor_rejects_other_variants(hero):
    with pytest.raises(SectionValidationError):
        editors.update_text(hero, {"content": "nope"})


def test_responsive_height_and_title_size(hero):
    updated = editors.set_height(hero, "mobile", "60vh")
    updated = editors.set_title_size(updated, "desktop", "text-7xl")

    assert updated.height.mobile == "60vh"
    assert updated.height.tablet == "80vh"
    assert updated.title_size.desktop == "text-7xl"
    assert updated.title_size.mobile == "text-3xl"

    with pytest.raises(SectionValidationError):
        editors.set_height(hero, "watch", "10vh")


def test_toggle_platform(hero):
    without_copy = editors.toggle_platform(hero, "copy")
    assert "copy" not in without_copy.social_sharing.platforms

    with_share = editors.toggle_platform(without_copy, "share")
    assert with_share.social_sharing.platforms == ["facebook", "twitter", "linkedin", "share"]


def test_drop_cap_update_keeps_defaults():
    text = create_section("text")
    updated = editors.update_drop_cap(text, {"enabled": True, "size": "text-6xl"})

    assert updated.drop_cap.enabled is True
    assert updated.drop_cap.size == "text-6xl"
    assert updated.drop_cap.font_weight == "semibold"
    assert updated.drop_cap.float is True

    assert editors.toggle_drop_cap(updated).drop_cap.enabled is False


def test_select_media_sets_url_and_alt_text():
    image = create_section("image")
    asset = MediaAssetSchema(id="a1", url="https://cdn.example.com/belem.jpg", filename="belem.jpg")

    updated = editors.select_media(image, asset)

    assert updated.image_url == "https://cdn.example.com/belem.jpg"
    assert updated.alt_text == "belem.jpg"


def test_gallery_image_operations():
    gallery = create_section("gallery")
    gallery = editors.add_gallery_image(gallery, "/img/1.jpg", alt_text="One")
    gallery = editors.add_gallery_image(gallery, "/img/2.jpg")
    assert len(gallery.images) == 3

    gallery = editors.update_gallery_image(gallery, 1, {"caption": "Tram 28"})
    assert gallery.images[1].caption == "Tram 28"
    assert gallery.images[1].alt_text == "One"

    gallery = editors.move_gallery_image(gallery, 2, 0)
    assert gallery.images[0].url == "/img/2.jpg"

    gallery = editors.remove_gallery_image(gallery, 0)
    assert [img.url for img in gallery.images][1:] == ["/img/1.jpg"]

    with pytest.raises(IndexOutOfRange):
        editors.update_gallery_image(gallery, 5, {"caption": "x"})


def test_gallery_cannot_drop_below_one_image():
    gallery = create_section("gallery")
    assert len(gallery.images) == 1

    result = editors.remove_gallery_image(gallery, 0)

    assert result is gallery
    assert len(result.images) == 1


def test_gallery_responsive_and_hover():
    gallery = create_section("gallery")
    updated = editors.update_responsive(gallery, "mobile", {"columns": 2})
    updated = editors.update_hover_effects(updated, {"overlay": True})

    assert updated.responsive.mobile.columns == 2
    assert updated.responsive.mobile.spacing == "sm"
    assert updated.responsive.desktop.columns == 3
    assert updated.hover_effects.overlay is True
    assert updated.hover_effects.zoom is True


def test_add_media_assets(media_assets):
    gallery = editors.add_media_assets(create_section("gallery"), media_assets[:1])

    assert gallery.images[-1].url == "https://cdn.example.com/uploads/lisbon.jpg"
    assert gallery.images[-1].alt_text == "lisbon.jpg"


def test_breadcrumb_item_operations():
    breadcrumb = create_section("breadcrumb")
    breadcrumb = editors.add_breadcrumb_item(breadcrumb)
    assert breadcrumb.items[-1].label == "New Item"

    breadcrumb = editors.update_breadcrumb_item(breadcrumb, 2, {"label": "Portugal"})
    assert breadcrumb.items[2].label == "Portugal"

    breadcrumb = editors.update_breadcrumb_style(breadcrumb, {"separator": "→"})
    assert breadcrumb.style.separator == "→"
    assert breadcrumb.style.text_size == "sm"

    with pytest.raises(IndexOutOfRange):
        editors.remove_breadcrumb_item(breadcrumb, 3)


def test_breadcrumb_cannot_drop_below_one_item():
    breadcrumb = create_section("breadcrumb")
    breadcrumb = editors.remove_breadcrumb_item(breadcrumb, 1)
    assert len(breadcrumb.items) == 1

    result = editors.remove_breadcrumb_item(breadcrumb, 0)

    assert len(result.items) == 1
    assert result.items[0].label == "Home"


def test_popular_posts_editing():
    posts = create_section("popular-posts")

    posts = editors.update_featured_post(posts, {"title": "48 hours in Porto"})
    assert posts.featured_post.title == "48 hours in Porto"
    assert posts.featured_post.category == ""

    posts = editors.select_post_image(posts, {"url": "/img/porto.jpg"})
    assert posts.featured_post.image_url == "/img/porto.jpg"
    assert posts.featured_post.title == "48 hours in Porto"

    for _ in range(3):
        posts = editors.add_side_post(posts)
    posts = editors.update_side_post(posts, 0, {"title": "Madeira"})
    assert posts.side_posts[0].title == "Madeira"

    with pytest.raises(SectionValidationError):
        editors.add_side_post(posts)

    posts = editors.remove_side_post(posts, 0)
    assert len(posts.side_posts) == 2

    assert editors.clear_featured_post(posts).featured_post is None
