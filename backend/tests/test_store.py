from collections import Counter

import pytest

from content_builder.domain import store
from content_builder.domain.exceptions import IndexOutOfRange


SEQUENCE = ["hero", "breadcrumb", "text", "image", "gallery"]


def test_append_adds_at_end():
    result = store.append(SEQUENCE, "popular-posts")

    assert result[-1] == "popular-posts"
    assert len(result) == len(SEQUENCE) + 1
    assert len(SEQUENCE) == 5


def test_replace_at_preserves_length_and_position():
    result = store.replace_at(SEQUENCE, 2, "TEXT")

    assert result == ["hero", "breadcrumb", "TEXT", "image", "gallery"]
    assert SEQUENCE[2] == "text"


def test_remove_at_can_empty_the_sequence():
    assert store.remove_at(["hero"], 0) == []
    assert store.remove_at(SEQUENCE, 0) == SEQUENCE[1:]


def test_move_to_forward_and_backward():
    assert store.move_to(SEQUENCE, 0, 2) == ["breadcrumb", "text", "hero", "image", "gallery"]
    assert store.move_to(SEQUENCE, 4, 0) == ["gallery", "hero", "breadcrumb", "text", "image"]
    assert store.move_to(SEQUENCE, 1, 4) == ["hero", "text", "image", "gallery", "breadcrumb"]


def test_move_to_same_index_is_a_copy():
    result = store.move_to(SEQUENCE, 3, 3)

    assert result == SEQUENCE
    assert result is not SEQUENCE


def test_move_to_preserves_length_and_elements():
    for i in range(len(SEQUENCE)):
        for j in range(len(SEQUENCE)):
            result = store.move_to(SEQUENCE, i, j)
            assert len(result) == len(SEQUENCE)
            assert Counter(result) == Counter(SEQUENCE)
            assert result[j] == SEQUENCE[i]


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_invalid_indices_fail_loudly(index):
    with pytest.raises(IndexOutOfRange):
        store.replace_at(SEQUENCE, index, "x")
    with pytest.raises(IndexOutOfRange):
        store.remove_at(SEQUENCE, index)
    with pytest.raises(IndexOutOfRange):
        store.move_to(SEQUENCE, index, 0)
    with pytest.raises(IndexOutOfRange):
        store.move_to(SEQUENCE, 0, index)


def test_index_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        store.remove_at([], 0)
