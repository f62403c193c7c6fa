"""Contains unit tests for the utils.helpers module."""

import pytest

from default_branch_renamer.utils.helpers import chunk


@pytest.mark.parametrize(
    "item_count,size,expected_sizes",
    [
        pytest.param(25, 10, [10, 10, 5], id="partial last chunk"),
        pytest.param(20, 10, [10, 10], id="exact multiple"),
        pytest.param(3, 10, [3], id="fewer than one chunk"),
        pytest.param(0, 10, [], id="no items"),
        pytest.param(3, 1, [1, 1, 1], id="size one"),
    ],
)
def test_chunk_sizes(item_count: int, size: int, expected_sizes: list[int]) -> None:
    """Test that chunk produces groups of the expected sizes."""
    assert [len(group) for group in chunk(list(range(item_count)), size)] == expected_sizes


def test_chunk_preserves_order() -> None:
    """Test that concatenating the chunks gives back the original sequence."""
    items = list(range(25))
    chunks = chunk(items, 10)
    assert [item for group in chunks for item in group] == items
    assert chunks[2] == [20, 21, 22, 23, 24]


def test_chunk_rejects_non_positive_size() -> None:
    """Test that a chunk size below one is rejected."""
    with pytest.raises(ValueError):
        chunk([1, 2, 3], 0)
