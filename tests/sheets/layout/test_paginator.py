"""
Unit tests for the sheet paginator.
"""

import math

import pytest

from sticker_studio.sheets import InvalidSlotReferenceError, LayoutConfig
from sticker_studio.sheets.layout import compute_geometry, paginate, validate_slots


@pytest.fixture
def medium():
    """2 x 4 grid (8 per page)."""
    return compute_geometry(7, LayoutConfig())


@pytest.fixture
def large():
    """2 x 2 grid (4 per page)."""
    return compute_geometry(10, LayoutConfig())


class TestPaginate:
    """Tests for paginate()."""

    def test_when_twenty_round_robin_slots_then_three_pages(self, medium):
        """20 stickers over 3 designs at Medium: 8 + 8 + 4."""
        # Arrange
        slots = [i % 3 for i in range(20)]

        # Act
        layout = paginate(slots, medium, image_count=3)

        # Assert
        assert layout.page_count == 3
        assert [p.placement_count for p in layout.pages] == [8, 8, 4]
        assert layout.total_placements == 20
        assert layout.slot_count == 20

    def test_last_page_fills_first_cells_only(self, medium):
        """Partial final page uses the first cells in row-major order."""
        layout = paginate([0] * 20, medium, image_count=1)

        last = layout.pages[-1]
        assert [(p.row, p.col) for p in last.placements] == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_slots_consumed_in_order_across_pages(self, medium):
        """Every slot appears exactly once, in order, with its image index."""
        slots = [2, 0, 1, 1, 0, 2, 2, 2, 0, 1]

        layout = paginate(slots, medium, image_count=3)

        placements = [p for page in layout.pages for p in page.placements]
        assert [p.slot for p in placements] == list(range(len(slots)))
        assert [p.image_index for p in placements] == slots

    def test_row_major_order_within_page(self, medium):
        """Columns advance before rows."""
        layout = paginate([0] * 8, medium, image_count=1)

        cells = [(p.row, p.col) for p in layout.pages[0].placements]
        assert cells == [(r, c) for r in range(4) for c in range(2)]

    def test_positions_match_geometry_on_every_page(self, medium):
        """The same cell has the same position on every page."""
        layout = paginate([0] * 24, medium, image_count=1)

        for page in layout.pages:
            for p in page.placements:
                assert (p.x, p.y) == medium.cell_origin(p.row, p.col)
                assert p.size == medium.size_pt

    def test_when_single_slot_then_one_page_one_cell_at_grid_origin(self, medium):
        """A single sticker sits in the first cell of the centred grid."""
        layout = paginate([0], medium, image_count=1)

        assert layout.page_count == 1
        only = layout.pages[0].placements
        assert len(only) == 1
        assert (only[0].x, only[0].y) == (medium.offset_x, medium.offset_y)

    def test_when_no_slots_then_no_pages(self, medium):
        """Zero-length slot list gives an empty document, not an error."""
        layout = paginate([], medium, image_count=0)

        assert layout.page_count == 0
        assert layout.total_placements == 0

    def test_when_exact_multiple_then_no_blank_page(self, large):
        """8 stickers at 4 per page fill exactly two pages."""
        layout = paginate([0] * 8, large, image_count=1)

        assert layout.page_count == 2
        assert all(p.placement_count == 4 for p in layout.pages)

    @pytest.mark.parametrize("count", [1, 3, 4, 5, 7, 8, 9, 16, 17, 33])
    def test_pagination_bound(self, medium, count):
        """total_pages * per_page >= count > (total_pages - 1) * per_page."""
        layout = paginate([0] * count, medium, image_count=1)

        per_page = medium.per_page
        assert layout.page_count == math.ceil(count / per_page)
        assert layout.page_count * per_page >= count > (layout.page_count - 1) * per_page
        assert all(not p.is_empty for p in layout.pages)

    def test_page_indices_are_sequential(self, large):
        layout = paginate([0] * 10, large, image_count=1)

        assert [p.index for p in layout.pages] == [0, 1, 2]


class TestValidateSlots:
    """Tests for slot validation."""

    def test_when_index_out_of_range_then_raises(self, medium):
        """A slot pointing past the last image fails before layout."""
        with pytest.raises(InvalidSlotReferenceError) as exc_info:
            paginate([0, 1, 3], medium, image_count=3)

        assert exc_info.value.slot == 2
        assert exc_info.value.image_index == 3
        assert exc_info.value.image_count == 3

    def test_when_negative_index_then_raises(self):
        """Negative indices are never valid references."""
        with pytest.raises(InvalidSlotReferenceError):
            validate_slots([0, -1], image_count=2)

    def test_when_no_images_and_slots_then_raises(self):
        """Every slot must resolve, so no images means any slot is invalid."""
        with pytest.raises(InvalidSlotReferenceError, match="only 0 unique image"):
            validate_slots([0], image_count=0)

    @pytest.mark.parametrize("bad", ["0", 1.0, None, True])
    def test_when_not_an_integer_then_raises(self, bad):
        with pytest.raises(InvalidSlotReferenceError):
            validate_slots([bad], image_count=2)

    def test_when_all_valid_then_passes(self):
        validate_slots([0, 1, 1, 0], image_count=2)
