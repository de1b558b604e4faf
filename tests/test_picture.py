"""
Unit tests for the immutable Picture model.
"""

import pytest

from pixel_editor.core.picture import Edit, OutOfRangeError, Picture


class TestEmpty:
    """Tests for Picture.empty."""

    def test_every_cell_has_the_color(self):
        """Should fill all cells with the given color."""
        pic = Picture.empty(4, 3, "#abcdef")
        for y in range(3):
            for x in range(4):
                assert pic.pixel_at(x, y) == "#abcdef"

    def test_cell_count_matches_size(self):
        pic = Picture.empty(7, 2, "#000000")
        assert len(pic.cells) == 14

    def test_zero_size(self):
        """Should allow a picture with no cells."""
        pic = Picture.empty(0, 5, "#000000")
        assert pic.cells == ()


class TestConstruction:
    """Tests for Picture invariants."""

    def test_rejects_wrong_cell_count(self):
        with pytest.raises(ValueError):
            Picture(2, 2, ("#fff",) * 3)

    def test_rejects_negative_size(self):
        with pytest.raises(ValueError):
            Picture(-1, 2, ())

    def test_list_cells_become_tuple(self):
        """Should store cells immutably even when given a list."""
        pic = Picture(1, 2, ["#000", "#fff"])
        assert pic.cells == ("#000", "#fff")


class TestPixelAt:
    """Tests for Picture.pixel_at."""

    def test_row_major_indexing(self):
        pic = Picture(2, 2, ("a", "b", "c", "d"))
        assert pic.pixel_at(1, 0) == "b"
        assert pic.pixel_at(0, 1) == "c"

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_range_raises(self, white_3x3, x, y):
        """Should raise OutOfRangeError instead of reading outside the grid."""
        with pytest.raises(OutOfRangeError):
            white_3x3.pixel_at(x, y)

    def test_out_of_range_is_index_error(self, white_3x3):
        with pytest.raises(IndexError):
            white_3x3.pixel_at(9, 9)


class TestWithEdits:
    """Tests for Picture.with_edits."""

    def test_example_edit(self):
        """Should change only the edited cell."""
        pic = Picture.empty(2, 2, "#fff").with_edits([Edit(0, 0, "#000")])
        assert pic.pixel_at(0, 0) == "#000"
        assert pic.pixel_at(1, 1) == "#fff"

    def test_original_untouched(self, white_3x3):
        """Should return a new picture and leave the original as it was."""
        edited = white_3x3.with_edits([Edit(1, 1, "#000000")])
        assert edited is not white_3x3
        assert white_3x3.pixel_at(1, 1) == "#ffffff"

    def test_out_of_range_edits_ignored(self, white_3x3):
        """Should discard edits outside the grid."""
        edits = [Edit(-1, 0, "#000000"), Edit(3, 0, "#000000"), Edit(0, 3, "#000000"), Edit(0, -5, "#000000")]
        assert white_3x3.with_edits(edits) == white_3x3

    def test_last_edit_wins(self, white_3x3):
        """Should apply edits in order so the last write to a cell wins."""
        edited = white_3x3.with_edits([Edit(2, 2, "#111111"), Edit(2, 2, "#222222")])
        assert edited.pixel_at(2, 2) == "#222222"

    def test_accepts_plain_tuples(self, white_3x3):
        edited = white_3x3.with_edits([(0, 2, "#ff0000")])
        assert edited.pixel_at(0, 2) == "#ff0000"

    def test_no_edits(self, white_3x3):
        assert white_3x3.with_edits([]) == white_3x3


class TestChangedCells:
    """Tests for Picture.changed_cells."""

    def test_everything_without_previous(self, white_3x3):
        assert len(list(white_3x3.changed_cells(None))) == 9

    def test_only_differences(self, white_3x3):
        edited = white_3x3.with_edits([Edit(1, 2, "#000000")])
        assert list(edited.changed_cells(white_3x3)) == [Edit(1, 2, "#000000")]

    def test_nothing_for_identical(self, white_3x3):
        assert list(white_3x3.changed_cells(white_3x3)) == []

    def test_everything_on_size_change(self, white_3x3):
        bigger = Picture.empty(4, 3, "#ffffff")
        assert len(list(bigger.changed_cells(white_3x3))) == 12
