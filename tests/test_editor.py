"""Tests for click-to-paint editing."""

import pytest

from pathviz.app.editor import GridEditor, default_endpoints, new_grid


@pytest.fixture
def editor():
    return GridEditor(new_grid(6, 8))


class TestDefaults:
    def test_default_endpoints_20x30(self):
        assert default_endpoints(20, 30) == ((10, 5), (10, 25))

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 2), (2, 1), (3, 3), (5, 40)])
    def test_new_grid_endpoints_are_in_bounds(self, rows, cols):
        grid = new_grid(rows, cols)
        assert grid.start is not None
        assert grid.in_bounds(grid.start)
        assert grid.in_bounds(grid.end)
        if rows * cols > 1:
            assert grid.end != grid.start


class TestGridEditor:
    def test_default_mode_is_wall(self, editor):
        assert editor.mode == "wall"

    def test_wall_click_toggles(self, editor):
        assert editor.click((0, 0))
        assert editor.grid.cell_at(0, 0).obstacle
        assert editor.click((0, 0))
        assert not editor.grid.cell_at(0, 0).obstacle

    def test_wall_click_on_endpoint_is_ignored(self, editor):
        assert not editor.click(editor.grid.start)
        assert not editor.grid.cell_at(*editor.grid.start).obstacle

    def test_start_mode_moves_start_and_clears_wall(self, editor):
        editor.click((1, 1))
        editor.set_mode("start")
        assert editor.click((1, 1))
        assert editor.grid.start == (1, 1)
        assert not editor.grid.cell_at(1, 1).obstacle

    def test_end_mode(self, editor):
        editor.set_mode("end")
        assert editor.click((5, 7))
        assert editor.grid.end == (5, 7)
        assert not editor.click((5, 7))

    def test_start_onto_end_shares_the_cell(self, editor):
        end = editor.grid.end
        editor.set_mode("start")
        assert editor.click(end)
        assert editor.grid.start == editor.grid.end == end

    def test_locked_editor_ignores_clicks(self, editor):
        editor.locked = True
        assert not editor.click((0, 0))
        assert editor.grid.obstacles() == []

    def test_out_of_bounds_click(self, editor):
        assert not editor.click((99, 99))

    def test_drag_repeats_first_value(self, editor):
        editor.click((0, 0))              # paints a wall
        assert editor.drag((0, 1))
        assert not editor.drag((0, 1))    # already a wall
        editor.release()
        assert not editor.drag((0, 2))
        assert editor.grid.obstacles() == [(0, 0), (0, 1)]

    def test_drag_skips_endpoints(self, editor):
        editor.click((0, 0))
        assert not editor.drag(editor.grid.end)

    def test_bad_mode(self, editor):
        with pytest.raises(ValueError):
            editor.set_mode("erase")

    def test_full_reset(self, editor):
        editor.click((0, 0))
        grid = editor.full_reset(4, 4)
        assert grid is editor.grid
        assert grid.dimensions() == (4, 4)
        assert grid.obstacles() == []
