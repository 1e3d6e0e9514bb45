"""Smoke tests for the pygame viewer (headless, SDL dummy driver)."""

import pytest

pygame = pytest.importorskip("pygame")

from pathviz.app.editor import new_grid  # noqa: E402
from pathviz.app.viewer import Viewer, resolve_map_path  # noqa: E402
from pathviz.config import ViewerConfig  # noqa: E402


@pytest.fixture
def viewer():
    v = Viewer(ViewerConfig(speed="fast"), new_grid(10, 12))
    yield v
    pygame.quit()


class TestViewer:
    def test_cell_at_pixel_round_trips(self, viewer):
        rect = viewer._cell_rect((2, 3))
        assert viewer.cell_at_pixel(rect.center) == (2, 3)
        assert viewer.cell_at_pixel((0, 0)) is None

    def test_paint_wall(self, viewer):
        viewer.on_key(pygame.K_w)
        viewer.paint(viewer._cell_rect((0, 0)).center)
        assert viewer.grid.cell_at(0, 0).obstacle

    def test_mode_keys(self, viewer):
        viewer.on_key(pygame.K_s)
        assert viewer.editor.mode == "start"
        viewer.on_key(pygame.K_e)
        assert viewer.editor.mode == "end"
        assert viewer.btn_mode_end.active

    def test_run_to_completion(self, viewer):
        viewer.toggle_run()
        assert viewer.running
        assert viewer.editor.locked
        viewer.playback.finish()
        viewer._sync_state()
        assert viewer.state == "Done"
        assert not viewer.running
        assert not viewer.editor.locked
        viewer._draw()

    def test_step_once(self, viewer):
        viewer.on_key(pygame.K_n)
        assert viewer.playback.active
        assert viewer.state == "Paused"

    def test_invalid_endpoints_reported(self, viewer):
        viewer.grid.end = None
        viewer.toggle_run()
        assert not viewer.running
        assert viewer.state.startswith("Can't search")

    def test_start_on_end_is_searched(self, viewer):
        viewer.grid.set_start(*viewer.grid.end)
        viewer.step_once()
        assert viewer.playback.finished
        assert viewer.state == "Done"

    def test_endpoint_walled_mid_search_is_reported(self, viewer):
        assert viewer.playback.start(viewer.grid, viewer.heuristic)
        viewer.grid.cell_at(*viewer.grid.end).obstacle = True
        viewer.playback.tick()
        viewer._sync_state()
        assert viewer.state.startswith("Can't search: invalid end")
        assert not viewer.running
        assert not viewer.editor.locked

    def test_reset_keeps_walls(self, viewer):
        viewer.grid.set_obstacle(0, 0, True)
        viewer.toggle_run()
        viewer.on_key(pygame.K_r)
        assert not viewer.playback.active
        assert viewer.grid.obstacles() == [(0, 0)]

    def test_clear_grid(self, viewer):
        viewer.grid.set_obstacle(0, 0, True)
        viewer.on_key(pygame.K_c)
        assert viewer.grid.obstacles() == []

    def test_speed_and_heuristic_cycle(self, viewer):
        viewer.bump_speed(-1)
        assert viewer.speed == "medium"
        assert viewer.playback.delay_ms == 50
        viewer.cycle_heuristic()
        assert viewer.heuristic == "euclidean"

    def test_switch_map(self, viewer):
        viewer.switch_map("small_maze")
        assert viewer.grid.dimensions() == (7, 7)
        assert viewer.selected_map_key == "small_maze"

    def test_switch_to_missing_map_keeps_grid(self, viewer):
        before = viewer.grid
        viewer.switch_map("no_such_map")
        assert viewer.grid is before

    def test_resolve_map_path_unknown(self):
        with pytest.raises(ValueError):
            resolve_map_path("no_such_map")

    def test_quit_key(self, viewer):
        viewer.on_key(pygame.K_q)
        assert viewer._quit
