"""Tests for viewer settings resolution."""

import pytest

from pathviz.config import SPEEDS, ViewerConfig, resolve_config


class TestResolveConfig:
    def test_defaults(self):
        cfg = resolve_config(environ={}, argv=[])
        assert cfg == ViewerConfig()
        assert (cfg.rows, cfg.cols) == (20, 30)
        assert cfg.delay_ms == SPEEDS["medium"]

    def test_environment(self):
        cfg = resolve_config(
            environ={"PATHVIZ_ROWS": "12", "PATHVIZ_SPEED": "fast", "PATHVIZ_LOG_LEVEL": "debug"},
            argv=[],
        )
        assert cfg.rows == 12
        assert cfg.speed == "fast"
        assert cfg.delay_ms == 10
        assert cfg.log_level == "DEBUG"

    def test_cli_overrides_environment(self):
        cfg = resolve_config(
            environ={"PATHVIZ_HEURISTIC": "euclidean"},
            argv=["--heuristic=Dijkstra", "--map=small_maze", "--log-level=warning"],
        )
        assert cfg.heuristic == "dijkstra"
        assert cfg.map == "small_maze"
        assert cfg.log_level == "WARNING"

    def test_unrelated_args_ignored(self):
        cfg = resolve_config(environ={}, argv=["--verbose", "file.json", "--colour=red"])
        assert cfg == ViewerConfig()

    @pytest.mark.parametrize("arg", ["--rows=0", "--cols=-3", "--rows=abc"])
    def test_bad_dimensions(self, arg):
        with pytest.raises(ValueError):
            resolve_config(environ={}, argv=[arg])

    @pytest.mark.parametrize("arg", ["--speed=ludicrous", "--heuristic=octile", "--log-level=LOUD"])
    def test_bad_choices(self, arg):
        with pytest.raises(ValueError):
            resolve_config(environ={}, argv=[arg])
