"""Tests for argument parsing and the command line entry point."""

import logging
from unittest.mock import patch

import pytest
from scroll import ConfigError, ScalingMode
from scroll_display.cli import build_config, build_parser, main


def parse(*argv):
    return build_parser().parse_args(list(argv))


class TestBuildConfig:
    def test_minimal(self):
        cfg = build_config(parse("-i", "bg.png", "-p", "0,0;1,1"))
        assert cfg.image == "bg.png"
        assert cfg.waypoints == ((0.0, 0.0), (1.0, 1.0))
        assert cfg.scaling_mode is ScalingMode.STRETCH
        assert cfg.speed == pytest.approx(0.1 / 1000)
        assert cfg.smoothing is False
        assert cfg.fps == 60
        assert cfg.resolution == 15

    def test_all_flags(self):
        cfg = build_config(parse(
            "-i", "bg.png", "-p", "0,0;1,0;1,1",
            "-s", "2", "-m", "fit-height", "-V", "250",
            "-f", "30", "-b", "-r", "8",
        ))
        assert cfg.scale == 2.0
        assert cfg.scaling_mode is ScalingMode.FIT_HEIGHT
        assert cfg.speed == 0.25
        assert cfg.effective_speed == 0.125
        assert cfg.fps == 30
        assert cfg.smoothing is True
        assert cfg.resolution == 8

    def test_numeric_mode(self):
        cfg = build_config(parse("-i", "bg.png", "-p", "0,0;1,1", "-m", "1"))
        assert cfg.scaling_mode is ScalingMode.FIT_WIDTH

    @pytest.mark.parametrize(
        "extra",
        [
            ["-p", "0,0"],
            ["-p", "0,0;1,1", "-s", "0.5"],
            ["-p", "0,0;1,1", "-V", "0"],
            ["-p", "0,0;1,1", "-V", "nan"],
            ["-p", "0,0;1,1", "-s", "inf"],
            ["-p", "0,0;1,1", "-f", "0"],
            ["-p", "0,0;1,1", "-r", "1"],
            ["-p", "0,0;1,1", "-m", "9"],
        ],
    )
    def test_invalid_values(self, extra):
        with pytest.raises(ConfigError):
            build_config(parse("-i", "bg.png", *extra))


class TestMain:
    def test_runs_with_config(self):
        with patch("scroll_display.cli.run") as run:
            assert main(["-i", "bg.png", "-p", "0,0;1,1", "-b"]) == 0
        (cfg,), _ = run.call_args
        assert cfg.smoothing is True
        assert cfg.waypoints == ((0.0, 0.0), (1.0, 1.0))

    def test_invalid_points_exit_nonzero(self, caplog):
        with patch("scroll_display.cli.run") as run:
            with caplog.at_level(logging.ERROR):
                assert main(["-i", "bg.png", "-p", "0,0;1"]) == 1
        run.assert_not_called()
        assert "two dimensions" in caplog.text

    def test_load_failure_exit_nonzero(self):
        with patch("scroll_display.cli.run", side_effect=ConfigError("Can't load image")):
            assert main(["-i", "missing.png", "-p", "0,0;1,1"]) == 1

    def test_missing_points_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            main(["-i", "bg.png"])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-v"])
        assert exc.value.code == 0
        assert "scroll" in capsys.readouterr().out

    def test_non_finite_scale_exit_nonzero(self, caplog):
        with patch("scroll_display.cli.run") as run:
            with caplog.at_level(logging.ERROR):
                assert main(["-i", "bg.png", "-p", "0,0;1,1", "-s", "inf"]) == 1
        run.assert_not_called()
        assert "Scale" in caplog.text
