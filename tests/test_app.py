import pygame
import pytest

from sketchymvc.app import main


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_runs_fixed_number_of_frames(headless):
    assert main(["--frames", "2"]) == 0
    assert pygame.display.get_init() is False


def test_rejects_non_positive_frame_count(headless):
    with pytest.raises(SystemExit) as excinfo:
        main(["--frames", "0"])
    assert excinfo.value.code == 2


def test_rejects_non_numeric_frame_count(headless):
    with pytest.raises(SystemExit) as excinfo:
        main(["--frames", "many"])
    assert excinfo.value.code == 2