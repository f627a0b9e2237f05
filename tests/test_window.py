"""Tests for window.py and the CLI entry point, without opening a display."""
import pygame
import pytest

from flappy_dragon import __main__ as entry
from flappy_dragon import window
from flappy_dragon.console import Console, Key
from flappy_dragon.game_state import GameMode, State


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


@pytest.mark.unit
class TestPollInput:

    def test_no_events(self):
        assert window.poll_input([]) == (None, False)

    def test_known_key(self):
        assert window.poll_input([keydown(pygame.K_p)]) == (Key.P, False)
        assert window.poll_input([keydown(pygame.K_SPACE)]) == (Key.SPACE, False)

    def test_unknown_key_dropped(self):
        assert window.poll_input([keydown(pygame.K_a)]) == (None, False)

    def test_last_key_wins(self):
        events = [keydown(pygame.K_p), keydown(pygame.K_q), keydown(pygame.K_a)]
        assert window.poll_input(events) == (Key.Q, False)

    def test_window_close(self):
        events = [keydown(pygame.K_SPACE), pygame.event.Event(pygame.QUIT)]
        assert window.poll_input(events) == (Key.SPACE, True)


@pytest.mark.unit
class TestWindowBuilder:

    def test_settings(self):
        builder = window.WindowBuilder.simple80x50().with_title("Test").with_fps(30)
        assert (builder.width, builder.height) == (80, 50)
        assert builder.title == "Test"
        assert builder.fps == 30

    def test_display_failure_raises_backend_error(self, monkeypatch):
        def no_display(*args, **kwargs):
            raise pygame.error("no video device")

        monkeypatch.setattr(pygame, "init", lambda: (0, 0))
        monkeypatch.setattr(pygame.display, "set_mode", no_display)
        with pytest.raises(window.BackendError):
            window.WindowBuilder.simple80x50().build()

    def test_main_returns_error_status(self, monkeypatch):
        def fail(self):
            raise window.BackendError("no display")

        monkeypatch.setattr(window.WindowBuilder, "build", fail)
        assert entry.main(["--seed", "1"]) == 1


class FakeClock:
    def tick(self, fps):
        return 16


class FakeWindow:
    def __init__(self):
        self.console = Console()
        self.clock = FakeClock()
        self.fps = 60
        self.frames_drawn = 0

    def draw(self):
        self.frames_drawn += 1


@pytest.mark.unit
class TestMainLoop:

    def test_quit_from_menu_stops_loop(self, monkeypatch):
        frames = iter([[], [keydown(pygame.K_q)]])
        monkeypatch.setattr(pygame.event, "get", lambda: next(frames))
        fake = FakeWindow()
        state = State()
        window.main_loop(fake, state)
        assert fake.console.quitting is True
        assert fake.frames_drawn == 1
        assert state.mode == GameMode.MENU

    def test_window_close_stops_loop(self, monkeypatch):
        monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
        fake = FakeWindow()
        window.main_loop(fake, State())
        assert fake.frames_drawn == 0

    def test_frame_time_reaches_state(self, monkeypatch):
        frames = iter([[keydown(pygame.K_p)], [], [], [pygame.event.Event(pygame.QUIT)]])
        monkeypatch.setattr(pygame.event, "get", lambda: next(frames))
        fake = FakeWindow()
        state = State()
        window.main_loop(fake, state)
        assert state.mode == GameMode.PLAYING
        assert state.frame_time == 32.0
