"""The application frame loop and the entry point that runs it."""

from __future__ import annotations

import logging
import sys
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from zenith.errors import ZenithError
from zenith.scene import SceneManager
from zenith.systems import SystemManager

__all__ = [
    "KeyPressedEvent",
    "WindowResizedEvent",
    "Application",
    "run_application",
]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPressedEvent:
    """A key went down."""

    key: Any


@dataclass(frozen=True)
class WindowResizedEvent:
    """The window changed size; ``new_size`` is (width, height)."""

    new_size: tuple[int, int]


class Application:
    """Runs the frame loop: events, update, render, until closed.

    The scene manager is started after the given systems, so it is
    shut down first. Use the application as a context manager, or call
    :meth:`shut_down`, to stop the systems.
    """

    def __init__(self, systems: Iterable = ()):
        self.scene_manager = SceneManager()
        self.system_manager = SystemManager()
        self._events: deque = deque()
        self._should_close = False
        self.system_manager.init_systems([*systems, self.scene_manager])
        _log.info("Application initialized.")

    @property
    def should_close(self) -> bool:
        return self._should_close

    def post_event(self, event) -> None:
        """Queue an event for the start of the next frame."""
        self._events.append(event)

    def close(self) -> None:
        """Ask the loop to stop before its next frame."""
        self._should_close = True

    def run(self, max_frames: int | None = None) -> int:
        """Run frames until closed or ``max_frames`` have run; return the frame count."""
        frames = 0
        while not self._should_close and (max_frames is None or frames < max_frames):
            while self._events:
                self._handle_event(self._events.popleft())
            self._handle_update()
            self._handle_render()
            frames += 1
        return frames

    def on_event(self, event) -> None:
        """Called for every event after the systems have seen it."""

    def on_update(self) -> None:
        """Called once per frame after the systems update."""

    def on_render(self) -> None:
        """Called once per frame after the systems render."""

    def shut_down(self) -> None:
        _log.info("Shutting down application.")
        self.system_manager.shut_down_systems()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shut_down()

    def _handle_event(self, event) -> None:
        self.system_manager.on_event(event)
        self.on_event(event)

    def _handle_update(self) -> None:
        self.system_manager.on_update()
        self.on_update()

    def _handle_render(self) -> None:
        self.system_manager.on_render()
        self.on_render()


def run_application(factory: Callable[[], Application], max_frames: int | None = None) -> int:
    """Create an application, run it and shut it down; report errors on stderr.

    Returns 0 on success and 1 when an error was reported.
    """
    try:
        with factory() as app:
            app.run(max_frames)
    except ZenithError as e:
        print(f"{e}\n{e.stacktrace()}", file=sys.stderr)
        return 1
    except Exception as e:
        print(e, file=sys.stderr)
        return 1
    return 0