"""Scenes and the manager that runs the active one."""

from __future__ import annotations

import logging

__all__ = ["Scene", "SceneManager"]

_log = logging.getLogger(__name__)

_NO_SCENE = "[Scene Manager] No scene loaded."


class Scene:
    """Base of all scenes; override the hooks that are needed.

    The default hooks count how often each was called.
    """

    load_count = 0
    update_count = 0
    event_count = 0
    render_count = 0

    def on_load(self) -> None:
        """Called when the scene becomes active."""
        self.load_count += 1

    def on_update(self) -> None:
        """Called once per frame."""
        self.update_count += 1

    def on_event(self, event) -> None:
        """Called for each event while the scene is active."""
        self.event_count += 1

    def on_render(self) -> None:
        """Called once per frame after drawing."""
        self.render_count += 1


class SceneManager:
    """Holds the active scene and a scene queued to replace it."""

    def __init__(self):
        self._scene: Scene | None = None
        self._queued_scene: Scene | None = None
        self._running = False

    @property
    def scene(self) -> Scene | None:
        return self._scene

    @property
    def running(self) -> bool:
        return self._running

    def init(self) -> None:
        self._running = True
        _log.info("Scene Manager initialized.")

    def on_update(self) -> None:
        if self._queued_scene is not None:
            self._scene, self._queued_scene = self._queued_scene, None
            self._scene.on_load()

        if self._scene is None:
            _log.warning(_NO_SCENE)
            return

        self._scene.on_update()

    def on_event(self, event) -> None:
        if self._scene is None:
            _log.warning(_NO_SCENE)
            return
        self._scene.on_event(event)

    def on_render(self) -> None:
        if self._scene is None:
            _log.warning(_NO_SCENE)
            return
        self._scene.on_render()

    def shut_down(self) -> None:
        """Drop the active and queued scenes."""
        self._scene = None
        self._queued_scene = None
        self._running = False
        _log.info("Scene Manager shut down.")

    def load_scene(self, scene: Scene) -> None:
        """Load ``scene`` now if none is active, else at the start of the next update."""
        if self._scene is None:
            self._scene = scene
            self._scene.on_load()
        else:
            self._queued_scene = scene