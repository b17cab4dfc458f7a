"""Starting, driving and stopping the engine's systems in dependency order."""

from __future__ import annotations

import logging
from collections.abc import Iterable

__all__ = ["System", "SystemManager"]

_log = logging.getLogger(__name__)


class System:
    """Base of engine systems; the default hooks track state and call counts."""

    initialized = False
    event_count = 0
    update_count = 0
    render_count = 0

    def init(self) -> None:
        self.initialized = True

    def on_event(self, event) -> None:
        self.event_count += 1

    def on_update(self) -> None:
        self.update_count += 1

    def on_render(self) -> None:
        self.render_count += 1

    def shut_down(self) -> None:
        self.initialized = False


class SystemManager:
    """Initializes systems in the given order and shuts them down in reverse.

    Any object with the hooks of :class:`System` can be managed.
    """

    def __init__(self):
        self._systems: list = []

    @property
    def systems(self) -> list:
        return list(self._systems)

    def init_systems(self, systems: Iterable) -> None:
        """Initialize each system in order; on failure shut down those already started."""
        try:
            for system in systems:
                system.init()
                self._systems.append(system)
            _log.info("[System Manager] All systems initialized.")
        except BaseException:
            self.shut_down_systems()
            raise

    def on_event(self, event) -> None:
        for system in self._systems:
            system.on_event(event)

    def on_update(self) -> None:
        for system in self._systems:
            system.on_update()

    def on_render(self) -> None:
        for system in self._systems:
            system.on_render()

    def shut_down_systems(self) -> None:
        """Shut down every started system, last started first."""
        _log.info("[SystemManager] Shutting down all systems.")
        systems, self._systems = self._systems, []
        for system in reversed(systems):
            system.shut_down()