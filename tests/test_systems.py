import pytest

from zenith.systems import System, SystemManager


class _Recording(System):
    def __init__(self, name, log, fail=False):
        self.name = name
        self.log = log
        self.fail = fail

    def init(self):
        if self.fail:
            raise RuntimeError(f"{self.name} failed")
        self.log.append(("init", self.name))

    def on_event(self, event):
        self.log.append(("event", self.name, event))

    def on_update(self):
        self.log.append(("update", self.name))

    def on_render(self):
        self.log.append(("render", self.name))

    def shut_down(self):
        self.log.append(("shut_down", self.name))


def test_init_in_order_and_shutdown_in_reverse():
    log = []
    manager = SystemManager()
    manager.init_systems([_Recording("a", log), _Recording("b", log), _Recording("c", log)])
    manager.shut_down_systems()
    assert log == [
        ("init", "a"),
        ("init", "b"),
        ("init", "c"),
        ("shut_down", "c"),
        ("shut_down", "b"),
        ("shut_down", "a"),
    ]


def test_failed_init_shuts_down_started_systems():
    log = []
    manager = SystemManager()
    systems = [_Recording("a", log), _Recording("b", log), _Recording("c", log, fail=True)]
    with pytest.raises(RuntimeError, match="c failed"):
        manager.init_systems(systems)
    assert log == [("init", "a"), ("init", "b"), ("shut_down", "b"), ("shut_down", "a")]
    assert manager.systems == []


def test_hooks_reach_every_system():
    log = []
    manager = SystemManager()
    manager.init_systems([_Recording("a", log), _Recording("b", log)])
    log.clear()
    manager.on_event("e")
    manager.on_update()
    manager.on_render()
    assert log == [
        ("event", "a", "e"),
        ("event", "b", "e"),
        ("update", "a"),
        ("update", "b"),
        ("render", "a"),
        ("render", "b"),
    ]


def test_shutdown_runs_once():
    log = []
    manager = SystemManager()
    manager.init_systems([_Recording("a", log)])
    manager.shut_down_systems()
    manager.shut_down_systems()
    assert log.count(("shut_down", "a")) == 1


def test_base_system_is_manageable():
    manager = SystemManager()
    system = System()
    manager.init_systems([system])
    manager.on_update()
    assert manager.systems == [system]