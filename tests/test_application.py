import pytest

from zenith.application import (
    Application,
    KeyPressedEvent,
    WindowResizedEvent,
    run_application,
)
from zenith.errors import ZenithError
from zenith.scene import Scene
from zenith.systems import System


class _Tracking(System):
    def __init__(self, log):
        self.log = log

    def init(self):
        self.log.append("init")

    def on_event(self, event):
        self.log.append(("event", event))

    def shut_down(self):
        self.log.append("shut_down")


class _RecordingScene(Scene):
    def __init__(self):
        self.events = []
        self.updates = 0

    def on_event(self, event):
        self.events.append(event)

    def on_update(self):
        self.updates += 1


class _App(Application):
    def __init__(self, systems=()):
        super().__init__(systems)
        self.events = []
        self.updates = 0
        self.renders = 0

    def on_event(self, event):
        self.events.append(event)
        if isinstance(event, KeyPressedEvent) and event.key == "Escape":
            self.close()

    def on_update(self):
        self.updates += 1

    def on_render(self):
        self.renders += 1


def test_run_counts_frames():
    app = Application(())
    scene = _RecordingScene()
    app.scene_manager.load_scene(scene)
    try:
        assert app.run(max_frames=3) == 3
        assert scene.updates == 3
    finally:
        app.shut_down()


def test_events_reach_systems_scene_and_app():
    log = []
    with _App([_Tracking(log)]) as app:
        scene = _RecordingScene()
        app.scene_manager.load_scene(scene)
        event = WindowResizedEvent((640, 480))
        app.post_event(event)
        app.run(max_frames=1)
        assert ("event", event) in log
        assert scene.events == [event]
        assert app.events == [event]
        assert scene.updates == 1


def test_close_stops_loop_before_next_frame():
    with _App() as app:
        app.post_event(KeyPressedEvent("Escape"))
        frames = app.run(max_frames=10)
        assert frames == 1
        assert app.should_close is True
        assert app.run(max_frames=10) == 0


def test_events_are_handled_in_order():
    with _App() as app:
        events = [KeyPressedEvent("A"), KeyPressedEvent("B"), KeyPressedEvent("C")]
        for event in events:
            app.post_event(event)
        app.run(max_frames=1)
        assert app.events == events


def test_context_exit_shuts_down_systems():
    log = []
    tracking = _Tracking(log)
    with Application([tracking]) as app:
        assert tracking in app.system_manager.systems
        assert log == ["init"]
    assert log == ["init", "shut_down"]
    assert tracking not in app.system_manager.systems


def test_run_application_success():
    created = []

    def factory():
        app = _App()
        created.append(app)
        return app

    assert run_application(factory, max_frames=2) == 0
    assert created[0].updates == 2
    assert created[0].system_manager.systems == []


def test_run_application_reports_engine_error(capsys):
    def factory():
        raise ZenithError("engine broke")

    assert run_application(factory) == 1
    assert "engine broke" in capsys.readouterr().err


def test_run_application_reports_other_error(capsys):
    class _Failing(_App):
        def on_update(self):
            raise ValueError("bad frame")

    log = []
    assert run_application(lambda: _Failing([_Tracking(log)]), max_frames=1) == 1
    assert "bad frame" in capsys.readouterr().err
    assert log[-1] == "shut_down"


def test_events_are_frozen():
    event = KeyPressedEvent("W")
    with pytest.raises(AttributeError):
        event.key = "S"
    assert event.key == "W"