from vang.events import WindowCloseEvent
from vang.layers import Layer, LayerStack


class _Recorder(Layer):
    def __init__(self, name, log, handles=False):
        super().__init__(name)
        self.log = log
        self.handles = handles

    def on_attach(self):
        self.log.append(("attach", self.name))

    def on_detach(self):
        self.log.append(("detach", self.name))

    def on_update(self):
        self.log.append(("update", self.name))

    def on_event(self, event):
        self.log.append(("event", self.name))
        if self.handles:
            event.handled = True


def test_default_layer_name():
    assert Layer().name == "Layer"
    assert Layer("Player Movement").name == "Player Movement"


def test_layers_go_below_overlays():
    log = []
    stack = LayerStack()
    a = _Recorder("a", log)
    overlay = _Recorder("overlay", log)
    b = _Recorder("b", log)
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.push_layer(b)
    assert list(stack) == [a, b, overlay]
    assert len(stack) == 3
    assert log == [("attach", "a"), ("attach", "overlay"), ("attach", "b")]


def test_update_runs_bottom_up():
    log = []
    stack = LayerStack()
    stack.push_overlay(_Recorder("top", log))
    stack.push_layer(_Recorder("bottom", log))
    log.clear()
    stack.update()
    assert log == [("update", "bottom"), ("update", "top")]


def test_events_run_top_down_until_handled():
    log = []
    stack = LayerStack()
    stack.push_layer(_Recorder("bottom", log))
    stack.push_layer(_Recorder("middle", log, handles=True))
    stack.push_overlay(_Recorder("top", log))
    log.clear()
    event = WindowCloseEvent()
    stack.on_event(event)
    assert log == [("event", "top"), ("event", "middle")]
    assert event.handled


def test_pop_layer_and_overlay():
    log = []
    stack = LayerStack()
    a = _Recorder("a", log)
    o = _Recorder("o", log)
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_layer(a)
    stack.pop_overlay(o)
    assert len(stack) == 0
    assert log[-2:] == [("detach", "a"), ("detach", "o")]
    new = _Recorder("new", log)
    stack.push_layer(new)
    assert list(stack) == [new]


def test_pop_missing_layer_does_nothing():
    log = []
    stack = LayerStack()
    kept = _Recorder("kept", log)
    stranger = _Recorder("stranger", log)
    stack.push_layer(kept)
    stack.pop_layer(stranger)
    stack.pop_overlay(stranger)
    assert list(stack) == [kept]
    assert ("detach", "stranger") not in log