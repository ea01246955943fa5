from annotation_canvas.models import PageElement, Rect
from annotation_canvas.observer import ResizeObserver


def test_observer_called_on_resize():
    element = PageElement(tag="img", rect=Rect(0, 0, 100, 100))
    calls = []
    observer = ResizeObserver(lambda: calls.append(1))

    observer.observe(element)
    element.set_rect(Rect(0, 0, 150, 100))
    element.set_rect(Rect(0, 0, 150, 120))

    assert len(calls) == 2


def test_observe_twice_registers_once():
    element = PageElement(tag="img", rect=Rect(0, 0, 100, 100))
    calls = []
    observer = ResizeObserver(lambda: calls.append(1))

    observer.observe(element)
    observer.observe(element)
    element.set_rect(Rect(0, 0, 10, 10))

    assert len(calls) == 1
    assert observer.observed == [element]


def test_disconnect_stops_callbacks():
    element = PageElement(tag="img", rect=Rect(0, 0, 100, 100))
    calls = []
    observer = ResizeObserver(lambda: calls.append(1))

    observer.observe(element)
    observer.disconnect()
    element.set_rect(Rect(0, 0, 10, 10))

    assert calls == []
    assert observer.observed == []


def test_unobserve_single_element():
    first = PageElement(tag="img", rect=Rect(0, 0, 100, 100))
    second = PageElement(tag="canvas", rect=Rect(0, 0, 100, 100))
    calls = []
    observer = ResizeObserver(lambda: calls.append(1))

    observer.observe(first)
    observer.observe(second)
    observer.unobserve(first)
    first.set_rect(Rect(0, 0, 1, 1))
    second.set_rect(Rect(0, 0, 1, 1))

    assert len(calls) == 1
