from annotation_canvas.capture import PointerCapture


def test_capture_and_release():
    capture = PointerCapture()

    capture.capture(7)

    assert capture.owner == 7
    assert capture.owns(7)
    assert not capture.owns(8)

    capture.release(7)

    assert capture.owner is None
    assert not capture.is_captured


def test_release_other_pointer_is_noop():
    capture = PointerCapture()
    capture.capture(1)

    capture.release(2)

    assert capture.owns(1)


def test_owns_nothing_when_idle():
    assert not PointerCapture().owns(1)
