from dataclasses import asdict

from dsfpuzzle.camera import CameraFrame


def test_defaults_match_documented_values():
    frame = CameraFrame()
    assert frame.pan == (0.0, 0.0)
    assert frame.max_pan == 5.0
    assert frame.panning_speed == 10.0
    assert frame.panning_recovery_speed == 40.0


def test_recovery_is_faster_than_panning():
    frame = CameraFrame()
    assert frame.panning_recovery_speed > frame.panning_speed


def test_custom_values_are_kept():
    frame = CameraFrame(pan=(1.5, -2.0), max_pan=3.0)
    assert asdict(frame) == {
        "pan": (1.5, -2.0),
        "max_pan": 3.0,
        "panning_speed": CameraFrame().panning_speed,
        "panning_recovery_speed": CameraFrame().panning_recovery_speed,
    }


def test_pan_can_be_changed():
    frame = CameraFrame()
    frame.pan = (0.25, 0.5)
    assert frame.pan == (0.25, 0.5)
    assert CameraFrame().pan == (0.0, 0.0)