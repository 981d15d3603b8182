import pytest

from dsfpuzzle.signals import SignalEdge, SignalEdgeDetector


def test_full_press_cycle():
    detector = SignalEdgeDetector()
    results = [detector.edge("jump", down) for down in (False, True, True, False, False)]
    assert results == [
        SignalEdge.STILL_LOW,
        SignalEdge.RISING,
        SignalEdge.STILL_HIGH,
        SignalEdge.FALLING,
        SignalEdge.STILL_LOW,
    ]


def test_first_press_is_rising():
    assert SignalEdgeDetector().edge("jump", True) is SignalEdge.RISING


def test_actions_are_tracked_independently():
    detector = SignalEdgeDetector()
    assert detector.edge("jump", True) is SignalEdge.RISING
    assert detector.edge("left", True) is SignalEdge.RISING
    assert detector.edge("jump", False) is SignalEdge.FALLING
    assert detector.edge("left", True) is SignalEdge.STILL_HIGH


@pytest.mark.parametrize(
    "previous, current, expected",
    [
        (False, False, SignalEdge.STILL_LOW),
        (False, True, SignalEdge.RISING),
        (True, True, SignalEdge.STILL_HIGH),
        (True, False, SignalEdge.FALLING),
    ],
)
def test_transitions(previous, current, expected):
    detector = SignalEdgeDetector()
    detector.edge("action", previous)
    assert detector.edge("action", current) is expected