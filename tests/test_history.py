from dsfpuzzle.history import Frame, History, Rewind
from dsfpuzzle.movement import Pos


def test_new_history_forces_key_frame():
    h = History()
    assert h.force_key_frame is True
    assert h.pop_frame() is None
    assert len(h) == 0


def test_frames_pop_in_reverse_order():
    h = History()
    frames = [Frame(Pos(i, -i)) for i in range(3)]
    for frame in frames:
        h.push_frame(frame)
    assert len(h) == len(frames)
    popped = [h.pop_frame() for _ in frames]
    assert popped == list(reversed(frames))
    assert h.pop_frame() is None


def test_frame_holds_position():
    assert Frame(Pos(2, 3)).player_position == Pos(2, 3)


def test_rewind_readiness():
    assert not Rewind().is_ready()
    assert not Rewind(0.5).is_ready()
    assert Rewind(-0.1).is_ready()
    assert Rewind(-0.0).is_ready()