from saturn.background import SCREEN_HEIGHT, SCREEN_WIDTH
from saturn.observer import Event, EventKind, Listener, Rect
from saturn.runningstone import PUSH_STEPS, RunningStone
from saturn.sprite import BALL_SIZE


class RecordingFrame:
    def __init__(self):
        self.blits = []

    def blit(self, image, position):
        self.blits.append((image, position))


def test_touching_position_pushes_stone_down():
    stone = RunningStone(20, 0, object())
    stone.observer().receive(Event(EventKind.POSITION, Rect(20, 0, BALL_SIZE, BALL_SIZE)))
    stone.behave()
    assert stone.sprite.y == PUSH_STEPS
    assert stone.sprite.x == 20


def test_distant_position_leaves_stone_alone():
    stone = RunningStone(20, 0, object())
    stone.observer().receive(Event(EventKind.POSITION, Rect(100, 100, BALL_SIZE, BALL_SIZE)))
    stone.behave()
    assert (stone.sprite.x, stone.sprite.y) == (20, 0)


def test_reset_events_are_ignored_by_stone():
    stone = RunningStone(20, 0, object())
    stone.observer().receive(Event(EventKind.RESET))
    stone.behave()
    assert (stone.sprite.x, stone.sprite.y) == (20, 0)


def test_reaching_bottom_resets_and_notifies():
    stone = RunningStone(20, 0, object())
    listener = Listener()
    stone.register_subscription(listener, Event(EventKind.RESET))
    stone.sprite.y = SCREEN_HEIGHT
    stone.behave()
    assert stone.sprite.y == 0
    assert 0 <= stone.sprite.x < SCREEN_WIDTH - BALL_SIZE
    assert listener.poll_events() == [Event(EventKind.RESET)]


def test_no_reset_above_bottom():
    stone = RunningStone(20, SCREEN_HEIGHT - 1, object())
    listener = Listener()
    stone.register_subscription(listener, Event(EventKind.RESET))
    stone.behave()
    assert stone.sprite.y == SCREEN_HEIGHT - 1
    assert listener.poll_events() == []


def test_observer_handed_out_is_the_one_behave_reads():
    stone = RunningStone(20, 0, object())
    handed_out = stone.observer()
    handed_out.receive(Event(EventKind.POSITION, Rect(20, 0, BALL_SIZE, BALL_SIZE)))
    stone.behave()
    assert stone.sprite.y == PUSH_STEPS
    assert handed_out.poll_events() == []


def test_render_draws_at_position():
    image = object()
    stone = RunningStone(20, 0, image)
    frame = RecordingFrame()
    stone.render(frame)
    assert frame.blits == [(image, (20, 0))]