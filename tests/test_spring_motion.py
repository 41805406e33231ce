import pytest

from expander.components.border_point import BorderPoint
from expander.config import spring_config
from expander.motion import SpringMotion

TICK = 15.0


def run_until_arrived(motion, point, now, limit=10_000):
    for i in range(limit):
        now += TICK
        motion.advance(point, now)
        if motion.is_finished(point):
            return i + 1, now
    return None, now


def test_single_step_matches_hand_integration():
    motion = SpringMotion(spring_config())
    point = BorderPoint(x=0.0, y=0.0, target_x=10.0, target_y=0.0, last_tick=0.0)

    motion.advance(point, 15.0)

    # a = 0.5 * 10; v = (0 + a * 15) * 0.9 = 67.5 units/s; dx = 67.5 * 15 / 1000
    assert point.vx == pytest.approx(67.5)
    assert point.x == pytest.approx(1.0125)
    assert point.y == 0.0
    assert point.last_tick == 15.0


@pytest.mark.parametrize("start", [(0.0, 0.0), (100.0, 0.0), (37.5, 81.0), (100.0, 100.0)])
@pytest.mark.parametrize("target", [(24.0, 24.0), (76.0, 76.0), (0.0, 100.0)])
def test_converges_from_any_start_inside_bounds(start, target):
    motion = SpringMotion(spring_config())
    point = BorderPoint(x=start[0], y=start[1], target_x=target[0], target_y=target[1])

    ticks, _ = run_until_arrived(motion, point, 0.0)

    assert ticks is not None, "spring never settled within 10,000 ticks"


def test_arrival_can_happen_mid_swing():
    motion = SpringMotion(spring_config())
    point = BorderPoint(x=0.0, y=0.0, target_x=24.0, target_y=24.0)

    ticks, _ = run_until_arrived(motion, point, 0.0)

    assert ticks is not None
    # Position is within tolerance but the point is still moving.
    assert abs(point.vx) > 1.0


def test_settled_point_stays_finished_from_the_next_tick():
    motion = SpringMotion(spring_config())
    point = BorderPoint(x=0.0, y=0.0, target_x=24.0, target_y=24.0)
    ticks, now = run_until_arrived(motion, point, 0.0)
    assert ticks is not None

    motion.settle(point)

    assert point.position() == (24.0, 24.0)
    assert (point.vx, point.vy) == (0.0, 0.0)
    for _ in range(1000):
        now += TICK
        motion.advance(point, now)
        assert motion.is_finished(point)
    assert point.position() == (24.0, 24.0)


def test_resting_point_never_drifts():
    motion = SpringMotion(spring_config())
    point = BorderPoint.resting(12.0, 34.0, now=0.0)
    now = 0.0
    for _ in range(100):
        now += TICK
        motion.advance(point, now)
    assert point.position() == (12.0, 34.0)
    assert motion.is_finished(point)


def test_retarget_keeps_position_and_velocity():
    motion = SpringMotion(spring_config())
    point = BorderPoint(x=40.0, y=60.0, target_x=100.0, target_y=100.0, vx=120.0, vy=-35.0)

    motion.retarget(point, 0.0, 0.0, now=500.0)

    assert point.position() == (40.0, 60.0)
    assert point.target() == (0.0, 0.0)
    assert (point.vx, point.vy) == (120.0, -35.0)
    assert point.last_tick == 500.0


def test_long_gap_is_clamped_to_max_step():
    motion = SpringMotion(spring_config())
    clamped = BorderPoint(x=0.0, y=0.0, target_x=10.0, target_y=10.0, last_tick=0.0)
    reference = BorderPoint(x=0.0, y=0.0, target_x=10.0, target_y=10.0, last_tick=0.0)

    motion.advance(clamped, 60_000.0)
    motion.advance(reference, 50.0)

    assert clamped.position() == pytest.approx(reference.position())
    assert clamped.last_tick == 60_000.0


def test_clock_going_backwards_does_not_move_the_point():
    motion = SpringMotion(spring_config())
    point = BorderPoint(x=5.0, y=5.0, target_x=50.0, target_y=50.0, last_tick=1_000.0)

    motion.advance(point, 400.0)

    assert point.position() == (5.0, 5.0)
    assert point.last_tick == 400.0
