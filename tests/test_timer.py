from game.meteors.timer import Timer, ticks_for


def test_ticks_for_truncates():
    assert ticks_for(500, 60) == 30
    assert ticks_for(1000, 60) == 60
    assert ticks_for(10, 60) == 0  # 0.6 ticks
    assert ticks_for(25, 60) == 1  # 1.5 ticks


def test_update_is_monotonic_and_saturates():
    t = Timer(5)
    seen = []
    for _ in range(10):
        assert t.current_ticks <= t.target_ticks
        seen.append((t.current_ticks, t.is_ready()))
        t.update()

    assert [c for c, _ in seen[:6]] == [0, 1, 2, 3, 4, 5]
    assert all(c == 5 for c, _ in seen[5:])
    # Ready exactly once the target is reached and from then on
    assert [r for _, r in seen] == [False] * 5 + [True] * 5


def test_reset_returns_to_not_ready():
    t = Timer.from_duration(500, 60)
    for _ in range(30):
        t.update()
    assert t.is_ready()
    t.reset()
    assert not t.is_ready()
    assert t.current_ticks == 0
    assert t.progress == 0.0


def test_force_ready_and_progress():
    t = Timer(4)
    t.update()
    assert t.progress == 0.25
    t.force_ready()
    assert t.is_ready()
    assert t.progress == 1.0


def test_zero_target_is_always_ready():
    t = Timer(0)
    assert t.is_ready()
    t.update()
    assert t.current_ticks == 0
    assert t.progress == 1.0
