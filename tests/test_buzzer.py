import pytest

from picosnake.buzzer import Buzzer


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def buzzer(clock):
    return Buzzer(clock, 1_000_000)


def test_starts_silent(buzzer):
    assert buzzer.level == 0
    assert not buzzer.active
    assert not buzzer.sounding


def test_turn_on_sets_wrap_and_duty(buzzer):
    buzzer.turn_on(1000)
    assert buzzer.wrap == 999
    assert 0 < buzzer.level < buzzer.wrap
    assert buzzer.sounding


def test_higher_frequency_gives_shorter_period(buzzer):
    buzzer.turn_on(400)
    low = buzzer.wrap
    buzzer.turn_on(1200)
    assert buzzer.wrap < low


def test_turn_off(buzzer):
    buzzer.turn_on(1000)
    buzzer.turn_off()
    assert buzzer.level == 0


def test_beep_runs_until_duration_elapses(buzzer, clock):
    clock.now = 50
    buzzer.start(1000, 100)
    assert buzzer.active and buzzer.sounding
    clock.now = 149
    buzzer.update()
    assert buzzer.active and buzzer.sounding
    clock.now = 150
    buzzer.update()
    assert not buzzer.active
    assert buzzer.level == 0


def test_restart_extends_beep(buzzer, clock):
    buzzer.start(1000, 100)
    clock.now = 80
    buzzer.start(400, 100)
    clock.now = 120
    buzzer.update()
    assert buzzer.active
    assert buzzer.frequency == 400


def test_stop_ends_beep(buzzer):
    buzzer.start(1000, 100)
    buzzer.stop()
    assert not buzzer.active
    assert not buzzer.sounding


def test_update_without_beep_keeps_state(buzzer, clock):
    clock.now = 10_000
    buzzer.update()
    assert not buzzer.active
    assert buzzer.level == 0


@pytest.mark.parametrize("frequency", [0, -5])
def test_rejects_non_positive_frequency(buzzer, frequency):
    with pytest.raises(ValueError):
        buzzer.turn_on(frequency)