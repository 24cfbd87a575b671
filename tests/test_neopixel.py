import pytest

from picosnake.neopixel import LED_COUNT, LedMatrix, get_index


def test_index_covers_every_led_once():
    indices = [get_index(x, y) for y in range(5) for x in range(5)]
    assert sorted(indices) == list(range(LED_COUNT))


def test_rows_alternate_direction():
    assert get_index(4, 0) == 0
    assert get_index(0, 1) == 5
    assert get_index(0, 0) == get_index(1, 0) + 1
    assert get_index(1, 1) == get_index(0, 1) + 1


def test_write_emits_grb_order():
    received = []
    matrix = LedMatrix(received.append)
    matrix.set_led(0, 1, 2, 3)
    data = matrix.write()
    assert received == [data]
    assert len(data) == 3 * LED_COUNT
    assert data[:3] == bytes([2, 1, 3])
    assert not any(data[3:])


def test_color_at_round_trip():
    matrix = LedMatrix()
    matrix.set_led(get_index(2, 3), 10, 0, 5)
    assert matrix.color_at(2, 3) == (10, 0, 5)
    assert matrix.color_at(3, 2) == (0, 0, 0)


def test_clear_turns_everything_off():
    matrix = LedMatrix()
    for i in range(LED_COUNT):
        matrix.set_led(i, 1, 1, 1)
    matrix.clear()
    assert matrix.pixels == ((0, 0, 0),) * LED_COUNT
    assert matrix.write() == bytes(3 * LED_COUNT)


@pytest.mark.parametrize("index", [-1, LED_COUNT])
def test_set_led_out_of_range(index):
    with pytest.raises(IndexError):
        LedMatrix().set_led(index, 1, 1, 1)


def test_color_at_outside_grid():
    with pytest.raises(IndexError):
        LedMatrix().color_at(0, 5)