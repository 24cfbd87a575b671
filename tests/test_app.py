import pytest

from picosnake.app import (
    BORDER_HEIGHT,
    BORDER_WIDTH,
    Menu,
    Screen,
    draw_border,
    draw_square,
    main,
    render_screen,
)
from picosnake.buzzer import Buzzer
from picosnake.game import ADC_MAX, CENTER, Phase
from picosnake.neopixel import LedMatrix
from picosnake.ssd1306 import SSD1306


class _RecordingBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


def _lit(display):
    return {
        (x, y)
        for y in range(display.height)
        for x in range(display.width)
        if display.get_pixel(x, y)
    }


def test_draw_border_is_a_hollow_square():
    display = SSD1306()
    left, top = draw_border(display, 108, 32)
    lit = _lit(display)
    xs = {x for x, _ in lit}
    ys = {y for _, y in lit}
    assert min(xs) == left and max(xs) == left + BORDER_WIDTH - 1
    assert min(ys) == top and max(ys) == top + BORDER_HEIGHT - 1
    assert (left + 10, top + 10) not in lit


def test_draw_square_is_filled_and_sized():
    display = SSD1306()
    x, y = draw_square(display, 108, 32, 8, CENTER, CENTER)
    lit = _lit(display)
    expected = {(x + i, y + j) for i in range(8) for j in range(8)}
    assert lit == expected


@pytest.mark.parametrize("vrx", [0, 1000, CENTER, 3000, ADC_MAX])
@pytest.mark.parametrize("vry", [0, 1000, CENTER, 3000, ADC_MAX])
def test_square_stays_inside_border(vrx, vry):
    display = SSD1306()
    left, top = draw_border(SSD1306(), 108, 32)
    x, y = draw_square(display, 108, 32, 8, vrx, vry)
    assert left <= x and x + 8 <= left + BORDER_WIDTH
    assert top <= y and y + 8 <= top + BORDER_HEIGHT


def test_square_moves_with_joystick():
    left_x, _ = draw_square(SSD1306(), 108, 32, 8, 0, CENTER)
    right_x, _ = draw_square(SSD1306(), 108, 32, 8, ADC_MAX, CENTER)
    _, low_y = draw_square(SSD1306(), 108, 32, 8, CENTER, 0)
    _, high_y = draw_square(SSD1306(), 108, 32, 8, CENTER, ADC_MAX)
    assert left_x < right_x
    assert high_y < low_y


def test_render_screen_sends_buffer():
    bus = _RecordingBus()
    display = SSD1306(bus=bus)
    render_screen(display, Screen.MENU, 0, False, CENTER, CENTER)
    assert bus.writes[-1][1] == display.buffer
    assert bus.writes[-1][0] == display.address


def test_render_game_over_texts():
    lost = SSD1306()
    render_screen(lost, Screen.GAME_OVER, 0, True, CENTER, CENTER)
    expected = SSD1306()
    expected.draw_string("VOCE PERDEU!!!", 8, 25)
    expected.draw_string("AGUARDE...", 24, 38)
    assert lost.buffer == expected.buffer

    won = SSD1306()
    render_screen(won, Screen.GAME_OVER, 5, False, CENTER, CENTER)
    assert won.buffer != lost.buffer


def test_render_game_shows_apple_count():
    zero = SSD1306()
    render_screen(zero, Screen.GAME, 0, False, CENTER, CENTER)
    three = SSD1306()
    render_screen(three, Screen.GAME, 3, False, CENTER, CENTER)
    menu = SSD1306()
    render_screen(menu, Screen.MENU, 0, False, CENTER, CENTER)
    assert zero.buffer != three.buffer
    assert zero.buffer != menu.buffer


def test_render_clears_previous_content():
    display = SSD1306()
    display.fill(True)
    render_screen(display, Screen.RESULT, 0, False, CENTER, CENTER)
    assert _lit(display) == set()


def test_menu_debounce_and_cycle():
    now = [0]
    buzzer = Buzzer(clock=lambda: now[0])
    menu = Menu(buzzer)
    assert menu.move(ADC_MAX, 100_000) is Phase.EASY
    assert menu.move(ADC_MAX, 300_000) is Phase.MEDIUM
    assert buzzer.active and buzzer.frequency == 1000
    assert menu.move(ADC_MAX, 400_000) is Phase.MEDIUM
    assert menu.move(ADC_MAX, 600_000) is Phase.HARD
    assert menu.move(ADC_MAX, 900_000) is Phase.EASY


def test_menu_moves_left_and_ignores_center():
    menu = Menu()
    assert menu.move(0, 300_000) is Phase.HARD
    assert menu.move(CENTER, 900_000) is Phase.HARD


def test_menu_select_stops_buzzer():
    buzzer = Buzzer(clock=lambda: 0)
    menu = Menu(buzzer)
    menu.move(ADC_MAX, 300_000)
    assert menu.select() is Phase.MEDIUM
    assert menu.selected
    assert not buzzer.active and not buzzer.sounding


def test_menu_draw_shows_phase_digit():
    matrix = LedMatrix()
    menu = Menu()
    menu.move(0, 300_000)
    menu.draw(matrix)
    assert matrix.color_at(3, 1) == (1, 0, 0)
    assert not menu.needs_redraw


def test_main_loses_against_wall(capsys):
    assert main(["--phase", "1", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Você Perdeu!!!" in out
    assert "Voltando para o menu!" in out


def test_main_hard_phase_turning_up_loses(capsys):
    assert main(["--phase", "3", "--seed", "2", "--moves", "U"]) == 0
    out = capsys.readouterr().out
    assert "Entrando na Fase 3" in out
    assert "Você Perdeu!!!" in out


def test_main_no_steps_reports_nothing(capsys):
    assert main(["--max-steps", "0"]) == 0
    out = capsys.readouterr().out
    assert "Você Perdeu!!!" not in out
    assert "Você Ganhou!!!" not in out


def test_main_rejects_bad_moves():
    with pytest.raises(SystemExit):
        main(["--moves", "RX"])