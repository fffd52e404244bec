import pytest

from vang.input import InputCache, Key, Mouse


class _FixedInput(InputCache):
    def __init__(self, keys, buttons, position):
        self.keys = set(keys)
        self.buttons = set(buttons)
        self.position = position

    def is_key_pressed(self, key):
        return key in self.keys

    def is_mouse_button_pressed(self, button):
        return button in self.buttons

    def mouse_position(self):
        return self.position


def test_key_codes_match_source():
    assert Key(32) is Key.SPACE
    assert Key(87) is Key.W
    assert Key(341) is Key.LEFT_CONTROL
    assert Key(-1) is Key.UNKNOWN


def test_digit_and_letter_codes_are_ascii():
    digits = [Key(ord(str(d))) for d in range(10)]
    assert [key.name for key in digits] == [f"NUM_{d}" for d in range(10)]
    assert Key(ord("A")) is Key.A
    assert Key(ord("Z")) is Key.Z


def test_mouse_aliases():
    assert Mouse(0) is Mouse.BUTTON_LEFT
    assert Mouse(1) is Mouse.BUTTON_RIGHT
    assert Mouse(4) is Mouse.BUTTON_BACK
    assert Mouse(7) is Mouse.BUTTON_8


def test_input_cache_is_abstract():
    with pytest.raises(TypeError):
        InputCache()


def test_mouse_x_and_y_come_from_position():
    cache = _FixedInput([Key(87)], [Mouse(0)], (12.5, -3.0))
    assert InputCache.mouse_x(cache) == 12.5
    assert InputCache.mouse_y(cache) == -3.0
    assert cache.is_key_pressed(Key.W)
    assert not cache.is_key_pressed(Key.S)
    assert cache.is_mouse_button_pressed(Mouse.BUTTON_1)