import pytest

from drillkit.lessons.testing import Rectangle, is_even


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)


def test_zero_side_is_rejected():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(0, 5)