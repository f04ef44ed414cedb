import pytest

from drillkit.lessons.errors import (
    CreationError,
    NegativeError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroError,
    generate_nametag_text,
    parse_pos_nonzero,
    spend_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "cannot parse integer from empty string"),
        (" 5", "invalid digit found in string"),
        ("-", "invalid digit found in string"),
        ("3000000000", "number too large to fit in target type"),
        ("-3000000000", "number too small to fit in target type"),
    ],
)
def test_total_cost_parse_errors(text, message):
    with pytest.raises(ValueError) as info:
        total_cost(text)
    assert str(info.value) == message


def test_total_cost_accepts_sign():
    assert total_cost("+5") == 26


def test_spend_tokens():
    assert spend_tokens(100, "8") == 59


def test_spend_tokens_cannot_afford():
    with pytest.raises(ValueError, match="afford"):
        spend_tokens(10, "8")


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-1)
    assert str(negative.value) == "number is negative"
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert str(zero.value) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, NegativeError)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, ZeroError)


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)