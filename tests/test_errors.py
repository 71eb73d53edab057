import pytest

from rustdrill.lessons.errors import (
    CreationError,
    NegativeNumber,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroNumber,
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


def test_total_cost_empty_input():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_total_cost_out_of_range():
    with pytest.raises(ValueError) as info:
        total_cost("2147483648")
    assert str(info.value) == "number too large to fit in target type"


def test_spend_tokens_affordable(capsys):
    assert spend_tokens(100, "8") == 59
    assert "You now have 59 tokens." in capsys.readouterr().out


def test_spend_tokens_unaffordable(capsys):
    assert spend_tokens(10, "8") == 10
    assert "You can't afford that many!" in capsys.readouterr().out


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeNumber):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroNumber):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    with pytest.raises(CreationError, match="number is negative"):
        PositiveNonzeroInteger(-1)
    with pytest.raises(CreationError, match="number is zero"):
        PositiveNonzeroInteger(0)


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not info.value.is_creation
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, NegativeNumber)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, ZeroNumber)


def test_positive():
    expected = PositiveNonzeroInteger(42)
    assert parse_pos_nonzero("42") == expected