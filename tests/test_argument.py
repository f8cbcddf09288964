import pytest

from cellcli.argument import Argument, ArgumentType, UnclosedQuoteError


def test_value_falls_back_to_default():
    arg = Argument("num", default="7")
    assert arg.value == "7"
    assert arg.is_set is False


def test_value_empty_without_default():
    arg = Argument("num", required=True)
    assert arg.value == ""


def test_set_value_plain():
    arg = Argument("num")
    arg.set_value("hello")
    assert arg.value == "hello"
    assert arg.is_set is True


def test_set_value_removes_quotes():
    arg = Argument("msg")
    arg.set_value('"a b"')
    assert arg.value == "a b"


def test_set_value_keeps_escaped_quote():
    arg = Argument("msg")
    arg.set_value('\\"x')
    assert arg.value == '"x'


def test_set_value_escaped_backslash():
    arg = Argument("msg")
    arg.set_value("a\\\\b")
    assert arg.value == "a\\b"


def test_empty_quotes_give_empty_value_not_default():
    arg = Argument("msg", default="dflt")
    arg.set_value('""')
    assert arg.value == ""
    assert arg.is_set


def test_unclosed_quote_raises_and_resets():
    arg = Argument("msg", default="dflt")
    arg.set_value("first")
    with pytest.raises(UnclosedQuoteError):
        arg.set_value('"oops')
    assert arg.is_set is False
    assert arg.value == "dflt"


def test_unclosed_quote_is_value_error():
    arg = Argument("msg")
    with pytest.raises(ValueError):
        arg.set_value('ab"c')


def test_flag_set_without_value():
    arg = Argument("i", default="", type=ArgumentType.FLAG)
    arg.set_value(None)
    assert arg.is_set is True
    assert arg.value == ""


def test_empty_raw_keeps_previous_value():
    arg = Argument("num")
    arg.set_value("5")
    arg.set_value("")
    assert arg.value == "5"
    assert arg.is_set


def test_reset_clears_value():
    arg = Argument("num", default="1")
    arg.set_value("9")
    arg.reset()
    assert arg.is_set is False
    assert arg.value == "1"


def test_copy_is_independent():
    arg = Argument("num", default="1", type=ArgumentType.POSITIONAL)
    arg.set_value("9")
    dup = arg.copy()
    assert dup.value == "9"
    assert dup.is_set
    assert dup.type is ArgumentType.POSITIONAL
    dup.reset()
    assert arg.value == "9"
    assert dup.value == "1"


def test_matches_abbreviation_template():
    arg = Argument("s/el")
    assert arg.matches("s")
    assert arg.matches("sel")
    assert arg.matches("SEL")
    assert not arg.matches("SEL", case_sensitive=True)
    assert not arg.matches("x")
    assert not arg.matches(None)


def test_equality_by_name():
    a = Argument("num")
    b = Argument("NUM", default="3")
    c = Argument("value")
    assert a == b
    assert a != c
    assert a == "num"


def test_optional_and_default_properties():
    req = Argument("num", required=True)
    opt = Argument("num")
    assert req.optional is False
    assert opt.optional is True
    assert opt.has_default_value is True


def test_str_required_normal():
    assert str(Argument("num", required=True)) == "-num <value>"


def test_str_optional_with_value():
    arg = Argument("num", default="3")
    assert str(arg) == "[-num <3>]"


def test_str_flag():
    assert str(Argument("i", default="", type=ArgumentType.FLAG)) == "[-i]"


def test_str_positional_required_shows_set_value():
    arg = Argument("vol", type=ArgumentType.POSITIONAL, required=True)
    arg.set_value("3.4")
    assert str(arg) == "-vol <3.4>"