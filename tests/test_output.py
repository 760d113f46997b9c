import io

import pytest

from fillit.output import putchar, putendl, putnbr, putstr


def test_putchar_string():
    buf = io.StringIO()
    putchar("#", buf)
    assert buf.getvalue() == "#"


def test_putchar_code():
    buf = io.StringIO()
    putchar(ord("A"), buf)
    putchar(ord("\n"), buf)
    assert buf.getvalue() == "A\n"


def test_putchar_rejects_bad_input():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())
    with pytest.raises(TypeError):
        putchar(None, io.StringIO())


def test_putchar_defaults_to_stdout(capsys):
    putchar(".")
    assert capsys.readouterr().out == "."


def test_putstr_writes_exactly():
    text = "ERROR WHILE READING FILE\n"
    buf = io.StringIO()
    putstr(text, buf)
    assert buf.getvalue() == text


def test_putstr_empty_writes_nothing():
    buf = io.StringIO()
    putstr("", buf)
    assert buf.getvalue() == ""


def test_putstr_rejects_non_string():
    with pytest.raises(TypeError):
        putstr(None, io.StringIO())


def test_putstr_defaults_to_stdout(capsys):
    putstr("usage: ./fillit [file]\n")
    assert capsys.readouterr().out == "usage: ./fillit [file]\n"


def test_putendl_appends_newline():
    buf = io.StringIO()
    putendl("AAB.", buf)
    putendl("", buf)
    assert buf.getvalue() == "AAB.\n\n"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -2147483648, 10**20])
def test_putnbr_round_trip(n):
    buf = io.StringIO()
    putnbr(n, buf)
    assert int(buf.getvalue()) == n


def test_putnbr_int_min():
    buf = io.StringIO()
    putnbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_putnbr_rejects_non_int():
    with pytest.raises(TypeError):
        putnbr(1.5, io.StringIO())
    with pytest.raises(TypeError):
        putnbr(True, io.StringIO())


def test_putnbr_defaults_to_stdout(capsys):
    putnbr(-12)
    assert int(capsys.readouterr().out) == -12