import pytest

from svart.errors import IllegalValueError, SvartError


@pytest.mark.parametrize(
    "error, expected",
    [
        (IllegalValueError("Something went wrong."), "Illegal value error: Something went wrong."),
        (SvartError(), "Other error"),
    ],
)
def test_svart_error(error, expected):
    assert str(error) == expected


def test_illegal_value_error_is_svart_error():
    error = IllegalValueError("Something went wrong.")
    assert isinstance(error, SvartError)
    assert error.cause == "Something went wrong."


def test_illegal_value_error_is_value_error():
    error = IllegalValueError("bad")
    assert isinstance(error, ValueError)
    assert str(error) == "Illegal value error: bad"


def test_illegal_value_error_equality():
    assert IllegalValueError("a") == IllegalValueError("a")
    assert not IllegalValueError("a") == IllegalValueError("b")