# tests/core/test_constructors.py
"""
Constructor and wrapper tests

Covers message composition, nil-safety of every wrap-style factory and
where captured stacks start.
"""

import pytest

import errorchain as errors
from errorchain import (
    ERR_NOT_FOUND,
    Error,
    Stack,
    add_custom_call_stack,
    new,
    new_with_stack,
    newf,
    wrap,
    wrap_with_custom_err,
    wrapf,
    wrapf_with_custom_err,
)


def test_new_has_description_only():
    err = new("db failure")

    assert str(err) == "db failure"
    assert err.unwrap() is None
    assert err.get_call_stack() is None


def test_new_with_stack_captures_caller():
    err = new_with_stack("db failure")

    frames = err.get_call_stack()

    assert frames
    assert frames[0].split("\n\t")[0].endswith("test_new_with_stack_captures_caller")


def test_newf_formats_description():
    err = newf("user %d missing", 42)

    assert isinstance(err, Error)
    assert str(err) == "user 42 missing"
    assert err.get_call_stack() is None


def test_wrap_scenario():
    """
    Test: wrap a plain error with context

    Expected: message joins both descriptions; unwrap returns the original
    """
    err = new("db failure")

    wrapped = wrap(err, "reading config")

    assert str(wrapped) == "reading config: db failure"
    assert wrapped.unwrap() is err
    assert str(wrapped.unwrap()) == "db failure"


def test_wrap_foreign_error():
    err = KeyError("user")

    wrapped = wrap(err, "lookup")

    assert wrapped.unwrap() is err
    assert str(wrapped) == f"lookup: {err}"


def test_wrap_captures_caller_stack():
    wrapped = wrap(ValueError("x"), "context")

    assert "test_wrap_captures_caller_stack" in wrapped.get_call_stack()[0]


def test_wrapf_formats_description():
    wrapped = wrapf(ValueError("timeout"), "calling %s after %d tries", "billing", 3)

    assert str(wrapped) == "calling billing after 3 tries: timeout"
    assert "test_wrapf_formats_description" in wrapped.get_call_stack()[0]


@pytest.mark.parametrize(
    "factory",
    [
        lambda: wrap(None, "reading config"),
        lambda: wrapf(None, "reading %s", "config"),
        lambda: wrap_with_custom_err(None, ERR_NOT_FOUND),
        lambda: wrapf_with_custom_err(None, ERR_NOT_FOUND, "user %d missing", 42),
        lambda: add_custom_call_stack(None, Stack.capture()),
    ],
)
def test_wrap_family_propagates_none(factory):
    assert factory() is None


def test_unwrap_n_times_returns_innermost():
    root = ValueError("root")
    err = root
    for i in range(5):
        err = wrap(err, f"layer {i}")

    for _ in range(5):
        err = errors.unwrap(err)

    assert err is root


# -------- predefined wrapping --------

def test_wrap_with_custom_err_is_matchable():
    original = RuntimeError("no rows")

    result = wrap_with_custom_err(original, ERR_NOT_FOUND)

    assert errors.is_(result, ERR_NOT_FOUND)
    assert result.get_original_predefined_error() is ERR_NOT_FOUND
    assert result.description == ""
    assert str(result) == ": entity not found: no rows"
    assert result.get_call_stack()


def test_wrapf_with_custom_err_scenario():
    sql_err = RuntimeError("sql: no rows in result set")

    result = wrapf_with_custom_err(sql_err, ERR_NOT_FOUND, "user %d missing", 42)

    assert errors.is_(result, ERR_NOT_FOUND)
    assert str(result).startswith("user 42 missing: ")
    assert str(result) == "user 42 missing: entity not found: sql: no rows in result set"
    assert result.short_message() == "user 42 missing"


def test_composite_link_is_not_an_error_value():
    result = wrap_with_custom_err(RuntimeError("no rows"), ERR_NOT_FOUND)

    assert not isinstance(result.cause, Error)
    assert errors.find_first_error_with_stack(result.cause) is ERR_NOT_FOUND


# -------- custom stacks --------

def test_add_custom_call_stack_uses_given_stack():
    def origin():
        return Stack.capture()

    stack = origin()
    err = ValueError("bad input")

    result = add_custom_call_stack(err, stack)

    assert result.stack is stack
    assert result.description == "bad input"
    assert result.unwrap() is err
    assert str(result) == "bad input: bad input"
    assert "origin" in result.get_call_stack()[0]


def test_add_custom_call_stack_from_traceback():
    try:
        {}["missing"]
    except KeyError as exc:
        result = add_custom_call_stack(exc, Stack.from_traceback(exc.__traceback__))

    assert "test_add_custom_call_stack_from_traceback" in result.get_call_stack()[0]


# -------- mapping formats --------

def test_newf_with_mapping_argument():
    err = newf("user %(id)d in %(region)s", {"id": 7, "region": "eu"})

    assert str(err) == "user 7 in eu"


def test_wrapf_with_mapping_argument():
    wrapped = wrapf(ValueError("timeout"), "calling %(service)s", {"service": "billing"})

    assert str(wrapped) == "calling billing: timeout"


def test_wrapf_with_custom_err_mapping_argument():
    err = wrapf_with_custom_err(KeyError("user"), ERR_NOT_FOUND, "user %(id)d", {"id": 7})

    assert str(err).startswith("user 7: ")
    assert errors.is_(err, ERR_NOT_FOUND)
