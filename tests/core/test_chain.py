# tests/core/test_chain.py
"""
Standard chain helper tests - unwrap, is_, as_ and errorf
"""

import pytest

from errorchain import Error, FormattedError, as_, errorf, is_, new, unwrap, wrap


def test_unwrap_none():
    assert unwrap(None) is None


def test_unwrap_uses_unwrap_method():
    cause = ValueError("inner")

    assert unwrap(Error("outer", cause)) is cause


def test_unwrap_falls_back_to_dunder_cause():
    cause = ValueError("inner")
    try:
        try:
            raise cause
        except ValueError as exc:
            raise RuntimeError("outer") from exc
    except RuntimeError as outer:
        assert unwrap(outer) is cause


def test_unwrap_ignores_implicit_context():
    try:
        try:
            raise ValueError("inner")
        except ValueError:
            raise RuntimeError("outer")
    except RuntimeError as outer:
        assert outer.__context__ is not None
        assert unwrap(outer) is None


# -------- errorf --------

def test_errorf_without_wrap_verb():
    err = errorf("user %d missing", 42)

    assert isinstance(err, FormattedError)
    assert str(err) == "user 42 missing"
    assert err.unwrap() is None


def test_errorf_wraps_single_error():
    cause = new("db failure")

    err = errorf("loading %s: %w", "users", cause)

    assert str(err) == "loading users: db failure"
    assert err.unwrap() is cause
    assert err.__cause__ is cause


def test_errorf_wraps_several_errors():
    first = new("first")
    second = new("second")

    err = errorf("%w and %w", first, second)

    assert str(err) == "first and second"
    assert err.unwrap() is None
    assert err.unwrap_all() == (first, second)
    assert is_(err, second)


def test_errorf_wrap_verb_with_non_error_only_formats():
    err = errorf("%w", "plain text")

    assert str(err) == "plain text"
    assert err.unwrap_all() == ()


def test_errorf_keeps_literal_percent():
    cause = new("x")

    err = errorf("100%% sure: %w", cause)

    assert str(err) == "100% sure: x"
    assert err.unwrap() is cause


def test_errorf_counts_star_width_arguments():
    cause = new("x")

    err = errorf("%*d %w", 3, 7, cause)

    assert str(err) == "  7 x"
    assert err.unwrap() is cause


def test_errorf_mapping_argument_wraps_named_error():
    """
    Test: errorf with a single mapping argument

    Expected: %(key)w wraps the mapped exception, %(key)s only formats
    """
    cause = new("db failure")

    err = errorf("loading %(table)s: %(cause)w", {"table": "users", "cause": cause})

    assert str(err) == "loading users: db failure"
    assert err.unwrap() is cause


def test_errorf_empty_mapping_is_positional():
    err = errorf("config %s", {})

    assert str(err) == "config {}"
    assert err.unwrap() is None


def test_errorf_bad_format_raises():
    with pytest.raises(TypeError):
        errorf("%d", "not a number")


# -------- is_ / as_ --------

def test_is_matches_identity_anywhere_in_chain():
    root = new("root")
    err = wrap(errorf("middle: %w", root), "top")

    assert is_(err, root)
    assert is_(err, err)
    assert not is_(err, new("root"))


def test_is_with_none():
    assert is_(None, None)
    assert not is_(None, new("x"))
    assert not is_(new("x"), None)


def test_is_survives_cycles():
    a = RuntimeError("a")
    b = RuntimeError("b")
    a.__cause__ = b
    b.__cause__ = a

    assert not is_(a, new("elsewhere"))
    assert is_(a, b)


def test_as_returns_first_instance():
    inner = Error("inner")
    err = errorf("wrapped: %w", wrap(inner, "outer"))

    found = as_(err, Error)

    assert found is not None
    assert found.description == "outer"
    assert as_(err, FormattedError) is err
    assert as_(err, KeyError) is None
    assert as_(None, Error) is None
