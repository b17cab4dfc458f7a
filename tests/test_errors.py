import pytest

from zenith.errors import AssertionFailure, ZenithError, zth_assert


def _build_error_here(skip):
    return ZenithError("boom", skip)


def test_message_is_kept():
    err = ZenithError("failed to load")
    assert str(err) == "failed to load"
    assert isinstance(err, RuntimeError)


def test_stacktrace_includes_caller():
    err = ZenithError("x")
    assert "test_stacktrace_includes_caller" in err.stacktrace()


def test_skip_drops_frames():
    assert "_build_error_here" in _build_error_here(0).stacktrace()
    trimmed = _build_error_here(1).stacktrace()
    assert "_build_error_here" not in trimmed
    assert "test_skip_drops_frames" in trimmed


def test_assert_passes_and_fails():
    assert zth_assert(1 < 2, "1 < 2") is None
    with pytest.raises(AssertionFailure) as info:
        zth_assert(False, "index < size")
    assert "Assertion failed: (index < size)" in str(info.value)


def test_assert_failure_is_assertion_error():
    with pytest.raises(AssertionFailure) as info:
        zth_assert(0, "value")
    assert isinstance(info.value, AssertionError)
    assert str(info.value).count("Assertion failed: (value)") == 1


def test_assert_message_names_caller():
    with pytest.raises(AssertionFailure) as info:
        zth_assert([], "items")
    assert "test_assert_message_names_caller" in str(info.value)