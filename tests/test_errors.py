import pytest

from acciping.errors import WrappedError, wrap, wrapf


def test_wrap_none_is_none():
    assert wrap(None, "context") is None
    assert wrapf(None, "context %s", "x") is None


def test_wrap_message_and_cause():
    inner = ValueError("inner")
    wrapped = wrap(inner, "outer")
    assert str(wrapped) == "outer caused by: inner"
    assert wrapped.cause is inner
    assert wrapped.__cause__ is inner
    assert wrapped.message == "outer"


def test_wrap_nests():
    wrapped = wrap(wrap(OSError("disk"), "middle"), "top")
    assert str(wrapped) == "top caused by: middle caused by: disk"


def test_wrapf_formats():
    wrapped = wrapf(RuntimeError("x"), "couldn't read packet from %r", "example.com")
    assert wrapped.message == "couldn't read packet from 'example.com'"


def test_wrapped_error_can_be_raised():
    inner = RuntimeError("k")
    with pytest.raises(WrappedError) as info:
        raise wrap(inner, "lookup")
    assert info.value.cause is inner
    assert str(info.value) == "lookup caused by: k"