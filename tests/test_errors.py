import pytest

from tcqdisc.errors import (
    Config,
    InvalidArgError,
    InvalidDevError,
    NoArgAlterError,
    NoArgError,
    NotImplementedTcError,
    TcError,
    UnknownKindError,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (NoArgError, "missing argument"),
        (NoArgAlterError, "argument cannot be altered"),
        (InvalidDevError, "invalid device ID"),
        (NotImplementedTcError, "functionality not yet implemented"),
        (InvalidArgError, "invalid argument"),
        (UnknownKindError, "unknown kind"),
    ],
)
def test_messages(cls, text):
    assert str(cls()) == text


def test_context_prefix():
    err = NoArgError("Hhf")
    assert str(err) == "Hhf: missing argument"
    assert err.context == "Hhf"


@pytest.mark.parametrize(
    "cls",
    [NoArgError, NoArgAlterError, InvalidDevError, NotImplementedTcError, InvalidArgError, UnknownKindError],
)
def test_all_are_tc_errors(cls):
    err = cls("ctx")
    assert isinstance(err, TcError)
    assert str(err).startswith("ctx: ")
    assert err.context == "ctx"


def test_not_implemented_is_builtin_kind():
    err = NotImplementedTcError("plug")
    assert isinstance(err, NotImplementedError)
    assert str(err) == "plug: functionality not yet implemented"


def test_invalid_arg_is_value_error():
    err = InvalidArgError("x")
    assert isinstance(err, ValueError)
    assert str(err) == "x: invalid argument"


def test_config_defaults_and_values():
    assert Config().net_ns == 0
    assert Config(net_ns=7).net_ns == 7