# tests/core/test_base.py
from errs import DEFAULT_MESSAGE, ErrorLike, ErrsError, is_error
from errs.core.errors import label_of, message_of, resolve_properties, set_message


class Duck:
    def __init__(self):
        self.message = "quack"
        self.stack = "Duck: quack"


def test_default_message():
    err = ErrsError()

    assert err.message == DEFAULT_MESSAGE
    assert str(err) == DEFAULT_MESSAGE


def test_constructor_properties_are_attributes():
    err = ErrsError("m", status=503, retry_after=2)

    assert err.status == 503
    assert err.retry_after == 2


def test_message_setter_keeps_args_in_step():
    err = ErrsError("before")
    err.message = "after"

    assert err.args == ("after",)
    assert str(err) == "after"


def test_name_defaults_to_class_name():
    class ParseError(ErrsError):
        pass

    err = ParseError("x")
    assert err.name == "ParseError"

    err.name = "SyntaxProblem"
    assert err.name == "SyntaxProblem"
    assert label_of(err) == "SyntaxProblem"


def test_is_error():
    assert is_error(ErrsError("x"))
    assert is_error(ValueError("x"))
    assert is_error(Duck())
    assert isinstance(Duck(), ErrorLike)

    for value in (None, False, True, "str", 1, {"message": "m", "stack": "s"}, Duck, ValueError):
        assert not is_error(value)


def test_message_of_builtin_exception():
    assert message_of(KeyError("id")) == "id"
    assert message_of(ValueError()) == ""


def test_set_message_on_builtin_exception():
    err = RuntimeError("old")
    set_message(err, 123)

    assert err.message == "123"
    assert err.args == ("123",)


def test_resolve_properties_shapes():
    assert resolve_properties(None) == {}
    assert resolve_properties("m") == {"message": "m"}
    assert resolve_properties({"a": 1}) == {"a": 1}
    assert resolve_properties(lambda: {"b": 2}) == {"b": 2}
    assert resolve_properties(lambda: None) == {}
    assert resolve_properties(42) == {}
