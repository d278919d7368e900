import pytest

from posixopt.exceptions import ValidationError
from posixopt.type_registry import TypeRegistry
from posixopt.value_types import BUILTIN_TYPES, ValueType


def parse_port(value: str) -> int:
    port = int(value)
    if not 0 < port < 65536:
        raise ValueError("port out of range")
    return port


def test_builtin_types_registered():
    registry = TypeRegistry()
    assert registry.available_types() == [value_type.name for value_type in BUILTIN_TYPES]
    assert len(registry) == 18
    assert "INFILE" in registry


def test_lookup_is_case_insensitive():
    registry = TypeRegistry()
    assert registry.get("int") is registry.get("INT")
    assert registry.has("Email")


def test_unknown_type():
    registry = TypeRegistry()
    assert registry.find("PORT") is None
    with pytest.raises(ValidationError, match="Unknown type: PORT"):
        registry.get("PORT")


def test_empty_registry():
    registry = TypeRegistry(include_builtins=False)
    assert len(registry) == 0
    assert registry.available_types() == []


def test_register_custom_type():
    registry = TypeRegistry()
    registry.register(ValueType("PORT", parse_port, "TCP port"))
    assert registry.get("port").validate("8080") == 8080
    assert registry.available_types()[-1] == "PORT"


def test_custom_type_errors_are_wrapped():
    registry = TypeRegistry()
    port = registry.register_validator("PORT", parse_port)
    with pytest.raises(ValidationError, match="Invalid port: 70000") as exc_info:
        port.validate("70000")
    assert isinstance(exc_info.value.__cause__, ValueError)
    with pytest.raises(ValidationError, match="Invalid port: http"):
        registry.get("PORT").validate("http")


def test_register_replaces_existing_type():
    registry = TypeRegistry()
    registry.register(ValueType("string", str.upper))
    assert registry.get("STRING").validate("abc") == "ABC"
    assert len(registry) == 18


def test_register_rejects_non_value_type():
    with pytest.raises(TypeError):
        TypeRegistry().register(parse_port)
