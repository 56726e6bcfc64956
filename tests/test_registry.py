"""
Tests for TypeRegistry construction and lookup.
"""
import pytest

from responsewriter import ConfigurationError, JSONType, PlainTextType, ResponseHandler, TypeRegistry


class CustomJSON(JSONType):
    """Second JSON type registered under the same media type."""


class EmptyType(JSONType):
    accepted_type = ""


class TestConstruction:
    """Tests for building a registry."""

    def test_missing_preferred_type_is_fatal(self) -> None:
        with pytest.raises(ConfigurationError):
            TypeRegistry.build(None)

    def test_empty_accepted_type_is_fatal(self) -> None:
        with pytest.raises(ConfigurationError):
            TypeRegistry.build(EmptyType())

    def test_missing_allowed_type_is_fatal(self, json_type: JSONType) -> None:
        with pytest.raises(ConfigurationError):
            TypeRegistry.build(json_type, None)

    def test_handler_setup_fails_before_any_request(self) -> None:
        """ResponseHandler refuses a bad preferred type at construction."""
        with pytest.raises(ConfigurationError):
            ResponseHandler(lambda request: None, None)
        with pytest.raises(ConfigurationError):
            ResponseHandler(lambda request: None, EmptyType())

    def test_preferred_wins_key_collision(self, json_type: JSONType) -> None:
        allowed = CustomJSON()
        registry = TypeRegistry.build(json_type, allowed)
        assert registry["application/json"] is json_type
        assert len(registry) == 1

    def test_keys(self, json_type: JSONType, text_type: PlainTextType) -> None:
        registry = TypeRegistry.build(json_type, text_type)
        assert set(registry) == {"application/json", "text/plain"}
        assert registry.preferred is json_type


class TestSelect:
    """Tests for TypeRegistry.select."""

    def test_exact_match(self, json_type: JSONType, text_type: PlainTextType) -> None:
        registry = TypeRegistry.build(json_type, text_type)
        assert registry.select("text/plain") is text_type
        assert registry.select("application/json") is json_type

    def test_fallback_to_preferred(self, json_type: JSONType, text_type: PlainTextType) -> None:
        """Unknown, empty, missing and wildcard values select the preferred type."""
        registry = TypeRegistry.build(json_type, text_type)
        for accepted in ("application/xml", "", None, "*/*", "text/plain;q=0.9"):
            assert registry.select(accepted) is json_type
