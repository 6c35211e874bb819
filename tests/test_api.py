"""Tests for the public typefirst.api functions."""

import pytest

from typefirst.api import SanitiseResult, check_component, to_json, to_yaml
from typefirst.codes import ErrorCode
from typefirst.errors import EncodingError, MissingOrInvalidType


class TestRenderShortcuts:

    def test_to_json(self):
        conf = {"type": "http", "http": {"url": "x"}, "plugin": {"ignored": True}}
        assert to_json(conf) == '{"type":"http","http":{"url":"x"}}'

    def test_to_yaml(self):
        assert to_yaml({"type": "custom", "plugin": {"driver": "z"}}) == (
            "type: custom\nplugin:\n  driver: z\n"
        )

    def test_to_json_missing_type(self):
        with pytest.raises(MissingOrInvalidType):
            to_json({})

    def test_to_json_value_failure_is_atomic(self):
        """A NaN payload passes sanitisation but fails JSON rendering."""
        with pytest.raises(EncodingError):
            to_json({"type": "t", "t": {"ratio": float("nan")}})


class TestCheckComponent:
    """check_component reports errors as data instead of raising."""

    def test_ok(self):
        result = check_component({"type": "http", "http": {"url": "x"}, "extra": 1})
        assert isinstance(result, SanitiseResult)
        assert result.ok is True
        assert result.code is None
        assert result.sanitised == {"type": "http", "http": {"url": "x"}}
        assert list(result.sanitised) == ["type", "http"]

    def test_missing_type(self):
        result = check_component({})
        assert result.ok is False
        assert result.code == ErrorCode.MISSING_OR_INVALID_TYPE
        assert "type field" in result.message
        assert result.sanitised is None

    def test_encoding_error(self):
        result = check_component(["not", "a", "mapping"])
        assert result.ok is False
        assert result.code == ErrorCode.ENCODING_ERROR

    def test_result_serializes(self):
        dumped = check_component({}).model_dump(mode="json")
        assert dumped["code"] == "MISSING_OR_INVALID_TYPE"
        assert dumped["ok"] is False


class TestCheckComponentDepth:
    """Deeply nested configs are reported, not raised."""

    @pytest.mark.parametrize("depth", [350, 400, 450, 5000])
    def test_deep_config(self, depth):
        value = {"leaf": 1}
        for _ in range(depth):
            value = {"n": value}
        result = check_component({"type": "t", "t": value})
        assert result.ok or result.code == ErrorCode.ENCODING_ERROR
