"""Tests for payload rendering in failure messages."""

import pytest

from vessel import Failure, RenderMode, Success, init
from vessel._render import render


class Opaque:
    """An object msgspec cannot encode."""

    def __repr__(self) -> str:
        return "Opaque()"


class TestJsonRendering:
    """Tests for the default JSON mode."""

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ("Oh no", '"Oh no"'),
            (5, "5"),
            (None, "null"),
            (True, "true"),
            ([1, "x"], '[1,"x"]'),
            ({"a": [1, 2]}, '{"a":[1,2]}'),
        ],
    )
    def test_plain_values(self, payload, expected):
        """Plain values render as compact JSON."""
        assert render(payload) == expected

    def test_containers_render_as_objects(self):
        """Nested containers render through msgspec."""
        assert render(Success(5)) == '{"value":5}'
        assert render(Failure("e")) == '{"error":"e"}'

    def test_unknown_object_uses_repr(self):
        """Objects msgspec can't encode fall back to their repr."""
        assert render(Opaque()) == '"Opaque()"'
        assert render({"x": Opaque()}) == '{"x":"Opaque()"}'

    def test_exception_payload(self):
        """Exceptions render via repr inside JSON."""
        assert render(ValueError("bad")) == "\"ValueError('bad')\""

    @pytest.mark.parametrize("payload", [b"oops", bytearray(b"oops")])
    def test_binary_payload_uses_repr(self, payload):
        """Binary payloads render readably instead of as base64."""
        assert render(payload) == repr(payload)
        assert "b29wcw==" not in render(payload)

    def test_binary_failure_message(self):
        """Failure(b"oops").unwrap() shows the bytes literal."""
        with pytest.raises(RuntimeError) as exc_info:
            Failure(b"oops").unwrap()
        assert str(exc_info.value) == "Called unwrap on Failure: b'oops'"


class TestReprRendering:
    """Tests for REPR mode."""

    def test_explicit_mode(self):
        """mode=REPR uses repr()."""
        assert render("Oh no", RenderMode.REPR) == "'Oh no'"

    def test_configured_mode(self):
        """init(render_mode='repr') switches failure messages to repr."""
        init(render_mode="repr")
        with pytest.raises(RuntimeError) as exc_info:
            Failure("Oh no").unwrap()
        assert str(exc_info.value) == "Called unwrap on Failure: 'Oh no'"
