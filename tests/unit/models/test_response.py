"""Unit tests for ResponseEnvelope."""

import pytest
from pydantic import ValidationError

from ethos.proxy.models import ResponseEnvelope


class TestResponseEnvelopeHeaders:
    """Test header lookups."""

    def test_exact_and_case_insensitive(self):
        """Test header lookup falls back to a case-insensitive match."""
        response = ResponseEnvelope(headers={"X-Total-Count": "42"})
        assert response.header("X-Total-Count") == "42"
        assert response.header("x-total-count") == "42"
        assert response.header("x-max-page-size") is None

    def test_blank_name(self):
        """Test blank header names return None."""
        response = ResponseEnvelope(headers={"a": "1"})
        assert response.header("") is None
        assert response.header("  ") is None

    @pytest.mark.parametrize(
        "value,expected",
        [("25", 25), (" 7 ", 7), ("", None), ("abc", None), ("1.5", None)],
    )
    def test_header_int(self, value, expected):
        """Test integer header parsing."""
        response = ResponseEnvelope(headers={"x-total-count": value})
        assert response.header_int("x-total-count") == expected

    def test_frozen(self):
        """Test envelopes are immutable."""
        response = ResponseEnvelope(body="[]")
        with pytest.raises(ValidationError):
            response.body = "[1]"


class TestResponseEnvelopeBody:
    """Test body helpers."""

    def test_array_length(self):
        """Test array length of JSON array bodies."""
        assert ResponseEnvelope(body="[1, 2, 3]").array_length() == 3
        assert ResponseEnvelope(body="[]").array_length() == 0

    @pytest.mark.parametrize("body", ["", "  ", '{"a": 1}', "not json"])
    def test_array_length_none(self, body):
        """Test non-array bodies have no array length."""
        assert ResponseEnvelope(body=body).array_length() is None

    def test_content_as_json(self):
        """Test JSON parsing of the body."""
        assert ResponseEnvelope(body='{"a": 1}').content_as_json() == {"a": 1}
        assert ResponseEnvelope(body="").content_as_json() is None

    def test_sliced(self):
        """Test slicing keeps status and headers and cuts the array."""
        response = ResponseEnvelope(
            status_code=200, body="[1, 2, 3, 4]", headers={"x-total-count": "4"}
        )
        sliced = response.sliced(1, 3)

        assert sliced.content_as_json() == [2, 3]
        assert sliced.headers == {"x-total-count": "4"}
        assert response.content_as_json() == [1, 2, 3, 4]

    def test_sliced_non_array_unchanged(self):
        """Test non-array bodies are returned as is."""
        response = ResponseEnvelope(body='{"a": 1}')
        assert response.sliced(1) is response
