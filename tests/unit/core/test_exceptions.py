"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from ethos.proxy.core import (
    InvalidArgumentError,
    InvalidPageSizeError,
    MissingHeaderError,
    ProxyError,
    TransportError,
)


def test_transport_error_with_status_and_url():
    """Test TransportError carries status code and URL."""
    error = TransportError("boom", status_code=503, url="https://host/api/persons")
    assert str(error) == "boom"
    assert error.status_code == 503
    assert error.url == "https://host/api/persons"
    assert isinstance(error, ProxyError)


def test_transport_error_defaults():
    """Test TransportError for network failures has no status."""
    error = TransportError("connection reset")
    assert error.status_code is None
    assert error.url is None


def test_invalid_argument_error_is_value_error():
    """Test InvalidArgumentError can be caught as ValueError."""
    error = InvalidArgumentError("blank resource name")
    assert isinstance(error, ValueError)
    assert isinstance(error, ProxyError)


def test_missing_header_error_names_header():
    """Test MissingHeaderError records the missing header."""
    error = MissingHeaderError("no total", header="x-total-count")
    assert error.header == "x-total-count"
    assert isinstance(error, ProxyError)


def test_invalid_page_size_error_with_page_size():
    """Test InvalidPageSizeError records the offending page size."""
    error = InvalidPageSizeError("bad size", page_size=0)
    assert error.page_size == 0
    assert isinstance(error, ValueError)
    assert isinstance(error, ProxyError)
