"""Unit tests for total count and page size resolution."""

from __future__ import annotations

import logging

import pytest

from ethos.proxy.core import MissingHeaderError, ProxyConfig
from ethos.proxy.models import CriteriaFilter, QapiBody
from ethos.proxy.runtime.paging import (
    CountAndSizeResolver,
    PagingContext,
    ResourceFetcher,
    read_total_count,
    resolve_page_size,
)
from ethos.proxy.runtime.rest import EthosUrls

BASE_URL = "https://integrate.elluciancloud.com"


@pytest.fixture
def urls():
    return EthosUrls(BASE_URL)


@pytest.fixture
def resolver(mock_transport, urls):
    return CountAndSizeResolver(ResourceFetcher(mock_transport, urls), config=ProxyConfig())


class TestResolvePageSize:
    """Test the page size decision table."""

    def test_caller_value_above_threshold_wins(self, make_envelope):
        """Test an explicit caller page size is used as is."""
        probe = make_envelope(total=100, rows=50)
        assert resolve_page_size(25, 0, probe, "100", 500) == 25

    def test_no_probe_uses_configured_max(self):
        """Test without a probe the configured max applies."""
        assert resolve_page_size(0, 0, None, None, 500) == 500

    def test_array_length(self, make_envelope):
        """Test the probe's row count is the page size."""
        assert resolve_page_size(0, 0, make_envelope(rows=3), "100", 500) == 3

    def test_empty_array_gives_zero(self, make_envelope):
        """Test an empty array body yields page size 0."""
        assert resolve_page_size(0, 0, make_envelope(rows=0), "100", 500) == 0

    def test_non_array_body_falls_back_to_header(self, make_envelope):
        """Test a non-array body is ignored in favor of the header."""
        assert resolve_page_size(0, 0, make_envelope(body='{"a":1}'), "100", 500) == 100

    @pytest.mark.parametrize("header", [None, "", "abc", "-5"])
    def test_unusable_header_falls_back_to_configured_max(self, make_envelope, header):
        """Test blank bodies with unusable headers use the configured max."""
        assert resolve_page_size(0, 0, make_envelope(body=""), header, 500) == 500

    def test_caller_value_at_threshold_is_ignored(self, make_envelope):
        """Test values at or below the threshold let the engine decide."""
        assert resolve_page_size(10, 10, make_envelope(rows=4), None, 500) == 4


class TestReadTotalCount:
    """Test read_total_count."""

    def test_reads_header(self, make_envelope):
        """Test the total is read case-insensitively."""
        assert read_total_count(make_envelope(total=25)) == 25

    @pytest.mark.parametrize("total", [None, "", "abc", "-1"])
    def test_unusable_header_raises(self, make_envelope, total):
        """Test missing or invalid totals raise MissingHeaderError."""
        with pytest.raises(MissingHeaderError) as exc_info:
            read_total_count(make_envelope(total=total))
        assert exc_info.value.header == "x-total-count"


class TestCountAndSizeResolver:
    """Test CountAndSizeResolver.populate."""

    @pytest.mark.asyncio
    async def test_populate_filtered(self, resolver, mock_transport, make_envelope, urls):
        """Test one probe resolves total count and page size."""
        probe = make_envelope(total=25, rows=10)
        mock_transport.get.return_value = probe
        criteria = CriteriaFilter('?criteria={"lastName":"Smith"}')
        context = PagingContext(resource_name="persons", filter=criteria)

        context = await resolver.populate(context)

        assert context.total_count == 25
        assert context.page_size == 10
        assert context.last_probe_response is probe
        mock_transport.get.assert_called_once()
        assert mock_transport.get.call_args.args[0] == urls.api_filter(
            "persons", criteria.url_text()
        )

    @pytest.mark.asyncio
    async def test_filter_encoded_after_probe(self, resolver, mock_transport, make_envelope):
        """Test the context filter is in wire form once populated."""
        mock_transport.get.return_value = make_envelope(total=5, rows=5)
        criteria = CriteriaFilter('?criteria={"lastName":"Smith"}')
        context = PagingContext(resource_name="persons", filter=criteria)

        context = await resolver.populate(context)

        assert context.filter.encoded
        assert context.filter.text == criteria.url_text()
        assert context.filter.url_text() == criteria.url_text()

    @pytest.mark.asyncio
    async def test_caller_page_size_kept(self, resolver, mock_transport, make_envelope):
        """Test an explicit page size survives population."""
        mock_transport.get.return_value = make_envelope(total=100, rows=50)
        context = PagingContext(
            resource_name="persons", filter=CriteriaFilter('?criteria={"a":"b"}'), page_size=20
        )

        context = await resolver.populate(context)

        assert context.page_size == 20

    @pytest.mark.asyncio
    async def test_qapi_probe_is_post(self, resolver, mock_transport, make_envelope, urls):
        """Test QAPI filters are probed with a POST."""
        mock_transport.post.return_value = make_envelope(total=3, rows=3)
        body = QapiBody('{"names":[{"lastName":"Smith"}]}')
        context = PagingContext(resource_name="persons", filter=body)

        await resolver.populate(context)

        mock_transport.post.assert_called_once()
        mock_transport.get.assert_not_called()
        assert mock_transport.post.call_args.args[0] == urls.qapi("persons")
        assert mock_transport.post.call_args.kwargs["body"] == body.text

    @pytest.mark.asyncio
    async def test_missing_total_raises(self, resolver, mock_transport, make_envelope):
        """Test a probe without total count raises MissingHeaderError."""
        mock_transport.get.return_value = make_envelope(rows=3)
        context = PagingContext(resource_name="persons", filter=CriteriaFilter('{"a":"b"}'))

        with pytest.raises(MissingHeaderError):
            await resolver.populate(context)

    @pytest.mark.asyncio
    async def test_negative_offset_normalized(
        self, resolver, mock_transport, make_envelope, caplog
    ):
        """Test negative offsets become 0 and log a warning."""
        mock_transport.get.return_value = make_envelope(total=5, rows=5)
        context = PagingContext(
            resource_name="persons", filter=CriteriaFilter('{"a":"b"}'), offset=-4
        )

        with caplog.at_level(logging.WARNING, logger="ethos.proxy.runtime.paging.resolver"):
            context = await resolver.populate(context)

        assert context.offset == 0
        assert "negative_offset_normalized" in caplog.text

    @pytest.mark.asyncio
    async def test_blank_version_defaulted(self, resolver, mock_transport, make_envelope):
        """Test a blank version is replaced by the configured default."""
        mock_transport.get.return_value = make_envelope(total=5, rows=5)
        context = PagingContext(
            resource_name="persons", filter=CriteriaFilter('{"a":"b"}'), version=" "
        )

        context = await resolver.populate(context)

        assert context.version == "application/json"

    @pytest.mark.asyncio
    async def test_unfiltered_uses_default_fallback(
        self, resolver, mock_transport, make_envelope, urls
    ):
        """Test contexts without a filter probe the unfiltered listing."""
        mock_transport.get.return_value = make_envelope(total=40, rows=20)
        context = PagingContext(resource_name="persons")

        context = await resolver.populate(context)

        assert context.total_count == 40
        assert context.page_size == 20
        assert mock_transport.get.call_args.args[0] == urls.apis("persons")

    @pytest.mark.asyncio
    async def test_custom_fallback_without_total_raises(self, mock_transport, urls):
        """Test a fallback probe that leaves the total unknown fails."""

        async def probe(context: PagingContext) -> PagingContext:
            return context

        resolver = CountAndSizeResolver(
            ResourceFetcher(mock_transport, urls), fallback_probe=probe
        )

        with pytest.raises(MissingHeaderError):
            await resolver.populate(PagingContext(resource_name="persons"))

    @pytest.mark.asyncio
    async def test_custom_fallback_without_response(self, mock_transport, urls):
        """Test a fallback probe without a response uses the configured max."""

        async def probe(context: PagingContext) -> PagingContext:
            context.total_count = 1200
            return context

        resolver = CountAndSizeResolver(
            ResourceFetcher(mock_transport, urls),
            config=ProxyConfig(max_page_size=250),
            fallback_probe=probe,
        )

        context = await resolver.populate(PagingContext(resource_name="persons"))

        assert context.total_count == 1200
        assert context.page_size == 250
        mock_transport.get.assert_not_called()


class TestPagingContext:
    """Test PagingContext derived properties."""

    def test_defaults_unknown(self):
        """Test a fresh context has unknown total and page size."""
        context = PagingContext(resource_name="persons")
        assert not context.total_known
        assert not context.page_size_known
        assert context.filter_kind is None

    def test_filter_kind(self):
        """Test filter_kind follows the active filter."""
        context = PagingContext(resource_name="persons", filter=QapiBody("{}"))
        assert context.filter_kind.value == "qapi"
