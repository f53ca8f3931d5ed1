"""Tests for how SDK operations surface errors."""

from unittest.mock import MagicMock

import httpx
import pytest
import respx
from pydantic import ValidationError

from freshdesk_sdk import FreshdeskClient
from freshdesk_sdk._internal.http import ApiTransport
from freshdesk_sdk.exceptions import (
    FreshdeskAPIError,
    FreshdeskCursorExhaustedError,
    FreshdeskError,
    FreshdeskValidationError,
)
from freshdesk_sdk.models import ReplyCreate, Ticket
from freshdesk_sdk.query import Query
from freshdesk_sdk.results import TicketResults

BASE_URL = "https://acme.freshdesk.com"


def _client() -> FreshdeskClient:
    return FreshdeskClient(domain="acme", api_key="key")


class TestAPIErrorFromOperations:
    """FreshdeskAPIError raised by resource calls."""

    @respx.mock
    def test_network_failure_has_no_status_code(self):
        """A connection error carries no status and chains the httpx error."""
        respx.get(f"{BASE_URL}/api/v2/companies").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        with pytest.raises(FreshdeskAPIError) as exc_info:
            _client().companies.all()
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_status_failure_carries_status_code(self):
        """A rejected write reports the status the server returned."""
        respx.post(f"{BASE_URL}/api/v2/tickets/3/reply").mock(
            return_value=httpx.Response(429)
        )
        with pytest.raises(FreshdeskAPIError) as exc_info:
            _client().tickets.reply(3, ReplyCreate(body="hi"))
        assert exc_info.value.status_code == 429
        assert "429" in str(exc_info.value)


class TestValidationErrorFromOperations:
    """FreshdeskValidationError raised on undecodable responses."""

    @respx.mock
    def test_chains_pydantic_validation_error(self):
        """A record that does not fit the model chains the pydantic error."""
        respx.get(f"{BASE_URL}/api/v2/agents/me").mock(
            return_value=httpx.Response(200, json={"id": "not-a-number"})
        )
        with pytest.raises(FreshdeskValidationError) as exc_info:
            _client().agents.me()
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @respx.mock
    def test_search_response_must_be_an_object(self):
        """A search answering with a bare list is rejected on the first page."""
        respx.get(f"{BASE_URL}/api/v2/search/contacts").mock(
            return_value=httpx.Response(200, json=[{"id": 1}])
        )
        with pytest.raises(FreshdeskValidationError):
            _client().users.search(Query.where("company_id", 1))


class TestCursorExhaustedFromNextPage:
    """FreshdeskCursorExhaustedError raised by next_page()."""

    def test_raised_by_last_page(self):
        """The last page of a listing cannot be advanced."""
        results = TicketResults([Ticket(id=1)], transport=MagicMock(spec=ApiTransport))
        with pytest.raises(FreshdeskCursorExhaustedError, match="Ticket"):
            results.next_page()

    def test_catchable_as_base_error_but_not_api_error(self):
        """Callers catching FreshdeskError see it; transport handlers do not."""
        results = TicketResults([], transport=MagicMock(spec=ApiTransport))
        with pytest.raises(FreshdeskError) as exc_info:
            results.next_page()
        assert not isinstance(exc_info.value, FreshdeskAPIError)
