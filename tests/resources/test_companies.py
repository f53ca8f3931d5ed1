"""Tests for CompaniesResource."""

import httpx
import pytest
import respx

from freshdesk_sdk.client import FreshdeskClient
from freshdesk_sdk.exceptions import FreshdeskAPIError, FreshdeskValidationError
from freshdesk_sdk.models import CompanyCreate

BASE_URL = "https://acme.freshdesk.com"
COMPANIES_URL = f"{BASE_URL}/api/v2/companies"


def _client() -> FreshdeskClient:
    return FreshdeskClient(domain="acme", api_key="key")


def _paged(pages: list[list[dict]], fail_on: int | None = None):
    """Side effect serving ``pages`` with Link headers between them."""

    def handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        if page == fail_on:
            return httpx.Response(500)
        headers = {}
        if page < len(pages):
            headers["Link"] = f'<{COMPANIES_URL}?page={page + 1}>; rel="next"'
        return httpx.Response(200, json=pages[page - 1], headers=headers)

    return handler


class TestCompaniesAll:
    """Tests for companies.all()."""

    @respx.mock
    def test_single_page_without_link(self):
        """Should return the first page and make no further request."""
        route = respx.get(COMPANIES_URL).mock(
            side_effect=_paged([[{"id": 1, "name": "Acme"}, {"id": 2, "name": "Globex"}]])
        )
        companies = _client().companies.all()
        assert [c.name for c in companies] == ["Acme", "Globex"]
        assert route.call_count == 1

    @respx.mock
    def test_follows_every_page(self):
        """Three pages take three fetches, concatenated in fetch order."""
        route = respx.get(COMPANIES_URL).mock(
            side_effect=_paged([[{"id": 3}, {"id": 1}], [{"id": 2}], [{"id": 5}]])
        )
        companies = _client().companies.all()
        assert [c.id for c in companies] == [3, 1, 2, 5]
        assert route.call_count == 3

    @respx.mock
    def test_page_failure_raises_immediately(self):
        """A failed page discards partial results and stops fetching."""
        route = respx.get(COMPANIES_URL).mock(
            side_effect=_paged([[{"id": 1}], [{"id": 2}], [{"id": 3}]], fail_on=2)
        )
        with pytest.raises(FreshdeskAPIError) as exc_info:
            _client().companies.all()
        assert exc_info.value.status_code == 500
        assert route.call_count == 2

    @respx.mock
    def test_null_domains_and_custom_fields(self):
        """Companies with null collections are kept, not rejected."""
        respx.get(COMPANIES_URL).mock(
            return_value=httpx.Response(
                200,
                json=[{"id": 1, "domains": None, "custom_fields": None}, {"id": 2}],
            )
        )
        companies = _client().companies.all()
        assert [c.id for c in companies] == [1, 2]
        assert companies[0].domains == []
        assert companies[0].custom_fields == {}

    @respx.mock
    def test_non_list_body_raises_validation_error(self):
        """Should reject a listing that is not a JSON array."""
        respx.get(COMPANIES_URL).mock(
            return_value=httpx.Response(200, json={"companies": []})
        )
        with pytest.raises(FreshdeskValidationError):
            _client().companies.all()


class TestCompaniesWrite:
    """Tests for companies.create() and companies.update()."""

    @respx.mock
    def test_create(self):
        """Should POST the company and return the created record."""
        route = respx.post(COMPANIES_URL).mock(
            return_value=httpx.Response(
                201, json={"id": 8, "name": "Acme", "domains": ["acme.com"]}
            )
        )
        company = _client().companies.create(CompanyCreate(name="Acme", domains=["acme.com"]))
        assert company.id == 8
        assert company.domains == ["acme.com"]
        assert route.calls.last.request.read() == b'{"name":"Acme","domains":["acme.com"]}'

    @respx.mock
    def test_create_conflict_raises(self):
        """Should raise on a 409 duplicate."""
        respx.post(COMPANIES_URL).mock(return_value=httpx.Response(409))
        with pytest.raises(FreshdeskAPIError) as exc_info:
            _client().companies.create(CompanyCreate(name="Acme"))
        assert exc_info.value.status_code == 409

    @respx.mock
    def test_update(self):
        """Should PUT to the company path."""
        respx.put(f"{COMPANIES_URL}/8").mock(
            return_value=httpx.Response(200, json={"id": 8, "note": "renewed"})
        )
        company = _client().companies.update(8, CompanyCreate(note="renewed"))
        assert company.note == "renewed"
