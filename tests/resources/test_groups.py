"""Tests for GroupsResource and AgentsResource."""

import httpx
import pytest
import respx

from freshdesk_sdk.client import FreshdeskClient
from freshdesk_sdk.exceptions import FreshdeskAPIError

BASE_URL = "https://acme.freshdesk.com"


def _client() -> FreshdeskClient:
    return FreshdeskClient(domain="acme", api_key="key")


class TestGroupsAll:
    """Tests for groups.all()."""

    @respx.mock
    def test_returns_groups(self):
        """Should decode every group across pages."""
        respx.get(f"{BASE_URL}/api/v2/groups", params={"page": "2"}).mock(
            return_value=httpx.Response(200, json=[{"id": 2, "name": "Sales"}])
        )
        respx.get(f"{BASE_URL}/api/v2/groups").mock(
            return_value=httpx.Response(
                200,
                json=[{"id": 1, "name": "Billing", "agent_ids": [10, 11]}],
                headers={"Link": f'<{BASE_URL}/api/v2/groups?page=2>; rel="next"'},
            )
        )
        groups = _client().groups.all()
        assert [(g.id, g.name) for g in groups] == [(1, "Billing"), (2, "Sales")]
        assert groups[0].agent_ids == [10, 11]


class TestAgents:
    """Tests for agents.all() and agents.me()."""

    @respx.mock
    def test_all(self):
        """Should decode agents with their nested contact."""
        respx.get(f"{BASE_URL}/api/v2/agents").mock(
            return_value=httpx.Response(
                200,
                json=[{"id": 4, "available": True, "contact": {"name": "Dana"}}],
            )
        )
        agents = _client().agents.all()
        assert agents[0].contact is not None
        assert agents[0].contact.name == "Dana"

    @respx.mock
    def test_me(self):
        """Should fetch the current agent."""
        respx.get(f"{BASE_URL}/api/v2/agents/me").mock(
            return_value=httpx.Response(200, json={"id": 4, "type": "support_agent"})
        )
        assert _client().agents.me().type == "support_agent"

    @respx.mock
    def test_me_unauthorized(self):
        """Should raise on 401."""
        respx.get(f"{BASE_URL}/api/v2/agents/me").mock(return_value=httpx.Response(401))
        with pytest.raises(FreshdeskAPIError):
            _client().agents.me()
