"""Group and agent resources."""

from freshdesk_sdk.models import Agent, Group
from freshdesk_sdk.resources._base import BaseResource


class GroupsResource(BaseResource):
    """Read agent groups."""

    def all(self) -> list[Group]:
        """Fetch every group, following pagination to the end."""
        return self._list_all(self._endpoints.groups_all, Group)


class AgentsResource(BaseResource):
    """Read agents."""

    def all(self) -> list[Agent]:
        """Fetch every agent, following pagination to the end."""
        return self._list_all(self._endpoints.agents_all, Agent)

    def me(self) -> Agent:
        """Fetch the agent the API key belongs to."""
        return self._get_one(self._endpoints.agents_me, Agent)
