"""User (contact) resource."""

from freshdesk_sdk.models import User, UserCreate
from freshdesk_sdk.query import Query
from freshdesk_sdk.resources._base import BaseResource
from freshdesk_sdk.results import UserResults


class UsersResource(BaseResource):
    """Manage contacts."""

    def all(self) -> list[User]:
        """Fetch every contact, following pagination to the end."""
        return self._list_all(self._endpoints.contacts_all, User)

    def create(self, user: UserCreate) -> User:
        return self._create(self._endpoints.contacts_create, user, User)

    def update(self, user_id: int, user: UserCreate) -> User:
        return self._update(self._endpoints.contacts_update(user_id), user, User)

    def search(self, query: Query) -> UserResults:
        """Search contacts; same page cap and silent truncation as ticket search."""
        path = self._endpoints.contacts_search(query.url_safe())
        return UserResults(self._search(path, User), transport=self._transport)
