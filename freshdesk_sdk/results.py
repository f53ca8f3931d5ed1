"""Paginated result cursors and the in-memory ticket filter chain."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from freshdesk_sdk._internal.http import ApiTransport
from freshdesk_sdk.exceptions import (
    FreshdeskCursorExhaustedError,
    FreshdeskError,
    FreshdeskValidationError,
)
from freshdesk_sdk.models import Ticket, User

if TYPE_CHECKING:
    from freshdesk_sdk.resources.groups import GroupsResource

RecordT = TypeVar("RecordT", bound=BaseModel)
ResultsT = TypeVar("ResultsT", bound="Results")


def parse_records(model: type[RecordT], data: object) -> list[RecordT]:
    """Decode a JSON array into model instances."""
    if not isinstance(data, list):
        raise FreshdeskValidationError(
            f"Expected a list of {model.__name__} records, got {type(data).__name__}"
        )
    try:
        return [model.model_validate(item) for item in data]
    except ValidationError as e:
        raise FreshdeskValidationError(f"Invalid {model.__name__} record: {e}") from e


class Results(Generic[RecordT]):
    """One page of records plus the link to the next page.

    ``next_page()`` returns a new cursor and leaves this one untouched; callers
    are expected to carry on with the returned cursor.
    """

    model: type[BaseModel] = BaseModel

    def __init__(
        self,
        results: list[RecordT],
        *,
        transport: ApiTransport,
        next_link: str = "",
    ) -> None:
        self.results = results
        self._transport = transport
        self._next_link = next_link

    @property
    def next_link(self) -> str:
        return self._next_link

    @property
    def has_next(self) -> bool:
        return bool(self._next_link)

    def next_page(self: ResultsT) -> ResultsT:
        """Fetch the page after this one.

        Raises:
            FreshdeskCursorExhaustedError: There is no next link. No request
                is made.
            FreshdeskAPIError: The page fetch failed.
        """
        if not self._next_link:
            raise FreshdeskCursorExhaustedError(f"No more {self.model.__name__} pages")
        data, links = self._transport.get(self._next_link)
        return self._from_page(parse_records(self.model, data), self._transport.next_link(links))

    def _from_page(self: ResultsT, results: list, next_link: str) -> ResultsT:
        return type(self)(results, transport=self._transport, next_link=next_link)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> RecordT:
        return self.results[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(results={len(self.results)}, has_next={self.has_next})"


class UserResults(Results[User]):
    model = User


class TicketResults(Results[Ticket]):
    """Ticket page with chainable exclusion filters.

    Every ``filter_*`` method DROPS the matching tickets, replaces
    ``results`` with the survivors (original order kept) and returns the same
    cursor, so calls chain as a logical AND of "kept" conditions::

        results.filter_tags("spam").filter_types("Question")
    """

    model = Ticket

    def __init__(
        self,
        results: list[Ticket],
        *,
        transport: ApiTransport,
        next_link: str = "",
        groups: "GroupsResource | None" = None,
    ) -> None:
        super().__init__(results, transport=transport, next_link=next_link)
        self._groups = groups

    def _from_page(self, results: list, next_link: str) -> "TicketResults":
        return TicketResults(
            results, transport=self._transport, next_link=next_link, groups=self._groups
        )

    def filter_tags(self, *tags: str) -> "TicketResults":
        """Drop every ticket carrying any of ``tags``.

        This excludes matches; it does not keep them.
        """
        excluded = set(tags)
        self.results = [t for t in self.results if excluded.isdisjoint(t.tags)]
        return self

    def filter_types(self, *types: str) -> "TicketResults":
        """Drop every ticket whose type equals one of ``types`` (case-sensitive)."""
        excluded = set(types)
        self.results = [t for t in self.results if t.type not in excluded]
        return self

    def filter_groups_id(self, *group_ids: int) -> "TicketResults":
        """Drop every ticket assigned to one of ``group_ids``."""
        excluded = set(group_ids)
        self.results = [t for t in self.results if t.group_id not in excluded]
        return self

    def filter_groups(self, *names: str) -> "TicketResults":
        """Drop every ticket assigned to a group named in ``names``.

        Names are resolved through a full group listing. If that lookup fails
        nothing is dropped.
        """
        group_ids: list[int] = []
        if self._groups is None:
            self._transport.log_debug("No groups resource, skipping group name lookup")
        else:
            try:
                group_ids = [g.id for g in self._groups.all() if g.name in names]
            except FreshdeskError as e:
                self._transport.log_debug(f"Group lookup failed, filtering nothing: {e}")
        return self.filter_groups_id(*group_ids)
