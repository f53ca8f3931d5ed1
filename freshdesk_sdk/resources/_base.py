"""Shared request helpers for resource managers."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from freshdesk_sdk._internal.endpoints import Endpoints
from freshdesk_sdk._internal.http import ApiTransport
from freshdesk_sdk.exceptions import FreshdeskAPIError, FreshdeskValidationError
from freshdesk_sdk.results import parse_records

RecordT = TypeVar("RecordT", bound=BaseModel)

# Search pagination stops here even if ``total`` says more results exist.
MAX_SEARCH_PAGES = 10


class BaseResource:
    """Base class for a Freshdesk resource manager."""

    def __init__(self, transport: ApiTransport, endpoints: Endpoints) -> None:
        self._transport = transport
        self._endpoints = endpoints

    def _list_all(self, path: str, model: type[RecordT]) -> list[RecordT]:
        """Fetch ``path`` and every page after it by following next links.

        Any failing page propagates immediately and discards what was
        collected so far.
        """
        data, links = self._transport.get(path)
        records = parse_records(model, data)
        next_link = self._transport.next_link(links)
        while next_link:
            data, links = self._transport.get(next_link)
            records.extend(parse_records(model, data))
            next_link = self._transport.next_link(links)
        return records

    def _get_page(self, path: str, model: type[RecordT]) -> tuple[list[RecordT], str]:
        """Fetch one page and return its records and the next link."""
        data, links = self._transport.get(path)
        return parse_records(model, data), self._transport.next_link(links)

    def _get_one(self, path: str, model: type[RecordT]) -> RecordT:
        data, _ = self._transport.get(path)
        return _parse_record(model, data)

    def _create(self, path: str, payload: BaseModel, model: type[RecordT]) -> RecordT:
        """POST ``payload`` and expect 201 Created."""
        data = self._transport.post_json(path, _serialize(payload), expected_status=201)
        return _parse_record(model, data)

    def _update(self, path: str, payload: BaseModel, model: type[RecordT]) -> RecordT:
        """PUT ``payload`` and expect 200 OK."""
        data = self._transport.put(path, _serialize(payload), expected_status=200)
        return _parse_record(model, data)

    def _search(self, path: str, model: type[RecordT]) -> list[RecordT]:
        """Collect search results page by page until ``total`` is reached.

        Known gaps, kept as-is: pagination stops silently at page
        ``MAX_SEARCH_PAGES``, and a failure on any page after the first ends
        pagination without raising. In both cases the caller gets a shorter
        list with no indication it was truncated. A failure on the first page
        raises.
        """
        records, total = self._parse_search_page(model, self._transport.get(path)[0])

        page = 1
        while len(records) < total:
            if page == MAX_SEARCH_PAGES:
                self._transport.log_debug(
                    f"Search capped at page {MAX_SEARCH_PAGES}: "
                    f"returning {len(records)} of {total} results"
                )
                break
            page += 1
            try:
                data, _ = self._transport.get(f"{path}&page={page}")
                page_records, total = self._parse_search_page(model, data)
            except (FreshdeskAPIError, FreshdeskValidationError) as e:
                self._transport.log_debug(
                    f"Search stopped at page {page}: returning {len(records)} "
                    f"of {total} results ({e})"
                )
                break
            if not page_records:
                break
            records.extend(page_records)
        return records

    @staticmethod
    def _parse_search_page(model: type[RecordT], data: Any) -> tuple[list[RecordT], int]:
        if not isinstance(data, dict):
            raise FreshdeskValidationError(
                f"Expected a search response object, got {type(data).__name__}"
            )
        records = parse_records(model, data.get("results") or [])
        total = data.get("total")
        return records, total if isinstance(total, int) else len(records)


def _serialize(payload: BaseModel) -> str:
    try:
        return payload.model_dump_json(exclude_none=True)
    except PydanticSerializationError as e:
        raise FreshdeskValidationError(
            f"Could not serialize {type(payload).__name__}: {e}"
        ) from e


def _parse_record(model: type[RecordT], data: Any) -> RecordT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise FreshdeskValidationError(f"Invalid {model.__name__} record: {e}") from e
