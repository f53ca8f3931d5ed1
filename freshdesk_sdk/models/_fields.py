"""Field types for response records.

Freshdesk sends ``null`` for empty collections and unset flags; these types
read such a ``null`` as the empty value instead of rejecting the record.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator


def _empty_list(value: Any) -> Any:
    return [] if value is None else value


def _empty_dict(value: Any) -> Any:
    return {} if value is None else value


def _false(value: Any) -> Any:
    return False if value is None else value


StrList = Annotated[list[str], BeforeValidator(_empty_list)]
IntList = Annotated[list[int], BeforeValidator(_empty_list)]
AnyList = Annotated[list[Any], BeforeValidator(_empty_list)]
JsonDict = Annotated[dict[str, Any], BeforeValidator(_empty_dict)]
Flag = Annotated[bool, BeforeValidator(_false)]
