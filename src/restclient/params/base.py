"""Classification tags and the classified parameter model.

Tags are attached with ``typing.Annotated``, both on pydantic model fields::

    class PullsQuery(BaseModel):
        owner: Annotated[str, PathParam("owner")] = Field(exclude=True)
        draft: Annotated[bool | None, Body("draft")] = None

and on the parameters of client interface methods::

    def get_pulls(self, owner: Annotated[str, PathParam("owner")]): ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable

from pydantic import BaseModel


class ParamType(str, Enum):
    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParamTag:
    """Base for the markers recognized by the classifier."""

    name: str | None = None

    param_type: ClassVar[ParamType]


@dataclass(frozen=True)
class PathParam(ParamTag):
    param_type: ClassVar[ParamType] = ParamType.PATH


@dataclass(frozen=True)
class QueryParam(ParamTag):
    param_type: ClassVar[ParamType] = ParamType.QUERY


@dataclass(frozen=True)
class HeaderParam(ParamTag):
    param_type: ClassVar[ParamType] = ParamType.HEADER


@dataclass(frozen=True)
class Body(ParamTag):
    """Marks a field as a JSON body property.

    The JSON property name itself comes from the serializer (pydantic alias or
    field name); ``name`` only records it for classification.
    """

    param_type: ClassVar[ParamType] = ParamType.BODY


class Param(BaseModel):
    """A named value classified as path, query, header, body or unknown."""

    name: str
    value: Any = None
    param_type: ParamType


def find_tag(metadata: Iterable[Any]) -> ParamTag | None:
    """Return the first classification tag in ``Annotated`` metadata, if any."""
    for item in metadata:
        if isinstance(item, ParamTag):
            return item
    return None


def to_mapping(params: Iterable[Param], param_type: ParamType, skip_none: bool = False) -> dict[str, Any]:
    """Collect ``name -> value`` for the params of one type."""
    return {
        p.name: p.value
        for p in params
        if p.param_type == param_type and not (skip_none and p.value is None)
    }
