from enum import Enum
from typing import Annotated

import pytest
from pydantic import BaseModel, Field

from restclient.params.base import Body, HeaderParam, PathParam, QueryParam


class State(str, Enum):
    open = "open"
    closed = "closed"
    all = "all"


class Sort(str, Enum):
    created = "created"
    updated = "updated"
    popularity = "popularity"
    long_running = "long-running"


class Direction(str, Enum):
    asc = "asc"
    desc = "desc"


class Orange(BaseModel):
    owner: Annotated[str | None, PathParam("owner")] = Field(default=None, exclude=True)
    repo: Annotated[str | None, PathParam("repo")] = Field(default=None, exclude=True)
    state: Annotated[State | None, QueryParam("state")] = Field(default=None, exclude=True)
    head: Annotated[str | None, QueryParam("head")] = Field(default=None, exclude=True)
    base: Annotated[str | None, QueryParam("base")] = Field(default=None, exclude=True)
    sort: Annotated[Sort | None, QueryParam("sort")] = Field(default=None, exclude=True)
    direction: Annotated[Direction | None, QueryParam("direction")] = Field(default=None, exclude=True)
    link: Annotated[str | None, HeaderParam("link")] = Field(default=None, exclude=True)
    draft: Annotated[bool | None, Body("draft")] = None


@pytest.fixture
def orange() -> Orange:
    return Orange(
        base="orange",
        direction=Direction.asc,
        head="cabeza",
        owner="tomitribe",
        repo="orange",
        sort=Sort.long_running,
        state=State.closed,
        link="http://foo.example.com/",
        draft=True,
    )
