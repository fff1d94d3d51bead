"""Immutable HTTP request descriptors.

A Request carries everything a transport needs to issue one call: the verb,
the path template and its bindings, query and header parameters, an optional
JSON body and the expected response type. Setters return a new Request, so a
descriptor can be shared and specialised without affecting the original.
"""

import logging
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from restclient.errors import InvalidMethodSignatureError
from restclient.marshalling import to_formatted_json
from restclient.params.base import ParamType, to_mapping
from restclient.params.fields import classify_object, contains_body
from restclient.params.signature import (
    DEFAULT_ACCEPT,
    HttpMethod,
    classify_arguments,
    get_route,
    merge_accept,
    resolve_http_method,
)
from restclient.template import UriTemplate, build_query

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")
T = TypeVar("T")


def _put(params: dict[str, Any], name: str, value: Any) -> dict[str, Any]:
    updated = dict(params)
    if value is None:
        updated.pop(name, None)
    else:
        updated[name] = value
    return updated


class Entity(BaseModel):
    """A transport-ready request body."""

    model_config = ConfigDict(frozen=True)

    content: str
    media_type: str = DEFAULT_ACCEPT


class Request(BaseModel, Generic[ResponseT]):
    """Description of a single HTTP call."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod | None = None
    path: str
    body: str | None = None
    response_type: Any = None
    path_params: dict[str, Any] = {}
    query_params: dict[str, Any] = {}
    header_params: dict[str, Any] = {}

    def with_path(self, name: str, value: Any) -> "Request[ResponseT]":
        """Bind a path variable. A ``None`` value removes the binding."""
        return self._derive(path_params=_put(self.path_params, name, value))

    def with_query(self, name: str, value: Any) -> "Request[ResponseT]":
        """Set a query parameter. A ``None`` value removes it."""
        return self._derive(query_params=_put(self.query_params, name, value))

    def with_header(self, name: str, value: Any) -> "Request[ResponseT]":
        """Set a header. A ``None`` value removes it."""
        return self._derive(header_params=_put(self.header_params, name, value))

    def with_body(self, value: Any) -> "Request[ResponseT]":
        """Replace the body with the JSON serialization of ``value``."""
        return self._derive(body=to_formatted_json(value))

    def with_method(self, method: HttpMethod | str) -> "Request[ResponseT]":
        return self._derive(method=HttpMethod(method))

    def _derive(self, **update: Any) -> "Request[ResponseT]":
        # every derived request owns its mappings
        update.setdefault("path_params", dict(self.path_params))
        update.setdefault("query_params", dict(self.query_params))
        update.setdefault("header_params", dict(self.header_params))
        return self.model_copy(update=update)

    def retype(self, response_type: type[T]) -> "Request[T]":
        """Return a copy of this request expecting ``response_type``."""
        return Request(
            method=self.method,
            path=self.path,
            body=self.body,
            response_type=response_type,
            path_params=dict(self.path_params),
            query_params=dict(self.query_params),
            header_params=dict(self.header_params),
        )

    def has_body(self) -> bool:
        return self.body is not None

    def get_uri(self) -> str:
        """Resolve the path template and append the query string."""
        uri = UriTemplate(self.path).resolve(self.path_params)
        query = build_query(self.query_params)
        return f"{uri}?{query}" if query else uri

    def get_entity(self) -> Entity | None:
        if not self.has_body():
            return None
        return Entity(content=self.body)

    @classmethod
    def target(cls, path: str, *path_values: Any) -> "Request[Any]":
        """Build a request binding ``path_values`` to the template variables in order."""
        path_params = UriTemplate(path).bind(*path_values)
        return cls(path=path, path_params=path_params)

    @classmethod
    def from_object(cls, path_template: str, obj: BaseModel) -> "Request[Any]":
        """Build a request from a model whose fields are all tagged.

        When any field is Body-tagged the whole object becomes the body.
        """
        params = classify_object(obj)
        body = to_formatted_json(obj) if contains_body(params) else None

        logger.debug("Built request for %s from %s", path_template, type(obj).__qualname__)
        return cls(
            path=path_template,
            body=body,
            path_params=to_mapping(params, ParamType.PATH, skip_none=True),
            query_params=to_mapping(params, ParamType.QUERY, skip_none=True),
            header_params=to_mapping(params, ParamType.HEADER, skip_none=True),
        )

    @classmethod
    def from_method(
        cls,
        method: Callable,
        args: Sequence[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        resolve_method: bool = False,
    ) -> "Request[Any]":
        """Build a request from a client interface method and its call arguments.

        At most one argument may be untagged. Its tagged fields contribute
        path, query and header values, and if any of its fields is Body-tagged
        the argument itself becomes the body. The HTTP verb is left unset
        unless ``resolve_method`` is true.
        """
        path = get_route(method)
        params = classify_arguments(method, args, kwargs)

        unknown = [p for p in params if p.param_type == ParamType.UNKNOWN]
        if len(unknown) > 1:
            raise InvalidMethodSignatureError(
                f"Client interface methods may only have one non-tagged parameter. Found {len(unknown)}",
                method,
            )

        bodies = [p.value for p in params if p.param_type == ParamType.BODY]
        fields = []
        if unknown:
            fields = classify_object(unknown[0].value, strict=False)
            if contains_body(fields):
                bodies.append(unknown[0].value)

        if len(bodies) > 1:
            raise InvalidMethodSignatureError("Client interface methods may only have one request body", method)
        body = to_formatted_json(bodies[0]) if bodies else None

        combined = fields + params
        header_params = to_mapping(combined, ParamType.HEADER, skip_none=True)
        accept = [header_params.pop(name) for name in list(header_params) if name.lower() == "accept"]
        header_params["accept"] = merge_accept(", ".join(str(a) for a in accept) if accept else None)

        http_method = resolve_http_method(method) if resolve_method else None

        logger.debug("Built request for %s from %s", path, getattr(method, "__qualname__", method))
        return cls(
            method=http_method,
            path=path,
            body=body,
            path_params=to_mapping(combined, ParamType.PATH, skip_none=True),
            query_params=to_mapping(combined, ParamType.QUERY, skip_none=True),
            header_params=header_params,
        )
