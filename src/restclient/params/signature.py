"""Client interface declarations and method argument classification.

A client interface is a class whose methods are decorated with a route and an
HTTP verb, and whose parameters carry classification tags::

    class PullsApi:
        @GET
        @Path("/repos/{owner}/{repo}/pulls")
        def list_pulls(
            self,
            owner: Annotated[str, PathParam("owner")],
            repo: Annotated[str, PathParam("repo")],
            state: Annotated[str | None, QueryParam("state")] = None,
        ): ...
"""

import inspect
import logging
import re
from enum import Enum
from typing import Annotated, Any, Callable, Mapping, Sequence, get_origin

from restclient.errors import InvalidMethodSignatureError
from restclient.params.base import Param, ParamType, find_tag

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = "application/json"

PATH_ATTR = "_restclient_path"
METHOD_ATTR = "_restclient_http_method"

SKIPPED_PARAMETERS = ("self", "cls")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


def Path(template: str) -> Callable:
    """Declare the route template of a client interface method."""

    def decorator(func):
        setattr(func, PATH_ATTR, template)
        return func

    return decorator


def _verb(http_method: HttpMethod) -> Callable:
    def decorator(func):
        setattr(func, METHOD_ATTR, http_method)
        return func

    decorator.__name__ = http_method.value
    return decorator


GET = _verb(HttpMethod.GET)
POST = _verb(HttpMethod.POST)
PUT = _verb(HttpMethod.PUT)
DELETE = _verb(HttpMethod.DELETE)
PATCH = _verb(HttpMethod.PATCH)
OPTIONS = _verb(HttpMethod.OPTIONS)
HEAD = _verb(HttpMethod.HEAD)


def get_route(method: Callable) -> str:
    """Return the method's route template with one leading slash removed."""
    template = getattr(method, PATH_ATTR, None)
    if template is None:
        raise InvalidMethodSignatureError("Client interface methods must be decorated with @Path", method)
    return template[1:] if template.startswith("/") else template


def resolve_http_method(method: Callable) -> HttpMethod:
    http_method = getattr(method, METHOD_ATTR, None)
    if http_method is None:
        raise InvalidMethodSignatureError(
            "Method must be decorated with one of @GET, @POST, @PUT, @DELETE, @PATCH, @OPTIONS or @HEAD",
            method,
        )
    return http_method


def classify_arguments(method: Callable, args: Sequence[Any] = (), kwargs: Mapping[str, Any] | None = None) -> list[Param]:
    """Classify the call arguments of ``method`` by their parameter tags.

    Arguments whose parameter has no tag are UNKNOWN. Defaults are applied, so
    omitted optional arguments are classified with their default value.
    """
    signature = inspect.signature(method, eval_str=True)
    parameters = list(signature.parameters.values())
    if parameters and parameters[0].name in SKIPPED_PARAMETERS:
        parameters = parameters[1:]

    bound = signature.replace(parameters=parameters).bind(*args, **(kwargs or {}))
    bound.apply_defaults()

    params = []
    for parameter in parameters:
        tag = None
        if get_origin(parameter.annotation) is Annotated:
            tag = find_tag(parameter.annotation.__metadata__)

        value = bound.arguments.get(parameter.name)
        if tag is None:
            params.append(Param(name=parameter.name, value=value, param_type=ParamType.UNKNOWN))
        else:
            params.append(Param(name=tag.name or parameter.name, value=value, param_type=tag.param_type))

    logger.debug("Classified %d arguments of %s", len(params), getattr(method, "__qualname__", method))
    return params


def merge_accept(accept: Any) -> str:
    """Union caller-supplied accept values with application/json.

    Values are de-duplicated keeping the caller's order first.
    """
    values = []
    if accept is not None:
        values = [v for v in re.split(r" *, *", str(accept).strip()) if v]
    values.append(DEFAULT_ACCEPT)
    return ", ".join(dict.fromkeys(values))
