"""Classify the fields of a tagged pydantic model."""

import logging
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from restclient.errors import FieldAccessError, UnrecognizedFieldError, UnsupportedObjectError
from restclient.params.base import Param, ParamTag, ParamType, find_tag

logger = logging.getLogger(__name__)


def classify_object(obj: Any, strict: bool = True) -> list[Param]:
    """Classify every field of ``obj`` by its tag.

    In strict mode every field must be tagged, otherwise
    UnrecognizedFieldError is raised. Non-strict mode reports untagged
    fields as UNKNOWN and treats objects that are not pydantic models as
    having no fields.
    """
    if not isinstance(obj, BaseModel):
        if strict:
            raise UnsupportedObjectError(obj)
        return []

    cls = type(obj)
    params = []
    for field_name, info in cls.model_fields.items():
        tag = find_tag(info.metadata)
        if tag is None:
            if strict:
                raise UnrecognizedFieldError(cls, field_name)
            params.append(Param(name=field_name, value=_read(obj, field_name), param_type=ParamType.UNKNOWN))
            continue
        params.append(
            Param(
                name=_declared_name(field_name, info, tag),
                value=_read(obj, field_name),
                param_type=tag.param_type,
            )
        )

    logger.debug("Classified %d fields of %s", len(params), cls.__qualname__)
    return params


def contains_body(params: list[Param]) -> bool:
    return any(p.param_type == ParamType.BODY for p in params)


def _declared_name(field_name: str, info: FieldInfo, tag: ParamTag) -> str:
    if tag.name:
        return tag.name
    if tag.param_type == ParamType.BODY:
        return info.serialization_alias or info.alias or field_name
    return field_name


def _read(obj: BaseModel, field_name: str) -> Any:
    try:
        return getattr(obj, field_name)
    except AttributeError as e:
        raise FieldAccessError(f"Cannot get value of field: {type(obj).__qualname__}.{field_name}") from e
