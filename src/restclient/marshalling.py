"""JSON body serialization.

pydantic is the codec: property names follow field aliases and fields declared
with ``Field(exclude=True)`` are left out of the body. A ``Body("name")`` tag
renames the property, the same way a field alias would.
"""

import json
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from restclient.params.base import Body, find_tag

JSON_INDENT = 2
JSON_SEPARATORS = (",", ":")


def to_formatted_json(value: Any) -> str:
    """Serialize ``value`` to 2-space indented JSON text, e.g. ``{\\n  "draft":true\\n}``."""
    return json.dumps(_to_data(value), indent=JSON_INDENT, separators=JSON_SEPARATORS, ensure_ascii=False)


def _to_data(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return _model_data(value)
    if isinstance(value, dict):
        return {to_jsonable_python(k): _to_data(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_data(v) for v in value]
    return to_jsonable_python(value, by_alias=True)


def _model_data(model: BaseModel) -> dict[str, Any]:
    data = model.model_dump(mode="json", by_alias=True)

    properties = {}
    for field_name, info in type(model).model_fields.items():
        key = info.serialization_alias or info.alias or field_name
        if key not in data:
            continue
        tag = find_tag(info.metadata)
        name = tag.name if isinstance(tag, Body) and tag.name else key
        value = getattr(model, field_name)
        if isinstance(value, (BaseModel, dict, list, tuple, set, frozenset)):
            properties[key] = (name, _to_data(value))
        else:
            properties[key] = (name, data[key])

    # computed and extra fields keep pydantic's output
    result = {}
    for key, value in data.items():
        name, value = properties.get(key, (key, value))
        result[name] = value
    return result
