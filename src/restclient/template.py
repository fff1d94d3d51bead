"""URI templates with ``{name}`` placeholders.

Only variable substitution is handled here. Variables may carry a JAX-RS style
regular expression (``{id: [0-9]+}``) which is accepted and ignored.
"""

import re
from enum import Enum
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from restclient.errors import ExcessParametersError, TemplateResolutionError

VARIABLE_PATTERN = re.compile(r"\{\s*([A-Za-z_][\w.-]*)\s*(?::[^{}]*)?\}")


def to_param_string(value: Any) -> str:
    """Render a path or query value the way it should appear on the wire."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class UriTemplate:
    """A parsed path template and its ordered variable names."""

    def __init__(self, template: str):
        self._template = template
        self._variables = tuple(m.group(1) for m in VARIABLE_PATTERN.finditer(template))

    @property
    def template(self) -> str:
        return self._template

    @property
    def variables(self) -> list[str]:
        """Variable names left to right, duplicates included."""
        return list(self._variables)

    def bind(self, *values: Any) -> dict[str, Any]:
        """Bind positional values to variables in declaration order.

        Supplying fewer values than variables is allowed; the remaining
        variables stay unbound.
        """
        if len(values) > len(self._variables):
            raise ExcessParametersError(self._template, len(self._variables), len(values))
        return dict(zip(self._variables, values))

    def resolve(self, values: Mapping[str, Any]) -> str:
        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name not in values:
                raise TemplateResolutionError(self._template, name)
            return quote(to_param_string(values[name]), safe="")

        return VARIABLE_PATTERN.sub(substitute, self._template)

    def __repr__(self) -> str:
        return f"UriTemplate({self._template!r})"


def build_query(params: Mapping[str, Any]) -> str:
    """Encode query parameters as a query string, in mapping order.

    List and tuple values repeat the key once per element.
    """
    pairs = []
    for name, value in params.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((name, to_param_string(v)) for v in value)
        else:
            pairs.append((name, to_param_string(value)))
    return urlencode(pairs)
