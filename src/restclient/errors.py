"""Errors raised while building request descriptors."""


class RestClientError(Exception):
    """Base class for all request-building errors."""


class ExcessParametersError(RestClientError, ValueError):
    """More positional path values were supplied than the template declares."""

    def __init__(self, path: str, expected: int, supplied: int):
        self.path = path
        self.expected = expected
        self.supplied = supplied
        super().__init__(
            f"Excess path parameters supplied. Path {path} contains {expected} "
            f"parameters, but {supplied} were supplied."
        )


class UnrecognizedFieldError(RestClientError):
    """A field carries none of the PathParam, QueryParam, HeaderParam or Body tags."""

    def __init__(self, owner: type, field_name: str):
        self.owner = owner
        self.field_name = field_name
        super().__init__(
            "Field must be tagged PathParam, QueryParam, HeaderParam or Body: "
            f"{owner.__qualname__}.{field_name}"
        )


class UnsupportedObjectError(RestClientError, TypeError):
    """An object without tagged fields was given where a tagged model is required."""

    def __init__(self, obj):
        self.object_type = type(obj)
        super().__init__(f"Expected a tagged pydantic model, got {type(obj).__qualname__}")


class InvalidMethodSignatureError(RestClientError):
    """A client interface method cannot be turned into a request."""

    def __init__(self, message: str, method):
        self.method = method
        name = getattr(method, "__qualname__", repr(method))
        super().__init__(f"{message}: {name}")


class TemplateResolutionError(RestClientError):
    """A URI template references a variable with no bound value."""

    def __init__(self, template: str, variable: str):
        self.template = template
        self.variable = variable
        super().__init__(f"No value bound for template variable '{variable}' in {template}")


class FieldAccessError(RestClientError):
    """The value of a tagged field could not be read."""
