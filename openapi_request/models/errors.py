from typing import Any, Iterable, Optional


class UnsupportedValueError(ValueError):
    """Raised when a value that must be serialized as a scalar is an array or object.

    Only shallow arrays and objects can be expressed with the OpenAPI serialization
    styles. Anything nested deeper needs a custom query serializer.
    """

    def __init__(
        self,
        value: Any = None,
        message="Deeply-nested arrays/objects aren't supported. Provide your own `query_serializer()` to handle these.",
    ):
        self.value = value
        self.message = message
        super().__init__(self.message)


class UnsupportedStyleError(ValueError):
    def __init__(self, style: str, allowed: Optional[Iterable[str]] = None):
        self.style = style
        self.message = f"Unsupported serialization style `{style}`."
        if allowed is not None:
            self.message += f" Expected one of: {', '.join(allowed)}."
        super().__init__(self.message)
