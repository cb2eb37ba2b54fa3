"""Errors raised while reading publication models."""


class ParseError(ValueError):
    """A JSON document could not be parsed into a model."""

    def __init__(self, type_name: str, message: str | None = None):
        self.type_name = type_name
        self.message = message
        if message:
            super().__init__(f"Failed to parse {type_name}: {message}")
        else:
            super().__init__(f"Failed to parse {type_name}")
