import typing as t

from pydantic import ValidationError


class ConfigurationError(Exception):
    """Raised when a planner or scenario is constructed from invalid parameters."""

    def __init__(self, message: str, errors: t.Optional[t.List[t.Any]] = None):
        super().__init__(message)
        self.errors = errors if errors else []

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ConfigurationError":
        details = "; ".join(
            "{}: {}".format(".".join(str(x) for x in e["loc"]), e["msg"])
            for e in error.errors()
        )
        return cls(f"Invalid configuration: {details}", errors=list(error.errors()))
