class RiderEngineError(Exception):
    """Base class for errors raised by the rider engine."""


class InvalidRosterError(RiderEngineError, ValueError):
    """The roster has no performers, so there is nothing to build a rider for."""

    def __init__(self, message: str = "Roster must contain at least one performer"):
        super().__init__(message)
        self.message = message


class UnknownTemplateError(RiderEngineError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown rider template: {self.name!r}"
