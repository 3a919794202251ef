"""Error descriptors returned in HttpResponse bodies.

These are returned, never raised, by controllers. Two descriptors are
equal when they are the same type with the same message and stack.
"""


class ControllerError(Exception):
    def __init__(self, message: str, stack: str | None = None):
        super().__init__(message)
        self.message = message
        self.stack = stack

    @property
    def name(self) -> str:
        return type(self).__name__

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.stack) == (other.message, other.stack)

    def __hash__(self):
        return hash((type(self), self.message, self.stack))

    def __repr__(self):
        return f"{self.name}({self.message!r})"


class MissingParamError(ControllerError):
    def __init__(self, param_name: str):
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class InvalidParamError(ControllerError):
    def __init__(self, param_name: str):
        super().__init__(f"Invalid param: {param_name}")
        self.param_name = param_name


class ServerError(ControllerError):
    """Unexpected collaborator failure. ``stack`` is the formatted traceback."""

    def __init__(self, stack: str | None = None):
        super().__init__("Internal server error", stack)
