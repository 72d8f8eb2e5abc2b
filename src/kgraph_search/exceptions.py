"""Exceptions raised by the Knowledge Graph search client."""


class KGraphError(Exception):
    """Base exception for all Knowledge Graph search failures."""

    pass


class ConflictingParametersError(KGraphError):
    """Raised when both a keyword and entity ids are supplied.

    The API resolves either a free-text query or a fixed set of ids, never both.
    """

    def __init__(self, message: str = "Either keyword or ids can be obtained"):
        super().__init__(message)


class InvalidParameterError(KGraphError):
    """Raised when a call parameter has the wrong type or is missing."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")


class ApiError(KGraphError):
    """Raised when the Knowledge Graph API answers with a non-200 status.

    `code` and `message` are passed through from the upstream error envelope.
    """

    def __init__(self, code: int | str | None, message: str, status_code: int):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"Google API Error:{code} {message}")
