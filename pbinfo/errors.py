class PbInfoError(Exception):
    """Base class for everything that can go wrong while fetching a problem."""


class UnknownIdError(PbInfoError):
    def __init__(self, problem_id: int):
        super().__init__(f"No problem with id {problem_id}")
        self.problem_id = problem_id


class UnknownNameError(PbInfoError):
    """No search candidate matched the name exactly.

    ``suggestions`` holds the display names the search endpoint returned,
    in the order it returned them.
    """

    def __init__(self, name: str, suggestions: list[str]):
        super().__init__(f"No problem named {name!r}")
        self.name = name
        self.suggestions = suggestions


class NetworkError(PbInfoError):
    pass


class JSONFormatError(PbInfoError):
    pass


class ExtractionError(PbInfoError):
    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class RegexError(ExtractionError):
    """An expected pattern is missing from the HTML."""


class ParseError(ExtractionError):
    """A value was located but could not be converted."""
