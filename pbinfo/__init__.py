from .errors import (
    ExtractionError,
    JSONFormatError,
    NetworkError,
    ParseError,
    PbInfoError,
    RegexError,
    UnknownIdError,
    UnknownNameError,
)
from .models import Difficulty, FileSource, Problem, ProblemMetadata, StdSource
from .pbinfo import PbInfoScraper

__all__ = [
    "PbInfoScraper",
    "Problem",
    "ProblemMetadata",
    "Difficulty",
    "StdSource",
    "FileSource",
    "PbInfoError",
    "UnknownIdError",
    "UnknownNameError",
    "NetworkError",
    "JSONFormatError",
    "ExtractionError",
    "RegexError",
    "ParseError",
]
