import re

from .errors import JSONFormatError, ParseError, RegexError
from .models import Difficulty, FileSource, IOSource, StdSource

EMPTY_TOKEN = "-"
STD_INPUT = "tastatură"
STD_OUTPUT = "ecran"

# 1-based, as the columns appear on the problem page
GRADE_CELL = 2
TIME_LIMIT_CELL = 4
MEMORY_LIMIT_CELL = 5
SOURCE_CELL = 6
AUTHOR_CELL = 7
DIFFICULTY_CELL = 8

LABEL_FORMAT_ERROR = (
    "The JSON 'label' attribute should be of the form "
    "`'Problema #{id}: <strong>{name}</strong>'`"
)

CELL_RE = re.compile(r"<td[^>]*>(.*?)</td>", re.DOTALL)
IO_RE = re.compile(
    r'<span style="background: url\(.*?>\s*(?P<input>[\w.ă]+) / (?P<output>[\w.ă]+)\s*</span>'
)
MEMORY_VALUE_RE = re.compile(r">([\w -]*)<")
DIGITS_RE = re.compile(r"[0-9]+")


def extract_id_from_label(label: str) -> int:
    words = label.split()
    if len(words) < 2 or words[0] != "Problema":
        raise JSONFormatError(LABEL_FORMAT_ERROR)

    id_text = words[1].replace("#", "").replace(":", "").strip()
    if not DIGITS_RE.fullmatch(id_text):
        raise JSONFormatError(LABEL_FORMAT_ERROR)
    return int(id_text)


def _io_match(meta: str, field: str) -> re.Match[str]:
    m = IO_RE.search(meta)
    if not m:
        raise RegexError(f"Failed to locate the {field} in the HTML", field)
    return m


def extract_input_source(meta: str) -> IOSource:
    value = _io_match(meta, "input source").group("input").strip()
    if value == STD_INPUT:
        return StdSource()
    return FileSource(name=value)


def extract_output_source(meta: str) -> IOSource:
    value = _io_match(meta, "output source").group("output").strip()
    if value == STD_OUTPUT:
        return StdSource()
    return FileSource(name=value)


def split_cells(meta: str) -> list[str]:
    return CELL_RE.findall(meta)


def _cell(meta: str, position: int, field: str) -> str:
    cells = split_cells(meta)
    if len(cells) < DIFFICULTY_CELL:
        raise RegexError(f"Failed to locate the {field} in the HTML", field)
    return cells[position - 1]


def _optional_text(meta: str, position: int, field: str) -> str | None:
    text = _cell(meta, position, field).strip()
    return None if text == EMPTY_TOKEN else text


def extract_grade(meta: str) -> int:
    text = _cell(meta, GRADE_CELL, "grade").strip()
    if not DIGITS_RE.fullmatch(text) or int(text) == 0:
        raise ParseError(f"Could not convert the grade {text!r} into a positive integer", "grade")
    return int(text)


def extract_time_limit(meta: str) -> str | None:
    return _optional_text(meta, TIME_LIMIT_CELL, "time limit")


def extract_memory_limit(meta: str) -> str | None:
    cell = _cell(meta, MEMORY_LIMIT_CELL, "memory limit")
    values = [v.strip() for v in MEMORY_VALUE_RE.findall(cell)]

    if len(values) == 2:
        return f"{values[0]} / {values[1]}"
    if len(values) == 1:
        return f"{values[0]} / {EMPTY_TOKEN}"
    return None


def extract_source(meta: str) -> str | None:
    return _optional_text(meta, SOURCE_CELL, "source")


def extract_author(meta: str) -> str | None:
    return _optional_text(meta, AUTHOR_CELL, "author")


def extract_difficulty(meta: str) -> Difficulty | None:
    text = _optional_text(meta, DIFFICULTY_CELL, "difficulty")
    if text is None:
        return None
    try:
        return Difficulty(text.lower())
    except ValueError:
        raise ParseError(f"Unknown difficulty {text!r}", "difficulty") from None
