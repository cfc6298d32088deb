import pytest
from pydantic import ValidationError

from pbinfo.errors import ParseError, RegexError
from pbinfo.extract import split_cells
from pbinfo.models import Difficulty, FileSource, ProblemMetadata, StdSource
from pbinfo.page import (
    locate_fragments,
    parse_metadata,
    parse_metadata_table,
    parse_name,
    parse_problem_page,
    parse_statement,
)


def test_parse_name_is_lowercased(fixture_text):
    assert parse_name(fixture_text("pbinfo_1691.html")) == "arbore1"
    assert parse_name(fixture_text("pbinfo_4.html")) == "sum"


def test_parse_name_missing_title():
    page = "<title>Arbore1 - pbinfo</title><h1>Cerința</h1></article>"

    with pytest.raises(RegexError) as exc_info:
        parse_name(page)

    assert exc_info.value.field == "name"


def test_parse_statement_stops_at_first_article_end():
    page = "<article><h1>Cerința</h1><p>text</p></article><article>other</article>"

    assert parse_statement(page) == "<h1>Cerința</h1><p>text</p>"


def test_parse_statement_missing():
    with pytest.raises(RegexError) as exc_info:
        parse_statement("<h1>Requirement</h1></article>")

    assert exc_info.value.field == "problem_text"


def test_parse_metadata_table_takes_first_table(fixture_text):
    meta = parse_metadata_table(fixture_text("pbinfo_1691.html"))

    assert meta.lstrip().startswith("<tr>")
    assert "arbore1.in / arbore1.out" in meta
    assert "</table>" not in meta


def test_parse_metadata_table_missing():
    with pytest.raises(RegexError) as exc_info:
        parse_metadata_table('<table class="table">...</table>')

    assert exc_info.value.field == "meta_text"


def test_locate_fragments(fixture_text):
    fragments = locate_fragments(fixture_text("pbinfo_1691.html"))

    assert fragments.name == "arbore1"
    assert fragments.problem_text.startswith("<h1>Cerința</h1>")
    assert "</article>" not in fragments.problem_text
    assert "Date de ieșire" in fragments.problem_text
    assert "ONI 2016" in fragments.meta_text


def test_parse_metadata_file_io(fixture_text):
    meta = parse_metadata_table(fixture_text("pbinfo_1691.html"))

    assert parse_metadata(meta) == ProblemMetadata(
        input_source=FileSource(name="arbore1.in"),
        output_source=FileSource(name="arbore1.out"),
        grade=11,
        time_limit="0.5 secunde",
        memory_limit="64 MB / 32 MB",
        source="ONI 2016, clasele XI-XII",
        author="Denis-Gabriel Mită",
        difficulty=Difficulty.CONTEST,
    )


def test_parse_metadata_std_io(meta_std_io):
    assert parse_metadata(meta_std_io) == ProblemMetadata(
        input_source=StdSource(),
        output_source=StdSource(),
        grade=9,
        time_limit=None,
        memory_limit="64 MB / -",
        source=None,
        author=None,
        difficulty=None,
    )


def test_parse_metadata_stops_at_first_failure(meta_std_io):
    cells = split_cells(meta_std_io)
    bad_grade = meta_std_io.replace(cells[1], "noua")

    with pytest.raises(ParseError) as exc_info:
        parse_metadata(bad_grade)

    assert exc_info.value.field == "grade"

    with pytest.raises(RegexError) as exc_info:
        parse_metadata(bad_grade.replace("tastatură / ecran", "???"))

    assert exc_info.value.field == "input source"


def test_parse_problem_page(fixture_text):
    page = fixture_text("pbinfo_1691.html")
    problem = parse_problem_page(1691, page)

    assert problem.id == 1691
    assert problem.name == "arbore1"
    assert problem.grade == 11
    assert problem.input_source == FileSource(name="arbore1.in")
    assert problem.output_source == FileSource(name="arbore1.out")
    assert problem.difficulty == Difficulty.CONTEST
    assert problem.meta_text == parse_metadata_table(page)


@pytest.mark.parametrize("name", ["pbinfo_1691.html", "pbinfo_4.html"])
def test_reextracting_meta_text_is_stable(fixture_text, name):
    problem = parse_problem_page(1, fixture_text(name))
    again = parse_metadata(problem.meta_text)

    assert again.model_dump() == problem.model_dump(
        include=set(ProblemMetadata.model_fields)
    )


def test_problem_is_frozen(fixture_text):
    problem = parse_problem_page(4, fixture_text("pbinfo_4.html"))

    with pytest.raises(ValidationError):
        problem.grade = 10
