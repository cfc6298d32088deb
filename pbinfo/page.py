"""Locating the interesting parts of a pbinfo problem page.

A problem page is treated as text, not as a document tree. Three fragments
are cut out of it with fixed patterns: the ``<title>`` (which carries the
problem name), the statement (from the "Cerința" heading to the end of the
article) and the metadata table. The field extractors in :mod:`pbinfo.extract`
then work on the metadata table alone.
"""

import re

from .errors import RegexError
from .extract import (
    extract_author,
    extract_difficulty,
    extract_grade,
    extract_input_source,
    extract_memory_limit,
    extract_output_source,
    extract_source,
    extract_time_limit,
)
from .models import PageFragments, Problem, ProblemMetadata

TITLE_RE = re.compile(r"<title>Problema (?P<name>\w+) \| www\.pbinfo\.ro</title>")
STATEMENT_RE = re.compile(r"(<h1>Cerința</h1>.*?)</article>", re.DOTALL)
METADATA_RE = re.compile(
    r'<table class="table table-bordered">(.*?)</table>', re.DOTALL
)


def parse_name(page: str) -> str:
    m = TITLE_RE.search(page)
    if not m:
        raise RegexError("Failed to locate the problem name in the HTML", "name")
    return m.group("name").lower()


def parse_statement(page: str) -> str:
    m = STATEMENT_RE.search(page)
    if not m:
        raise RegexError(
            "Failed to locate the problem text in the HTML", "problem_text"
        )
    return m.group(1)


def parse_metadata_table(page: str) -> str:
    m = METADATA_RE.search(page)
    if not m:
        raise RegexError(
            "Failed to locate the problem metadata in the HTML", "meta_text"
        )
    return m.group(1)


def locate_fragments(page: str) -> PageFragments:
    return PageFragments(
        name=parse_name(page),
        problem_text=parse_statement(page),
        meta_text=parse_metadata_table(page),
    )


def parse_metadata(meta: str) -> ProblemMetadata:
    """Run every field extractor over the metadata table, in column order.

    The first extractor to fail aborts the whole parse; its error is raised
    unchanged and names the field it was working on.
    """
    return ProblemMetadata(
        input_source=extract_input_source(meta),
        output_source=extract_output_source(meta),
        grade=extract_grade(meta),
        time_limit=extract_time_limit(meta),
        memory_limit=extract_memory_limit(meta),
        source=extract_source(meta),
        author=extract_author(meta),
        difficulty=extract_difficulty(meta),
    )


def parse_problem_page(problem_id: int, page: str) -> Problem:
    fragments = locate_fragments(page)
    metadata = parse_metadata(fragments.meta_text)
    return Problem(
        id=problem_id,
        name=fragments.name,
        problem_text=fragments.problem_text,
        meta_text=fragments.meta_text,
        **dict(metadata),
    )
