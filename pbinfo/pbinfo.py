#!/usr/bin/env python3

import logging
import sys
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from .base import BaseScraper
from .clients import RequestsClient
from .errors import JSONFormatError, NetworkError, UnknownIdError, UnknownNameError
from .extract import extract_id_from_label
from .models import Problem, ProblemResult, ScraperConfig
from .page import parse_problem_page

logger = logging.getLogger(__name__)

PROBLEM_PATH = "/probleme/{id}"
SEARCH_PATH = "/php/ajax-search.php?term={term}"

SEARCH_RESULTS = TypeAdapter(list[dict[str, str]])


class PbInfoScraper(BaseScraper):
    def __init__(
        self,
        config: ScraperConfig | None = None,
        client: RequestsClient | None = None,
    ):
        super().__init__(config)
        self.client = client or RequestsClient(self.config)

    @property
    def platform_name(self) -> str:
        return "pbinfo"

    def problem_url(self, problem_id: int) -> str:
        return self.config.base_url + PROBLEM_PATH.format(id=problem_id)

    def search_url(self, name: str) -> str:
        return self.config.base_url + SEARCH_PATH.format(term=quote(name))

    def fetch_problem_by_id(self, problem_id: int) -> Problem:
        response = self.client.get(self.problem_url(problem_id))

        if response.status_code == 200:
            return parse_problem_page(problem_id, response.text)
        if response.status_code == 404:
            raise UnknownIdError(problem_id)
        raise NetworkError(
            "Encountered an error when trying to fetch the problem. "
            f"HTTP status code {response.status_code}"
        )

    def fetch_problem_by_name(self, name: str) -> Problem:
        name = name.lower()
        candidates = self._search(name)

        suggestions: list[str] = []
        for candidate in candidates:
            value = candidate.get("value")
            if value is None:
                raise JSONFormatError("JSON should contain the 'value' attribute")

            if value.lower() != name:
                suggestions.append(value)
                continue

            label = candidate.get("label")
            if label is None:
                raise JSONFormatError("JSON should contain the 'label' attribute")

            problem_id = extract_id_from_label(label)
            logger.debug("Resolved %r to problem %d", name, problem_id)
            return self.fetch_problem_by_id(problem_id)

        raise UnknownNameError(name, suggestions)

    def _search(self, name: str) -> list[dict[str, str]]:
        response = self.client.get(self.search_url(name))
        if response.status_code != 200:
            raise NetworkError(
                "Encountered an error when searching for the problem. "
                f"HTTP status code {response.status_code}"
            )

        try:
            return SEARCH_RESULTS.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Unexpected search response for %r: %s", name, e)
            raise JSONFormatError("Could not parse JSON response") from e

    def scrape_problem(self, problem_id: int) -> ProblemResult:
        return self._safe_execute(self.fetch_problem_by_id, problem_id)

    def scrape_problem_by_name(self, name: str) -> ProblemResult:
        return self._safe_execute(self.fetch_problem_by_name, name)

    def close(self) -> None:
        self.client.close()


USAGE = "Usage: pbinfo id <problem_id> OR pbinfo name <problem_name>"


def run(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 2:
        result = ProblemResult(success=False, error=USAGE)
        print(result.model_dump_json())
        return 1

    mode, target = args
    scraper = PbInfoScraper()
    try:
        if mode == "id":
            if not (target.isascii() and target.isdigit()):
                result = ProblemResult(
                    success=False, error=f"Invalid problem id: {target}"
                )
            else:
                result = scraper.scrape_problem(int(target))
        elif mode == "name":
            result = scraper.scrape_problem_by_name(target)
        else:
            result = ProblemResult(
                success=False,
                error=f"Unknown mode: {mode}. Use 'id <problem_id>' or 'name <problem_name>'",
            )
    finally:
        scraper.close()

    print(result.model_dump_json())
    return 0 if result.success else 1


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
