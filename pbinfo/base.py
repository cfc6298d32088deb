from abc import ABC, abstractmethod
from typing import Callable, ParamSpec

P = ParamSpec("P")

from .errors import PbInfoError, UnknownNameError
from .models import Problem, ProblemResult, ScraperConfig


class BaseScraper(ABC):
    def __init__(self, config: ScraperConfig | None = None):
        self.config = config or ScraperConfig()

    @property
    @abstractmethod
    def platform_name(self) -> str: ...

    @abstractmethod
    def fetch_problem_by_id(self, problem_id: int) -> Problem: ...

    @abstractmethod
    def fetch_problem_by_name(self, name: str) -> Problem: ...

    def _create_problem_error(
        self, error_msg: str, suggestions: list[str] | None = None
    ) -> ProblemResult:
        return ProblemResult(
            success=False,
            error=f"{self.platform_name}: {error_msg}",
            suggestions=suggestions or [],
        )

    def _safe_execute(
        self,
        func: Callable[P, Problem],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> ProblemResult:
        try:
            problem = func(*args, **kwargs)
        except UnknownNameError as e:
            return self._create_problem_error(str(e), e.suggestions)
        except PbInfoError as e:
            return self._create_problem_error(str(e))
        return ProblemResult(success=True, error="", problem=problem)
