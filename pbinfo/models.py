from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class StdSource(BaseModel):
    kind: Literal["std"] = "std"

    model_config = ConfigDict(extra="forbid", frozen=True)


class FileSource(BaseModel):
    kind: Literal["file"] = "file"
    name: str

    model_config = ConfigDict(extra="forbid", frozen=True)


IOSource = Annotated[Union[StdSource, FileSource], Field(discriminator="kind")]


class Difficulty(str, Enum):
    EASY = "ușor"
    MEDIUM = "mediu"
    DIFFICULT = "dificil"
    CONTEST = "concurs"


class ProblemMetadata(BaseModel):
    input_source: IOSource
    output_source: IOSource
    grade: int

    time_limit: str | None = None
    memory_limit: str | None = None

    source: str | None = None
    author: str | None = None
    difficulty: Difficulty | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Problem(ProblemMetadata):
    id: int
    name: str
    problem_text: str
    meta_text: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class PageFragments(BaseModel):
    name: str
    problem_text: str
    meta_text: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class ScrapingResult(BaseModel):
    success: bool
    error: str

    model_config = ConfigDict(extra="forbid")


class ProblemResult(ScrapingResult):
    problem: Problem | None = None
    suggestions: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class ScraperConfig(BaseModel):
    base_url: str = "https://www.pbinfo.ro"
    timeout_seconds: float = 30.0
    user_agent: str = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"

    model_config = ConfigDict(extra="forbid")
