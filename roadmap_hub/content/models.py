from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class InterviewQuestion(ContentModel):
    q: str
    a: str
    type: str | None = None


class Topic(ContentModel):
    id: str = Field(min_length=1)
    title: str
    explanation: str = ""
    code_example: str = Field(default="", alias="codeExample")
    code_language: str = Field(default="javascript", alias="codeLanguage")
    exercise: str = ""
    common_mistakes: tuple[str, ...] = Field(default=(), alias="commonMistakes")
    interview_questions: tuple[InterviewQuestion, ...] = Field(
        default=(), alias="interviewQuestions"
    )


class Phase(ContentModel):
    id: str = Field(min_length=1)
    title: str
    emoji: str = ""
    description: str = ""
    topics: tuple[Topic, ...] = ()

    @property
    def short_title(self) -> str:
        return self.title.split(":")[0]


class Roadmap(ContentModel):
    slug: str = Field(min_length=1)
    title: str
    emoji: str = ""
    color: str = "#888888"
    description: str = ""
    tags: tuple[str, ...] = ()
    coming_soon: bool = Field(default=False, alias="comingSoon")
    phases: tuple[Phase, ...] = ()
