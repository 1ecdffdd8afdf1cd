from __future__ import annotations

from collections.abc import Iterator

from fastapi.testclient import TestClient
import pytest

from roadmap_hub.content import ContentCatalog, InterviewQuestion, Phase, Roadmap, Topic
from roadmap_hub.main import app


def _topic(topic_id: str, title: str) -> Topic:
    return Topic(
        id=topic_id,
        title=title,
        explanation=f"About **{title}**.",
        code_example="print('hi')",
        code_language="python",
        exercise="Try it.",
        common_mistakes=("Forgetting `:`",),
        interview_questions=(
            InterviewQuestion(q=f"What is {title}?", a="An answer.", type="conceptual"),
        ),
    )


@pytest.fixture
def python_catalog() -> ContentCatalog:
    return ContentCatalog(
        [
            Roadmap(
                slug="python",
                title="Python",
                emoji="🐍",
                phases=(
                    Phase(
                        id="phase-1",
                        title="Phase 1: Basics",
                        emoji="🟢",
                        topics=(_topic("variables", "Variables"), _topic("strings", "Strings")),
                    ),
                    Phase(
                        id="phase-2",
                        title="Phase 2: Control Flow",
                        emoji="🟡",
                        topics=(_topic("conditionals", "Conditionals"), _topic("loops", "Loops")),
                    ),
                    Phase(
                        id="phase-3",
                        title="Phase 3: Functions",
                        emoji="🔵",
                        topics=(_topic("defining", "Defining Functions"),),
                    ),
                ),
            ),
            Roadmap(slug="rust", title="Rust", emoji="🦀", coming_soon=True),
        ]
    )


@pytest.fixture
def client() -> Iterator[TestClient]:
    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
