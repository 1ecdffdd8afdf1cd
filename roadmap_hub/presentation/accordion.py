from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Final

from markupsafe import Markup

from roadmap_hub.content import InterviewQuestion
from roadmap_hub.presentation.expansion import ExclusiveExpansion
from roadmap_hub.presentation.links import query_with
from roadmap_hub.rendering import normalize_newlines, render_markdown

OPEN_PARAM = "q"


@dataclass(frozen=True)
class CategoryBadge:
    label: str
    color: str


QUESTION_CATEGORIES: Final[dict[str, CategoryBadge]] = {
    "conceptual": CategoryBadge(label="Conceptual", color="#60a5fa"),
    "tricky": CategoryBadge(label="Tricky Output", color="#f59e0b"),
    "coding": CategoryBadge(label="Coding", color="#34d399"),
    "scenario": CategoryBadge(label="Scenario", color="#a78bfa"),
}
DEFAULT_CATEGORY: Final[str] = "conceptual"


@dataclass(frozen=True)
class AccordionItemViewModel:
    index: int
    number: int
    category: str
    badge: CategoryBadge
    preamble: str
    is_open: bool
    toggle_query: str
    question_html: Markup | None
    answer_html: Markup | None


@dataclass(frozen=True)
class AccordionViewModel:
    open_index: int | None
    items: list[AccordionItemViewModel]


def resolve_category(tag: str | None) -> str:
    if tag and tag in QUESTION_CATEGORIES:
        return tag
    return DEFAULT_CATEGORY


def parse_open_index(raw_value: str | None, item_count: int) -> int | None:
    if raw_value is None:
        return None
    try:
        index = int(raw_value)
    except ValueError:
        return None
    if 0 <= index < item_count:
        return index
    return None


def _toggle_query(
    expansion: ExclusiveExpansion[int],
    index: int,
    preserved: Mapping[str, str] | None,
) -> str:
    toggled = expansion.toggle(index)
    value = None if toggled.open_key is None else str(toggled.open_key)
    return query_with(preserved, OPEN_PARAM, value)


def build_accordion(
    items: Sequence[InterviewQuestion],
    *,
    open_index: int | None = None,
    renderer: Callable[[str], Markup] = render_markdown,
    preserved: Mapping[str, str] | None = None,
) -> AccordionViewModel:
    if open_index is not None and not 0 <= open_index < len(items):
        open_index = None
    expansion: ExclusiveExpansion[int] = ExclusiveExpansion(open_key=open_index)

    view_items: list[AccordionItemViewModel] = []
    for index, item in enumerate(items):
        category = resolve_category(item.type)
        question = normalize_newlines(item.q)
        preamble = question.split("\n", 1)[0]
        is_open = expansion.is_open(index)
        question_html: Markup | None = None
        answer_html: Markup | None = None
        if is_open:
            if question.strip() != preamble.strip():
                question_html = renderer(question)
            answer_html = renderer(normalize_newlines(item.a))
        view_items.append(
            AccordionItemViewModel(
                index=index,
                number=index + 1,
                category=category,
                badge=QUESTION_CATEGORIES[category],
                preamble=preamble,
                is_open=is_open,
                toggle_query=_toggle_query(expansion, index, preserved),
                question_html=question_html,
                answer_html=answer_html,
            )
        )
    return AccordionViewModel(open_index=expansion.open_key, items=view_items)
