from __future__ import annotations

from markupsafe import Markup

from roadmap_hub.content import InterviewQuestion
from roadmap_hub.presentation.accordion import (
    DEFAULT_CATEGORY,
    build_accordion,
    parse_open_index,
    resolve_category,
)
from roadmap_hub.presentation.expansion import ExclusiveExpansion

ITEMS = (
    InterviewQuestion(q="First question", a="First answer", type="conceptual"),
    InterviewQuestion(q="What prints?\\n```js\\nconsole.log(1)\\n```", a="`1`", type="tricky"),
    InterviewQuestion(q="Third question", a="Third answer", type="mystery"),
)


def test_exclusive_expansion_law() -> None:
    state: ExclusiveExpansion[int] = ExclusiveExpansion()

    state = state.toggle(2)
    state = state.toggle(0)
    assert state.open_key == 0
    assert [index for index in range(3) if state.is_open(index)] == [0]

    state = state.toggle(0)
    assert state.open_key is None


def test_build_accordion_opens_only_requested_item() -> None:
    view = build_accordion(ITEMS, open_index=0)

    assert [item.is_open for item in view.items] == [True, False, False]
    assert view.items[0].answer_html is not None
    assert view.items[1].answer_html is None
    assert view.items[0].toggle_query == ""
    assert view.items[2].toggle_query == "?q=2"


def test_collapsed_item_shows_plain_first_line_only() -> None:
    view = build_accordion(ITEMS)

    item = view.items[1]
    assert item.preamble == "What prints?"
    assert item.question_html is None
    assert item.answer_html is None


def test_open_item_renders_full_question_with_real_newlines() -> None:
    seen: list[str] = []

    def renderer(text: str) -> Markup:
        seen.append(text)
        return Markup("<p>rendered</p>")

    view = build_accordion(ITEMS, open_index=1, renderer=renderer)

    assert view.items[1].question_html == Markup("<p>rendered</p>")
    assert seen[0] == "What prints?\n```js\nconsole.log(1)\n```"
    assert "\\n" not in seen[0]


def test_single_line_question_is_not_rendered_twice() -> None:
    view = build_accordion(ITEMS, open_index=0)

    assert view.items[0].question_html is None
    assert "First answer" in view.items[0].answer_html


def test_unknown_or_missing_category_falls_back() -> None:
    view = build_accordion(ITEMS)

    assert view.items[2].category == DEFAULT_CATEGORY
    assert view.items[2].badge.label == "Conceptual"
    assert view.items[1].badge.label == "Tricky Output"
    assert resolve_category(None) == DEFAULT_CATEGORY


def test_out_of_range_open_index_is_ignored() -> None:
    view = build_accordion(ITEMS, open_index=7)

    assert view.open_index is None
    assert not any(item.is_open for item in view.items)


def test_parse_open_index() -> None:
    assert parse_open_index("1", 3) == 1
    assert parse_open_index("3", 3) is None
    assert parse_open_index("-1", 3) is None
    assert parse_open_index("abc", 3) is None
    assert parse_open_index(None, 3) is None


def test_toggle_links_keep_the_expanded_phase() -> None:
    view = build_accordion(ITEMS, open_index=0, preserved={"expand": "phase-1", "q": "0"})

    assert view.items[0].toggle_query == "?expand=phase-1"
    assert view.items[2].toggle_query == "?expand=phase-1&q=2"
