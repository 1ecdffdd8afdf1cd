from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from markupsafe import Markup

from roadmap_hub.content import (
    ContentCatalog,
    Phase,
    Roadmap,
    Topic,
    TopicLink,
    phase_href,
    roadmap_href,
    topic_href,
)
from roadmap_hub.presentation.accordion import AccordionViewModel, build_accordion
from roadmap_hub.rendering import highlight_code, normalize_newlines, render_markdown


@dataclass(frozen=True)
class BreadcrumbItem:
    label: str
    href: str | None


@dataclass(frozen=True)
class RoadmapCardViewModel:
    slug: str
    title: str
    emoji: str
    color: str
    description: str
    tags: tuple[str, ...]
    coming_soon: bool
    href: str | None
    topic_count: int
    phase_count: int


@dataclass(frozen=True)
class PhaseCardViewModel:
    id: str
    title: str
    emoji: str
    description: str
    href: str
    topic_count: int


@dataclass(frozen=True)
class TopicListItemViewModel:
    number: int
    title: str
    href: str


@dataclass(frozen=True)
class TopicPageViewModel:
    title: str
    breadcrumbs: list[BreadcrumbItem]
    explanation_html: Markup
    code_example: str
    code_language: str
    code_html: Markup
    exercise_html: Markup
    common_mistakes_html: list[Markup]
    accordion: AccordionViewModel
    previous: TopicLink | None
    next: TopicLink | None


def _render(text: str) -> Markup:
    return render_markdown(normalize_newlines(text))


def build_roadmap_cards(catalog: ContentCatalog) -> list[RoadmapCardViewModel]:
    cards: list[RoadmapCardViewModel] = []
    for roadmap in catalog.roadmaps:
        phases = catalog.get_phases(roadmap.slug) or ()
        cards.append(
            RoadmapCardViewModel(
                slug=roadmap.slug,
                title=roadmap.title,
                emoji=roadmap.emoji,
                color=roadmap.color,
                description=roadmap.description,
                tags=roadmap.tags,
                coming_soon=roadmap.coming_soon,
                href=None if roadmap.coming_soon else roadmap_href(roadmap.slug),
                topic_count=catalog.topic_count(roadmap.slug),
                phase_count=len(phases),
            )
        )
    return cards


def build_phase_cards(roadmap: Roadmap) -> list[PhaseCardViewModel]:
    return [
        PhaseCardViewModel(
            id=phase.id,
            title=phase.title,
            emoji=phase.emoji,
            description=phase.description,
            href=phase_href(roadmap.slug, phase.id),
            topic_count=len(phase.topics),
        )
        for phase in roadmap.phases
    ]


def build_topic_list(roadmap: Roadmap, phase: Phase) -> list[TopicListItemViewModel]:
    return [
        TopicListItemViewModel(
            number=index + 1,
            title=topic.title,
            href=topic_href(roadmap.slug, phase.id, topic.id),
        )
        for index, topic in enumerate(phase.topics)
    ]


def roadmap_breadcrumbs(
    roadmap: Roadmap,
    phase: Phase | None = None,
    topic: Topic | None = None,
) -> list[BreadcrumbItem]:
    crumbs = [BreadcrumbItem(label="All Roadmaps", href="/")]
    roadmap_label = f"{roadmap.emoji} {roadmap.title}".strip()
    if phase is None:
        crumbs.append(BreadcrumbItem(label=roadmap_label, href=None))
        return crumbs
    crumbs.append(BreadcrumbItem(label=roadmap_label, href=roadmap_href(roadmap.slug)))
    if topic is None:
        crumbs.append(BreadcrumbItem(label=f"{phase.emoji} {phase.title}".strip(), href=None))
        return crumbs
    crumbs.append(BreadcrumbItem(label=phase.short_title, href=phase_href(roadmap.slug, phase.id)))
    crumbs.append(BreadcrumbItem(label=topic.title, href=None))
    return crumbs


def build_topic_page_view_model(
    catalog: ContentCatalog,
    *,
    roadmap: Roadmap,
    phase: Phase,
    topic: Topic,
    open_index: int | None = None,
    preserved: Mapping[str, str] | None = None,
) -> TopicPageViewModel:
    adjacent = catalog.adjacent_topics(roadmap.slug, phase.id, topic.id)
    return TopicPageViewModel(
        title=topic.title,
        breadcrumbs=roadmap_breadcrumbs(roadmap, phase, topic),
        explanation_html=_render(topic.explanation),
        code_example=topic.code_example.strip(),
        code_language=topic.code_language,
        code_html=highlight_code(topic.code_example.strip(), topic.code_language, linenos=True),
        exercise_html=_render(topic.exercise),
        common_mistakes_html=[_render(mistake) for mistake in topic.common_mistakes],
        accordion=build_accordion(
            topic.interview_questions,
            open_index=open_index,
            preserved=preserved,
        ),
        previous=adjacent.previous,
        next=adjacent.next,
    )
