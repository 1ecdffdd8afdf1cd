from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from roadmap_hub.content import ContentCatalog, roadmap_href, topic_href
from roadmap_hub.presentation.expansion import ExclusiveExpansion
from roadmap_hub.presentation.links import query_with

SETTINGS_PATH = "/settings"
EXPAND_PARAM = "expand"


@dataclass(frozen=True)
class NavTopicViewModel:
    id: str
    title: str
    href: str
    is_active: bool


@dataclass(frozen=True)
class NavPhaseViewModel:
    id: str
    title: str
    emoji: str
    is_expanded: bool
    toggle_href: str
    topics: list[NavTopicViewModel]


@dataclass(frozen=True)
class NavRoadmapLinkViewModel:
    slug: str
    title: str
    emoji: str
    href: str | None
    coming_soon: bool
    is_active: bool


@dataclass(frozen=True)
class NavigationViewModel:
    in_roadmap: bool
    roadmap_slug: str | None
    roadmap_title: str | None
    roadmap_emoji: str | None
    roadmap_href: str | None
    expanded_phase_id: str | None
    phases: list[NavPhaseViewModel]
    roadmaps: list[NavRoadmapLinkViewModel]
    settings_active: bool


def split_path(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def _within(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(f"{prefix}/")


def _toggle_href(
    path: str,
    expansion: ExclusiveExpansion[str],
    phase_id: str,
    preserved: Mapping[str, str] | None,
) -> str:
    toggled = expansion.toggle(phase_id)
    # An empty value collapses; dropping the param would re-expand the route's phase.
    return path + query_with(preserved, EXPAND_PARAM, toggled.open_key or "")


def build_navigation(
    path: str,
    catalog: ContentCatalog,
    *,
    expanded: str | None = None,
    preserved: Mapping[str, str] | None = None,
) -> NavigationViewModel:
    """Derive the sidebar for ``path``.

    ``expanded`` overrides the phase derived from the route: an empty string
    collapses every phase, any other value expands that phase if it exists.
    ``preserved`` carries other page state (the open question) into toggle links.
    """
    parts = split_path(path)
    settings_active = path == SETTINGS_PATH
    slug = parts[1] if len(parts) >= 2 and parts[0] == "roadmap" else None
    roadmap = catalog.get_roadmap(slug) if slug else None
    phases = catalog.get_phases(slug) if slug else None

    if roadmap is None or phases is None:
        return NavigationViewModel(
            in_roadmap=False,
            roadmap_slug=None,
            roadmap_title=None,
            roadmap_emoji=None,
            roadmap_href=None,
            expanded_phase_id=None,
            phases=[],
            roadmaps=[
                NavRoadmapLinkViewModel(
                    slug=item.slug,
                    title=item.title,
                    emoji=item.emoji,
                    href=None if item.coming_soon else catalog.first_topic_href(item.slug),
                    coming_soon=item.coming_soon,
                    is_active=_within(path, roadmap_href(item.slug)),
                )
                for item in catalog.roadmaps
            ],
            settings_active=settings_active,
        )

    known_phase_ids = {phase.id for phase in phases}
    if expanded is None:
        candidate = parts[2] if len(parts) >= 3 else None
    else:
        candidate = expanded or None
    expansion: ExclusiveExpansion[str] = ExclusiveExpansion(
        open_key=candidate if candidate in known_phase_ids else None
    )

    return NavigationViewModel(
        in_roadmap=True,
        roadmap_slug=roadmap.slug,
        roadmap_title=roadmap.title,
        roadmap_emoji=roadmap.emoji,
        roadmap_href=roadmap_href(roadmap.slug),
        expanded_phase_id=expansion.open_key,
        phases=[
            NavPhaseViewModel(
                id=phase.id,
                title=phase.title,
                emoji=phase.emoji,
                is_expanded=expansion.is_open(phase.id),
                toggle_href=_toggle_href(path, expansion, phase.id, preserved),
                topics=[
                    NavTopicViewModel(
                        id=topic.id,
                        title=topic.title,
                        href=topic_href(roadmap.slug, phase.id, topic.id),
                        is_active=path == topic_href(roadmap.slug, phase.id, topic.id),
                    )
                    for topic in phase.topics
                ],
            )
            for phase in phases
        ],
        roadmaps=[],
        settings_active=settings_active,
    )
