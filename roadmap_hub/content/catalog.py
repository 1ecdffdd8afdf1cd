from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import json
import logging
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from roadmap_hub.content.models import Phase, Roadmap, Topic

logger = logging.getLogger(__name__)

INDEX_FILENAME = "roadmaps.json"


class ContentError(ValueError):
    """Raised when the content pack is missing or malformed."""


@dataclass(frozen=True)
class TopicLink:
    phase_id: str
    topic: Topic
    href: str


@dataclass(frozen=True)
class AdjacentTopics:
    previous: TopicLink | None
    next: TopicLink | None


def roadmap_href(slug: str) -> str:
    return f"/roadmap/{slug}"


def phase_href(slug: str, phase_id: str) -> str:
    return f"/roadmap/{slug}/{phase_id}"


def topic_href(slug: str, phase_id: str, topic_id: str) -> str:
    return f"/roadmap/{slug}/{phase_id}/{topic_id}"


class ContentCatalog:
    def __init__(self, roadmaps: Iterable[Roadmap]) -> None:
        ordered = tuple(roadmaps)
        by_slug: dict[str, Roadmap] = {}
        for roadmap in ordered:
            if roadmap.slug in by_slug:
                raise ContentError(f"Duplicate roadmap slug {roadmap.slug!r}.")
            by_slug[roadmap.slug] = roadmap
        self._roadmaps = ordered
        self._by_slug: Mapping[str, Roadmap] = MappingProxyType(by_slug)

    @property
    def roadmaps(self) -> tuple[Roadmap, ...]:
        return self._roadmaps

    def get_roadmap(self, slug: str) -> Roadmap | None:
        return self._by_slug.get(slug)

    def get_phases(self, slug: str) -> tuple[Phase, ...] | None:
        roadmap = self.get_roadmap(slug)
        if roadmap is None or not roadmap.phases:
            return None
        return roadmap.phases

    def get_phase(self, slug: str, phase_id: str) -> Phase | None:
        for phase in self.get_phases(slug) or ():
            if phase.id == phase_id:
                return phase
        return None

    def get_topic(self, slug: str, phase_id: str, topic_id: str) -> Topic | None:
        phase = self.get_phase(slug, phase_id)
        if phase is None:
            return None
        for topic in phase.topics:
            if topic.id == topic_id:
                return topic
        return None

    def topic_count(self, slug: str) -> int:
        return sum(len(phase.topics) for phase in self.get_phases(slug) or ())

    def first_topic_href(self, slug: str) -> str | None:
        for phase in self.get_phases(slug) or ():
            if phase.topics:
                return topic_href(slug, phase.id, phase.topics[0].id)
        return None

    def adjacent_topics(self, slug: str, phase_id: str, topic_id: str) -> AdjacentTopics:
        """Previous/next topic in reading order, crossing phase boundaries."""
        sequence = [
            TopicLink(phase_id=phase.id, topic=topic, href=topic_href(slug, phase.id, topic.id))
            for phase in self.get_phases(slug) or ()
            for topic in phase.topics
        ]
        for index, link in enumerate(sequence):
            if link.phase_id == phase_id and link.topic.id == topic_id:
                previous = sequence[index - 1] if index > 0 else None
                following = sequence[index + 1] if index + 1 < len(sequence) else None
                return AdjacentTopics(previous=previous, next=following)
        return AdjacentTopics(previous=None, next=None)


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ContentError(f"Content file {path} is missing.") from exc
    except UnicodeDecodeError as exc:
        raise ContentError(f"Content file {path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContentError(f"Content file {path} is not valid JSON: {exc}") from exc


def _load_roadmap(root: Path, entry: dict) -> Roadmap:
    slug = entry.get("slug")
    coming_soon = bool(entry.get("comingSoon", entry.get("coming_soon", False)))
    phases_path = root / f"{slug}.json"
    # Coming-soon roadmaps never read a phase file; available ones must have one.
    phases = [] if coming_soon else _read_json(phases_path)
    try:
        roadmap = Roadmap.model_validate({**entry, "phases": phases})
    except ValidationError as exc:
        raise ContentError(f"Roadmap {slug!r} is malformed: {exc}") from exc
    if not roadmap.coming_soon and not roadmap.phases:
        raise ContentError(
            f"Roadmap {slug!r} has no phases in {phases_path.name}; add phases or mark it comingSoon."
        )
    return roadmap


def load_catalog(directory: str | Path) -> ContentCatalog:
    root = Path(directory)
    index = _read_json(root / INDEX_FILENAME)
    if not isinstance(index, list):
        raise ContentError(f"{root / INDEX_FILENAME} must contain a list of roadmaps.")

    roadmaps: list[Roadmap] = []
    for entry in index:
        if not isinstance(entry, dict):
            raise ContentError("Roadmap entries must be objects.")
        roadmaps.append(_load_roadmap(root, entry))

    catalog = ContentCatalog(roadmaps)
    logger.info(
        "content.catalog_loaded",
        extra={
            "event": "content.catalog_loaded",
            "roadmap_count": len(catalog.roadmaps),
            "topic_count": sum(catalog.topic_count(r.slug) for r in catalog.roadmaps),
        },
    )
    return catalog
