from roadmap_hub.content.catalog import (
    AdjacentTopics,
    ContentCatalog,
    ContentError,
    TopicLink,
    load_catalog,
    phase_href,
    roadmap_href,
    topic_href,
)
from roadmap_hub.content.models import InterviewQuestion, Phase, Roadmap, Topic

__all__ = [
    "AdjacentTopics",
    "ContentCatalog",
    "ContentError",
    "InterviewQuestion",
    "Phase",
    "Roadmap",
    "Topic",
    "TopicLink",
    "load_catalog",
    "phase_href",
    "roadmap_href",
    "topic_href",
]
