from __future__ import annotations

from roadmap_hub.presentation.navigation import build_navigation


def test_topic_route_expands_its_phase_and_marks_topic_active(python_catalog) -> None:
    nav = build_navigation("/roadmap/python/phase-2/loops", python_catalog)

    assert nav.in_roadmap is True
    assert nav.roadmap_slug == "python"
    assert nav.expanded_phase_id == "phase-2"
    assert [phase.id for phase in nav.phases if phase.is_expanded] == ["phase-2"]
    active_topics = [
        (phase.id, topic.id)
        for phase in nav.phases
        for topic in phase.topics
        if topic.is_active
    ]
    assert active_topics == [("phase-2", "loops")]


def test_roadmap_overview_collapses_all_phases(python_catalog) -> None:
    nav = build_navigation("/roadmap/python", python_catalog)

    assert nav.in_roadmap is True
    assert nav.expanded_phase_id is None
    assert not any(phase.is_expanded for phase in nav.phases)
    assert nav.roadmap_href == "/roadmap/python"


def test_phase_toggle_links_implement_exclusive_expansion(python_catalog) -> None:
    nav = build_navigation("/roadmap/python/phase-2/loops", python_catalog)
    toggles = {phase.id: phase.toggle_href for phase in nav.phases}

    assert toggles["phase-1"] == "/roadmap/python/phase-2/loops?expand=phase-1"
    assert toggles["phase-2"] == "/roadmap/python/phase-2/loops?expand="


def test_expanded_override_opens_another_phase(python_catalog) -> None:
    nav = build_navigation("/roadmap/python/phase-2/loops", python_catalog, expanded="phase-3")

    assert nav.expanded_phase_id == "phase-3"
    assert [phase.id for phase in nav.phases if phase.is_expanded] == ["phase-3"]


def test_empty_override_collapses_everything(python_catalog) -> None:
    nav = build_navigation("/roadmap/python/phase-2/loops", python_catalog, expanded="")

    assert nav.expanded_phase_id is None


def test_unknown_phase_in_route_omits_expansion(python_catalog) -> None:
    nav = build_navigation("/roadmap/python/phase-9/loops", python_catalog)

    assert nav.in_roadmap is True
    assert nav.expanded_phase_id is None
    assert not any(topic.is_active for phase in nav.phases for topic in phase.topics)


def test_landing_lists_roadmaps_with_first_topic_links(python_catalog) -> None:
    nav = build_navigation("/", python_catalog)

    assert nav.in_roadmap is False
    assert nav.phases == []
    links = {link.slug: link for link in nav.roadmaps}
    assert links["python"].href == "/roadmap/python/phase-1/variables"
    assert links["python"].coming_soon is False
    assert links["rust"].href is None
    assert links["rust"].coming_soon is True


def test_unmatched_routes_fall_back_to_landing(python_catalog) -> None:
    for path in ("/roadmap/nope/phase-1/loops", "/roadmap", "/elsewhere", "/roadmap/rust"):
        nav = build_navigation(path, python_catalog)
        assert nav.in_roadmap is False
        assert [link.slug for link in nav.roadmaps] == ["python", "rust"]


def test_settings_link_active_only_on_exact_path(python_catalog) -> None:
    assert build_navigation("/settings", python_catalog).settings_active is True
    assert build_navigation("/settings/extra", python_catalog).settings_active is False


def test_phase_toggle_links_keep_the_open_question(python_catalog) -> None:
    nav = build_navigation(
        "/roadmap/python/phase-2/loops",
        python_catalog,
        preserved={"q": "1"},
    )
    toggles = {phase.id: phase.toggle_href for phase in nav.phases}

    assert toggles["phase-1"] == "/roadmap/python/phase-2/loops?q=1&expand=phase-1"
    assert toggles["phase-2"] == "/roadmap/python/phase-2/loops?q=1&expand="
