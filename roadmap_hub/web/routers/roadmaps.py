from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from roadmap_hub.content import ContentCatalog, phase_href, roadmap_href
from roadmap_hub.presentation import roadmaps as roadmap_presenter
from roadmap_hub.presentation.accordion import OPEN_PARAM, parse_open_index
from roadmap_hub.presentation.navigation import EXPAND_PARAM
from roadmap_hub.web import common

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    catalog: ContentCatalog = Depends(common.get_catalog),
) -> HTMLResponse:
    context = common.build_template_context(
        request,
        catalog=catalog,
        page_title="Learning Roadmaps",
    )
    context["roadmap_cards"] = roadmap_presenter.build_roadmap_cards(catalog)
    return common.render_page(request, name="index.html", context=context)


@router.get("/roadmap/{slug}", response_class=HTMLResponse)
async def roadmap_overview(
    slug: str,
    request: Request,
    catalog: ContentCatalog = Depends(common.get_catalog),
) -> HTMLResponse:
    roadmap = catalog.get_roadmap(slug)
    if roadmap is None or catalog.get_phases(slug) is None:
        return common.render_not_found(
            request,
            catalog=catalog,
            message="Roadmap not found.",
        )

    context = common.build_template_context(
        request,
        catalog=catalog,
        page_title=f"{roadmap.title} Roadmap",
    )
    context["roadmap"] = roadmap
    context["breadcrumbs"] = roadmap_presenter.roadmap_breadcrumbs(roadmap)
    context["phase_cards"] = roadmap_presenter.build_phase_cards(roadmap)
    return common.render_page(request, name="roadmap.html", context=context)


@router.get("/roadmap/{slug}/{phase_id}", response_class=HTMLResponse)
async def phase_page(
    slug: str,
    phase_id: str,
    request: Request,
    catalog: ContentCatalog = Depends(common.get_catalog),
) -> HTMLResponse:
    roadmap = catalog.get_roadmap(slug)
    if roadmap is None or catalog.get_phases(slug) is None:
        return common.render_not_found(request, catalog=catalog, message="Roadmap not found.")
    phase = catalog.get_phase(slug, phase_id)
    if phase is None:
        return common.render_not_found(
            request,
            catalog=catalog,
            message="Phase not found.",
            fallback_label=f"{roadmap.title} Roadmap",
            fallback_href=roadmap_href(slug),
        )

    context = common.build_template_context(
        request,
        catalog=catalog,
        page_title=phase.title,
    )
    context["roadmap"] = roadmap
    context["phase"] = phase
    context["breadcrumbs"] = roadmap_presenter.roadmap_breadcrumbs(roadmap, phase)
    context["topics"] = roadmap_presenter.build_topic_list(roadmap, phase)
    return common.render_page(request, name="phase.html", context=context)


@router.get("/roadmap/{slug}/{phase_id}/{topic_id}", response_class=HTMLResponse)
async def topic_page(
    slug: str,
    phase_id: str,
    topic_id: str,
    request: Request,
    catalog: ContentCatalog = Depends(common.get_catalog),
) -> HTMLResponse:
    roadmap = catalog.get_roadmap(slug)
    if roadmap is None or catalog.get_phases(slug) is None:
        return common.render_not_found(request, catalog=catalog, message="Roadmap not found.")
    phase = catalog.get_phase(slug, phase_id)
    if phase is None:
        return common.render_not_found(
            request,
            catalog=catalog,
            message="Phase not found.",
            fallback_label=f"{roadmap.title} Roadmap",
            fallback_href=roadmap_href(slug),
        )
    topic = catalog.get_topic(slug, phase_id, topic_id)
    if topic is None:
        return common.render_not_found(
            request,
            catalog=catalog,
            message="Topic not found.",
            fallback_label=phase.title,
            fallback_href=phase_href(slug, phase_id),
        )

    open_index = parse_open_index(
        request.query_params.get(OPEN_PARAM),
        len(topic.interview_questions),
    )
    context = common.build_template_context(
        request,
        catalog=catalog,
        page_title=topic.title,
    )
    context["topic_page"] = roadmap_presenter.build_topic_page_view_model(
        catalog,
        roadmap=roadmap,
        phase=phase,
        topic=topic,
        open_index=open_index,
        preserved=common.preserved_params(request, EXPAND_PARAM),
    )
    return common.render_page(request, name="topic.html", context=context)
