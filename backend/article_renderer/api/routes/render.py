"""Endpoints that render stored article bodies."""

from __future__ import annotations

import base64

from fastapi import APIRouter, Depends, HTTPException

from article_renderer.api.deps import get_content_renderer
from article_renderer.block_dispatcher import ContentRenderer
from article_renderer.document_exporter import DocumentExportError, export_document_to_docx
from article_renderer.html_renderer import render_html
from article_renderer.schemas import ExportRequest, ExportResponse, RenderRequest, RenderResponse

router = APIRouter(prefix="/render", tags=["render"])


@router.post("", response_model=RenderResponse)
def render_document(
    payload: RenderRequest,
    renderer: ContentRenderer = Depends(get_content_renderer),
) -> RenderResponse:
    document = renderer.decode(payload.document)
    nodes = renderer.render_document(document)
    return RenderResponse(
        html=render_html(nodes),
        tree=[node.to_dict() for node in nodes],
        block_count=len(document),
        rendered_count=len(nodes),
        unknown_types=document.unknown_types,
    )


@router.post("/docx", response_model=ExportResponse)
def export_document(
    payload: ExportRequest,
    renderer: ContentRenderer = Depends(get_content_renderer),
) -> ExportResponse:
    document = renderer.decode(payload.document)
    try:
        file_name, content = export_document_to_docx(document, title=payload.title)
    except DocumentExportError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return ExportResponse(file_base64=base64.b64encode(content).decode("ascii"), file_name=file_name)
