from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API status")
    app: str = Field(..., description="Configured application name")
    environment: str = Field(..., description="Deployment environment name")


class RenderRequest(BaseModel):
    document: Any = Field(
        default=None,
        description="Stored article body: a block list, editor save output or an article record",
    )


class RenderResponse(BaseModel):
    html: str = Field(..., description="HTML fragment built from the render tree")
    tree: list[dict[str, Any]] = Field(..., description="Render tree, one entry per rendered block")
    block_count: int = Field(..., description="Number of blocks found in the document")
    rendered_count: int = Field(..., description="Number of blocks that produced output")
    unknown_types: list[str] = Field(
        default_factory=list,
        description="Block types that were skipped because they are not supported",
    )


class ExportRequest(RenderRequest):
    title: str | None = Field(default=None, description="Optional title written as the first heading")


class ExportResponse(BaseModel):
    file_base64: str = Field(..., description="DOCX file, base64 without a data: prefix")
    file_name: str = Field(..., description="File name suggested to the client")
