"""Common dependency functions for API routes."""

from functools import lru_cache
from typing import Generator

from article_renderer.block_dispatcher import ContentRenderer
from article_renderer.core.config import Settings, get_settings


@lru_cache
def get_content_renderer() -> ContentRenderer:
    return ContentRenderer.from_settings(get_settings())


def get_app_settings() -> Generator[Settings, None, None]:
    yield get_settings()
