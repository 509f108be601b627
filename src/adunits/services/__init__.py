"""Application services."""

from .client_assets import build_client_assets, render_init_script
from .page_render import render_page
from .render_session import RenderSession

__all__ = ["RenderSession", "build_client_assets", "render_init_script", "render_page"]
