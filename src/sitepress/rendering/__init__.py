"""Template rendering for Sitepress."""

from .base import REQUIRED_TEMPLATES, RenderRequest, TemplateRenderer
from .jinja import JinjaRenderer

__all__ = ["JinjaRenderer", "REQUIRED_TEMPLATES", "RenderRequest", "TemplateRenderer"]
