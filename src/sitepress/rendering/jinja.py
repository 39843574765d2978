"""Jinja2-backed template renderer."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from sitepress.dates import DateFormatter, fmt_date
from sitepress.errors import RenderError, TemplatesMissingError
from sitepress.rendering.base import REQUIRED_TEMPLATES

logger = logging.getLogger(__name__)


class JinjaRenderer:
    """Render named templates from a pre-populated Jinja2 environment.

    Missing context values raise instead of rendering as empty strings, and
    ``.html``/``.xml`` templates are autoescaped, so pre-rendered bodies must be
    marked ``|safe`` in the templates that embed them.
    """

    def __init__(
        self,
        loader: BaseLoader,
        *,
        date_formatter: DateFormatter = fmt_date,
        globals: Mapping[str, Any] | None = None,
        autoescape: bool = True,
    ) -> None:
        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]) if autoescape else False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.date_formatter = date_formatter
        self.env.filters["fmt_date"] = date_formatter
        self.env.globals.update(globals or {})

    def use_date_formatter(self, date_formatter: DateFormatter) -> None:
        """Replace the formatter behind the ``fmt_date`` filter."""

        self.date_formatter = date_formatter
        self.env.filters["fmt_date"] = date_formatter

    @classmethod
    def from_directory(cls, template_dir: Path, **options: Any) -> JinjaRenderer:
        if not template_dir.is_dir():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")
        return cls(FileSystemLoader(template_dir), **options)

    @classmethod
    def from_mapping(cls, templates: Mapping[str, str], **options: Any) -> JinjaRenderer:
        return cls(DictLoader(dict(templates)), **options)

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(context)
        except TemplateNotFound as exc:
            raise RenderError(template_name, "template not found") from exc
        except TemplateError as exc:
            raise RenderError(template_name, str(exc)) from exc
        except Exception as exc:  # pylint: disable=broad-except
            raise RenderError(template_name, f"{type(exc).__name__}: {exc}") from exc

    def verify(self, names: Iterable[str] = REQUIRED_TEMPLATES) -> None:
        """Raise ``TemplatesMissingError`` unless every template in ``names`` loads."""

        required = tuple(names)
        missing: list[str] = []
        for name in required:
            try:
                self.env.get_template(name)
            except TemplateNotFound:
                missing.append(name)
            except TemplateError as exc:
                raise RenderError(name, str(exc)) from exc
        if missing:
            raise TemplatesMissingError(missing)
        logger.debug("Verified %s template(s).", len(required))
