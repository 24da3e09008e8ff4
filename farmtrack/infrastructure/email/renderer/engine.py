from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound

from farmtrack.config.settings import Settings
from farmtrack.infrastructure.email.models import EmailMessage, format_sender

FALLBACK_LOCALE = "en"
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def _is_html(template_name: str | None) -> bool:
    # body.html.j2 is escaped, subject.txt.j2 / body.txt.j2 are not
    return bool(template_name) and ".html" in template_name


@dataclass(slots=True)
class EmailTemplateRenderer:
    """Renders ``<locale>/<template_key>/{subject.txt,body.txt,body.html}.j2``.

    Missing locales fall back to English. The HTML body is optional and, when
    present, is wrapped in the locale's ``_layout.html.j2``.
    """

    env: Environment

    @classmethod
    def create_default(cls, base_path: Path = TEMPLATES_DIR) -> EmailTemplateRenderer:
        return cls(env=Environment(loader=FileSystemLoader(str(base_path)), autoescape=_is_html))

    def _find(self, locale: str, name: str, *, required: bool = True) -> Template | None:
        candidates = [f"{locale}/{name}"]
        if locale != FALLBACK_LOCALE:
            candidates.append(f"{FALLBACK_LOCALE}/{name}")
        for path in candidates:
            try:
                return self.env.get_template(path)
            except TemplateNotFound:
                continue
        if required:
            raise TemplateNotFound(candidates[0])
        return None

    def render(
        self,
        *,
        template_key: str,
        settings: Settings,
        context: dict[str, Any],
        locale: str | None = None,
    ) -> EmailMessage:
        loc = (locale or settings.email_default_locale or FALLBACK_LOCALE).lower()
        ctx: dict[str, Any] = {
            "app": {
                "name": settings.email_from_name,
                "primary_color": settings.email_primary_color,
                "url": settings.app_url,
            },
            **context,
        }

        subject = self._find(loc, f"{template_key}/subject.txt.j2").render(ctx)
        text = self._find(loc, f"{template_key}/body.txt.j2").render(ctx)

        html = None
        body_tpl = self._find(loc, f"{template_key}/body.html.j2", required=False)
        if body_tpl is not None:
            html = body_tpl.render(ctx)
            layout = self._find(loc, "_layout.html.j2", required=False)
            if layout is not None:
                html = layout.render({**ctx, "content": html})

        # Recipients are filled in by the caller
        return EmailMessage(
            subject=subject.strip(),
            text=text.strip(),
            html=html,
            sender=format_sender(settings.email_from_address, settings.email_from_name),
        )
