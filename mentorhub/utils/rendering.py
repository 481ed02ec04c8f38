from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from mentorhub.models.enums import Role

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

SIDEBAR_LINKS = {
    Role.ADMIN: [
        ("/admin/users", "Users"),
        ("/admin/matches", "Matches"),
        ("/admin/sessions", "Sessions"),
    ],
    Role.MENTOR: [
        ("/dashboard", "Dashboard"),
        ("/availability", "Availability"),
        ("/requests", "Requests"),
        ("/sessions", "Sessions"),
    ],
    Role.MENTEE: [
        ("/dashboard", "Dashboard"),
        ("/mentors", "Mentors"),
        ("/my-requests", "My Requests"),
        ("/my-sessions", "My Sessions"),
    ],
}


def sidebar_links(user) -> List[Dict[str, str]]:
    if user is None:
        return []
    return [{"to": to, "label": label} for to, label in SIDEBAR_LINKS[Role(user.role)]]


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render a page; ``user`` in the context drives the sidebar."""
    context = dict(context or {})
    context.setdefault("user", None)
    context.setdefault("error", None)
    context["sidebar_links"] = sidebar_links(context["user"])
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    # 303 so the browser follows a POST with a GET
    return RedirectResponse(url=url, status_code=303)
