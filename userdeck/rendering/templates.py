"""HTML rendering for the user listing page."""

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from userdeck.domain.schemas.user import UserRead

PLACEHOLDER_PHOTO_URL = "https://www.gravatar.com/avatar/00000000000000000000000000000000?d=mp&f=y"
UPLOADS_URL_PREFIX = "/uploads/"


def _template_environment() -> Environment:
    base_dir = Path(__file__).resolve().parent.parent
    return Environment(
        loader=FileSystemLoader(str(base_dir / "templates")),
        autoescape=select_autoescape(["html"]),
    )


_environment = _template_environment()


def photo_url(user: UserRead) -> str:
    if user.photo:
        return UPLOADS_URL_PREFIX + user.photo
    return PLACEHOLDER_PHOTO_URL


def render_users(users: Sequence[UserRead]) -> str:
    """Render the listing page; one card per user, in the order given."""
    template = _environment.get_template("users.html")
    return template.render(
        users=[{"user": user, "photo_url": photo_url(user)} for user in users],
    )
