"""Content builders for notification emails."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlencode

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ponto_auth.services.email_service import OutgoingEmail

_TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"
_ENV = Environment(
    loader=FileSystemLoader(_TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)

PASSWORD_RESET_SUBJECT = "Redefinição de Senha"


def build_reset_url(*, frontend_url: str, page: str, token: str, email: str) -> str:
    """Return ``<frontend>/<page>?token=<token>&email=<email>``."""
    query = urlencode({"token": token, "email": email}, safe="@")
    return f"{frontend_url.rstrip('/')}/{page.lstrip('/')}?{query}"


def build_password_reset_email(
    *, to: str, reset_url: str, ttl_minutes: int
) -> OutgoingEmail:
    text = (
        "Você solicitou a redefinição de senha da sua conta. "
        f"Clique no link para redefinir: {reset_url}\n\n"
        f"O link expira em {ttl_minutes} minutos. "
        "Se você não solicitou esta alteração, ignore este e-mail."
    )
    html = _ENV.get_template("password_reset_email.html").render(
        reset_url=reset_url, ttl_minutes=ttl_minutes
    )
    return OutgoingEmail(to=to, subject=PASSWORD_RESET_SUBJECT, text=text, html=html)
