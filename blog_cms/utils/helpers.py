from collections.abc import MutableMapping
from datetime import UTC, datetime
from re import sub
from typing import Any
from unicodedata import normalize
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(tz=UTC)


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def slugify(text: str) -> str:
    """
    Derive a URL-safe slug from a human-readable name.

    Accents are folded to ASCII, everything but lowercase letters, digits,
    whitespace and dashes is dropped, whitespace runs become a single dash
    and leading/trailing dashes are trimmed. ``slugify(slugify(x)) == slugify(x)``.

    Args:
        text: Name or title to convert.

    Returns:
        str: The slug, possibly empty when ``text`` has no usable characters.
    """
    folded = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = folded.lower()
    slug = sub(r"[^a-z0-9\s-]", "", slug)
    slug = sub(r"\s+", "-", slug)
    slug = sub(r"-+", "-", slug)
    return slug.strip("-")


def normalize_email(email: str) -> str:
    """Canonicalize an email address for comparison."""
    return email.strip().lower()


def parse_uuid(value: str) -> UUID | None:
    """Return ``value`` as a UUID, or None when it is not one."""
    try:
        return UUID(value)
    except ValueError:
        return None


def split_ids(raw: str) -> list[str]:
    """Split a comma-separated id list, dropping blanks."""
    return [part.strip() for part in raw.split(",") if part.strip()]
