"""Field-level validators shared by the configuration builders."""

from __future__ import annotations

import re
import typing as typ
from urllib.parse import urlsplit

from .models import ConfigValidationError, LinkConfig

_ICON_SIZES = re.compile(r"^[1-9]\d*x[1-9]\d*$")
_MIME_TYPE = re.compile(r"^[A-Za-z0-9][\w.+-]*/[A-Za-z0-9][\w.+-]*$")
_URL_SCHEMES = frozenset({"http", "https"})


def _section(payload: object, field: str) -> typ.Mapping[str, typ.Any]:
    """Return ``payload`` as a mapping or fail naming ``field``."""
    match payload:
        case dict() as data:
            return data
        case None:
            raise ConfigValidationError(field, "section is required")
        case _:
            raise ConfigValidationError(field, "must be a mapping")


def _string(value: object, field: str, *, required: bool = False) -> str:
    """Validate a string field; ``required`` also rejects empty strings."""
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ConfigValidationError(field, "must be a string")
    if required and not value.strip():
        raise ConfigValidationError(field, "must be a non-empty string")
    return value


def _optional_str(value: object, field: str) -> str | None:
    """Return a string or None when empty or absent."""
    if value is None:
        return None
    text = _string(value, field)
    return text or None


def _boolean(value: object, field: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigValidationError(field, "must be a boolean")
    return value


def _url(value: object, field: str) -> str:
    """Validate an absolute http(s) URL."""
    text = _string(value, field, required=True)
    parts = urlsplit(text)
    if parts.scheme not in _URL_SCHEMES or not parts.netloc:
        raise ConfigValidationError(field, "must be an absolute http(s) URL")
    return text


def _path_list(value: object, field: str, *, trailing_slash: bool) -> tuple[str, ...]:
    """Validate a list of site paths beginning with ``/``."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigValidationError(field, "must be a list of paths")
    paths: list[str] = []
    for index, entry in enumerate(value):
        entry_field = f"{field}[{index}]"
        path = _string(entry, entry_field, required=True)
        if not path.startswith("/"):
            raise ConfigValidationError(entry_field, "must begin with '/'")
        if trailing_slash and not path.endswith("/"):
            raise ConfigValidationError(
                entry_field, "must end with '/' when trailingSlash is enabled"
            )
        paths.append(path)
    return tuple(paths)


def _links(value: object, field: str) -> tuple[LinkConfig, ...]:
    """Build ``{text, link}`` entries; empty placeholders are allowed."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigValidationError(field, "must be a list of links")
    links: list[LinkConfig] = []
    for index, entry in enumerate(value):
        entry_field = f"{field}[{index}]"
        match entry:
            case {"text": text, "link": link}:
                pass
            case dict():
                raise ConfigValidationError(entry_field, "requires 'text' and 'link'")
            case _:
                raise ConfigValidationError(entry_field, "must be a mapping")
        links.append(
            LinkConfig(
                text=_string(text, f"{entry_field}.text"),
                link=_string(link, f"{entry_field}.link"),
            )
        )
    return tuple(links)


def _check_icon_sizes(value: object, field: str, *, required: bool = True) -> str:
    """Validate ``<W>x<H>``; an empty value passes only when not required."""
    text = _string(value, field, required=required)
    if text and not _ICON_SIZES.match(text):
        raise ConfigValidationError(field, "must look like '<W>x<H>'")
    return text


def _check_mime_type(value: object, field: str, *, required: bool = True) -> str:
    text = _string(value, field, required=required)
    if text and not _MIME_TYPE.match(text):
        raise ConfigValidationError(field, "must be a MIME type such as 'image/png'")
    return text


__all__ = [
    "_boolean",
    "_check_icon_sizes",
    "_check_mime_type",
    "_links",
    "_optional_str",
    "_path_list",
    "_section",
    "_string",
    "_url",
]
