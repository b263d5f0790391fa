"""Kernel templating – field-reference expansion against event fields."""
from __future__ import annotations

import abc
import json
import re
from collections.abc import Mapping
from typing import Any

__all__ = ["FieldReferenceRenderer", "TemplateRenderer"]

_REFERENCE = re.compile(r"%\{([^}]+)\}")
_BRACKET_PATH = re.compile(r"\[([^\]]+)\]")
_MISSING = object()


class TemplateRenderer(abc.ABC):
    """Port: expand a template string against an event's field map."""

    @abc.abstractmethod
    def render(self, template: str, fields: Mapping[str, Any] | None) -> str: ...


class FieldReferenceRenderer(TemplateRenderer):
    """Expands ``%{field}`` and ``%{[nested][field]}`` references.

    References that do not resolve are left verbatim, so a template without
    references always renders to itself. Lists are joined with ``,`` and
    mappings are rendered as compact JSON.

    Example::

        renderer = FieldReferenceRenderer()
        renderer.render("%{[order][id]}-%{type}", {"order": {"id": 7}, "type": "x"})
        # '7-x'
    """

    def render(self, template: str, fields: Mapping[str, Any] | None) -> str:
        if "%{" not in template:
            return template
        source = fields or {}

        def _substitute(match: re.Match[str]) -> str:
            value = self._lookup(source, match.group(1).strip())
            if value is _MISSING or value is None:
                return match.group(0)
            return self._stringify(value)

        return _REFERENCE.sub(_substitute, template)

    @staticmethod
    def _path(reference: str) -> list[str]:
        if reference.startswith("["):
            return _BRACKET_PATH.findall(reference)
        return [reference]

    def _lookup(self, fields: Mapping[str, Any], reference: str) -> Any:
        current: Any = fields
        for key in self._path(reference):
            if not isinstance(current, Mapping) or key not in current:
                return _MISSING
            current = current[key]
        return current

    @staticmethod
    def _stringify(value: Any) -> str:
        if isinstance(value, Mapping):
            return json.dumps(value, separators=(",", ":"), sort_keys=True, default=str)
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        return str(value)
