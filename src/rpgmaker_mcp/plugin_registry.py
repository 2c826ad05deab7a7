"""Plugin registry script with one embedded JSON data region.

``js/plugins.js`` is JavaScript, not JSON: it assigns an array literal to
``$plugins`` and may carry hand-written comments or code around it. The
document keeps the text before and after the array verbatim and only
re-serialises the array itself.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from .errors import ReadFailure

_ASSIGNMENT = re.compile(r"\$plugins\s*=\s*")

_DEFAULT_PREFIX = (
    "// Generated by RPG Maker.\n// Do not edit this file directly.\nvar $plugins =\n"
)
_DEFAULT_SUFFIX = ";\n"
_ENTRY_KEYS = frozenset({"name", "status", "description", "parameters"})


@dataclass
class PluginConfig:
    """Registration of a single plugin in ``$plugins``."""

    name: str
    status: bool = True
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "name": self.name,
            "status": self.status,
            "description": self.description,
            "parameters": dict(self.parameters),
        }
        for key, value in self.extra.items():
            payload.setdefault(key, value)
        return payload

    @classmethod
    def from_payload(cls, payload: Any) -> "PluginConfig":
        if not isinstance(payload, Mapping):
            raise ReadFailure("Plugin registry entries must be objects.")
        name = payload.get("name")
        if not isinstance(name, str) or not name:
            raise ReadFailure("Plugin registry entry is missing its name.")
        parameters = payload.get("parameters") or {}
        if not isinstance(parameters, Mapping):
            raise ReadFailure(f"Plugin '{name}' has invalid parameters.")
        return cls(
            name=name,
            status=bool(payload.get("status", False)),
            description=str(payload.get("description", "")),
            parameters={str(key): value for key, value in parameters.items()},
            extra={key: value for key, value in payload.items() if key not in _ENTRY_KEYS},
        )


class PluginRegistryDocument:
    """Parsed ``plugins.js`` keeping the surrounding script untouched."""

    def __init__(
        self,
        entries: Iterable[PluginConfig] = (),
        *,
        prefix: str = _DEFAULT_PREFIX,
        suffix: str = _DEFAULT_SUFFIX,
    ) -> None:
        self._entries: List[PluginConfig] = list(entries)
        self._prefix = prefix
        self._suffix = suffix

    @classmethod
    def parse(cls, text: str) -> "PluginRegistryDocument":
        """Locate the ``$plugins`` array in ``text`` and decode it.

        Raises:
            ReadFailure: If no assignment is found or the array is not JSON.
        """

        match = _ASSIGNMENT.search(text)
        if match is None:
            raise ReadFailure("No $plugins assignment found in plugin registry.")

        start = match.end()
        try:
            payload, end = json.JSONDecoder().raw_decode(text, start)
        except ValueError as exc:
            raise ReadFailure("The $plugins array is not valid JSON.") from exc

        if not isinstance(payload, list):
            raise ReadFailure("$plugins must be assigned an array.")

        entries = [PluginConfig.from_payload(entry) for entry in payload]
        return cls(entries, prefix=text[:start], suffix=text[end:])

    @property
    def entries(self) -> List[PluginConfig]:
        return list(self._entries)

    def find(self, name: str) -> PluginConfig | None:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def upsert(self, entry: PluginConfig) -> bool:
        """Replace the entry sharing ``entry.name`` or append it.

        Returns ``True`` when an existing registration was replaced.
        """

        for index, existing in enumerate(self._entries):
            if existing.name == entry.name:
                self._entries[index] = entry
                return True
        self._entries.append(entry)
        return False

    def replace_entries(self, entries: Iterable[PluginConfig]) -> None:
        self._entries = list(entries)

    def render(self) -> str:
        """Return the full script with the array re-serialised in place."""

        return self._prefix + _render_array(self._entries) + self._suffix


def _render_array(entries: Iterable[PluginConfig]) -> str:
    lines = [
        json.dumps(entry.to_payload(), ensure_ascii=False, separators=(",", ":"))
        for entry in entries
    ]
    if not lines:
        return "[\n]"
    return "[\n" + ",\n".join(lines) + "\n]"


__all__ = ["PluginConfig", "PluginRegistryDocument"]
