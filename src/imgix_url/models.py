"""Plain datatypes shared by config and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field

from .url import encode_query


@dataclass(frozen=True, slots=True)
class UrlPreset:
    """A base URL plus already-serialized query parameters."""

    base_url: str
    params: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def to_url(self) -> str:
        return f"{self.base_url}/?{encode_query(self.params)}"

    def as_dict(self) -> dict[str, object]:
        """JSON-friendly view used by the CLI."""
        return {
            "base_url": self.base_url,
            "url": self.to_url(),
            "params": [[name, value] for name, value in self.params],
        }
