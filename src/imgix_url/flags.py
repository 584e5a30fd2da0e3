"""Shared machinery for comma-joined flag parameters (`auto`, `crop`, `ch`)."""

from __future__ import annotations

from dataclasses import Field, dataclass, fields, replace
from typing import Generic, Iterable, TypeVar

F = TypeVar("F", bound="FlagSet")


def _token(item: Field) -> str:
    return item.metadata.get("token", item.name)


@dataclass(frozen=True, slots=True)
class FlagSet:
    """Immutable set of boolean flags rendered in declaration order.

    Subclasses declare one `bool` field per flag. A field's API token defaults
    to its name and can be overridden with `metadata={"token": ...}`.
    """

    def __str__(self) -> str:
        return ",".join(self.tokens())

    def tokens(self) -> tuple[str, ...]:
        """Return tokens of the enabled flags in declaration order."""
        return tuple(_token(item) for item in fields(self) if getattr(self, item.name))

    @classmethod
    def vocabulary(cls) -> tuple[str, ...]:
        """Return every token this flag set accepts, in declaration order."""
        return tuple(_token(item) for item in fields(cls))

    @classmethod
    def field_name(cls, token: str) -> str:
        """Map an API token (e.g. `save-data`) to its field name."""
        for item in fields(cls):
            if _token(item) == token:
                return item.name
        allowed = ", ".join(cls.vocabulary())
        raise ValueError(f"{cls.__name__} 不支持的取值: {token!r}（可选: {allowed}）")

    @classmethod
    def from_tokens(cls: type[F], tokens: Iterable[str]) -> F:
        """Build a value with the given tokens enabled. Order and repeats are ignored."""
        enabled = {cls.field_name(token.strip()): True for token in tokens if token.strip()}
        return cls(**enabled)


V = TypeVar("V", bound=FlagSet)
B = TypeVar("B", bound="FlagSetBuilder")


class FlagSetBuilder(Generic[V]):
    """Mutable accumulator behind a `FlagSet`.

    `finish()` may be called any number of times; each call returns an
    independent snapshot of the flags enabled so far.
    """

    def __init__(self, initial: V) -> None:
        self._value = initial

    def enable(self, token: str) -> FlagSetBuilder[V]:
        """Enable a flag by its API token."""
        return self._set(type(self._value).field_name(token))

    def finish(self) -> V:
        return self._value

    def _set(self: B, name: str) -> B:
        self._value = replace(self._value, **{name: True})
        return self
