from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SelectedService:
    key: str
    label: str


class SelectionSource(str, Enum):
    CONTEXT = "context"
    SERIALIZED = "serialized"
    LEGACY = "legacy"
    DEFAULT = "default"


@dataclass(frozen=True)
class LegacySelection:
    """Single service pick from the oldest navigation interface."""

    key: str | None = None
    label: str | None = None

    def to_selected(self) -> SelectedService | None:
        key = (self.key or "").strip()
        label = (self.label or "").strip()
        if not key and not label:
            return None
        return SelectedService(key=key or label, label=label or key)


@dataclass(frozen=True)
class SelectionInputBundle:
    context_selections: tuple[SelectedService, ...] = ()
    serialized_selections: str | None = None  # JSON list of {"key", "label"}
    legacy_single: LegacySelection | None = None


@dataclass(frozen=True)
class ResolvedSelection:
    source: SelectionSource
    services: tuple[SelectedService, ...]
