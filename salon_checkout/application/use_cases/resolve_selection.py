from __future__ import annotations

import logging

from pydantic import BaseModel, TypeAdapter, ValidationError

from salon_checkout.domain.entities.selection import (
    ResolvedSelection,
    SelectedService,
    SelectionInputBundle,
    SelectionSource,
)

# Product decision: a confirmation screen reached with no selection at all shows
# the shop's most booked pair instead of an empty receipt.
DEFAULT_SELECTION: tuple[SelectedService, ...] = (
    SelectedService(key="haircut", label="Haircut & Styling"),
    SelectedService(key="beard", label="Beard Trim"),
)


class SerializedSelection(BaseModel):
    key: str
    label: str | None = None


_SERIALIZED_LIST = TypeAdapter(list[SerializedSelection])


class ResolveSelectionUseCase:
    """Pick the one authoritative selection source for the confirmation step.

    Precedence is context, then serialized navigation params, then the legacy
    single pick, then DEFAULT_SELECTION. Sources are never merged, and duplicate
    keys inside the winning source are passed through untouched.
    """

    def __init__(self, default_selection: tuple[SelectedService, ...] = DEFAULT_SELECTION) -> None:
        self._default_selection = default_selection
        self._logger = logging.getLogger(__name__)

    def resolve(self, bundle: SelectionInputBundle) -> ResolvedSelection:
        if bundle.context_selections:
            return self._resolved(SelectionSource.CONTEXT, tuple(bundle.context_selections))

        parsed = self._parse_serialized(bundle.serialized_selections)
        if parsed:
            return self._resolved(SelectionSource.SERIALIZED, parsed)

        legacy = bundle.legacy_single.to_selected() if bundle.legacy_single else None
        if legacy:
            return self._resolved(SelectionSource.LEGACY, (legacy,))

        return self._resolved(SelectionSource.DEFAULT, self._default_selection)

    def _parse_serialized(self, raw: str | None) -> tuple[SelectedService, ...]:
        if not raw or not raw.strip():
            return ()
        try:
            entries = _SERIALIZED_LIST.validate_json(raw)
        except ValidationError as e:
            self._logger.warning(
                "Ignoring malformed serialized selections",
                extra={"reason": "invalid_json", "error": e.errors(include_url=False)[0]["msg"]},
            )
            return ()
        return tuple(
            SelectedService(key=entry.key, label=entry.label if entry.label else entry.key)
            for entry in entries
        )

    def _resolved(self, source: SelectionSource, services: tuple[SelectedService, ...]) -> ResolvedSelection:
        self._logger.debug("Selection resolved", extra={"source": source.value, "count": len(services)})
        return ResolvedSelection(source=source, services=services)
