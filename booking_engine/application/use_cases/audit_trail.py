from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Sequence
from zoneinfo import ZoneInfo

from booking_engine.application.dto.drafts import NoteEdit
from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError, InvalidInputError, NotFoundError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.utils.date_parser import now_iso
from booking_engine.application.utils.documents import BOOKINGS, ORDERS, deserialize_note, serialize_note
from booking_engine.application.utils.notes import make_note, render_notes
from booking_engine.domain.entities.note import NoteEntry


class NoteTarget(str, Enum):
    BOOKING = "booking"
    ORDER = "order"


_COLLECTIONS = {NoteTarget.BOOKING: BOOKINGS, NoteTarget.ORDER: ORDERS}


class AuditTrailUseCase:
    """Attributed, timestamped notes on bookings and orders. Every write records the acting staff member."""

    def __init__(self, store: DocumentStorePort, timezone: ZoneInfo) -> None:
        self._store = store
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def _require_staff(self, staff: str) -> str:
        name = (staff or "").strip()
        if not name:
            raise InvalidInputError("staff name is required")
        return name

    def _audit_changes(self, staff: str) -> dict[str, str]:
        return {"last_updated_by": staff, "updated_at": now_iso(self._timezone)}

    def _not_found(self, target: NoteTarget, record_id: str) -> NotFoundError:
        return NotFoundError(f"{target.value} {record_id} not found")

    def get_notes(self, target: NoteTarget, record_id: str) -> OperationResult[tuple[NoteEntry, ...]]:
        try:
            doc = self._store.get(_COLLECTIONS[target], record_id)
            if doc is None:
                raise self._not_found(target, record_id)
        except BookingEngineError as e:
            return OperationResult.from_error(e)
        return OperationResult.success(tuple(deserialize_note(n) for n in doc.get("notes") or []))

    def notes_text(self, target: NoteTarget, record_id: str) -> OperationResult[str]:
        result = self.get_notes(target, record_id)
        if not result.ok:
            return OperationResult.failure(result.error, result.message or "")
        return OperationResult.success(render_notes(result.value or ()))

    def append_note(
        self, target: NoteTarget, record_id: str, body: str, staff: str
    ) -> OperationResult[NoteEntry]:
        try:
            staff = self._require_staff(staff)
            entry = make_note(body, staff, now_iso(self._timezone))
            appended = self._store.append_item(
                _COLLECTIONS[target], record_id, "notes", serialize_note(entry), self._audit_changes(staff)
            )
            if not appended:
                raise self._not_found(target, record_id)
        except BookingEngineError as e:
            self._logger.warning("Note not added", extra={"record_id": record_id, "reason": str(e)})
            return OperationResult.from_error(e)

        self._logger.info("Note added", extra={"record_id": record_id, "note_id": entry.id, "staff": staff})
        return OperationResult.success(entry)

    def replace_notes(
        self, target: NoteTarget, record_id: str, entries: Sequence[NoteEdit], staff: str
    ) -> OperationResult[tuple[NoteEntry, ...]]:
        """
        Overwrite the whole trail with an edited version. Edited entries keep
        their id, author and timestamp; entries without an id are stamped now
        by the acting staff member.
        """
        try:
            staff = self._require_staff(staff)
            now = now_iso(self._timezone)
            replaced: list[NoteEntry] = []
            for edit in entries:
                body = (edit.body or "").strip()
                if not body:
                    raise InvalidInputError("note body must not be empty")
                replaced.append(
                    NoteEntry(
                        id=edit.id or f"note_{uuid.uuid4().hex}",
                        timestamp=edit.timestamp or now,
                        author=edit.author or staff,
                        body=body,
                    )
                )
            changes = self._audit_changes(staff)
            changes["notes"] = [serialize_note(n) for n in replaced]
            if not self._store.update(_COLLECTIONS[target], record_id, changes):
                raise self._not_found(target, record_id)
        except BookingEngineError as e:
            self._logger.warning("Notes not replaced", extra={"record_id": record_id, "reason": str(e)})
            return OperationResult.from_error(e)

        self._logger.info(
            "Notes replaced", extra={"record_id": record_id, "count": len(replaced), "staff": staff}
        )
        return OperationResult.success(tuple(replaced))

    def clear_notes(self, target: NoteTarget, record_id: str, staff: str) -> OperationResult[None]:
        try:
            staff = self._require_staff(staff)
            changes = self._audit_changes(staff)
            changes["notes"] = []
            if not self._store.update(_COLLECTIONS[target], record_id, changes):
                raise self._not_found(target, record_id)
        except BookingEngineError as e:
            return OperationResult.from_error(e)

        self._logger.info("Notes cleared", extra={"record_id": record_id, "staff": staff})
        return OperationResult.success(None)

    def remove_note(self, target: NoteTarget, record_id: str, note_id: str, staff: str) -> OperationResult[None]:
        try:
            staff = self._require_staff(staff)
            removed = self._store.remove_item(
                _COLLECTIONS[target], record_id, "notes", note_id, self._audit_changes(staff)
            )
            if not removed:
                raise self._not_found(target, record_id)
        except BookingEngineError as e:
            return OperationResult.from_error(e)

        self._logger.info("Note removed", extra={"record_id": record_id, "note_id": note_id, "staff": staff})
        return OperationResult.success(None)
