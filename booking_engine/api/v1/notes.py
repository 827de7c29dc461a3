from fastapi import APIRouter, Depends, Response

from booking_engine.api.staff_auth import StaffContext, require_staff
from booking_engine.api.v1.results import unwrap
from booking_engine.api.v1.schemas import NoteCreateSchema, NoteSchema, NotesReplaceSchema, NotesTextSchema
from booking_engine.application.dto.drafts import NoteEdit
from booking_engine.application.use_cases.audit_trail import AuditTrailUseCase, NoteTarget
from booking_engine.wiring.dependencies import get_audit_trail_use_case


def build_notes_router(target: NoteTarget) -> APIRouter:
    """Same note operations for bookings and orders, mounted under /{target}s/{record_id}/notes."""
    router = APIRouter(prefix=f"/{target.value}s/{{record_id}}/notes")

    @router.get("", response_model=list[NoteSchema])
    def list_notes(
        record_id: str,
        staff: StaffContext = Depends(require_staff),
        uc: AuditTrailUseCase = Depends(get_audit_trail_use_case),
    ):
        return [NoteSchema.model_validate(n) for n in unwrap(uc.get_notes(target, record_id))]

    @router.get("/text", response_model=NotesTextSchema)
    def notes_text(
        record_id: str,
        staff: StaffContext = Depends(require_staff),
        uc: AuditTrailUseCase = Depends(get_audit_trail_use_case),
    ):
        return NotesTextSchema(text=unwrap(uc.notes_text(target, record_id)))

    @router.post("", response_model=NoteSchema, status_code=201)
    def append_note(
        record_id: str,
        req: NoteCreateSchema,
        staff: StaffContext = Depends(require_staff),
        uc: AuditTrailUseCase = Depends(get_audit_trail_use_case),
    ):
        return NoteSchema.model_validate(unwrap(uc.append_note(target, record_id, req.body, staff.name)))

    @router.put("", response_model=list[NoteSchema])
    def replace_notes(
        record_id: str,
        req: NotesReplaceSchema,
        staff: StaffContext = Depends(require_staff),
        uc: AuditTrailUseCase = Depends(get_audit_trail_use_case),
    ):
        edits = [NoteEdit(**e.model_dump()) for e in req.entries]
        return [NoteSchema.model_validate(n) for n in unwrap(uc.replace_notes(target, record_id, edits, staff.name))]

    @router.delete("", status_code=204)
    def clear_notes(
        record_id: str,
        staff: StaffContext = Depends(require_staff),
        uc: AuditTrailUseCase = Depends(get_audit_trail_use_case),
    ) -> Response:
        unwrap(uc.clear_notes(target, record_id, staff.name))
        return Response(status_code=204)

    @router.delete("/{note_id}", status_code=204)
    def remove_note(
        record_id: str,
        note_id: str,
        staff: StaffContext = Depends(require_staff),
        uc: AuditTrailUseCase = Depends(get_audit_trail_use_case),
    ) -> Response:
        unwrap(uc.remove_note(target, record_id, note_id, staff.name))
        return Response(status_code=204)

    return router
