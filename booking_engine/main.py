import logging

from fastapi import FastAPI

from booking_engine.api.v1.bookings import router as bookings_router
from booking_engine.api.v1.calendar import router as calendar_router
from booking_engine.api.v1.notes import build_notes_router
from booking_engine.api.v1.orders import router as orders_router
from booking_engine.api.v1.transactions import router as transactions_router
from booking_engine.application.use_cases.audit_trail import NoteTarget
from booking_engine.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "order_id", "payment_id", "record_id", "status", "staff", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Studio Booking Engine", version="1.0.0")

app.include_router(calendar_router, prefix="/api/v1", tags=["calendar"])
app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])
app.include_router(build_notes_router(NoteTarget.BOOKING), prefix="/api/v1", tags=["notes"])
app.include_router(orders_router, prefix="/api/v1", tags=["orders"])
app.include_router(build_notes_router(NoteTarget.ORDER), prefix="/api/v1", tags=["notes"])
app.include_router(transactions_router, prefix="/api/v1", tags=["transactions"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
