from __future__ import annotations

import uuid
from datetime import datetime
from typing import Iterable

from booking_engine.application.exceptions import InvalidInputError
from booking_engine.domain.entities.note import NoteEntry


def make_note(body: str, author: str, timestamp: str) -> NoteEntry:
    text = (body or "").strip()
    if not text:
        raise InvalidInputError("note body must not be empty")
    return NoteEntry(id=f"note_{uuid.uuid4().hex}", timestamp=timestamp, author=author, body=text)


def _display_timestamp(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%d/%m/%Y %H:%M:%S")
    except ValueError:
        return value


def render_notes(entries: Iterable[NoteEntry]) -> str:
    """
    Render the trail as text blocks in append order:

        [timestamp] - author
        body

    Blocks are separated by a blank line.
    """
    blocks = []
    for entry in entries:
        header = f"[{_display_timestamp(entry.timestamp)}]"
        if entry.author:
            header = f"{header} - {entry.author}"
        blocks.append(f"{header}\n{entry.body}")
    return "\n\n".join(blocks)
