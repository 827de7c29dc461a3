from dataclasses import dataclass


@dataclass(frozen=True)
class NoteEntry:
    id: str
    timestamp: str  # ISO datetime
    author: str
    body: str
