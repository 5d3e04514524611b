"""
The complaint collection, newest first, persisted after every change.
"""

from datetime import datetime
from typing import Callable, Iterable, Optional
from uuid import uuid4

from pydantic import ValidationError

from malasngoding.journal.storage import JsonFileStorage
from malasngoding.schemas.complaint_schemas import Complaint, Feeling, JournalState, Theme
from malasngoding.utils.logger import get_logger

logger = get_logger(__name__)

STORAGE_KEY = "complaints-storage"


class ComplaintStore:
    """
    Holds complaints and the theme preference as one blob under STORAGE_KEY.

    The store does not validate input; callers (the entry form, the CLI)
    decide what a valid complaint is.
    """

    def __init__(
        self,
        storage: JsonFileStorage,
        key: str = STORAGE_KEY,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.storage = storage
        self.key = key
        self.clock = clock
        self._state = JournalState()
        self._rehydrate()

    def _rehydrate(self) -> None:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return
        try:
            self._state = JournalState.model_validate(raw)
        except ValidationError as e:
            logger.warning("stored journal state is invalid, starting empty key=%s errors=%s", self.key, e.errors())
            return
        logger.debug("rehydrated %s complaints", len(self._state.complaints))

    def _persist(self) -> None:
        self.storage.set_item(self.key, self._state.model_dump(mode="json", by_alias=True))

    @property
    def complaints(self) -> list[Complaint]:
        return list(self._state.complaints)

    def __len__(self) -> int:
        return len(self._state.complaints)

    def add(self, text: str, feeling: Feeling) -> Complaint:
        complaint = Complaint(id=str(uuid4()), text=text, feeling=Feeling(feeling), created_at=self.clock())
        self._state.complaints.insert(0, complaint)
        self._persist()
        return complaint

    def delete(self, complaint_id: str) -> bool:
        """Remove one complaint. Returns False (and changes nothing) if the id is unknown."""
        remaining = [c for c in self._state.complaints if c.id != complaint_id]
        if len(remaining) == len(self._state.complaints):
            return False
        self._state.complaints = remaining
        self._persist()
        return True

    def delete_all(self) -> None:
        self._state.complaints = []
        self._persist()

    def get(self, complaint_id: str) -> Optional[Complaint]:
        return next((c for c in self._state.complaints if c.id == complaint_id), None)

    def query_by_date_range(self, start: datetime, end: datetime) -> list[Complaint]:
        """Complaints created in [start, end], both ends inclusive."""
        return [c for c in self._state.complaints if start <= c.created_at <= end]

    def filter_by_feelings(self, feelings: Iterable[Feeling]) -> list[Complaint]:
        """Complaints tagged with any of `feelings`; an empty selection keeps everything."""
        wanted = {Feeling(f) for f in feelings}
        if not wanted:
            return self.complaints
        return [c for c in self._state.complaints if c.feeling in wanted]

    @property
    def theme(self) -> Theme:
        return self._state.theme

    def set_theme(self, theme: Theme) -> Theme:
        self._state.theme = Theme(theme)
        self._persist()
        return self._state.theme

    def toggle_theme(self) -> Theme:
        return self.set_theme(Theme.LIGHT if self._state.theme == Theme.DARK else Theme.DARK)
