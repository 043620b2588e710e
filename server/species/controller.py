"""
Edit form state for a single species record.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, Mapping

from .notifications import Notifier, error, success
from .rules import FIELD_NAMES, SpeciesValidationError, validate_species
from .store import BackendError, SpeciesRecord, SpeciesStore

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    VIEWING = 'viewing'
    EDITING = 'editing'


class RecordFormController:
    """
    Holds the draft and the last committed values of one record.

    `baseline` only changes after the store accepts an update; `fields` is
    the draft the user is typing into and survives a failed submit so the
    user can retry.
    """

    def __init__(
        self,
        record: SpeciesRecord,
        user_id,
        store: SpeciesStore,
        notify: Notifier,
        invalidate: Callable[[], None],
    ):
        self.record = record
        self.user_id = str(user_id)
        self.store = store
        self.notify = notify
        self.invalidate = invalidate

        self.baseline: Dict[str, Any] = record.field_values()
        self.fields: Dict[str, Any] = dict(self.baseline)
        self.errors: Dict[str, str] = {}
        self.mode = Mode.VIEWING
        self.pending = False

    @property
    def is_author(self) -> bool:
        return self.record.author == self.user_id

    @property
    def is_dirty(self) -> bool:
        return self.fields != self.baseline

    def begin_edit(self) -> bool:
        if self.mode is not Mode.VIEWING or not self.is_author:
            return False
        self.fields = dict(self.baseline)
        self.errors = {}
        self.mode = Mode.EDITING
        return True

    def update_fields(self, values: Mapping[str, Any]) -> None:
        """Copy user input into the draft. Ignored outside edit mode."""
        if self.mode is not Mode.EDITING:
            return
        for name in FIELD_NAMES:
            if name in values:
                self.fields[name] = values[name]

    def cancel(self) -> bool:
        if self.mode is not Mode.EDITING:
            return False
        self.fields = dict(self.baseline)
        self.errors = {}
        self.mode = Mode.VIEWING
        return True

    def submit(self) -> bool:
        """
        Validate the draft and send it to the store.

        Returns True only when the store accepted the update.
        """
        if self.mode is not Mode.EDITING or self.pending:
            return False

        try:
            payload = validate_species(self.fields)
        except SpeciesValidationError as e:
            self.errors = e.messages()
            return False
        self.errors = {}

        self.pending = True
        try:
            self.store.update(self.record.id, payload)
        except BackendError as e:
            logger.warning(f"Update of species #{self.record.id} rejected: {e.message}")
            self.notify(error('Something went wrong.', e.message))
            return False
        finally:
            self.pending = False

        self.record = self.record.with_values(payload)
        self.baseline = payload.as_dict()
        self.fields = dict(self.baseline)
        self.mode = Mode.VIEWING
        self.invalidate()
        self.notify(success('Species information updated successfully!'))
        return True
