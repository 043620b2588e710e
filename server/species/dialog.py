"""
Species dialogs.

`SpeciesDialog` is the single modal used to view, edit and delete one record.
It replaces separate nested popups with one flat state machine:

    VIEWING --start_edit--> EDITING --submit ok / cancel--> VIEWING
    VIEWING --start_delete--> CONFIRMING_DELETE --cancel--> VIEWING
    CONFIRMING_DELETE --confirm ok--> closed

Edit and delete are only reachable by the record's author. Triggers that
are not valid in the current state are ignored and return False.
"""
import logging
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

from .controller import RecordFormController
from .gate import DEFAULT_PREFIX, ConfirmationGate
from .notifications import Notifier, error, success
from .rules import FIELD_NAMES, SpeciesValidationError, validate_species
from .store import BackendError, SpeciesRecord, SpeciesStore

logger = logging.getLogger(__name__)


class DialogState(str, Enum):
    VIEWING = 'viewing'
    EDITING = 'editing'
    CONFIRMING_DELETE = 'confirming_delete'


# Controls shown to the author in each state
AUTHOR_CONTROLS = {
    DialogState.VIEWING: frozenset({'start_edit', 'start_delete'}),
    DialogState.EDITING: frozenset({'submit', 'cancel_edit'}),
    DialogState.CONFIRMING_DELETE: frozenset({'confirm_delete', 'cancel_delete'}),
}


class SpeciesDialog:
    """View / edit / delete modal for one species record."""

    def __init__(
        self,
        record: SpeciesRecord,
        user_id,
        store: SpeciesStore,
        notify: Notifier,
        invalidate: Callable[[], None],
        delete_prefix: str = DEFAULT_PREFIX,
    ):
        self.invalidate = invalidate
        self.form = RecordFormController(record, user_id, store, notify, invalidate)
        self.gate = ConfirmationGate(
            record,
            store,
            notify,
            on_deleted=self._on_deleted,
            prefix=delete_prefix,
        )
        self.state = DialogState.VIEWING
        self.is_open = False

    @property
    def record(self) -> SpeciesRecord:
        return self.form.record

    @property
    def is_author(self) -> bool:
        return self.form.is_author

    @property
    def read_only(self) -> bool:
        return self.state is not DialogState.EDITING

    @property
    def controls(self) -> FrozenSet[str]:
        if not self.is_author:
            return frozenset()
        return AUTHOR_CONTROLS[self.state]

    def open(self) -> None:
        self.is_open = True
        self.state = DialogState.VIEWING

    def close(self) -> None:
        """Dismiss the dialog, discarding any draft or typed confirmation."""
        self.form.cancel()
        self.gate.reset()
        self.state = DialogState.VIEWING
        self.is_open = False

    def start_edit(self) -> bool:
        if self.state is not DialogState.VIEWING:
            return False
        if not self.form.begin_edit():
            return False
        self.state = DialogState.EDITING
        return True

    def start_delete(self) -> bool:
        if self.state is not DialogState.VIEWING or not self.is_author:
            return False
        self.gate.reset()
        self.state = DialogState.CONFIRMING_DELETE
        return True

    def cancel(self) -> bool:
        if self.state is DialogState.EDITING:
            self.form.cancel()
        elif self.state is DialogState.CONFIRMING_DELETE:
            self.gate.reset()
        else:
            return False
        self.state = DialogState.VIEWING
        return True

    def submit(self, values: Optional[Mapping[str, Any]] = None) -> bool:
        if self.state is not DialogState.EDITING:
            return False
        if values is not None:
            self.form.update_fields(values)
        if not self.form.submit():
            return False
        # Later delete challenges use the name that was just saved
        self.gate.record = self.form.record
        self.state = DialogState.VIEWING
        return True

    def confirm_delete(self, text: str) -> bool:
        if self.state is not DialogState.CONFIRMING_DELETE:
            return False
        return self.gate.attempt(text)

    def _on_deleted(self) -> None:
        self.gate.reset()
        self.state = DialogState.VIEWING
        self.is_open = False
        self.invalidate()

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data copy of the UI state, suitable for a session."""
        return {
            'state': self.state.value,
            'open': self.is_open,
            'fields': dict(self.form.fields),
            'errors': dict(self.form.errors),
        }

    def restore(self, snapshot: Mapping[str, Any]) -> None:
        """
        Reapply a snapshot taken on an earlier request.

        The record itself always comes fresh from the store; only the draft
        and the mode are carried over, and only for the author.
        """
        self.is_open = bool(snapshot.get('open', False))
        try:
            state = DialogState(snapshot.get('state', DialogState.VIEWING.value))
        except ValueError:
            state = DialogState.VIEWING

        if state is DialogState.EDITING and self.start_edit():
            self.form.update_fields(snapshot.get('fields') or {})
            self.form.errors = dict(snapshot.get('errors') or {})
        elif state is DialogState.CONFIRMING_DELETE:
            self.start_delete()


class AddSpeciesDialog:
    """
    Create-species modal.

    Uses the same field rules as the edit form; the author of the new row is
    whoever the store is signed in as.
    """

    def __init__(self, store: SpeciesStore, notify: Notifier, invalidate: Callable[[], None]):
        self.store = store
        self.notify = notify
        self.invalidate = invalidate
        self.fields: Dict[str, Any] = self._empty_fields()
        self.errors: Dict[str, str] = {}
        self.is_open = False
        self.pending = False

    @staticmethod
    def _empty_fields() -> Dict[str, Any]:
        return {name: None for name in FIELD_NAMES}

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.fields = self._empty_fields()
        self.errors = {}
        self.is_open = False

    def submit(self, values: Optional[Mapping[str, Any]] = None) -> Optional[SpeciesRecord]:
        """Returns the created record, or None if nothing was created."""
        if self.pending:
            return None
        if values is not None:
            for name in FIELD_NAMES:
                if name in values:
                    self.fields[name] = values[name]

        try:
            payload = validate_species(self.fields)
        except SpeciesValidationError as e:
            self.errors = e.messages()
            return None
        self.errors = {}

        self.pending = True
        try:
            record = self.store.insert(payload)
        except BackendError as e:
            logger.warning(f"Insert of species {payload.scientific_name!r} rejected: {e.message}")
            self.notify(error('Something went wrong.', e.message))
            return None
        finally:
            self.pending = False

        self.close()
        self.invalidate()
        self.notify(success('New species added!'))
        return record
