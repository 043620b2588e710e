"""
Typed confirmation guarding species deletion.
"""
import logging
from typing import Callable

from .notifications import Notifier, error, success
from .store import BackendError, SpeciesRecord, SpeciesStore

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = 'DELETE'


class ChallengeMismatchError(Exception):
    """The typed confirmation did not match the challenge string."""


class ConfirmationGate:
    """
    Deletes a record only after the user types `<prefix> <scientific name>`.

    The comparison is exact: case-sensitive and untrimmed.
    """

    def __init__(
        self,
        record: SpeciesRecord,
        store: SpeciesStore,
        notify: Notifier,
        on_deleted: Callable[[], None],
        prefix: str = DEFAULT_PREFIX,
    ):
        self.record = record
        self.store = store
        self.notify = notify
        self.on_deleted = on_deleted
        self.prefix = prefix
        self.input = ''
        self.pending = False

    @property
    def challenge(self) -> str:
        return f"{self.prefix} {self.record.scientific_name}"

    def check(self, text: str) -> None:
        if text != self.challenge:
            raise ChallengeMismatchError(f"Expected {self.challenge!r}")

    def reset(self) -> None:
        self.input = ''

    def attempt(self, text: str) -> bool:
        """Returns True once the store has deleted the record."""
        if self.pending:
            return False
        self.input = text

        try:
            self.check(text)
        except ChallengeMismatchError:
            self.input = ''
            self.notify(error(
                'Improper deletion input.',
                f'Type "{self.challenge}" to confirm.'
            ))
            return False

        self.pending = True
        try:
            self.store.delete(self.record.id)
        except BackendError as e:
            logger.warning(f"Delete of species #{self.record.id} rejected: {e.message}")
            self.notify(error('Something went wrong.', e.message))
            return False
        finally:
            self.pending = False

        self.input = ''
        self.on_deleted()
        self.notify(success(f"{self.record.scientific_name} was deleted."))
        return True
