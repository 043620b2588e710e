"""
Species list presenter.
"""
import logging
from typing import List, Optional

from .store import SpeciesRecord, SpeciesStore

logger = logging.getLogger(__name__)


class ListPresenter:
    """
    Keeps both list orderings loaded so switching between them is free.

    Newest-first and alphabetical lists are fetched together; `toggle()` only
    changes which one is displayed. After any create, update or delete the
    owner calls `invalidate()`, which reloads both lists from the store
    instead of patching the local copies.
    """

    def __init__(self, store: SpeciesStore, alphabetical: bool = False,
                 kingdom: Optional[str] = None):
        self.store = store
        self.alphabetical = alphabetical
        self.kingdom = kingdom
        self.newest_first: List[SpeciesRecord] = []
        self.by_name: List[SpeciesRecord] = []
        self.fetch_count = 0

    @property
    def displayed(self) -> List[SpeciesRecord]:
        return self.by_name if self.alphabetical else self.newest_first

    def toggle(self) -> bool:
        self.alphabetical = not self.alphabetical
        return self.alphabetical

    def refresh(self) -> None:
        """Fetch both orderings from the store."""
        self.newest_first = self.store.list('id', descending=True, kingdom=self.kingdom)
        self.by_name = self.store.list('scientific_name', kingdom=self.kingdom)
        self.fetch_count += 1
        logger.debug(f"Loaded {len(self.newest_first)} species (kingdom={self.kingdom})")

    def invalidate(self) -> None:
        self.refresh()
