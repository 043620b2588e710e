"""
Record store for species.

The dialogs and the list only ever see `SpeciesRecord` copies handed out by a
`SpeciesStore`; they never hold model instances. `OrmSpeciesStore` is the
database-backed implementation, bound to one session user the way a hosted
client is bound to one login.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from django.db import DatabaseError, transaction
from django.utils import timezone

from .models import Species
from .rules import SpeciesPayload

logger = logging.getLogger(__name__)

ORDERABLE_FIELDS = ('id', 'scientific_name')


class BackendError(Exception):
    """A store call was rejected or failed. `message` is shown to the user."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class SpeciesRecord:
    """Read-only snapshot of a stored species row."""
    id: int
    author: str
    scientific_name: str
    kingdom: str
    common_name: Optional[str] = None
    total_population: Optional[int] = None
    image: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_model(cls, species: Species) -> 'SpeciesRecord':
        return cls(
            id=species.id,
            author=str(species.author_id),
            scientific_name=species.scientific_name,
            kingdom=species.kingdom,
            common_name=species.common_name,
            total_population=species.total_population,
            image=species.image,
            description=species.description,
        )

    def field_values(self) -> Dict[str, Any]:
        """Editable field values, keyed like a `SpeciesPayload`."""
        return {
            'scientific_name': self.scientific_name,
            'common_name': self.common_name,
            'kingdom': self.kingdom,
            'total_population': self.total_population,
            'image': self.image,
            'description': self.description,
        }

    def with_values(self, payload: SpeciesPayload) -> 'SpeciesRecord':
        return SpeciesRecord(id=self.id, author=self.author, **payload.as_dict())


class SpeciesStore(Protocol):
    """What the core expects from the backing store."""

    def list(self, order_by: str, descending: bool = False,
             kingdom: Optional[str] = None) -> List[SpeciesRecord]:
        ...

    def get(self, record_id: int) -> SpeciesRecord:
        ...

    def insert(self, payload: SpeciesPayload) -> SpeciesRecord:
        ...

    def update(self, record_id: int, payload: SpeciesPayload) -> None:
        ...

    def delete(self, record_id: int) -> None:
        ...


class OrmSpeciesStore:
    """
    Species store backed by the Django ORM.

    Writes are scoped to rows authored by `user_id`; touching anyone else's
    row fails the same way a missing row does.
    """

    def __init__(self, user_id):
        self.user_id = str(user_id)

    def list(self, order_by: str, descending: bool = False,
             kingdom: Optional[str] = None) -> List[SpeciesRecord]:
        if order_by not in ORDERABLE_FIELDS:
            raise BackendError(f"Cannot order species by '{order_by}'.")

        queryset = Species.objects.all()
        if kingdom:
            queryset = queryset.filter(kingdom=kingdom)
        ordering = f"-{order_by}" if descending else order_by
        # Tie-break on id so equal names keep a stable order
        queryset = queryset.order_by(ordering, 'id')

        try:
            return [SpeciesRecord.from_model(species) for species in queryset]
        except DatabaseError as e:
            logger.error(f"Failed to list species: {e}")
            raise BackendError(str(e))

    def get(self, record_id: int) -> SpeciesRecord:
        try:
            return SpeciesRecord.from_model(Species.objects.get(id=record_id))
        except Species.DoesNotExist:
            raise BackendError(f"Species #{record_id} does not exist.")
        except (DatabaseError, ValueError) as e:
            logger.error(f"Failed to load species #{record_id}: {e}")
            raise BackendError(str(e))

    def insert(self, payload: SpeciesPayload) -> SpeciesRecord:
        try:
            with transaction.atomic():
                species = Species.objects.create(author_id=self.user_id, **payload.as_dict())
        except (DatabaseError, OverflowError) as e:
            logger.error(f"Failed to insert species {payload.scientific_name!r}: {e}")
            raise BackendError(str(e))

        logger.info(f"User {self.user_id} created species #{species.id}: {species}")
        return SpeciesRecord.from_model(species)

    def update(self, record_id: int, payload: SpeciesPayload) -> None:
        try:
            with transaction.atomic():
                updated = Species.objects.filter(
                    id=record_id,
                    author_id=self.user_id,
                ).update(updated_at=timezone.now(), **payload.as_dict())
        except (DatabaseError, OverflowError) as e:
            logger.error(f"Failed to update species #{record_id}: {e}")
            raise BackendError(str(e))

        if not updated:
            logger.warning(f"User {self.user_id} could not update species #{record_id}")
            raise BackendError('Species not found or you are not its author.')
        logger.info(f"User {self.user_id} updated species #{record_id}")

    def delete(self, record_id: int) -> None:
        try:
            deleted, _ = Species.objects.filter(
                id=record_id,
                author_id=self.user_id,
            ).delete()
        except DatabaseError as e:
            logger.error(f"Failed to delete species #{record_id}: {e}")
            raise BackendError(str(e))

        if not deleted:
            logger.warning(f"User {self.user_id} could not delete species #{record_id}")
            raise BackendError('Species not found or you are not its author.')
        logger.info(f"User {self.user_id} deleted species #{record_id}")
