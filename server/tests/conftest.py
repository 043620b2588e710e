"""Shared fixtures for species catalog tests."""
import pytest
from rest_framework.test import APIClient

from species.rules import SpeciesPayload
from species.store import BackendError, SpeciesRecord

AUTHOR_ID = 'author-1'
OTHER_ID = 'someone-else'


class FakeStore:
    """In-memory species store that records every call."""

    def __init__(self, user_id=AUTHOR_ID):
        self.user_id = user_id
        self.rows = {}
        self.calls = []
        self.fail_with = None
        self._next_id = 1

    def add(self, author=AUTHOR_ID, **values):
        """Seed a row without counting it as a call."""
        values.setdefault('scientific_name', 'Cavia porcellus')
        values.setdefault('kingdom', 'Animalia')
        record = SpeciesRecord(id=self._next_id, author=author, **values)
        self.rows[record.id] = record
        self._next_id += 1
        return record

    def mutation_calls(self):
        return [call for call in self.calls if call[0] in ('insert', 'update', 'delete')]

    def _check_failure(self):
        if self.fail_with:
            raise BackendError(self.fail_with)

    def list(self, order_by, descending=False, kingdom=None):
        self.calls.append(('list', order_by, descending))
        self._check_failure()
        rows = [row for row in self.rows.values() if not kingdom or row.kingdom == kingdom]
        return sorted(rows, key=lambda row: getattr(row, order_by), reverse=descending)

    def get(self, record_id):
        self.calls.append(('get', record_id))
        self._check_failure()
        if record_id not in self.rows:
            raise BackendError(f"Species #{record_id} does not exist.")
        return self.rows[record_id]

    def insert(self, payload: SpeciesPayload):
        self.calls.append(('insert', payload))
        self._check_failure()
        return self.add(author=self.user_id, **payload.as_dict())

    def update(self, record_id, payload: SpeciesPayload):
        self.calls.append(('update', record_id, payload))
        self._check_failure()
        row = self.rows.get(record_id)
        if row is None or row.author != self.user_id:
            raise BackendError('Species not found or you are not its author.')
        self.rows[record_id] = row.with_values(payload)

    def delete(self, record_id):
        self.calls.append(('delete', record_id))
        self._check_failure()
        row = self.rows.get(record_id)
        if row is None or row.author != self.user_id:
            raise BackendError('Species not found or you are not its author.')
        del self.rows[record_id]


class CallCounter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def record(store):
    return store.add(
        scientific_name='Cavia porcellus',
        common_name=None,
        kingdom='Animalia',
        total_population=300000,
    )


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def invalidate():
    return CallCounter()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='testpass123',
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username='otheruser',
        email='otheruser@example.com',
        password='otherpass123',
    )


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
