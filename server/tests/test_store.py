"""Tests for the ORM-backed species store."""
import pytest

from species.models import Species
from species.rules import SpeciesPayload, validate_species
from species.store import BackendError, OrmSpeciesStore

pytestmark = pytest.mark.django_db


def payload(**overrides):
    raw = {'scientific_name': 'Cavia porcellus', 'kingdom': 'Animalia'}
    raw.update(overrides)
    return validate_species(raw)


def test_insert_sets_author_from_session_user(user):
    store = OrmSpeciesStore(user.pk)
    record = store.insert(payload(total_population=300000))

    assert record.author == str(user.pk)
    species = Species.objects.get(id=record.id)
    assert species.author == user
    assert species.total_population == 300000


def test_list_orderings(user):
    store = OrmSpeciesStore(user.pk)
    for name in ['Panthera leo', 'Amanita muscaria', 'Quercus robur']:
        store.insert(payload(scientific_name=name))

    newest = [r.scientific_name for r in store.list('id', descending=True)]
    by_name = [r.scientific_name for r in store.list('scientific_name')]
    assert newest == ['Quercus robur', 'Amanita muscaria', 'Panthera leo']
    assert by_name == ['Amanita muscaria', 'Panthera leo', 'Quercus robur']


def test_list_filters_by_kingdom(user):
    store = OrmSpeciesStore(user.pk)
    store.insert(payload())
    store.insert(payload(scientific_name='Amanita muscaria', kingdom='Fungi'))
    assert [r.kingdom for r in store.list('id', kingdom='Fungi')] == ['Fungi']


def test_list_rejects_unknown_ordering(user):
    with pytest.raises(BackendError):
        OrmSpeciesStore(user.pk).list('author')


def test_everyone_can_read(user, other_user):
    record = OrmSpeciesStore(user.pk).insert(payload())
    assert OrmSpeciesStore(other_user.pk).get(record.id) == record


def test_get_missing_record(user):
    with pytest.raises(BackendError):
        OrmSpeciesStore(user.pk).get(999999)


def test_author_can_update(user):
    store = OrmSpeciesStore(user.pk)
    record = store.insert(payload())
    store.update(record.id, payload(common_name='Guinea pig'))
    assert store.get(record.id).common_name == 'Guinea pig'


def test_other_user_cannot_update(user, other_user):
    record = OrmSpeciesStore(user.pk).insert(payload())
    with pytest.raises(BackendError) as exc_info:
        OrmSpeciesStore(other_user.pk).update(record.id, payload(common_name='Hacked'))
    assert 'not its author' in exc_info.value.message
    assert Species.objects.get(id=record.id).common_name is None


def test_author_can_delete(user):
    store = OrmSpeciesStore(user.pk)
    record = store.insert(payload())
    store.delete(record.id)
    assert not Species.objects.filter(id=record.id).exists()


def test_other_user_cannot_delete(user, other_user):
    record = OrmSpeciesStore(user.pk).insert(payload())
    with pytest.raises(BackendError):
        OrmSpeciesStore(other_user.pk).delete(record.id)
    assert Species.objects.filter(id=record.id).exists()


def test_unstorable_values_become_backend_errors(user):
    store = OrmSpeciesStore(user.pk)
    oversized = SpeciesPayload(scientific_name='Cavia porcellus', kingdom='Animalia', total_population=10 ** 20)
    with pytest.raises(BackendError):
        store.insert(oversized)

    record = store.insert(payload())
    with pytest.raises(BackendError):
        store.update(record.id, oversized)
    assert store.get(record.id).total_population is None
