"""Tests for the browser pages driving the species dialogs."""
import pytest
from django.contrib.messages import get_messages
from django.test import Client
from django.urls import reverse

from species.models import Species
from species.pages import SESSION_DIALOGS_KEY

pytestmark = pytest.mark.django_db

GUINEA_PIG = {
    'scientific_name': 'Cavia porcellus',
    'common_name': '',
    'kingdom': 'Animalia',
    'total_population': '',
    'image': '',
    'description': '',
}


@pytest.fixture
def author_client(user):
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def visitor_client(other_user):
    client = Client()
    client.force_login(other_user)
    return client


@pytest.fixture
def species(user):
    return Species.objects.create(author=user, scientific_name='Cavia porcellus', kingdom='Animalia')


def detail_url(species):
    return reverse('catalog-species', kwargs={'pk': species.pk})


def toasts(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


def test_pages_require_login(client, species):
    for url in [reverse('catalog'), reverse('catalog-add'), detail_url(species)]:
        response = client.get(url)
        assert response.status_code == 302
        assert response.url.startswith(reverse('login'))


def test_root_redirects_to_catalog(author_client):
    response = author_client.get('/')
    assert response.status_code == 302
    assert response.url == reverse('catalog')


def test_list_renders_both_orderings(author_client, user):
    for name in ['Panthera leo', 'Amanita muscaria']:
        Species.objects.create(author=user, scientific_name=name, kingdom='Animalia')

    response = author_client.get(reverse('catalog'))
    presenter = response.context['presenter']
    assert [r.scientific_name for r in presenter.newest_first] == ['Amanita muscaria', 'Panthera leo']
    assert [r.scientific_name for r in presenter.by_name] == ['Amanita muscaria', 'Panthera leo']
    content = response.content.decode()
    assert 'id="species-newest"' in content
    assert 'id="species-alphabetical"' in content


def test_list_kingdom_filter_and_order(author_client, user):
    Species.objects.create(author=user, scientific_name='Amanita muscaria', kingdom='Fungi')
    Species.objects.create(author=user, scientific_name='Quercus robur', kingdom='Plantae')

    response = author_client.get(reverse('catalog'), {'kingdom': 'Fungi', 'order': 'alphabetical'})
    presenter = response.context['presenter']
    assert presenter.alphabetical
    assert [r.scientific_name for r in presenter.displayed] == ['Amanita muscaria']


def test_add_species_invalid_input_shows_errors(author_client):
    response = author_client.post(reverse('catalog-add'), dict(GUINEA_PIG, scientific_name='  ', kingdom='Plants'))
    assert response.status_code == 200
    assert set(response.context['add_dialog'].errors) == {'scientific_name', 'kingdom'}
    assert not Species.objects.exists()


def test_add_species_population_too_large(author_client):
    response = author_client.post(reverse('catalog-add'), dict(GUINEA_PIG, total_population='99999999999999999999'))
    assert response.status_code == 200
    assert 'total_population' in response.context['add_dialog'].errors
    assert not Species.objects.exists()


def test_add_species_close(author_client):
    response = author_client.post(reverse('catalog-add'), {'action': 'close'})
    assert response.status_code == 302
    assert not Species.objects.exists()


def test_missing_species_is_404(author_client):
    response = author_client.get(reverse('catalog-species', kwargs={'pk': 424242}))
    assert response.status_code == 404


def test_author_sees_controls(author_client, species):
    content = author_client.get(detail_url(species)).content.decode()
    assert 'value="start_edit"' in content
    assert 'value="start_delete"' in content


def test_non_author_sees_no_controls(visitor_client, species):
    content = visitor_client.get(detail_url(species)).content.decode()
    assert 'More Information' in content
    assert 'value="start_edit"' not in content
    assert 'value="start_delete"' not in content


def test_non_author_posts_are_ignored(visitor_client, species):
    url = detail_url(species)
    visitor_client.post(url, {'action': 'start_edit'})
    visitor_client.post(url, dict(GUINEA_PIG, action='submit', common_name='Hacked'))
    visitor_client.post(url, {'action': 'start_delete'})
    visitor_client.post(url, {'action': 'confirm_delete', 'challenge': 'DELETE Cavia porcellus'})

    species.refresh_from_db()
    assert species.common_name is None


def test_edit_state_survives_reload(author_client, species):
    url = detail_url(species)
    author_client.post(url, {'action': 'start_edit'})
    author_client.post(url, dict(GUINEA_PIG, action='submit', total_population='0'))

    response = author_client.get(url)
    dialog = response.context['dialog']
    assert dialog.state.value == 'editing'
    assert 'total_population' in dialog.form.errors


def test_close_clears_session_dialog(author_client, species):
    url = detail_url(species)
    author_client.post(url, {'action': 'start_edit'})
    response = author_client.post(url, {'action': 'close'})

    assert response.status_code == 302
    assert str(species.pk) not in author_client.session.get(SESSION_DIALOGS_KEY, {})
    assert author_client.get(url).context['dialog'].state.value == 'viewing'


def test_guinea_pig_lifecycle(author_client):
    """Add, describe, fail to delete, then delete a guinea pig."""
    response = author_client.post(reverse('catalog-add'), dict(GUINEA_PIG, action='submit'))
    assert response.status_code == 302
    assert 'New species added!' in toasts(response)
    species = Species.objects.get()
    assert species.common_name is None
    presenter = author_client.get(reverse('catalog')).context['presenter']
    assert species.pk in [r.id for r in presenter.newest_first]
    assert species.pk in [r.id for r in presenter.by_name]
    url = detail_url(species)

    author_client.post(url, {'action': 'start_edit'})
    response = author_client.post(url, dict(GUINEA_PIG, action='submit', common_name='Guinea pig'))
    assert response.status_code == 200
    assert 'Species information updated successfully!' in toasts(response)
    assert response.context['dialog'].state.value == 'viewing'
    species.refresh_from_db()
    assert species.common_name == 'Guinea pig'
    displayed = response.context['presenter'].newest_first
    assert displayed[0].common_name == 'Guinea pig'

    author_client.post(url, {'action': 'start_delete'})
    response = author_client.post(url, {'action': 'confirm_delete', 'challenge': 'DELETE Cavia'})
    assert response.status_code == 200
    assert any(text.startswith('Improper deletion input.') for text in toasts(response))
    assert response.context['dialog'].gate.input == ''
    assert Species.objects.filter(pk=species.pk).exists()

    response = author_client.post(url, {'action': 'confirm_delete', 'challenge': 'DELETE Cavia porcellus'})
    assert response.status_code == 302
    assert response.url == reverse('catalog')
    assert 'Cavia porcellus was deleted.' in toasts(response)
    assert not Species.objects.filter(pk=species.pk).exists()

    presenter = author_client.get(reverse('catalog')).context['presenter']
    assert species.pk not in [r.id for r in presenter.newest_first]
    assert species.pk not in [r.id for r in presenter.by_name]


def test_viewing_a_record_keeps_nothing_in_session(author_client, species):
    url = detail_url(species)
    author_client.get(url)
    assert str(species.pk) not in author_client.session.get(SESSION_DIALOGS_KEY, {})

    author_client.post(url, {'action': 'start_edit'})
    assert str(species.pk) in author_client.session[SESSION_DIALOGS_KEY]

    author_client.post(url, {'action': 'cancel_edit'})
    assert str(species.pk) not in author_client.session[SESSION_DIALOGS_KEY]


def test_list_filter_and_order_survive_dialogs(author_client, species):
    query = 'kingdom=Animalia&order=alphabetical'

    content = author_client.get(f"{reverse('catalog')}?{query}").content.decode()
    assert f'{detail_url(species)}?kingdom=Animalia&amp;order=alphabetical' in content

    response = author_client.post(f'{detail_url(species)}?{query}', {'action': 'close'})
    assert response.status_code == 302
    assert response.url == f"{reverse('catalog')}?{query}"

    response = author_client.post(f"{reverse('catalog-add')}?{query}", {'action': 'close'})
    assert response.url == f"{reverse('catalog')}?{query}"


def test_list_query_drops_unknown_params(author_client, species):
    response = author_client.post(f'{detail_url(species)}?order=alphabetical&next=/admin/', {'action': 'close'})
    assert response.url == f"{reverse('catalog')}?order=alphabetical"
