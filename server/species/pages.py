"""
Browser pages for the species catalog.

Every page renders the species list; the record dialog and the add dialog
are drawn over it. Dialog state lives in the session between requests so a
half-finished edit or delete survives a reload.
"""
import logging

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import Http404, QueryDict
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from .dialog import AddSpeciesDialog, DialogState, SpeciesDialog
from .gate import DEFAULT_PREFIX
from .notifications import MessagesNotifier
from .presenter import ListPresenter
from .rules import FIELD_NAMES, KINGDOMS
from .store import BackendError, OrmSpeciesStore

logger = logging.getLogger(__name__)

SESSION_DIALOGS_KEY = 'species_dialogs'
LIST_TEMPLATE = 'species/list.html'
LIST_PARAMS = ('kingdom', 'order')


def _form_values(request):
    return {name: request.POST.get(name) for name in FIELD_NAMES if name in request.POST}


def _list_query(request):
    """Filter and ordering of the list page, as a query string."""
    query = QueryDict(mutable=True)
    for name in LIST_PARAMS:
        if request.GET.get(name):
            query[name] = request.GET[name]
    return query.urlencode()


def _redirect_to_list(request):
    url = reverse('catalog')
    query = _list_query(request)
    return redirect(f"{url}?{query}" if query else url)


def _presenter(request, store):
    kingdom = request.GET.get('kingdom')
    if kingdom not in KINGDOMS:
        kingdom = None
    alphabetical = request.GET.get('order') == 'alphabetical'
    return ListPresenter(store, alphabetical=alphabetical, kingdom=kingdom)


def _render_list(request, presenter, status=200, **context):
    # A mutation has already reloaded the lists; otherwise load them now
    if not presenter.fetch_count:
        presenter.refresh()
    context.update({
        'presenter': presenter,
        'kingdoms': KINGDOMS,
        'list_query': _list_query(request),
    })
    return render(request, LIST_TEMPLATE, context, status=status)


def _save_dialog(request, dialog):
    dialogs = request.session.setdefault(SESSION_DIALOGS_KEY, {})
    key = str(dialog.record.id)
    # Only edit drafts and delete confirmations are kept
    if dialog.is_open and dialog.state is not DialogState.VIEWING:
        dialogs[key] = dialog.snapshot()
    else:
        dialogs.pop(key, None)
    request.session.modified = True


@login_required
@require_http_methods(['GET'])
def species_list(request):
    """Species list with both orderings loaded up front."""
    store = OrmSpeciesStore(request.user.pk)
    return _render_list(request, _presenter(request, store))


@login_required
@require_http_methods(['GET', 'POST'])
def add_species(request):
    """List page with the add-species dialog open."""
    store = OrmSpeciesStore(request.user.pk)
    presenter = _presenter(request, store)
    dialog = AddSpeciesDialog(store, MessagesNotifier(request), presenter.invalidate)
    dialog.open()

    if request.method == 'POST':
        if request.POST.get('action') == 'close':
            return _redirect_to_list(request)
        if dialog.submit(_form_values(request)) is not None:
            return _redirect_to_list(request)

    return _render_list(request, presenter, add_dialog=dialog)


@login_required
@require_http_methods(['GET', 'POST'])
def species_detail(request, pk):
    """
    List page with one record's dialog open.

    POST `action` drives the dialog: start_edit, cancel_edit, submit,
    start_delete, cancel_delete, confirm_delete or close.
    """
    store = OrmSpeciesStore(request.user.pk)
    presenter = _presenter(request, store)

    try:
        record = store.get(pk)
    except BackendError as e:
        request.session.get(SESSION_DIALOGS_KEY, {}).pop(str(pk), None)
        request.session.modified = True
        raise Http404(e.message)

    dialog = SpeciesDialog(
        record,
        request.user.pk,
        store,
        MessagesNotifier(request),
        presenter.invalidate,
        delete_prefix=getattr(settings, 'SPECIES_DELETE_PREFIX', DEFAULT_PREFIX),
    )
    snapshot = request.session.get(SESSION_DIALOGS_KEY, {}).get(str(pk))
    if snapshot:
        dialog.restore(snapshot)
    if not dialog.is_open:
        dialog.open()

    if request.method == 'POST':
        action = request.POST.get('action')
        if action == 'start_edit':
            dialog.start_edit()
        elif action == 'submit':
            dialog.submit(_form_values(request))
        elif action in ('cancel_edit', 'cancel_delete'):
            dialog.cancel()
        elif action == 'start_delete':
            dialog.start_delete()
        elif action == 'confirm_delete':
            dialog.confirm_delete(request.POST.get('challenge', ''))
        elif action == 'close':
            dialog.close()
        else:
            logger.warning(f"Unknown dialog action {action!r} for species #{pk}")

        _save_dialog(request, dialog)
        if not dialog.is_open:
            return _redirect_to_list(request)
    else:
        _save_dialog(request, dialog)

    return _render_list(request, presenter, dialog=dialog)
