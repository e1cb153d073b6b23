from datetime import date

import pytest

from core.exceptions import NotFound
from core.models import Patient

pytestmark = pytest.mark.django_db


@pytest.fixture
def ward(make_patient):
    """Ten last names containing 'ali' among a few that do not."""
    make_patient(last_name='Alibert')  # capital A: no lowercase 'ali'
    matching = [make_patient(last_name=f'Khalil{i}', score=100 + i) for i in range(10)]
    make_patient(last_name='Martin')
    make_patient(last_name='Dupont')
    return matching


def test_search_pages_through_matches_in_id_order(container, ward):
    store = container.patients
    pages = [store.search(keyword='ali', page=p, size=4) for p in range(4)]

    assert [len(p.content) for p in pages] == [4, 4, 2, 0]
    assert all(p.total_elements == 10 for p in pages)
    assert pages[0].total_pages == 3
    assert list(pages[0].page_numbers) == [0, 1, 2]
    assert pages[0].has_next and not pages[2].has_next
    found = [patient.pk for p in pages for patient in p.content]
    assert found == [p.pk for p in ward]


def test_search_is_case_sensitive(container, ward):
    page = container.patients.search(keyword='Ali', page=0, size=50)
    assert [p.last_name for p in page.content] == ['Alibert']


def test_search_without_keyword_lists_everyone(container, ward):
    page = container.patients.search(page=0, size=100)
    assert page.total_elements == 13
    assert page.total_pages == 1


def test_search_with_no_matches(container, ward):
    page = container.patients.search(keyword='zzz')
    assert page.content == []
    assert page.total_pages == 0
    assert list(page.page_numbers) == []


def test_search_rejects_bad_paging(container):
    with pytest.raises(ValueError):
        container.patients.search(page=-1)
    with pytest.raises(ValueError):
        container.patients.search(size=0)


def test_create_and_get(container):
    created = container.patients.create(
        last_name='Lopez', first_name='Ana', birth_date=date(1990, 1, 2), score=130, sick=True,
    )
    fetched = container.patients.get(created.pk)
    assert fetched.last_name == 'Lopez'
    assert fetched.birth_date == date(1990, 1, 2)
    assert fetched.sick is True


def test_get_unknown_patient(container):
    assert container.patients.find(404) is None
    with pytest.raises(NotFound):
        container.patients.get(404)


def test_update_changes_existing_patient(container, make_patient):
    patient = make_patient(last_name='Garcia', score=120)
    container.patients.update(patient.pk, last_name='Garcia-Lopez', score=300, sick=True)
    patient.refresh_from_db()
    assert (patient.last_name, patient.score, patient.sick) == ('Garcia-Lopez', 300, True)


def test_update_unknown_id_does_not_insert(container):
    with pytest.raises(NotFound):
        container.patients.update(999, last_name='Ghost', first_name='Casper', score=150)
    assert not Patient.objects.exists()


def test_delete(container, make_patient):
    patient = make_patient()
    assert container.patients.delete(patient.pk) is True
    assert not Patient.objects.filter(pk=patient.pk).exists()


def test_delete_unknown_id_is_a_noop(container, ward):
    before = [p.pk for p in container.patients.list_all()]
    assert container.patients.delete(12345) is False
    assert [p.pk for p in container.patients.list_all()] == before
