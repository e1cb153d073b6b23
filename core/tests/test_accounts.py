import uuid

import pytest

from core.exceptions import Conflict, NotFound, ValidationError
from core.models import AppUser
from core.permissions import ADMIN, USER

pytestmark = pytest.mark.django_db


def test_add_new_user_stores_hashed_password(container, roles):
    container.accounts.add_new_user('alice', 'pa55word', 'alice@example.com', 'pa55word')

    loaded = container.accounts.load_user_by_username('alice')
    assert loaded.username == 'alice'
    assert loaded.email == 'alice@example.com'
    assert loaded.password != 'pa55word'
    assert container.hasher.verify('pa55word', loaded.password)
    assert uuid.UUID(loaded.user_id)
    assert loaded.role_names == set()


def test_each_user_gets_a_distinct_external_id(make_user):
    assert make_user('u1').user_id != make_user('u2').user_id


def test_add_new_user_rejects_existing_username(container, make_user):
    make_user('alice')
    with pytest.raises(Conflict):
        container.accounts.add_new_user('alice', 'other', 'other@example.com', 'other')
    # Conflict wins even when the confirmation is wrong too
    with pytest.raises(Conflict):
        container.accounts.add_new_user('alice', 'x', 'x@example.com', 'y')
    assert AppUser.objects.filter(username='alice').count() == 1


def test_add_new_user_rejects_password_mismatch(container, roles):
    with pytest.raises(ValidationError) as excinfo:
        container.accounts.add_new_user('bob', 'one', 'bob@example.com', 'two')
    assert 'confirmPassword' in excinfo.value.detail
    assert not AppUser.objects.filter(username='bob').exists()


def test_add_new_user_rejects_empty_password(container, roles):
    with pytest.raises(ValidationError):
        container.accounts.add_new_user('carol', '', 'carol@example.com', '')
    assert not AppUser.objects.filter(username='carol').exists()


def test_add_new_role_rejects_duplicate(container, roles):
    with pytest.raises(Conflict):
        container.accounts.add_new_role(USER)
    assert container.accounts.add_new_role('NURSE').role == 'NURSE'


def test_add_role_to_user_is_idempotent(container, make_user):
    make_user('dave')
    container.accounts.add_role_to_user('dave', USER)
    once = container.accounts.load_user_by_username('dave').role_names
    container.accounts.add_role_to_user('dave', USER)
    twice = container.accounts.load_user_by_username('dave').role_names
    assert once == twice == {USER}
    assert AppUser.roles.through.objects.filter(appuser__username='dave').count() == 1


def test_add_role_to_user_requires_user_and_role(container, make_user):
    make_user('erin')
    with pytest.raises(NotFound):
        container.accounts.add_role_to_user('nobody', USER)
    with pytest.raises(NotFound):
        container.accounts.add_role_to_user('erin', 'SURGEON')


def test_remove_role_from_user(container, make_user):
    make_user('frank', USER, ADMIN)
    container.accounts.remove_role_from_user('frank', ADMIN)
    assert container.accounts.load_user_by_username('frank').role_names == {USER}


def test_remove_role_not_held_is_a_noop(container, make_user):
    make_user('gina', USER)
    container.accounts.remove_role_from_user('gina', ADMIN)
    assert container.accounts.load_user_by_username('gina').role_names == {USER}


def test_remove_role_requires_user_and_role(container, make_user):
    make_user('hank', USER)
    with pytest.raises(NotFound):
        container.accounts.remove_role_from_user('nobody', USER)
    with pytest.raises(NotFound):
        container.accounts.remove_role_from_user('hank', 'SURGEON')


def test_load_user_by_username_unknown(container, roles):
    with pytest.raises(NotFound):
        container.accounts.load_user_by_username('ghost')


def test_bcrypt_is_the_default_hasher(settings, container):
    settings.PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.BCryptSHA256PasswordHasher',
        'django.contrib.auth.hashers.PBKDF2PasswordHasher',
    ]
    encoded = container.hasher.hash('1234')
    assert encoded.startswith('bcrypt_sha256$')
    assert container.hasher.verify('1234', encoded)
    assert not container.hasher.verify('4321', encoded)
