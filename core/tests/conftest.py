import pytest
from django.test import Client

from core.container import build_container
from core.models import Patient
from core.permissions import ADMIN, USER


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def roles(db, container):
    container.accounts.add_new_role(USER)
    container.accounts.add_new_role(ADMIN)
    return container.roles


@pytest.fixture
def make_user(roles, container):
    def _make(username, *granted, password='s3cret-pass'):
        user = container.accounts.add_new_user(username, password, f'{username}@example.com', password)
        for role in granted:
            container.accounts.add_role_to_user(username, role)
        return user
    return _make


@pytest.fixture
def user_client(make_user):
    client = Client()
    client.force_login(make_user('nurse', USER))
    return client


@pytest.fixture
def admin_client(make_user):
    client = Client()
    client.force_login(make_user('chief', USER, ADMIN))
    return client


@pytest.fixture
def make_patient(db):
    def _make(last_name='Martin', first_name='Paul', score=150, **extra):
        return Patient.objects.create(last_name=last_name, first_name=first_name, score=score, **extra)
    return _make
