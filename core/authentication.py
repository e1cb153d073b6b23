"""
Authentication backend.

Login resolves the account through ``AccountService.load_user_by_username``
and checks the password with the project's ``PasswordHasher``.  Session
lookups (``get_user``) are inherited from Django's ``ModelBackend``.
"""
from __future__ import annotations

import logging

from django.contrib.auth.backends import ModelBackend
from rest_framework.exceptions import NotFound

from core.container import get_container

logger = logging.getLogger(__name__)


class AccountBackend(ModelBackend):

    def authenticate(self, request, username=None, password=None, **kwargs):
        if not username or not password:
            return None
        container = get_container()
        try:
            user = container.accounts.load_user_by_username(username)
        except NotFound:
            # same cost as a password check
            container.hasher.hash(password)
            logger.info('Login refused for unknown user %s', username)
            return None
        if not container.hasher.verify(password, user.password):
            logger.info('Login refused for %s: bad password', username)
            return None
        if not self.user_can_authenticate(user):
            logger.info('Login refused for %s: inactive', username)
            return None
        logger.info('User %s logged in with roles %s', username, sorted(user.role_names))
        return user
