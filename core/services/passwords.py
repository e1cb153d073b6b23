from django.contrib.auth.hashers import check_password, make_password
from rest_framework.exceptions import ValidationError


class PasswordHasher:
    """One-way hashing for stored credentials.

    The algorithm is whatever heads ``settings.PASSWORD_HASHERS`` (bcrypt in
    this project); older hashes stay verifiable through the fallbacks listed
    after it.
    """

    def hash(self, raw_password: str) -> str:
        if not raw_password:
            raise ValidationError({'password': ['password must not be empty']})
        return make_password(raw_password)

    def verify(self, raw_password: str, encoded: str) -> bool:
        if not raw_password or not encoded:
            return False
        return check_password(raw_password, encoded)
