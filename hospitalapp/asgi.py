"""
ASGI config for the hospitalapp project.

Only plain HTTP is served; each request is handled independently and the
database is the only state shared between them.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hospitalapp.settings")

application = get_asgi_application()
