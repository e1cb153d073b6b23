import logging

from django.apps import AppConfig
from django.conf import settings
from django.db.models.signals import post_migrate

logger = logging.getLogger(__name__)


def _seed_after_migrate(sender, **kwargs):
    from core.container import get_container
    from core.services.bootstrap import seed_demo_data

    seed_demo_data(get_container())


class CoreConfig(AppConfig):
    name = 'core'
    verbose_name = 'Hospital patients'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        if getattr(settings, 'SEED_DEMO_DATA', False):
            logger.info('SEED_DEMO_DATA is on; demo data will be seeded after migrate')
            post_migrate.connect(_seed_after_migrate, sender=self, dispatch_uid='core.seed_demo_data')
