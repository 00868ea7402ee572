from django.apps import AppConfig


class ArenaCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'arenatour.arena_core'
    verbose_name = 'Arena Scoring Core'
