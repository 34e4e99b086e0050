from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticfilesRunserver


class Command(StaticfilesRunserver):
    """runserver listening on settings.PORT unless an address is given."""

    @property
    def default_port(self):
        return str(settings.PORT)
