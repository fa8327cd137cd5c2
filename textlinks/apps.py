# textlinks/apps.py

# Import AppConfig from django.apps because it's the base class for a Django app configuration.
from django.apps import AppConfig

"""
Author:
This class tells Django that an app named "textlinks" exists.
The app holds the "linkify" helper that turns URLs inside plain
text into clickable links, plus the template tags, preview page
and management command built on top of it.
"""
class TextLinksConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'textlinks'
    verbose_name = 'Text links'
