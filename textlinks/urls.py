# textlinks/urls.py

# Import path from django.urls because it's needed to define URL routes.
from django.urls import path
# Import views from .views because we need to map URLs to these functions.
from .views import preview_view

"""
Author:
This file defines the web addresses (URLs) for the 'textlinks' app.
"""
urlpatterns = [
    # Route for the linkify preview page
    path('preview/', preview_view, name='linkify_preview'),
]
