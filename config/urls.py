# config/urls.py

from django.urls import path, include
from django.http import HttpResponse

urlpatterns = [
    path('healthz/', lambda r: HttpResponse("ok", content_type="text/plain")),

    # App URLs
    path('links/', include('textlinks.urls')),
]
