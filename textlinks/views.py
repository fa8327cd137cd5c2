# textlinks/views.py

# Import render from django.shortcuts because 'preview_view' needs it.
from django.shortcuts import render

"""
Author:
This page lets you paste some text and see what it looks like
after the "linkify" filter has turned its URLs into links.
The text comes from the '?text=' query parameter; the template
does the actual linking, exactly as any other page would.
"""
def preview_view(request):
    text = request.GET.get('text', '')
    return render(request, 'textlinks/preview.html', {'text': text})
