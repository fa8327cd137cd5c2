# textlinks/templatetags/textlinks_extras.py

from django import template

from textlinks.utils import linkify as linkify_text

register = template.Library()


@register.filter
def linkify(text):
    if text is None:
        return ''
    return linkify_text(text)


# Same helper under the name templates migrated from the report UI use.
@register.simple_tag
def text_with_links(text):
    if text is None:
        return ''
    return linkify_text(text)
