# textlinks/utils.py

# Import logging because 'linkify' reports how many links it created.
import logging
# Import re because both URL detection and entity encoding are regular-expression based.
import re

# Import settings from django.conf because the link attributes can be overridden per project.
from django.conf import settings
# Import mark_safe from django.utils.safestring because linked text must not be escaped again by templates.
from django.utils.safestring import mark_safe

from .constants import DEFAULT_URL_SCHEME, LINK_CSS_CLASS, LINK_TARGET

logger = logging.getLogger(__name__)

# Whitespace as JavaScript's \s sees it; Python's \s differs on NEL, U+FEFF and \x1c-\x1f.
WHITESPACE = r'\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'

# Regex to find URLs.
# Group 1 is the link text, group 2 the explicit protocol (if any),
# group 3 the character that ends the link. "&#62" is an escaped ">".
URL_REGEX = re.compile(
    r'((?:(https?://|ftp://|mailto:)|www\.)[^' + WHITESPACE + r']+?)'
    r'([' + WHITESPACE + r']|"|\'|\)|]|}|&#62|$)',
    re.MULTILINE,
)

# Characters that get turned into numeric character references.
# Cherokee small letters are included because they upper-case into the range.
ENTITY_REGEX = re.compile(r'[\u00a0-\u9999\uab70-\uabbf<>&]')


def encode_html_entities(raw_string):
    """Replace every character in U+00A0..U+9999, the Cherokee small
    letters, ``<``, ``>`` and ``&`` with its decimal character reference,
    e.g. ``<`` becomes ``&#60;``."""
    return ENTITY_REGEX.sub(lambda match: f'&#{ord(match.group(0))};', raw_string)


def _link_settings():
    return (
        getattr(settings, 'TEXTLINKS_LINK_CLASS', LINK_CSS_CLASS),
        getattr(settings, 'TEXTLINKS_LINK_TARGET', LINK_TARGET),
        getattr(settings, 'TEXTLINKS_DEFAULT_SCHEME', DEFAULT_URL_SCHEME),
    )


"""
Author:
This is the helper behind the "linkify" template filter. It looks
for anything that starts like a web address (http://, https://,
ftp://, mailto: or just www.) and wraps it in an <a> tag.

When a URL is found, the whole text is entity-encoded first and
the result is marked safe, so Django prints the HTML as-is.
When nothing is found, the value is handed back untouched and the
template's normal autoescaping takes care of it.
"""
def linkify(text):
    if text is None:
        return text

    raw_text = text if isinstance(text, str) else str(text)
    if not URL_REGEX.search(raw_text):
        return text

    css_class, target, default_scheme = _link_settings()
    link_count = 0

    def replace(match):
        nonlocal link_count
        link_count += 1
        url_full_text, url_protocol, terminal_symbol = match.groups()
        href = url_full_text if url_protocol else f'{default_scheme}{url_full_text}'
        return (
            f'<a class="{css_class}" target="{target}" href="{href}">'
            f'{url_full_text}</a>{terminal_symbol} '
        )

    linked_text = URL_REGEX.sub(replace, encode_html_entities(raw_text))
    logger.debug('linkify created %d link(s)', link_count)
    return mark_safe(linked_text)


def count_links(text):
    """Number of links ``linkify`` would create for ``text``."""
    if text is None:
        return 0
    raw_text = text if isinstance(text, str) else str(text)
    if not URL_REGEX.search(raw_text):
        return 0
    return len(URL_REGEX.findall(encode_html_entities(raw_text)))
