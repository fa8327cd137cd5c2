"""
Tests for the template library (textlinks/templatetags/textlinks_extras.py).
"""

from django.template import Context, Template


def render(source, **context):
    return Template("{% load textlinks_extras %}" + source).render(Context(context))


class TestLinkifyFilter:

    def test_linked_output_is_not_escaped_again(self):
        html = render("{{ value|linkify }}", value="see www.a.io")
        assert html == 'see <a class="link" target="_blank" href="https://www.a.io">www.a.io</a> '

    def test_text_without_url_is_autoescaped(self):
        assert render("{{ value|linkify }}", value="Hello <b>") == "Hello &lt;b&gt;"

    def test_autoescape_off(self):
        assert render("{% autoescape off %}{{ value|linkify }}{% endautoescape %}", value="<b>") == "<b>"

    def test_none_renders_empty(self):
        assert render("{{ value|linkify }}", value=None) == ""


class TestTextWithLinksTag:

    def test_links(self):
        html = render("{% text_with_links value %}", value="mailto:me@a.io")
        assert html == '<a class="link" target="_blank" href="mailto:me@a.io">mailto:me@a.io</a> '

    def test_escapes_plain_text(self):
        assert render("{% text_with_links value %}", value="1 < 2") == "1 &lt; 2"

    def test_none_renders_empty(self):
        assert render("{% text_with_links value %}", value=None) == ""
