# textlinks/management/commands/linkify_text.py

# Import sys because the text is read from standard input when no file is given.
import sys

# Import BaseCommand and CommandError from django.core.management.base because custom management commands are based on them.
from django.core.management.base import BaseCommand, CommandError
# Import linkify and count_links from textlinks.utils because they do the actual work.
from textlinks.utils import count_links, linkify

"""
Author:
This class defines a custom command that can be run from the
server's command line (using 'python manage.py linkify_text notes.txt').
It reads a text file (or whatever is piped into it), turns every
URL into a link with the same helper the templates use, and prints
the resulting HTML. With '--count' it only prints how many links
were found.
"""
class Command(BaseCommand):
    help = 'Turns URLs in a text file (or stdin) into HTML links.'

    def add_arguments(self, parser):
        parser.add_argument('path', nargs='?', default='-', help="File to read, or '-' for stdin.")
        parser.add_argument('--count', action='store_true', help='Only print the number of links found.')

    def handle(self, *args, **options):
        path = options['path']

        if path == '-':
            text = sys.stdin.read()
        else:
            try:
                with open(path, encoding='utf-8') as f:
                    text = f.read()
            except OSError as e:
                raise CommandError(f"Could not read '{path}': {e}")

        if options['count']:
            self.stdout.write(self.style.SUCCESS(f'Found {count_links(text)} link(s).'))
            return

        # Print the HTML exactly as produced, without an extra newline
        self.stdout.write(str(linkify(text)), ending='')
