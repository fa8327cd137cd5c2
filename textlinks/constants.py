# textlinks/constants.py

"""
Author:
This file holds the default values used when building the
<a> tags for linked text. Each one can be overridden from
the project settings (see config/settings.py), so changing
how links look never requires touching the helper itself.
"""
# CSS class put on every generated link.
LINK_CSS_CLASS = 'link'

# Where the browser opens the link.
LINK_TARGET = '_blank'

# Prepended to bare "www." addresses that have no protocol of their own.
DEFAULT_URL_SCHEME = 'https://'
