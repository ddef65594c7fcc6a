# docjs -- Markup language support
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Markup language support for the free-form text of comment blocks.

The text of pages, descriptions and examples is written in a X{markup
language}, which is selected with the C{docformat} option.  The
following markup languages are currently supported:

  - C{markdown}: Markdown, with fenced code blocks and tables
    (see L{docjs.markup.markdowntext}).
  - C{restructuredtext}: ReStructuredText
    (see L{docjs.markup.restructuredtext}).
  - C{plaintext}: Plain text, rendered verbatim.

Use L{to_html} to convert a string to HTML.  If the markup language
is not recognized, a warning is logged and the text is treated as
plain text.

@group Conversion: to_html, plaintext_to_html
@var MARKUP_LANGUAGES: The names of the supported markup languages.
"""
__docformat__ = 'epytext en'

from docjs import log
from docjs.util import quote_html

MARKUP_LANGUAGES = ('markdown', 'restructuredtext', 'plaintext')

_DOCFORMAT_ALIASES = {'md': 'markdown', 'rst': 'restructuredtext',
                      'rest': 'restructuredtext', 'text': 'plaintext'}

def normalize_docformat(docformat):
    """
    @return: The canonical name for C{docformat}, or C{None} if it is
        not a supported markup language.
    """
    docformat = (docformat or 'markdown').lower()
    docformat = _DOCFORMAT_ALIASES.get(docformat, docformat)
    if docformat in MARKUP_LANGUAGES:
        return docformat
    return None

def to_html(text, docformat='markdown'):
    """
    Convert C{text}, written in the markup language C{docformat}, to
    an HTML fragment.

    @rtype: C{str}
    """
    if text is None:
        return ''
    name = normalize_docformat(docformat)
    if name is None:
        log.warning('Unknown docformat %r; treating text as plaintext.'
                    % docformat)
        name = 'plaintext'
    if name == 'markdown':
        from docjs.markup import markdowntext
        return markdowntext.to_html(text)
    if name == 'restructuredtext':
        from docjs.markup import restructuredtext
        return restructuredtext.to_html(text)
    return plaintext_to_html(text)

def plaintext_to_html(text):
    return '<pre class="plaintext">%s</pre>' % quote_html(text)
