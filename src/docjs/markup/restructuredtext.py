#
# restructuredtext.py: ReStructuredText support for docjs
# Edward Loper
#
# $Id$
#

"""
Conversion of ReStructuredText to HTML.  ReStructuredText is the
markup language used by the Docutils project.

The text is rendered with docutils' C{html4css1} writer, and only the
body of the resulting document is kept, so that it can be embedded in
a docjs page.  Docutils' own system messages are suppressed: comment
blocks are often fragments, and a stray warning about a title
underline is of no use to the reader.
"""
__docformat__ = 'epytext en'

from docutils.core import publish_parts

_SETTINGS = {
    'report_level': 5,
    'halt_level': 5,
    'file_insertion_enabled': False,
    'raw_enabled': False,
    'doctitle_xform': False,
    }

def to_html(text):
    """
    @return: The HTML rendering of the ReStructuredText string C{text}.
    @rtype: C{str}
    """
    parts = publish_parts(text, writer_name='html4css1',
                          settings_overrides=_SETTINGS)
    return parts['body']
