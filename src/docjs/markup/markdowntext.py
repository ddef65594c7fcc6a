#
# markdowntext.py: Markdown support for docjs
# Edward Loper
#
# $Id$
#

"""
Conversion of Markdown text to HTML, using the C{markdown} package.
Fenced code blocks and tables are enabled, since they are the usual
way of writing examples and parameter tables in comment blocks.
"""
__docformat__ = 'epytext en'

import markdown

MARKDOWN_EXTENSIONS = ['fenced_code', 'tables']

def to_html(text):
    """
    @return: The HTML rendering of the Markdown string C{text}.
    """
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
