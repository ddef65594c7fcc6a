# docjs -- Utility functions
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Miscellaneous utility functions that are used by multiple modules.

@group Text processing: wordwrap, quote_html, to_nice
"""
__docformat__ = 'epytext en'

import re

######################################################################
## Text Processing
######################################################################

def wordwrap(str, indent=0, right=75, startindex=0):
    """
    Word-wrap C{str}.  Runs of whitespace become single spaces; every
    line starts with C{indent} spaces and ends before column C{right},
    unless a single word is too long to fit.

    @param indent: The left margin.
    @param right: The right margin.
    @param startindex: The column where the first line starts, if
        something else has already been written on it.
    @return: The wrapped text, ending with a newline.
    @rtype: C{str}
    """
    words = str.split()
    out_str = ' '*(indent-startindex)
    charindex = max(indent, startindex)
    for word in words:
        if charindex+len(word) > right and charindex > 0:
            out_str += '\n' + ' '*indent
            charindex = indent
        out_str += word+' '
        charindex += len(word)+1
    return out_str.rstrip()+'\n'

def quote_html(s):
    """
    Escape the characters of C{s} that are special in HTML (C{&},
    C{<}, C{>} and C{"}).  C{None} is rendered as the empty string.
    """
    if s is None:
        return ''
    s = '%s' % (s,)
    s = s.replace('&', '&amp;')
    s = s.replace('<', '&lt;')
    s = s.replace('>', '&gt;')
    s = s.replace('"', '&quot;')
    return s

_NICE_DROP_RE = re.compile(r'[^a-zA-Z0-9/_|+ -]+')
_NICE_SEP_RE = re.compile(r'[/_|+ -]+')

def to_nice(s):
    """
    Convert a name into a lower-case string that can be used as an
    HTML anchor.  Punctuation is dropped, and every run of spaces and
    separator characters (C{/ _ | + -}) becomes a single C{-}.

        >>> to_nice('Getting Started!')
        'getting-started'
        >>> to_nice('DOCJS.Block')
        'docjsblock'
    """
    s = _NICE_DROP_RE.sub('', s).lower().strip()
    return _NICE_SEP_RE.sub('-', re.sub(r'\s+', ' ', s))
