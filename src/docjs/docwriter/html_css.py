#
# html_css.py: default docjs CSS stylesheets
# Edward Loper
#
# $Id$
#

"""
Predefined CSS stylesheets for the HTML outputter (L{docjs.docwriter.html}).

@type STYLESHEETS: C{dictionary} from C{string} to C{(string, string)}
@var STYLESHEETS: A dictionary mapping from stylesheet names to CSS
    stylesheets and descriptions.  A single stylesheet may have
    multiple names.  Currently, the following stylesheets are defined:
      - C{default}: The default stylesheet (synonym for C{white}).
      - C{white}: Black on white, with blue highlights.
      - C{green}: Black on white, with green highlights.
      - C{black}: White on black, with blue highlights.
      - C{grayscale}: Grayscale black on white.
"""
__docformat__ = 'epytext en'

import re

############################################################
## Basic stylesheet
############################################################

TEMPLATE = """
/* docjs CSS Stylesheet
 *
 * This stylesheet can be used to customize the appearance of the
 * HTML output.  The page is split into a fixed navigation column
 * ('nav') and a scrolling content column ('#content').
 */

/* Default Colors & Styles */
body                        { background: $body_bg; color: $body_fg;
                              font-family: sans-serif; margin: 0; }
a:link                      { color: $body_link; }
a:visited                   { color: $body_visited_link; }
h1                          { font-size: +140%; font-weight: bold; }
h2                          { font-size: +125%; font-weight: bold; }
h3                          { font-size: +110%; font-weight: normal; }
pre, code                   { background: $code_bg; color: $code_fg; }
pre                         { border: $code_border; padding: .5em; }

/* Navigation
 *   - The library's name, version and brief description are shown
 *     in '#logo'.  They are followed by lists of links to the pages,
 *     functions and classes.
 */
nav                         { position: fixed; top: 0; bottom: 0;
                              left: 0; width: 16em; overflow: auto;
                              background: $nav_bg; color: $nav_fg;
                              border-right: $nav_border;
                              padding: 0 1em; }
nav a                       { text-decoration: none; }
nav a:link                  { color: $nav_link; }
nav a:visited               { color: $nav_visited_link; }
nav ul                      { list-style: none; padding-left: 1em; }
#logo h1                    { margin-bottom: 0; }
#libversion                 { font-size: 60%; font-weight: normal; }
#libdesc                    { font-style: italic; margin-top: .2em; }

/* Content */
#content                    { margin-left: 19em; padding: 0 1em; }
#content > section > h1     { border-bottom: $table_border; }
p.brief                     { font-style: italic; }
p.description               { }
span.datatype, td.datatype  { color: $datatype_fg; font-family: monospace; }
span.methodName,
td.paramName,
td.propertyName             { font-family: monospace; font-weight: bold; }
span.signature              { font-family: monospace; }

/* Member overview tables (parameters, methods, properties) */
table.member_overview       { border-collapse: collapse;
                              background: $table_bg; color: $table_fg;
                              border: $table_border; }
table.member_overview td    { border: $table_border; padding: .2em .5em; }
table.member_overview a:link     { color: $table_link; }
table.member_overview a:visited  { color: $table_visited_link; }

/* Todos & errors */
#todos > div, #errors > div { border: $table_border; margin: .5em 0;
                              padding: 0 .5em; }
#errors > div               { background: $error_bg; }
#errors pre                 { background: transparent; border: none; }

footer                      { margin-left: 19em; padding: 1em;
                              font-size: 85%; }
"""

############################################################
## Derived stylesheets
############################################################
# Use some simple manipulations to produce a variety of color
# schemes.  In particular, use the _COLOR_RE regular expression to
# search for colors, and to transform them in various ways.

# Only six-digit hex colors: the template also has id selectors such
# as '#content'.
_COLOR_RE = re.compile(r'#([0-9a-fA-F]{2})([0-9a-fA-F]{2})'
                       r'([0-9a-fA-F]{2})\b')

def _set_colors(template, *dicts):
    colors = dicts[0].copy()
    for d in dicts[1:]: colors.update(d)
    return re.sub(r'\$(\w+)', lambda m:colors[m.group(1)], template)

def _rv(match):
    """
    Given a regexp match for a color, return the reverse-video version
    of that color.

    @param match: A regular expression match.
    @type match: C{Match}
    @return: The reverse-video color.
    @rtype: C{string}
    """
    rgb = [int(grp, 16) for grp in match.groups()]
    return '#' + ''.join(['%02x' % (255-c) for c in rgb])

_WHITE_COLORS = dict(
    # Defaults:
    body_bg                 =  '#ffffff',
    body_fg                 =  '#000000',
    body_link               =  '#0000ff',
    body_visited_link       =  '#204080',
    # Navigation column:
    nav_bg                  =  '#e8f0f8',
    nav_fg                  =  '#000000',
    nav_border              =  '1px solid #608090',
    nav_link                =  '#0000ff',
    nav_visited_link        =  '#204080',
    # Member overview tables:
    table_bg                =  '#e8f0f8',
    table_fg                =  '#000000',
    table_link              =  '#0000ff',
    table_visited_link      =  '#204080',
    table_border            =  '1px solid #608090',
    # Examples & code:
    code_bg                 =  '#f0f0f0',
    code_fg                 =  '#000000',
    code_border             =  '1px solid #708890',
    # Data types:
    datatype_fg             =  '#006080',
    # Error reports:
    error_bg                =  '#f8e0e0',
    )

_GREEN_COLORS = _WHITE_COLORS.copy()
_GREEN_COLORS.update(dict(
    nav_bg                  =  '#e0f8e0',
    nav_border              =  '1px solid #609060',
    table_bg                =  '#e0f8e0',
    table_border            =  '1px solid #609060',
    datatype_fg             =  '#006030',
    ))

_WHITE = _set_colors(TEMPLATE, _WHITE_COLORS)
_GREEN = _set_colors(TEMPLATE, _GREEN_COLORS)

# White-on-black, with blue highlights.
_BLACK = _COLOR_RE.sub(r'#\3\2\1', _COLOR_RE.sub(_rv, _WHITE))

# Grayscale
_GRAYSCALE = _COLOR_RE.sub(r'#\2\2\2', _WHITE)

############################################################
## Stylesheet table
############################################################

STYLESHEETS = {
    'white': (_WHITE, "Black on white, with blue highlights"),
    'green': (_GREEN, "Black on white, with green highlights"),
    'black': (_BLACK, "White on black, with blue highlights"),
    'grayscale': (_GRAYSCALE, "Grayscale black on white"),
    'default': (_WHITE, "Default stylesheet (=white)"),
    }
