# docjs
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Comment-block documentation extractor.  Docjs scans source files for
specially marked comment blocks (C{/** ... */} and C{/// ...}),
parses the C{@tags} they contain, and assembles the result into a
cross-referenced L{Documentation<docjs.docindex.Documentation>}
that can be rendered to HTML or plain text.  Docjs can be used via a
command-line interface (L{docjs.cli}) or programmatically (L{docjs.driver}).

Architecture graph::

      source files / urls
             |
             V
      +-------------+     Retrieves the text of each requested
      | FileLoader  |     source (filesystem or network).
      +-------------+
             |
             V
     +----------------+   Finds comment blocks, strips their
     | extract_blocks |   delimiters, and records line offsets.
     +----------------+
             |
             V
     +----------------+   Runs one TagParser per tag kind over each
     | parse_commands |   block, producing Commands and marking the
     +----------------+   lines they consume.
             |
             V
   +--------------------+  Classifies each block, builds Entities,
   | build_documentation|  attaches methods & properties to their
   +--------------------+  classes, and reports leftover lines.
             |
             V
     +---------------+    The sorted, indexed result: pages,
     | Documentation |    classes, functions, library, todos and
     +---------------+    errors.
             |
             V
       +-----------+      Turns the Documentation into HTML or
       | Renderers |      plain text.
       +-----------+

The tag grammar understood by the parser::

    @author text              @method name
    @brief text               @page title
    @class Name               @param dataType name [description]
    @description text...      @property dataType name [description]
    @event name [text]        @return[s] dataType [description]
    @example text @endexample @see text
    @extends ClassName        @todo text
    @file name                @version text
    @function|@fn name [text] @library name
    @memberof ClassName

@author: U{Edward Loper<edloper@gradient.cis.upenn.edu>}
@version: 0.2
@see: L{docjs.tagparser} for the exact grammar of each tag.

@todo: Support C{@event} entities in the renderers; events are
    parsed but not yet assembled into entities.
"""
__docformat__ = 'epytext en'

# General info
__version__ = '0.2'
__author__ = 'Edward Loper <edloper@gradient.cis.upenn.edu>'
__url__ = 'http://epydoc.sourceforge.net'
__license__ = 'IBM Open Source License'

DEBUG = False
"""True if debugging is turned on."""
