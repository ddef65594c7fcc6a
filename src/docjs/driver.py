# docjs -- Driver
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Wire the loader, the parser, the assembler and a renderer together.

    >>> from docjs.driver import generate
    >>> html = generate(['src/mylib.js'], title='My library')  # doctest: +SKIP

Options are given as keyword arguments; see L{DEFAULT_OPTIONS} for
the recognized names and their defaults.  Unrecognized options are
ignored.

@var DEFAULT_OPTIONS: The default value of every recognized option.
@var OPTION_ALIASES: Alternate spellings of option names, mapped to
    the names used in L{DEFAULT_OPTIONS}.
"""
__docformat__ = 'epytext en'

from docjs import log
from docjs.context import BuildContext
from docjs.docbuilder import build_documentation, parse_blocks
from docjs.loader import DefaultFileLoader, load_sources

######################################################################
## Options
######################################################################

def _format_source_url(filename, line_number):
    return filename

DEFAULT_OPTIONS = {
    'title': 'API Documentation',
    'description': '',
    'show_source_url': True,
    'format_source_url': _format_source_url,
    'renderer': None,
    'file_loader': None,
    'show_errors': True,
    'show_todos': True,
    'docformat': 'markdown',
    'css': 'default',
    }

OPTION_ALIASES = {
    'showSourceUrl': 'show_source_url',
    'formatSourceUrl': 'format_source_url',
    'fileLoader': 'file_loader',
    'showErrors': 'show_errors',
    'showTodos': 'show_todos',
    }

def make_options(**kwargs):
    """
    @return: A new dictionary containing L{DEFAULT_OPTIONS}, updated
        with the recognized options in C{kwargs}.
    """
    options = DEFAULT_OPTIONS.copy()
    for (key, value) in kwargs.items():
        key = OPTION_ALIASES.get(key, key)
        if key not in DEFAULT_OPTIONS:
            log.debug('Ignoring unknown option %r' % key)
            continue
        options[key] = value
    if options['format_source_url'] is None:
        options['format_source_url'] = _format_source_url
    return options

######################################################################
## Entry points
######################################################################

def build_doc(names, **options):
    """
    Load the named source files, and assemble their documentation.

    @param names: The names of the sources to document, in order.
    @return: The assembled L{Documentation<docjs.docindex.Documentation>}.
    """
    options = make_options(**options)
    loader = options['file_loader']
    if loader is None:
        loader = DefaultFileLoader()
    context = BuildContext()
    errors = []

    log.start_progress('Loading source files')
    sources = load_sources(names, loader, errors, context)
    log.end_progress()

    log.start_progress('Parsing comment blocks')
    blocks = []
    for (i, (name, text)) in enumerate(sources):
        log.progress(float(i)/max(len(sources), 1), name)
        blocks += parse_blocks(text, name, errors, context)
    log.end_progress()

    log.start_progress('Building documentation')
    doc = build_documentation(blocks, errors, context)
    log.end_progress()
    log.info('Documented %d classes, %d functions and %d pages; '
             '%d errors.' % (len(doc.classes), len(doc.functions),
                             len(doc.pages), len(doc.errors)))
    return doc

def get_renderer(options):
    """
    @return: The renderer named by the C{renderer} option; if it is
        not set, a new L{HTMLRenderer
        <docjs.docwriter.html.HTMLRenderer>}.
    """
    renderer = options['renderer']
    if renderer is None:
        from docjs.docwriter.html import HTMLRenderer
        renderer = HTMLRenderer(**options)
    return renderer

def generate(names, **options):
    """
    Load the named source files, assemble their documentation, and
    render it.

    @return: The renderer's output.
    """
    options = make_options(**options)
    doc = build_doc(names, **options)
    renderer = get_renderer(options)
    log.start_progress('Rendering documentation')
    try:
        return renderer.render(doc)
    finally:
        log.end_progress()
