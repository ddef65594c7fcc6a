# docjs -- Command line interface
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Command-line interface for docjs.

Usage::

 docjs [ACTION] [OPTIONS] FILES...

     FILES...                  The source files (or http/https URLs)
                               to document.
     --html                    Generate HTML output (default).
     --text                    Generate plaintext output.
     -o PATH, --output PATH    The output directory (HTML), or the
                               output file (text).
     --title TITLE             The title used if no @library is found.
     --description TEXT        The subtitle used if no @library is found.
     --docformat NAME          The markup language for pages and examples.
     --css SHEET               CSS stylesheet for HTML files.
     --source-url FORMAT       Template for source links; may use
                               %(filename)s and %(line)d.
     --no-source-url           Do not show source links.
     --no-errors               Do not list errors in the output.
     --no-todos                Do not list todos in the output.
     --encoding NAME           The encoding of the source files.
     --strict                  Exit with status 1 if any error was found.
     -v, --verbose             Increase the verbosity.
     -q, --quiet               Decrease the verbosity.
     --debug                   Show full tracebacks for internal errors.

Verbosity levels::

                Progress    Source warnings   Warnings   Errors
 -2               none            no             no        yes
 -1               none            no             yes       yes
  0 (default)     none            no             yes       yes
  1               list            yes            yes       yes
  2               list            yes            yes       yes (+info)
"""
__docformat__ = 'epytext en'

import codecs
import os
import sys
from optparse import OptionParser, OptionGroup

import docjs
from docjs import log
from docjs.docwriter.html import HTMLRenderer
from docjs.docwriter.html_css import STYLESHEETS
from docjs.docwriter.plaintext import PlaintextRenderer
from docjs.driver import build_doc
from docjs.loader import DefaultFileLoader
from docjs.markup import normalize_docformat
from docjs.util import wordwrap

######################################################################
## Argument Parsing
######################################################################

def parse_arguments(args=None):
    # Construct the option parser.
    usage = '%prog [ACTION] [options] FILES...'
    version = "docjs, version %s" % docjs.__version__
    optparser = OptionParser(usage=usage, version=version)
    action_group = OptionGroup(optparser, 'Actions')
    options_group = OptionGroup(optparser, 'Options')

    # Add options -- Actions
    action_group.add_option(                                # --html
        "--html", action="store_const", dest="action", const="html",
        help="Write HTML output.")
    action_group.add_option(                                # --text
        "--text", action="store_const", dest="action", const="text",
        help="Write plaintext output.")

    # Add options -- Options
    options_group.add_option(                                # --output
        "--output", "-o", dest="target", metavar="PATH",
        help="The output directory for HTML output (it will be created "
        "if it does not exist), or the output file for text output.")
    options_group.add_option(                                # --title
        "--title", dest="title", metavar="TITLE",
        help="The title of the documentation, used when no @library "
        "block is found.")
    options_group.add_option(                                # --description
        "--description", dest="description", metavar="TEXT",
        help="A subtitle, used when no @library block is found.")
    options_group.add_option(                                # --docformat
        "--docformat", dest="docformat", metavar="NAME",
        help="The markup language for pages and examples: markdown, "
        "restructuredtext or plaintext.  Defaults to \"%default\".")
    options_group.add_option(                                # --css
        "--css", dest="css", metavar="STYLESHEET",
        help="The CSS stylesheet.  STYLESHEET can be either a "
        "builtin stylesheet or the name of a CSS file.")
    options_group.add_option(                                # --source-url
        "--source-url", dest="source_url", metavar="FORMAT",
        help="A template for links to the source, such as "
        "\"http://example.com/%(filename)s#L%(line)d\".")
    options_group.add_option(                                # --no-source-url
        "--no-source-url", action="store_false", dest="show_source_url",
        help="Do not link to the source.")
    options_group.add_option(                                # --no-errors
        "--no-errors", action="store_false", dest="show_errors",
        help="Do not list errors in the output.")
    options_group.add_option(                                # --no-todos
        "--no-todos", action="store_false", dest="show_todos",
        help="Do not list todos in the output.")
    options_group.add_option(                                # --encoding
        "--encoding", dest="encoding", metavar="NAME",
        help="The encoding of the source files.")
    options_group.add_option(                                # --strict
        "--strict", action="store_true", dest="strict",
        help="Exit with a nonzero status if any errors were found.")
    options_group.add_option(                                # --quiet
        "--quiet", "-q", action="count", dest="quiet",
        help="Decrease the verbosity.")
    options_group.add_option(                                # --verbose
        "--verbose", "-v", action="count", dest="verbose",
        help="Increase the verbosity.")
    options_group.add_option(                                # --debug
        "--debug", action="store_true", dest="debug",
        help="Show full tracebacks for internal errors.")

    # Add the option groups.
    optparser.add_option_group(action_group)
    optparser.add_option_group(options_group)

    # Set the option parser's defaults.
    optparser.set_defaults(action="html", title='API Documentation',
                           description='', docformat='markdown',
                           css='default', source_url=None,
                           show_source_url=True, show_errors=True,
                           show_todos=True, encoding='utf-8',
                           strict=False, verbose=0, quiet=0,
                           debug=docjs.DEBUG)

    # Parse the arguments.
    options, names = optparser.parse_args(args)

    # Check to make sure all options are valid.
    if len(names) == 0:
        optparser.error("No files specified.")
    if normalize_docformat(options.docformat) is None:
        optparser.error("Unknown docformat %r.  Valid options are "
                        "markdown, restructuredtext and plaintext."
                        % options.docformat)
    if options.css not in STYLESHEETS and not os.path.isfile(options.css):
        optparser.error("Unknown stylesheet %r." % options.css)
    try:
        codecs.lookup(options.encoding)
    except LookupError:
        optparser.error("Unknown encoding %r." % options.encoding)

    # Calculate verbosity.
    options.verbosity = options.verbose - options.quiet

    # The target default depends on the action.
    if options.target is None and options.action == 'html':
        options.target = 'html'

    # Return parsed args.
    return options, names

def make_source_url_formatter(template):
    """
    @return: A function C{f(filename, line)} that fills in C{template}.
    """
    if template is None:
        return None
    def format_source_url(filename, line):
        return template % {'filename': filename, 'line': line}
    return format_source_url

######################################################################
## Interface
######################################################################

def main(options, names):
    """
    Document the named files, as directed by C{options}.

    @return: The process exit status.
    """
    # Set up the logger
    logger = ConsoleLogger(options.verbosity, options.debug)
    log.register_logger(logger)
    try:
        run_options = dict(
            title=options.title, description=options.description,
            show_source_url=options.show_source_url,
            format_source_url=make_source_url_formatter(options.source_url),
            show_errors=options.show_errors,
            show_todos=options.show_todos,
            docformat=options.docformat, css=options.css,
            file_loader=DefaultFileLoader(options.encoding))

        # check the output directory.
        if options.action == 'html' and os.path.exists(options.target):
            if not os.path.isdir(options.target):
                log.error("%s is not a directory" % options.target)
                return 1

        doc = build_doc(names, **run_options)

        # Perform the specified action.
        if options.action == 'html':
            renderer = HTMLRenderer(**run_options)
            log.start_progress('Writing HTML docs to %r' % options.target)
            renderer.write(doc, options.target)
            log.end_progress()
        elif options.action == 'text':
            text = PlaintextRenderer(**run_options).render(doc)
            if options.target:
                out = codecs.open(options.target, 'w', 'utf-8')
                try:
                    out.write(text)
                finally:
                    out.close()
            else:
                sys.stdout.write(text)
        else:
            log.error('Unsupported action %s!' % options.action)
            return 1

        if doc.errors:
            if len(doc.errors) == 1:
                prefix = '1 error was found'
            else:
                prefix = '%d errors were found' % len(doc.errors)
            log.warning('%s in the documented source.' % prefix)
            if options.strict:
                return 1
        return 0
    finally:
        log.remove_logger(logger)

def cli(args=None):
    # Parse command-line arguments.
    options, names = parse_arguments(args)

    try:
        return main(options, names)
    except KeyboardInterrupt:
        sys.stderr.write('\n\nKeyboard interrupt.\n')
        return 1
    except Exception as e:
        if options.debug: raise
        sys.stderr.write('\nUNEXPECTED ERROR:\n'
                         '%s\n' % (str(e) or e.__class__.__name__))
        sys.stderr.write('Use --debug to see trace information.\n')
        return 1

######################################################################
## Logging
######################################################################

class ConsoleLogger(log.Logger):
    """
    A logger that writes messages, and progress when the verbosity is
    at least 1, to C{stream} (by default, C{stderr}).  Source warnings
    are shown from verbosity 1 up.
    """
    COLS = 75

    def __init__(self, verbosity, debug=False, stream=None):
        self._verbosity = verbosity
        self._debug = debug
        self._stream = stream
        self._message_blocks = []

        self.suppressed_source_warnings = 0
        """The number of source warnings that were not shown because
        the verbosity was too low."""

    def _out(self):
        return self._stream or sys.stderr

    def start_block(self, header):
        self._message_blocks.append( (header, []) )

    def end_block(self):
        header, messages = self._message_blocks.pop()
        if messages:
            width = self.COLS - 5 - 2*len(self._message_blocks)
            prefix = '| '
            divider = '+'+'-'*(width-1)
            # Boxed header, indented body.
            header = wordwrap(header, right=width-2).rstrip()
            header = '\n'.join([prefix+l for l in header.split('\n')])
            body = '\n'.join(messages)
            body = '\n'.join([prefix+'  '+l for l in body.split('\n')])
            message = divider + '\n' + header + '\n' + body + '\n'
            self._report(message, rstrip=False)

    def _format(self, prefix, message):
        """
        Prefix and word-wrap C{message}.  Explicit newlines are kept,
        and indented lines (e.g. the lines of an unparsed-code dump) are
        left as they are.
        """
        lines = message.split('\n')
        startindex = indent = len(prefix)
        for i in range(len(lines)):
            if lines[i].startswith(' ') or not lines[i]:
                lines[i] = ' '*(indent-startindex) + lines[i] + '\n'
            else:
                width = self.COLS - 5 - 4*len(self._message_blocks)
                lines[i] = wordwrap(lines[i], indent, width, startindex)
            startindex = 0
        return prefix+''.join(lines)

    def log(self, level, message):
        if self._verbosity >= -2 and level >= log.ERROR:
            message = self._format('  Error: ', message)
        elif self._verbosity >= -1 and level >= log.WARNING:
            message = self._format('Warning: ', message)
        elif self._verbosity >= 1 and level >= log.SOURCE_WARNING:
            message = self._format('Warning: ', message)
        elif self._verbosity >= 2 and level >= log.INFO:
            message = self._format('   Info: ', message)
        elif self._debug and level == log.DEBUG:
            message = self._format('  Debug: ', message)
        else:
            if level >= log.SOURCE_WARNING:
                self.suppressed_source_warnings += 1
            return

        self._report(message)

    def _report(self, message, rstrip=True):
        if rstrip: message = message.rstrip()

        if self._message_blocks:
            self._message_blocks[-1][-1].append(message)
        else:
            out = self._out()
            out.write(message + '\n')
            out.flush()

    def start_progress(self, header=None):
        if self._verbosity >= 1 and header:
            self._out().write(header + '\n')

    def progress(self, percent, message=''):
        if self._verbosity >= 1 and message:
            self._out().write('[%3d%%] %s\n' % (100*min(1.0, percent),
                                               message))

######################################################################
## main
######################################################################

if __name__ == '__main__':
    sys.exit(cli())
