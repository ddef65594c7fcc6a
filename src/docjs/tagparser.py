# docjs -- Tag parsing
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Parsers that turn the tags of a comment block into L{Command}s.

Each kind of tag is described by a L{TagParser}: the tag names it
answers to, a human-readable grammar, a regular expression, and a
factory that builds a command from the expression's groups.  The
standard parsers are listed in L{STANDARD_TAGS}, in the order in which
they are run by L{parse_commands}:

    1. C{@example}, which may span several lines and is consumed
       first so that its content is not mistaken for other tags.
    2. The single-line tags, in alphabetical order.
    3. C{@description}, which claims every line up to the next tag,
       and so must run after every other tag has been consumed.

A line that mentions a tag (e.g. C{@param}) but does not match that
tag's grammar is X{malformed}: an L{ErrorReport} is generated for it,
and the line is marked as reported rather than consumed.  A later
parser may still claim a reported line; either way it is left out of
the block's leftover-text report.

@group Parsers: TagParser, LineTagParser, ExampleTagParser,
    DescriptionTagParser
@group Parsing: parse_commands, STANDARD_TAGS
"""
__docformat__ = 'epytext en'

######################################################################
## Imports
######################################################################

import re
from docjs import log
from docjs.command import *
from docjs.entity import ErrorReport

######################################################################
## Tag Parsers
######################################################################

def _opt(s):
    """Return C{s}, or C{None} if it is empty."""
    if s is None or s == '':
        return None
    return s

class TagParser:
    """
    Base class for tag parsers.

    @ivar tags: The tag names that this parser handles.  The first
        name is the canonical name, under which the parsed commands are
        stored in the block.
    @ivar spec: A human-readable rendering of the tag's grammar, used
        in error messages.
    @ivar regexp: The compiled regular expression for the tag.
    @ivar factory: A function C{factory(block, groups, line)} that
        builds a L{Command} from the regexp's match groups.
    """
    def __init__(self, tags, spec, regexp, factory, flags=0):
        if isinstance(tags, str):
            tags = (tags,)
        self.tags = tuple(tags)
        self.spec = spec
        self.regexp = re.compile(regexp, flags)
        self.factory = factory
        self._mention_re = re.compile(r'@(?:%s)\b' %
                                      '|'.join(self.tags))

    def name(self):
        return self.tags[0]

    def mentions(self, text):
        """
        @return: True if C{text} contains one of this parser's tags.
        """
        return self._mention_re.search(text) is not None

    def parse(self, block, errors):
        """
        Parse every occurrence of this parser's tag in C{block}.  The
        lines that are consumed are marked as parsed.

        @return: The list of commands that were found.
        """
        raise NotImplementedError('TagParser.parse')

    def _malformed(self, block, line_number, text, errors):
        message = ('Line contained @%s but did not match the command '
                   'spec "%s". The input: %s' %
                   (self.tags[0], self.spec, text))
        errors.append(ErrorReport(
            block.filename, block.local_to_global_line_number(line_number),
            message, block.context))
        block.mark_line_as_reported(line_number)
        log.debug(message)

    def __repr__(self):
        return '<TagParser: @%s>' % self.tags[0]

class LineTagParser(TagParser):
    """
    A parser for a tag whose command fits on a single line.
    """
    def parse(self, block, errors):
        commands = []
        for (i, line) in block.get_unparsed_lines():
            if not self.mentions(line):
                continue
            m = self.regexp.search(line)
            if m is None:
                self._malformed(block, i, line, errors)
                continue
            commands.append(self.factory(block, m.groups(), i))
            block.mark_line_as_parsed(i)
        return commands

class _MultiLineTagParser(TagParser):
    """
    Helpers for parsers that match against the unconsumed lines of a
    block joined into one string.
    """
    def _joined(self, block):
        """
        @return: A tuple C{(text, starts)}, where C{text} is the
            unconsumed lines joined with newlines, and C{starts} is a
            list of C{(offset, local_line_number)} pairs giving where
            each line begins in C{text}.
        """
        pieces = []
        starts = []
        offset = 0
        for (i, line) in block.get_unparsed_lines():
            starts.append((offset, i))
            pieces.append(line)
            offset += len(line) + 1
        return '\n'.join(pieces), starts

    def _lines_between(self, starts, start, end):
        """
        @return: The local line numbers of the lines that overlap the
            span C{[start, end)} of the joined text.
        """
        return [i for (offset, i) in starts if offset < end and
                self._line_end(starts, offset) > start]

    def _line_end(self, starts, offset):
        for (o, i) in starts:
            if o > offset:
                return o
        return 1 << 30

    def _line_at(self, starts, pos):
        line = starts[0][1]
        for (offset, i) in starts:
            if offset > pos:
                break
            line = i
        return line

class ExampleTagParser(_MultiLineTagParser):
    """
    A parser for C{@example ... @endexample}.  The content of the
    example keeps its internal newlines; a newline directly after the
    C{@example} tag is dropped, as is trailing whitespace.
    """
    def parse(self, block, errors):
        text, starts = self._joined(block)
        if not starts:
            return []
        commands = []
        consumed = []
        pos = 0
        for m in self.regexp.finditer(text):
            line = self._line_at(starts, m.start())
            commands.append(self.factory(block, m.groups(), line))
            consumed += self._lines_between(starts, m.start(), m.end())
            pos = m.end()
        # An @example with no @endexample.
        m = self._mention_re.search(text, pos)
        if m is not None:
            line = self._line_at(starts, m.start())
            self._malformed(block, line, block.get_line(line), errors)
        for i in consumed:
            block.mark_line_as_parsed(i)
        return commands

_EXAMPLE_LEAD_RE = re.compile(r'^[ \t]*\n')

def _example_content(text):
    if _EXAMPLE_LEAD_RE.match(text):
        text = _EXAMPLE_LEAD_RE.sub('', text, count=1)
    else:
        text = text.lstrip(' \t')
    return text.rstrip()

_TAG_LINE_RE = re.compile(r'^\s*@\w')

class DescriptionTagParser(TagParser):
    """
    A parser for C{@description}.  Its content starts after the tag
    and runs up to (but not including) the next line that starts with
    a tag, the next line that has already been consumed, or the end of
    the block.  A C{@description} with no content is ignored, and its
    line is left unconsumed.
    """
    def parse(self, block, errors):
        commands = []
        num_lines = block.get_num_lines()
        i = 0
        while i < num_lines:
            m = None
            if not block.line_is_parsed(i):
                m = self.regexp.search(block.get_line(i))
            if m is None:
                i += 1
                continue
            content = [m.group(1)]
            consumed = [i]
            j = i+1
            while (j < num_lines and not block.line_is_parsed(j) and
                   not _TAG_LINE_RE.match(block.get_line(j))):
                content.append(block.get_line(j))
                consumed.append(j)
                j += 1
            content = '\n'.join(content)
            if not content.strip():
                i = j
                continue
            commands.append(self.factory(block, (content,), i))
            for k in consumed:
                block.mark_line_as_parsed(k)
            i = j
        return commands

######################################################################
## Standard Tags
######################################################################

def _text(cls):
    return lambda block, g, line: cls(block, g[0].strip(), line)

def _named(cls):
    return lambda block, g, line: cls(block, g[0], line)

def _named_descr(cls):
    return lambda block, g, line: cls(block, g[0], _opt(g[1]), line)

def _typed(cls):
    return lambda block, g, line: cls(block, g[0], g[1], _opt(g[2]), line)

def _simple(tag, cls):
    return LineTagParser(tag, '@%s <text>' % tag,
                         r'@%s\s+(\S.*?)\s*$' % tag, _text(cls))

STANDARD_TAGS = [
    ExampleTagParser(
        'example', '@example <text> @endexample',
        r'@example\b(.*?)@endexample',
        lambda block, g, line: ExampleCommand(
            block, _example_content(g[0]), line),
        re.S),

    _simple('author', AuthorCommand),
    _simple('brief', BriefCommand),
    LineTagParser('class', '@class <name>',
                  r'@class\s+(\S+)\s*$', _named(ClassCommand)),
    LineTagParser('event', '@event <name> [<description>]',
                  r'@event\s+(\S+)(?:\s+(.*\S))?\s*$',
                  _named_descr(EventCommand)),
    LineTagParser('extends', '@extends <class>',
                  r'@extends\s+(\S+)\s*$', _named(ExtendsCommand)),
    _simple('file', FileCommand),
    LineTagParser(('function', 'fn'), '@function <name> [<description>]',
                  r'@(?:function|fn)\s+(\S+)(?:\s+(.*\S))?\s*$',
                  _named_descr(FunctionCommand)),
    _simple('library', LibraryCommand),
    LineTagParser(('memberof', 'memberOf'), '@memberof <class>',
                  r'@member[oO]f\s+(\S+)\s*$', _named(MemberofCommand)),
    LineTagParser('method', '@method <name>',
                  r'@method\s+(\S+)\s*$', _named(MethodCommand)),
    _simple('page', PageCommand),
    LineTagParser('param', '@param <type> <name> [<description>]',
                  r'@param\s+(\S+)\s+(\S+)(?:\s+(.*\S))?\s*$',
                  _typed(ParamCommand)),
    LineTagParser('property', '@property <type> <name> [<description>]',
                  r'@property\s+(\S+)\s+(\S+)(?:\s+(.*\S))?\s*$',
                  _typed(PropertyCommand)),
    LineTagParser(('return', 'returns'), '@return <type> [<description>]',
                  r'@returns?\s+(\S+)(?:\s+(.*\S))?\s*$',
                  _named_descr(ReturnCommand)),
    _simple('see', SeeCommand),
    _simple('todo', TodoCommand),
    _simple('version', VersionCommand),

    DescriptionTagParser(
        ('description', 'desc'), '@description <text>',
        r'@desc(?:ription)?\b[ \t]*(.*)$',
        lambda block, g, line: DescriptionCommand(
            block, g[0].strip(), line)),
    ]
"""The standard tag parsers, in the order in which they are run."""

def parse_commands(block, errors, parsers=None):
    """
    Run every tag parser over C{block}, storing the resulting commands
    in the block under each parser's canonical tag name.

    @param errors: A list that L{ErrorReport}s for malformed tags are
        appended to.
    @param parsers: The parsers to run; defaults to L{STANDARD_TAGS}.
    @return: C{block}
    """
    if parsers is None:
        parsers = STANDARD_TAGS
    for parser in parsers:
        block.set_commands(parser.name(), parser.parse(block, errors))
    return block
