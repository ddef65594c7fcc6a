# docjs -- Comment blocks
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Comment blocks and the extractor that finds them.

A L{Block} holds one documentation comment region: its raw text, its
cleaned text (delimiters and leading C{*} markers removed), the line
where it starts, and the bookkeeping needed to know which of its
lines have been claimed by a tag parser.  Two comment forms are
recognized by L{extract_blocks}::

    /**                          /// @property int id
     * @class Foo
     * @brief A foo.
     */

Line numbers come in two flavors: I{local} line indices count the
lines of the cleaned text starting at 0; I{global} line numbers are
positions in the source file, computed with
L{Block.local_to_global_line_number}.
"""
__docformat__ = 'epytext en'

######################################################################
## Imports
######################################################################

import re
from docjs.context import get_context

######################################################################
## Block
######################################################################

class Block:
    """
    Container for a documentation comment block.

    @ivar id: The block's sequence id, unique within one run.
    @ivar filename: The name of the file that contains the block.
    @ivar src: The cleaned text of the block.
    @ivar raw_src: The block's text as it appears in the file,
        including its delimiters.
    @ivar line_number: The (1-based) line of the file on which the
        block's opening marker appears.
    @ivar raw_diff: The number of lines of C{raw_src} that precede
        the first line of C{src}.
    """
    def __init__(self, src, raw_src, line_number, filename='',
                 context=None, raw_diff=None):
        self.context = get_context(context)
        self.id = self.context.next_block_id()
        self.filename = filename
        self.src = src
        self.raw_src = raw_src
        self.line_number = line_number
        if raw_diff is None:
            idx = raw_src.find(src)
            raw_diff = raw_src[:max(idx, 0)].count('\n')
        self.raw_diff = raw_diff

        self._lines = src.split('\n')
        self._parsed_lines = set()
        self._reported_lines = set()
        self._commands = {}

    def __repr__(self):
        return '<Block %s %s:%d>' % (self.id, self.filename or '??',
                                     self.line_number)

    #/////////////////////////////////////////////////////////////////
    # Lines
    #/////////////////////////////////////////////////////////////////

    def get_line(self, line_number):
        return self._lines[int(line_number)]

    def get_num_lines(self):
        return len(self._lines)

    def local_to_global_line_number(self, line_number):
        return int(line_number) + self.line_number + self.raw_diff + 1

    def get_line_number(self, s):
        """
        Return the local index of the line that contains the first
        occurrence of C{s}, or C{None} if C{s} does not occur in the
        cleaned text.
        """
        idx = self.src.find(s)
        if idx == -1:
            return None
        return self.src[:idx].count('\n')

    #/////////////////////////////////////////////////////////////////
    # Consumed-line tracking
    #/////////////////////////////////////////////////////////////////

    def mark_line_as_parsed(self, line_number):
        """
        Record that the given local line was consumed by a tag
        parser.  Once parsed, a line stays parsed.
        """
        self._parsed_lines.add(int(line_number))

    def line_is_parsed(self, line_number):
        return int(line_number) in self._parsed_lines

    def mark_line_as_reported(self, line_number):
        """
        Record that a malformed-tag error has already been reported
        for the given local line, so that it is not reported again as
        leftover content.
        """
        self._reported_lines.add(int(line_number))

    def line_is_reported(self, line_number):
        return int(line_number) in self._reported_lines

    def get_unparsed_lines(self):
        """
        @return: A list of C{(local_line_number, line)} pairs for
            every line that no tag parser has consumed yet, in order.
        """
        return [(i, line) for (i, line) in enumerate(self._lines)
                if i not in self._parsed_lines]

    def get_residual_lines(self):
        """
        @return: A list of C{(global_line_number, line)} pairs for the
            lines that were neither consumed by a tag parser nor
            reported as malformed.  Blank lines are not included.
        """
        return [(self.local_to_global_line_number(i), line)
                for (i, line) in self.get_unparsed_lines()
                if i not in self._reported_lines and line.strip()]

    #/////////////////////////////////////////////////////////////////
    # Commands
    #/////////////////////////////////////////////////////////////////

    def get_commands(self, tag):
        """
        @return: The list of commands parsed from this block for the
            tag kind C{tag} (e.g. C{'param'}).  The list is empty if
            there are none.
        """
        return self._commands.get(tag, [])

    def set_commands(self, tag, commands):
        self._commands[tag] = list(commands)

    def has_command(self, tag):
        return len(self._commands.get(tag, ())) > 0

    def first_command(self, tag):
        """
        @return: The first command of kind C{tag}, or C{None}.
        """
        commands = self._commands.get(tag)
        if commands:
            return commands[0]
        return None

######################################################################
## Block Extraction
######################################################################

# "/**" on its own line, then lines without "*/", then "*/".
_BLOCK_RE = re.compile(r'/\*\*\n(?:^(?:.(?!\*/))*\n)+[\n\s]*\*/', re.M)
_ONELINE_RE = re.compile(r'///(.*)')

_OPEN_RE = re.compile(r'^/\*\*[\n\t\r]*')
_CLOSE_RE = re.compile(r'\s*\*/$')
_STAR_RE = re.compile(r'^\s*\*\s?')

def extract_blocks(src, filename='', context=None):
    """
    Find the documentation comment blocks in C{src}.

    @param src: The full text of a source file.
    @param filename: The name under which the blocks are recorded.
    @param context: The L{BuildContext<docjs.context.BuildContext>}
        used to number the blocks.
    @return: A list of L{Block}s, ordered by their position in C{src}.
        If C{src} contains no blocks, the list is empty.
    """
    context = get_context(context)
    found = []
    spans = []

    for m in _BLOCK_RE.finditer(src):
        spans.append((m.start(), m.end()))
        found.append((m.start(), _clean_block(m.group(), m.start(), src)))

    for m in _ONELINE_RE.finditer(src):
        if [s for s in spans if s[0] <= m.start() < s[1]]:
            continue
        text = m.group(1)
        if text.startswith(' '):
            text = text[1:]
        found.append((m.start(), (text.rstrip(), m.group(),
                                  _line_at(src, m.start()), 0)))

    found.sort(key=lambda item: item[0])
    blocks = []
    for start, (clean, raw, line_number, raw_diff) in found:
        blocks.append(Block(clean, raw, line_number, filename,
                            context=context, raw_diff=raw_diff))
    return blocks

def _line_at(src, offset):
    """Return the 1-based line number of C{offset} in C{src}."""
    return src.count('\n', 0, offset) + 1

def _clean_block(raw, start, src):
    """
    Strip the delimiters and the leading C{*} markers from a
    multi-line block.

    @return: A tuple C{(clean, raw, line_number, raw_diff)}.
    """
    opening = _OPEN_RE.match(raw).group()
    body = _CLOSE_RE.sub('', raw[len(opening):])
    lines = [_STAR_RE.sub('', line, count=1) for line in body.split('\n')]
    clean = '\n'.join(lines).rstrip()
    return (clean, raw, _line_at(src, start), opening.count('\n'))
