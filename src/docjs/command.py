# docjs -- Commands
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Commands: the typed values produced by the tag parsers.

Each occurrence of a tag in a comment block (e.g. C{@param int x The
x coordinate}) is turned into one C{Command} object.  A command always
knows the L{Block<docjs.block.Block>} it came from, and the local line
on which its tag appeared.  Commands are not changed after parsing,
except through the few C{set_*} methods kept for corrective
post-processing.
"""
__docformat__ = 'epytext en'

from docjs.block import Block

class Command:
    """
    Base class for commands.

    @param block: The block that the command was defined in.
    @param line: The local line index of the tag within C{block},
        if known.
    @raise TypeError: If C{block} is not a L{Block}.
    """
    tag = None
    """The canonical name of the tag that produces this command."""

    def __init__(self, block, line=None):
        if not isinstance(block, Block):
            raise TypeError('%s requires a Block, got %r' %
                            (self.__class__.__name__, block))
        self._block = block
        self._line = line

    def get_block(self):
        return self._block

    def set_block(self, block):
        if not isinstance(block, Block):
            raise TypeError('Expected a Block, got %r' % (block,))
        self._block = block

    def get_line(self):
        """
        @return: The local line index of the command's tag, or C{None}.
        """
        return self._line

    def get_line_number(self):
        """
        @return: The global line number of the command's tag.  If the
            local line is unknown, the block's starting line is used.
        """
        if self._line is None:
            return self._block.line_number
        return self._block.local_to_global_line_number(self._line)

    def __repr__(self):
        return '<%s line %s>' % (self.__class__.__name__,
                                 self.get_line_number())

######################################################################
## Text commands
######################################################################

class _TextCommand(Command):
    def __init__(self, block, content, line=None):
        Command.__init__(self, block, line)
        self._content = content

    def get_content(self):
        return self._content

    def set_content(self, content):
        self._content = content

class AuthorCommand(_TextCommand):
    tag = 'author'

class BriefCommand(_TextCommand):
    tag = 'brief'

class DescriptionCommand(_TextCommand):
    tag = 'description'

class ExampleCommand(_TextCommand):
    """
    The text between an C{@example} tag and its C{@endexample}.
    """
    tag = 'example'

class TodoCommand(_TextCommand):
    tag = 'todo'

class VersionCommand(_TextCommand):
    tag = 'version'

class SeeCommand(_TextCommand):
    tag = 'see'

    def get_text(self):
        return self._content

    set_text = _TextCommand.set_content

######################################################################
## Named commands
######################################################################

class _NamedCommand(Command):
    def __init__(self, block, name, line=None):
        Command.__init__(self, block, line)
        self._name = name

    def get_name(self):
        return self._name

    def set_name(self, name):
        self._name = name

class ClassCommand(_NamedCommand):
    tag = 'class'

class LibraryCommand(_NamedCommand):
    tag = 'library'

class MethodCommand(_NamedCommand):
    tag = 'method'

class FileCommand(_NamedCommand):
    tag = 'file'

class PageCommand(_NamedCommand):
    """
    The title of a free-form documentation page.
    """
    tag = 'page'

class EventCommand(_NamedCommand):
    tag = 'event'

    def __init__(self, block, name, description=None, line=None):
        _NamedCommand.__init__(self, block, name, line)
        self._description = description

    def get_description(self):
        return self._description

    def set_description(self, description):
        self._description = description

class FunctionCommand(EventCommand):
    """
    C{@function name [description]}; also spelled C{@fn}.
    """
    tag = 'function'

######################################################################
## Class-reference commands
######################################################################

class _ClassRefCommand(Command):
    def __init__(self, block, class_name, line=None):
        Command.__init__(self, block, line)
        self._class_name = class_name

    def get_class_name(self):
        return self._class_name

class ExtendsCommand(_ClassRefCommand):
    tag = 'extends'

class MemberofCommand(_ClassRefCommand):
    tag = 'memberof'

    def set_class_name(self, class_name):
        self._class_name = class_name

######################################################################
## Typed commands
######################################################################

class ParamCommand(Command):
    """
    C{@param dataType name [description]}.
    """
    tag = 'param'

    def __init__(self, block, data_type, name, description=None,
                 line=None):
        Command.__init__(self, block, line)
        self._data_type = data_type
        self._name = name
        self._description = description or None

    def get_name(self):
        return self._name

    def get_data_type(self):
        return self._data_type

    def get_description(self):
        return self._description

class PropertyCommand(ParamCommand):
    tag = 'property'

    def set_name(self, name):
        self._name = name

class ReturnCommand(Command):
    """
    C{@return dataType [description]}; also spelled C{@returns}.
    """
    tag = 'return'

    def __init__(self, block, data_type, description=None, line=None):
        Command.__init__(self, block, line)
        self._data_type = data_type
        self._description = description or None

    def get_data_type(self):
        return self._data_type

    def set_data_type(self, data_type):
        self._data_type = data_type

    def get_description(self):
        return self._description

    def set_description(self, description):
        self._description = description
