# docjs -- Documentation entities
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Classes for the documented things that are shown to the user.

An X{entity} is assembled from the commands of a single comment
block: a C{@class} block becomes a L{ClassEntity}, a C{@function}
block a L{FunctionEntity}, and so on.  Entities expose their
information through accessor methods; optional information that was
not documented is returned as C{None}.

Every entity gets two ids when it is constructed: C{id}, which counts
entities of the same kind, and C{global_id}, which counts all
entities of a run.  Both are allocated by the run's
L{BuildContext<docjs.context.BuildContext>}.

L{ErrorReport}s are not entities, but they are listed alongside them
in the L{Documentation<docjs.docindex.Documentation>}.
"""
__docformat__ = 'epytext en'

######################################################################
## Imports
######################################################################

from docjs.context import get_context

def _content(command):
    if command is None:
        return None
    return command.get_content()

######################################################################
## Error Reports
######################################################################

class ErrorReport:
    """
    Container for a problem found in the documented source: a
    malformed tag, an invalid relationship between entities, leftover
    text in a comment block, or a file that could not be loaded.

    @ivar id: The report's sequence id, unique within one run.
    @ivar filename: The file that the problem was found in (may be
        empty if it is not known).
    @ivar line_number: A best-effort global line number.
    @ivar message: A human-readable description of the problem.
    """
    def __init__(self, filename, line_number, message, context=None):
        self.id = get_context(context).next_error_id()
        self.filename = filename
        self.line_number = line_number
        self.message = message

    # Alias for filename.
    @property
    def file(self):
        return self.filename

    def __str__(self):
        return '%s, line %s: %s' % (self.filename or '??',
                                    self.line_number, self.message)

    def __repr__(self):
        return '<ErrorReport %d %s:%s>' % (self.id, self.filename,
                                           self.line_number)

######################################################################
## Entity Base Class
######################################################################

class Entity:
    """
    Base class for entities.

    @cvar kind: The entity kind name; ids are counted per kind.
    @ivar block: The L{Block<docjs.block.Block>} that the entity was
        defined in.
    """
    kind = 'entity'

    def __init__(self, block, context=None):
        self.block = block
        if context is None:
            context = block.context
        self.id, self.global_id = context.next_entity_ids(self.kind)

    def get_block(self):
        return self.block

    def get_filename(self):
        return self.block.filename

    def get_line_number(self):
        """The line of the file where the entity's block starts."""
        return self.block.line_number

    def __repr__(self):
        name = getattr(self, 'get_name', None)
        if name is not None:
            return '<%s %s>' % (self.__class__.__name__, name())
        return '<%s %d>' % (self.__class__.__name__, self.global_id)

class _ParamsMixin:
    """
    Accessors for entities that take a list of C{@param} commands
    (functions, methods, and class constructors).
    """
    def num_params(self):
        return len(self._params)

    def get_params(self):
        return list(self._params)

    def get_param_data_type(self, i):
        return self._params[i].get_data_type()

    def get_param_name(self, i):
        return self._params[i].get_name()

    def get_param_description(self, i):
        return self._params[i].get_description()

    def add_param(self, param):
        self._params.append(param)

class _ExamplesMixin:
    def num_examples(self):
        return len(self._examples)

    def get_example_text(self, i):
        return self._examples[i].get_content()

######################################################################
## Entities
######################################################################

class FileEntity(Entity):
    kind = 'file'

    def __init__(self, block, file_command, context=None):
        Entity.__init__(self, block, context)
        self._file = file_command

    def get_name(self):
        return self._file.get_name()

class LibraryEntity(Entity):
    """
    The documented library as a whole.  At most one library entity is
    kept per run.
    """
    kind = 'library'

    def __init__(self, block, library_command, version_command=None,
                 brief_command=None, description_command=None,
                 context=None):
        Entity.__init__(self, block, context)
        self._library = library_command
        self._version = version_command
        self._brief = brief_command
        self._description = description_command

    def get_name(self):
        return self._library.get_name()

    def get_version(self):
        return _content(self._version)

    def get_brief(self):
        return _content(self._brief)

    def get_description(self):
        return _content(self._description)

class FunctionEntity(Entity, _ParamsMixin, _ExamplesMixin):
    kind = 'function'

    def __init__(self, block, function_command, param_commands=(),
                 return_command=None, brief_command=None,
                 description_command=None, example_commands=(),
                 context=None):
        Entity.__init__(self, block, context)
        self._function = function_command
        self._params = list(param_commands)
        self._return = return_command
        self._brief = brief_command
        self._description = description_command
        self._examples = list(example_commands)

    def get_name(self):
        return self._function.get_name()

    def get_brief(self):
        return _content(self._brief)

    def get_description(self):
        """
        @return: The text of the block's C{@description}; or, if there
            is none, the description given on the C{@function} line.
        """
        if self._description is not None:
            return self._description.get_content()
        return self._function.get_description()

    def get_return_data_type(self):
        if self._return is None:
            return None
        return self._return.get_data_type()

    def get_return_description(self):
        if self._return is None:
            return None
        return self._return.get_description()

class MethodEntity(Entity, _ParamsMixin):
    kind = 'method'

    def __init__(self, block, method_command, memberof_command,
                 param_commands=(), brief_command=None,
                 return_command=None, context=None):
        Entity.__init__(self, block, context)
        self._method = method_command
        self._memberof = memberof_command
        self._params = list(param_commands)
        self._brief = brief_command
        self._return = return_command

    def get_name(self):
        return self._method.get_name()

    def get_class_name(self):
        return self._memberof.get_class_name()

    def get_brief(self):
        return _content(self._brief)

    def get_return_data_type(self):
        if self._return is None:
            return None
        return self._return.get_data_type()

    def get_return_description(self):
        if self._return is None:
            return None
        return self._return.get_description()

class PropertyEntity(Entity):
    kind = 'property'

    def __init__(self, block, property_command, memberof_command,
                 brief_command=None, description_command=None,
                 context=None):
        Entity.__init__(self, block, context)
        self._property = property_command
        self._memberof = memberof_command
        self._brief = brief_command
        self._description = description_command

    def get_name(self):
        return self._property.get_name()

    def get_class_name(self):
        return self._memberof.get_class_name()

    def get_data_type(self):
        return self._property.get_data_type()

    def get_brief(self):
        """
        @return: The C{@brief} text, falling back to the description
            given on the C{@property} line.
        """
        if self._brief is not None:
            return self._brief.get_content()
        return self._property.get_description()

    def get_description(self):
        return _content(self._description)

class ClassEntity(Entity, _ParamsMixin, _ExamplesMixin):
    """
    A documented class.  Its C{@param} commands describe the
    constructor.  Methods and properties are attached after all
    blocks have been assembled, using L{add_method} and
    L{add_property}.
    """
    kind = 'class'

    def __init__(self, block, class_command, param_commands=(),
                 extends_command=None, brief_command=None,
                 description_command=None, example_commands=(),
                 context=None):
        Entity.__init__(self, block, context)
        self._class = class_command
        self._params = list(param_commands)
        self._extends = extends_command
        self._brief = brief_command
        self._description = description_command
        self._examples = list(example_commands)
        self._methods = []
        self._properties = []

    def get_name(self):
        return self._class.get_name()

    def get_brief(self):
        return _content(self._brief)

    def get_description(self):
        return _content(self._description)

    def get_extended_class_name(self):
        if self._extends is None:
            return None
        return self._extends.get_class_name()

    # Methods
    def num_methods(self):
        return len(self._methods)

    def add_method(self, method):
        self._methods.append(method)

    def get_method(self, i):
        return self._methods[i]

    def get_methods(self):
        return list(self._methods)

    # Properties
    def num_properties(self):
        return len(self._properties)

    def add_property(self, prop):
        self._properties.append(prop)

    def get_property(self, i):
        return self._properties[i]

    def get_properties(self):
        return list(self._properties)

    def get_property_name(self, i):
        return self._properties[i].get_name()

    def get_property_data_type(self, i):
        return self._properties[i].get_data_type()

    def get_property_brief(self, i):
        return self._properties[i].get_brief()

class PageEntity(Entity):
    """
    A free-form page of documentation.  Its content is the text of
    its block, minus the C{@page} line.
    """
    kind = 'page'

    def __init__(self, block, page_command, content, context=None):
        Entity.__init__(self, block, context)
        self._page = page_command
        self._content = content

    def get_name(self):
        return self._page.get_name()

    def get_content(self):
        return self._content

class TodoEntity(Entity):
    kind = 'todo'

    def __init__(self, block, todo_command, context=None):
        Entity.__init__(self, block, context)
        self._todo = todo_command
        self._entity = None

    def get_content(self):
        return self._todo.get_content()

    def get_line(self):
        """
        @return: The global line number of the C{@todo} tag.
        """
        return self._todo.get_line_number()

    def get_entity(self):
        """
        @return: The entity that was built from the same block, or
            C{None} if the block produced no entity.
        """
        return self._entity

    def set_entity(self, entity):
        self._entity = entity
