# docjs -- Documentation assembly
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Construct a L{Documentation} index from the comment blocks of a set
of source files.

Assembly proceeds in two stages:

    1. I{Classification}: each block is classified by
       L{classify_block}, and an entity of the corresponding kind is
       built from its commands.  Blocks are handled in order, so that
       a C{@method} or C{@property} block with no C{@memberof} can be
       attached to the class that was defined most recently.
    2. I{Linking}: the index is updated, methods and properties are
       attached to their classes, and inheritance cycles are
       reported.

Problems found along the way are recorded as L{ErrorReport}s; they
never interrupt the assembly.

@group Entry Points: build_documentation, parse_blocks
"""
__docformat__ = 'epytext en'

######################################################################
## Imports
######################################################################

from docjs import log
from docjs.block import extract_blocks
from docjs.command import MemberofCommand
from docjs.context import get_context
from docjs.docindex import Documentation
from docjs.entity import *
from docjs.tagparser import parse_commands

######################################################################
## Parsing
######################################################################

def parse_blocks(src, filename='', errors=None, context=None):
    """
    Extract the comment blocks of a source file, and run the tag
    parsers over each of them.

    @param src: The text of the source file.
    @param filename: The name of the source file.
    @param errors: A list that L{ErrorReport}s for malformed tags are
        appended to.
    @return: The list of parsed L{Block<docjs.block.Block>}s.
    """
    if errors is None:
        errors = []
    context = get_context(context)
    blocks = extract_blocks(src, filename, context)
    for block in blocks:
        parse_commands(block, errors)
    log.debug('Found %d comment blocks in %s' % (len(blocks),
                                                  filename or '??'))
    return blocks

######################################################################
## Classification
######################################################################

BLOCK_KINDS = ('page', 'class', 'file', 'library', 'function',
               'method', 'property')
"""The kinds of block that produce an entity, in order of priority."""

def classify_block(block):
    """
    @return: The first kind in L{BLOCK_KINDS} for which C{block} has a
        command, or C{None} if it has none of them.
    """
    for kind in BLOCK_KINDS:
        if block.has_command(kind):
            return kind
    return None

######################################################################
## Assembly
######################################################################

def build_documentation(blocks, errors=None, context=None):
    """
    Assemble a L{Documentation} from a list of parsed blocks.

    @param blocks: The parsed blocks of every source file, in source
        order.
    @param errors: A list of L{ErrorReport}s that were generated while
        the blocks were parsed.  New reports are appended to it, and
        it becomes the documentation's C{errors} list.
    @param context: The run's L{BuildContext<docjs.context.BuildContext>}.
    @rtype: L{Documentation}
    """
    if errors is None:
        errors = []
    if context is None and blocks:
        context = blocks[0].context
    context = get_context(context)

    doc = Documentation()
    doc.errors = errors

    last_class = None
    for block in blocks:
        last_class = _build_block(doc, block, last_class, context)

    _link(doc, context)
    report_errors(doc.errors)
    return doc

def _build_block(doc, block, last_class, context):
    """
    Build the entities for a single block.

    @return: The most recently defined class, after this block.
    """
    kind = classify_block(block)
    entity = None
    if kind is not None:
        builder = _BUILDERS[kind]
        entity = builder(doc, block, last_class, context)
        if kind == 'class' and entity is not None:
            last_class = entity

    for todo in block.get_commands('todo'):
        todo_entity = TodoEntity(block, todo, context)
        todo_entity.set_entity(entity)
        doc.todos.append(todo_entity)

    _report_residual_lines(doc, block, context)
    return last_class

def _error(doc, block, line_number, message, context):
    doc.errors.append(ErrorReport(block.filename, line_number, message,
                                  context))

def _build_page(doc, block, last_class, context):
    lines = []
    for (i, line) in block.get_unparsed_lines():
        lines.append(line)
        block.mark_line_as_parsed(i)
    page = PageEntity(block, block.first_command('page'),
                      '\n'.join(lines), context)
    doc.pages.append(page)
    return page

def _build_class(doc, block, last_class, context):
    class_command = block.first_command('class')
    name = class_command.get_name()
    if block.has_command('return'):
        _error(doc, block, class_command.get_line_number(),
               '@class blocks may not contain @return', context)
        return None
    extends = block.first_command('extends')
    if extends is not None and extends.get_class_name() == name:
        _error(doc, block, extends.get_line_number(),
               'A class may not extend itself!', context)
        return None
    cls = ClassEntity(block, class_command,
                      block.get_commands('param'), extends,
                      block.first_command('brief'),
                      block.first_command('description'),
                      block.get_commands('example'), context)
    doc.classes.append(cls)
    return cls

def _build_file(doc, block, last_class, context):
    # File blocks only describe the source file; they are listed, but
    # are not documented entities in their own right.
    entity = FileEntity(block, block.first_command('file'), context)
    doc.files.append(entity)
    return None

def _build_library(doc, block, last_class, context):
    library = LibraryEntity(block, block.first_command('library'),
                            block.first_command('version'),
                            block.first_command('brief'),
                            block.first_command('description'), context)
    if doc.library is not None:
        _error(doc, block, block.first_command('library').get_line_number(),
               'Only one @library may be documented; %s replaces %s.' %
               (library.get_name(), doc.library.get_name()), context)
    doc.library = library
    return library

def _build_function(doc, block, last_class, context):
    function = FunctionEntity(block, block.first_command('function'),
                              block.get_commands('param'),
                              block.first_command('return'),
                              block.first_command('brief'),
                              block.first_command('description'),
                              block.get_commands('example'), context)
    doc.functions.append(function)
    return function

def _memberof_commands(block, last_class):
    """
    @return: The block's C{@memberof} commands; or, if it has none and
        a class has been defined, a single command naming that class.
        The block itself is not changed.
    """
    memberof = block.get_commands('memberof')
    if not memberof and last_class is not None:
        memberof = [MemberofCommand(block, last_class.get_name())]
    return memberof

def _build_method(doc, block, last_class, context):
    method_command = block.first_command('method')
    memberof = _memberof_commands(block, last_class)
    if not memberof:
        log.warning('%s, line %s: method %s does not belong to any '
                    'class; it will not be documented.' %
                    (block.filename or '??', block.line_number,
                     method_command.get_name()))
        return None
    method = MethodEntity(block, method_command, memberof[0],
                          block.get_commands('param'),
                          block.first_command('brief'),
                          block.first_command('return'), context)
    doc.methods.append(method)
    return method

def _build_property(doc, block, last_class, context):
    property_command = block.first_command('property')
    memberof = _memberof_commands(block, last_class)
    if len(memberof) != 1:
        _error(doc, block, property_command.get_line_number(),
               'A @property block requires exactly 1 @memberof command, '
               'got %d.' % len(memberof), context)
        return None
    prop = PropertyEntity(block, property_command, memberof[0],
                          block.first_command('brief'),
                          block.first_command('description'), context)
    doc.properties.append(prop)
    return prop

_BUILDERS = {
    'page': _build_page,
    'class': _build_class,
    'file': _build_file,
    'library': _build_library,
    'function': _build_function,
    'method': _build_method,
    'property': _build_property,
    }

def _report_residual_lines(doc, block, context):
    residual = block.get_residual_lines()
    if not residual:
        return
    message = 'There was unparsed code:\n\n'
    for (line_number, line) in residual:
        message += 'Line %d: %s\n' % (line_number, line)
    _error(doc, block, residual[0][0], message, context)

######################################################################
## Linking
######################################################################

def _link(doc, context):
    doc.update()

    for method in doc.methods:
        cls = doc.name_to_class(method.get_class_name())
        if cls is None:
            _error(doc, method.get_block(),
                   method.get_block().line_number,
                   'Could not add method %s to the class %s, could not '
                   'find that class.' % (method.get_name(),
                                         method.get_class_name()),
                   context)
        else:
            cls.add_method(method)

    for prop in doc.properties:
        cls = doc.name_to_class(prop.get_class_name())
        if cls is None:
            _error(doc, prop.get_block(), prop.get_block().line_number,
                   'Could not add property %s to the class %s, could not '
                   'find that class.' % (prop.get_name(),
                                         prop.get_class_name()),
                   context)
        else:
            cls.add_property(prop)

    for cls in doc.find_inheritance_cycles():
        _error(doc, cls.get_block(), cls.get_line_number(),
               'The class %s inherits from itself: %s' %
               (cls.get_name(),
                ' -> '.join(doc.get_inheritance_list(cls) +
                            [cls.get_name()])),
               context)

######################################################################
## Error Reporting
######################################################################

def report_errors(errors):
    """
    Echo a list of L{ErrorReport}s to the log, grouped by file.
    """
    if not errors:
        return
    by_file = {}
    filenames = []
    for error in errors:
        if error.filename not in by_file:
            by_file[error.filename] = []
            filenames.append(error.filename)
        by_file[error.filename].append(error)
    for filename in filenames:
        log.start_block('In %s:' % (filename or '??'))
        for error in by_file[filename]:
            log.source_warning('Line %s: %s' % (error.line_number,
                                                   error.message.rstrip()))
        log.end_block()
