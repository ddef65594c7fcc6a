# docjs -- Documentation index
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
The L{Documentation} index: the collection of every entity built in a
run, with name lookups and inheritance queries.
"""
__docformat__ = 'epytext en'

from docjs import log

class Documentation:
    """
    The result of assembling a set of comment blocks.

    @ivar library: The documented library's L{LibraryEntity
        <docjs.entity.LibraryEntity>}, or C{None}.
    @ivar pages: The list of L{PageEntity<docjs.entity.PageEntity>}s.
    @ivar classes: The list of L{ClassEntity<docjs.entity.ClassEntity>}s.
    @ivar functions: The list of L{FunctionEntity
        <docjs.entity.FunctionEntity>}s.
    @ivar methods: The list of every L{MethodEntity
        <docjs.entity.MethodEntity>}, including those that could not be
        attached to a class.
    @ivar properties: The list of every L{PropertyEntity
        <docjs.entity.PropertyEntity>}.
    @ivar todos: The list of L{TodoEntity<docjs.entity.TodoEntity>}s.
    @ivar files: The list of L{FileEntity<docjs.entity.FileEntity>}s.
    @ivar errors: The list of L{ErrorReport<docjs.entity.ErrorReport>}s.
    """
    def __init__(self):
        self.library = None
        self.pages = []
        self.classes = []
        self.functions = []
        self.methods = []
        self.properties = []
        self.todos = []
        self.files = []
        self.errors = []
        self._class_index = {}

    def update(self):
        """
        Rebuild the name index and sort the pages, classes and
        functions by name.  This must be called after entities are
        added, and before the name lookups are used.
        """
        self._class_index = {}
        for cls in self.classes:
            name = cls.get_name()
            if name in self._class_index:
                log.warning('Class %s is defined more than once; '
                            'using the definition on line %s of %s.' %
                            (name, cls.get_line_number(),
                             cls.get_filename() or '??'))
            self._class_index[name] = cls
        self.pages.sort(key=lambda e: e.get_name())
        self.classes.sort(key=lambda e: e.get_name())
        self.functions.sort(key=lambda e: e.get_name())

    def name_to_class(self, name):
        """
        @return: The class with the given name, or C{None}.
        """
        return self._class_index.get(name)

    def name_to_entity(self, name):
        """
        @return: The entity with the given name, or C{None}.  Only
            classes are indexed by name.
        """
        return self._class_index.get(name)

    def get_inheritance_list(self, cls):
        """
        @return: The names of C{cls} and of the classes it extends,
            most derived first.  The list ends at the first class that
            does not extend another, that extends a class that was not
            documented, or that would repeat a name already in the
            list.
        """
        names = []
        visited = set()
        while cls is not None and cls.get_name() not in visited:
            visited.add(cls.get_name())
            names.append(cls.get_name())
            parent = cls.get_extended_class_name()
            if parent is None:
                break
            cls = self.name_to_class(parent)
        return names

    def find_inheritance_cycles(self):
        """
        @return: A list of classes whose chain of C{@extends} leads
            back to the class itself.
        """
        cyclic = []
        for cls in self.classes:
            names = self.get_inheritance_list(cls)
            last = self.name_to_class(names[-1])
            if (last is not None and
                last.get_extended_class_name() == cls.get_name()):
                cyclic.append(cls)
        return cyclic

    def __repr__(self):
        return ('<Documentation: %d classes, %d functions, %d pages, '
                '%d errors>' % (len(self.classes), len(self.functions),
                                len(self.pages), len(self.errors)))
