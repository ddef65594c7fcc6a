# docjs -- Plaintext output generation
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Plaintext output generation.
"""
__docformat__ = 'epytext en'

from docjs.docwriter import Renderer
from docjs.util import wordwrap

class PlaintextRenderer(Renderer):
    """
    Render a L{Documentation<docjs.docindex.Documentation>} as plain
    text, suitable for reading in a terminal.
    """
    def render(self, doc):
        self._doc = doc
        out = []
        self._write_title(out)
        for page in doc.pages:
            self._write_page(out, page)
        for function in doc.functions:
            self._write_function(out, function)
        for cls in doc.classes:
            self._write_class(out, cls)
        if self.option('show_todos', True) and doc.todos:
            self._write_section(out, 'TODOS (%d)' % len(doc.todos))
            for todo in doc.todos:
                out.append('  %s line %s: %s\n' % (todo.get_filename(),
                                                  todo.get_line(),
                                                  todo.get_content()))
        if self.option('show_errors', True) and doc.errors:
            self._write_section(out, 'ERRORS (%d)' % len(doc.errors))
            for error in doc.errors:
                out.append('  Error %d: %s on line %s\n' %
                           (error.id, error.filename, error.line_number))
                out.append(self._indent(error.message.rstrip(), 4))
        return ''.join(out)

    def _write_title(self, out):
        library = self._doc.library
        if library is not None:
            title = library.get_name()
            if library.get_version():
                title += ' ' + library.get_version()
            descr = library.get_brief()
        else:
            title = self.option('title') or 'API Documentation'
            descr = self.option('description')
        out.append('%s\n%s\n' % (title, '='*len(title)))
        if descr:
            out.append(wordwrap(descr))
        out.append('\n')

    def _write_section(self, out, heading):
        out.append('%s\n%s\n' % (heading, '-'*len(heading)))

    def _write_page(self, out, page):
        self._write_section(out, page.get_name())
        out.append(page.get_content().rstrip() + '\n\n')

    def _write_function(self, out, f):
        sig = '%s(%s)' % (f.get_name(), self._params(f))
        if f.get_return_data_type():
            sig = '%s %s' % (f.get_return_data_type(), sig)
        self._write_section(out, 'function ' + sig)
        self._write_text(out, f.get_brief())
        self._write_text(out, f.get_description())
        self._write_param_list(out, f)
        if f.get_return_description():
            out.append('  Returns:\n')
            out.append(wordwrap(f.get_return_description(), 6))
        self._write_examples(out, f)
        self._write_source(out, f)
        out.append('\n')

    def _write_class(self, out, c):
        self._write_section(out, 'class %s(%s)' % (c.get_name(),
                                                  self._params(c)))
        bases = self._doc.get_inheritance_list(c)[1:]
        if bases:
            out.append('  Extends %s\n' % ' -> '.join(bases))
        self._write_text(out, c.get_brief())
        self._write_text(out, c.get_description())
        self._write_param_list(out, c)
        if c.num_methods():
            out.append('  Methods:\n')
            for method in c.get_methods():
                sig = '%s(%s)' % (method.get_name(), self._params(method))
                if method.get_return_data_type():
                    sig = '%s %s' % (method.get_return_data_type(), sig)
                out.append('    - %s\n' % sig)
                if method.get_brief():
                    out.append(wordwrap(method.get_brief(), 8))
        if c.num_properties():
            out.append('  Properties:\n')
            for k in range(c.num_properties()):
                out.append('    - %s %s\n' % (c.get_property_data_type(k),
                                              c.get_property_name(k)))
                if c.get_property_brief(k):
                    out.append(wordwrap(c.get_property_brief(k), 8))
        self._write_examples(out, c)
        self._write_source(out, c)
        out.append('\n')

    def _params(self, entity):
        return ', '.join(['%s %s' % (entity.get_param_data_type(k),
                                     entity.get_param_name(k))
                          for k in range(entity.num_params())])

    def _write_text(self, out, text):
        if text:
            out.append(wordwrap(text, 2))

    def _write_param_list(self, out, entity):
        if not entity.num_params(): return
        out.append('  Parameters:\n')
        for k in range(entity.num_params()):
            descr = entity.get_param_description(k)
            line = '    - %s (%s)' % (entity.get_param_name(k),
                                      entity.get_param_data_type(k))
            if descr:
                line += ': ' + descr
            out.append(line + '\n')

    def _write_examples(self, out, entity):
        for j in range(entity.num_examples()):
            out.append('  Example %d:\n' % (j+1))
            out.append(self._indent(entity.get_example_text(j), 4))

    def _write_source(self, out, entity):
        if self.option('show_source_url', True):
            out.append('  Source: %s\n' % self.source_url(entity))

    def _indent(self, text, indent):
        return ''.join([' '*indent + line + '\n'
                        for line in text.split('\n')])
