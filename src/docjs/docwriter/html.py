#
# html.py: docjs HTML output generator
# Edward Loper
#
# $Id$
#

"""
Documentation=>HTML converter.

The whole of the documentation is written to a single page,
C{index.html}, which consists of a navigation column and a content
column.  The content column has one section for each kind of entity:

  - Pages: free-form documentation pages.
  - Functions: signature, description, parameters, return value,
    examples and source link for each function.
  - Classes: inheritance chain, constructor, method and property
    overviews, examples and source link for each class.
  - Todos and Errors: listings that can be turned off with the
    C{show_todos} and C{show_errors} options.

The page uses a CSS stylesheet, C{docjs.css}.  If you want to use
your own CSS file, pass its name as the C{css} option, or just
overwrite the one produced by docjs.
"""
__docformat__ = 'epytext en'

import codecs
import os
import os.path

from docjs import log
from docjs.docwriter import Renderer
from docjs.docwriter.html_css import STYLESHEETS
from docjs.markup import to_html
from docjs.util import quote_html, to_nice

class HTMLRenderer(Renderer):
    """
    Documentation=>HTML converter.

    @param options: The run's options.  The options used by this
        renderer are C{title}, C{description}, C{show_source_url},
        C{format_source_url}, C{show_errors}, C{show_todos},
        C{docformat} and C{css}.
    """
    def __init__(self, **options):
        Renderer.__init__(self, **options)
        self._doc = None

    def write(self, doc, directory):
        """
        Write the documentation for C{doc} to C{directory}, as
        C{index.html} and C{docjs.css}.  The directory is created if
        it does not exist.

        @return: The name of the HTML file that was written.
        """
        if directory in ('', None): directory = '.'
        if not os.path.exists(directory):
            os.makedirs(directory)
        filename = os.path.join(directory, 'index.html')
        log.info('Writing %s' % filename)
        out = codecs.open(filename, 'w', 'utf-8')
        try:
            out.write(self.render(doc))
        finally:
            out.close()
        self._write_css(directory)
        return filename

    def _write_css(self, directory):
        css = self.option('css') or 'default'
        if css in STYLESHEETS:
            content = STYLESHEETS[css][0]
        elif os.path.isfile(css):
            stream = codecs.open(css, 'r', 'utf-8')
            try:
                content = stream.read()
            finally:
                stream.close()
        else:
            log.warning('Unknown stylesheet %r; using the default.' % css)
            content = STYLESHEETS['default'][0]
        cssfile = codecs.open(os.path.join(directory, 'docjs.css'), 'w',
                              'utf-8')
        try:
            cssfile.write(content)
        finally:
            cssfile.close()

    def render(self, doc):
        """
        @return: A complete HTML page documenting C{doc}.
        """
        self._doc = doc
        try:
            return (self._header() + '<article>' + self._nav() +
                    self._content() + '</article>' + self._footer() +
                    '</body>\n</html>\n')
        finally:
            self._doc = None

    ##--------------------------
    ## Page frame
    ##--------------------------

    def _header(self):
        title = self.option('title') or 'API Documentation'
        if self._doc.library is not None:
            title = self._doc.library.get_name()
        return ('<!DOCTYPE html>\n<html>\n<head>\n'
                '<meta charset="utf-8">\n<title>%s</title>\n'
                '<link rel="stylesheet" href="docjs.css" type="text/css">\n'
                '</head>\n<body>\n' % quote_html(title))

    def _footer(self):
        return ('<footer><p>Documentation generated by '
                '<a href="http://epydoc.sf.net">docjs</a>.</p></footer>')

    def _nav(self):
        doc = self._doc
        if doc.library is not None:
            title = doc.library.get_name()
            version = doc.library.get_version()
            desc = doc.library.get_brief()
        else:
            title = self.option('title') or 'API Documentation'
            version = None
            desc = self.option('description')
        out = ['<nav>',
               '<div id="logo"><h1><span id="libtitle">%s</span>'
               '<sup id="libversion">%s</sup></h1>'
               '<p id="libdesc">%s</p></div>' %
               (quote_html(title), quote_html(version), quote_html(desc))]

        for (heading, section, entities) in (
            ('Pages', 'pages', doc.pages),
            ('Functions', 'functions', doc.functions),
            ('Classes', 'classes', doc.classes)):
            if not entities: continue
            out.append('<h2>%s</h2><ul>' % heading)
            for entity in entities:
                out.append('<li><a href="#%s-%s">%s</a></li>' %
                           (section, to_nice(entity.get_name()),
                            quote_html(entity.get_name())))
            out.append('</ul>')

        if self.option('show_todos', True) and doc.todos:
            out.append('<h2><a href="#todos">Todos (%d)</a></h2>' %
                       len(doc.todos))
        if self.option('show_errors', True) and doc.errors:
            out.append('<h2><a href="#errors">Errors (%d)</a></h2>' %
                       len(doc.errors))
        out.append('</nav>')
        return ''.join(out)

    def _content(self):
        return ('<div id="content">' + self._pages() + self._functions() +
                self._classes() + self._todos() + self._errors() +
                '</div>')

    ##--------------------------
    ## Sections
    ##--------------------------

    def _pages(self):
        if not self._doc.pages:
            return ''
        out = ['<section id="pages"><h1>Pages</h1>']
        for page in self._doc.pages:
            out.append('<section id="pages-%s"><h2>%s</h2>%s</section>' %
                       (to_nice(page.get_name()),
                        quote_html(page.get_name()),
                        self._markup(page.get_content())))
        out.append('</section>')
        return ''.join(out)

    def _functions(self):
        if not self._doc.functions:
            return ''
        out = ['<section id="functions"><h1>Functions</h1>']
        for f in self._doc.functions:
            out.append('<section id="functions-%s"><h2>%s</h2>' %
                       (to_nice(f.get_name()), quote_html(f.get_name())))
            if f.get_brief():
                out.append('<p class="brief">%s</p>' %
                           quote_html(f.get_brief()))

            out.append('<h3>Description</h3>')
            out.append('<span class="signature">%s</span>' %
                       self._signature(f.get_name(), f,
                                       f.get_return_data_type()))
            if f.get_description():
                out.append('<p class="description">%s</p>' %
                           quote_html(f.get_description()))

            if f.num_params() > 0:
                out.append('<h3>Parameters</h3>')
                out.append(self._param_table(f))

            if f.get_return_description():
                out.append('<h3>Return value</h3><p>%s</p>' %
                           quote_html(f.get_return_description()))

            out.append(self._examples(f))
            out.append(self._source(f))
            out.append('</section>')
        out.append('</section>')
        return ''.join(out)

    def _classes(self):
        doc = self._doc
        if not doc.classes:
            return ''
        out = ['<section id="classes"><h1>Classes</h1>']
        for c in doc.classes:
            out.append('<section id="classes-%s"><h2>%s</h2>' %
                       (to_nice(c.get_name()), quote_html(c.get_name())))
            if c.get_brief():
                out.append('<p class="brief">%s</p>' %
                           quote_html(c.get_brief()))

            bases = doc.get_inheritance_list(c)[1:]
            if bases:
                out.append('<p>Extends %s</p>' %
                           ' &rarr; '.join([self._name_to_link(b)
                                            for b in bases]))

            if c.get_description():
                out.append('<p class="description">%s</p>' %
                           quote_html(c.get_description()))

            out.append('<h3>Constructor</h3><p>%s</p>' %
                       self._signature(c.get_name(), c))

            if c.num_methods() > 0:
                out.append('<h3>Methods</h3><table class="member_overview">')
                for k in range(c.num_methods()):
                    method = c.get_method(k)
                    out.append(
                        '<tr><td class="datatype">%s</td><td>'
                        '<span class="methodName">%s</span> ( %s )</td></tr>'
                        '<tr><td></td><td class="brief">%s</td></tr>' %
                        (self._name_to_link(method.get_return_data_type()),
                         quote_html(method.get_name()),
                         self._param_list(method),
                         quote_html(method.get_brief())))
                out.append('</table>')

            if c.num_properties() > 0:
                out.append('<h3>Properties</h3>'
                           '<table class="member_overview">')
                for k in range(c.num_properties()):
                    out.append(
                        '<tr><td class="datatype">%s</td>'
                        '<td class="propertyName">%s</td>'
                        '<td class="brief">%s</td></tr>' %
                        (self._name_to_link(c.get_property_data_type(k)),
                         quote_html(c.get_property_name(k)),
                         quote_html(c.get_property_brief(k))))
                out.append('</table>')

            out.append(self._examples(c))
            out.append(self._source(c))
            out.append('</section>')
        out.append('</section>')
        return ''.join(out)

    def _todos(self):
        todos = self._doc.todos
        if not (self.option('show_todos', True) and todos):
            return ''
        out = ['<section id="todos"><h1>Todos (%d)</h1>' % len(todos)]
        for todo in todos:
            out.append('<div id="todos-%d"><h2>%s line %s</h2>'
                       '<p>%s</p></div>' %
                       (todo.id, quote_html(todo.get_filename()),
                        todo.get_line(), quote_html(todo.get_content())))
        out.append('</section>')
        return ''.join(out)

    def _errors(self):
        errors = self._doc.errors
        if not (self.option('show_errors', True) and errors):
            return ''
        out = ['<section id="errors"><h1>Errors (%d)</h1>' % len(errors)]
        for error in errors:
            out.append('<div id="errors-%d"><h2>Error %d</h2>'
                       '<p>%s on line %s</p><pre>%s</pre></div>' %
                       (error.id, error.id, quote_html(error.filename),
                        error.line_number, quote_html(error.message)))
        out.append('</section>')
        return ''.join(out)

    ##--------------------------
    ## Helpers
    ##--------------------------

    def _markup(self, text):
        return to_html(text, self.option('docformat', 'markdown'))

    def _name_to_link(self, name):
        """
        @return: C{name}, as a link to the class's section if C{name}
            is the name of a documented class.
        """
        if not name:
            return ''
        if self._doc.name_to_class(name) is not None:
            return '<a href="#classes-%s">%s</a>' % (to_nice(name),
                                                    quote_html(name))
        return quote_html(name)

    def _param_list(self, entity):
        params = []
        for k in range(entity.num_params()):
            params.append('<span class="datatype">%s</span> %s' %
                          (self._name_to_link(entity.get_param_data_type(k)),
                           quote_html(entity.get_param_name(k))))
        return ' , '.join(params)

    def _signature(self, name, entity, return_type=None):
        sig = '%s ( %s )' % (quote_html(name), self._param_list(entity))
        if return_type:
            sig = '<span class="datatype">%s</span> %s' % (
                self._name_to_link(return_type), sig)
        return sig

    def _param_table(self, entity):
        out = ['<table class="member_overview">']
        for k in range(entity.num_params()):
            out.append('<tr><td class="datatype">%s</td>'
                       '<td class="paramName">%s</td>'
                       '<td class="brief">%s</td></tr>' %
                       (self._name_to_link(entity.get_param_data_type(k)),
                        quote_html(entity.get_param_name(k)),
                        quote_html(entity.get_param_description(k))))
        out.append('</table>')
        return ''.join(out)

    def _examples(self, entity):
        out = []
        for j in range(entity.num_examples()):
            out.append('<h3>Example %d</h3><div>%s</div>' %
                       (j+1, self._markup(entity.get_example_text(j))))
        return ''.join(out)

    def _source(self, entity):
        if not self.option('show_source_url', True):
            return ''
        url = quote_html(self.source_url(entity))
        return '<h3>Source</h3><p><a href="%s">%s</a></p>' % (url, url)
