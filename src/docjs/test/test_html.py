# docjs -- Output generation tests
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Regression testing for the renderers and the markup languages.
"""

import os, shutil, tempfile, unittest
from docjs.context import BuildContext
from docjs.docbuilder import build_documentation, parse_blocks
from docjs.docwriter import Renderer
from docjs.docwriter.html import HTMLRenderer
from docjs.docwriter.html_css import STYLESHEETS
from docjs.docwriter.plaintext import PlaintextRenderer
from docjs.markup import normalize_docformat, to_html

def comment(*lines):
    return '/**\n' + ''.join([' * %s\n' % line for line in lines]) + ' */\n'

def build(src):
    context = BuildContext()
    errors = []
    blocks = parse_blocks(src, 'test.js', errors, context)
    return build_documentation(blocks, errors, context)

SRC = (comment('@library Widgets', '@version 2.1', '@brief Things & stuff.') +
       comment('@class Bar', '@param string name The <name>',
               '@brief A bar.') +
       comment('@class Baz', '@extends Bar') +
       comment('@method get', '@memberof Baz', '@return Bar The bar') +
       comment('@function make', '@param int n', '@return Baz',
               '@example', 'make(1);', '@endexample') +
       comment('@page Read Me', 'Some *prose*.') +
       comment('@todo Write more docs') +
       comment('@class Broken', '@return int'))

class HTMLRendererTestCase(unittest.TestCase):
    def setUp(self):
        self.doc = build(SRC)

    def render(self, **options):
        return HTMLRenderer(**options).render(self.doc)

    def test_structure(self):
        html = self.render()
        self.assertTrue(html.startswith('<!DOCTYPE html>'))
        self.assertTrue('<title>Widgets</title>' in html)
        for section in ('pages', 'functions', 'classes', 'todos', 'errors'):
            self.assertTrue('<section id="%s">' % section in html, section)
        self.assertTrue('<section id="classes-bar">' in html)
        self.assertTrue('<section id="pages-read-me">' in html)

    def test_nav(self):
        html = self.render()
        self.assertTrue('<span id="libtitle">Widgets</span>' in html)
        self.assertTrue('<sup id="libversion">2.1</sup>' in html)
        self.assertTrue('<p id="libdesc">Things &amp; stuff.</p>' in html)
        self.assertTrue('<li><a href="#classes-baz">Baz</a></li>' in html)
        self.assertTrue('<li><a href="#functions-make">make</a></li>'
                        in html)
        self.assertTrue('Todos (1)' in html)
        self.assertTrue('Errors (1)' in html)

    def test_class_links(self):
        html = self.render()
        self.assertTrue('Extends <a href="#classes-bar">Bar</a>' in html)
        # Undocumented types are not links.
        self.assertTrue('<span class="datatype">int</span> n' in html)

    def test_escaping(self):
        html = self.render()
        self.assertTrue('The &lt;name&gt;' in html)
        self.assertFalse('The <name>' in html)

    def test_markup(self):
        html = self.render()
        self.assertTrue('<em>prose</em>' in html)
        html = self.render(docformat='plaintext')
        self.assertTrue('<pre class="plaintext">Some *prose*.</pre>' in html)

    def test_hide_errors_and_todos(self):
        html = self.render(show_errors=False, show_todos=False)
        self.assertFalse('id="errors"' in html)
        self.assertFalse('Errors (' in html)
        self.assertFalse('id="todos"' in html)

    def test_source_url(self):
        html = self.render(format_source_url=lambda f, l: '%s#L%d' % (f, l))
        # Bar's block starts on line 6.
        self.assertTrue('<a href="test.js#L6">test.js#L6</a>' in html)
        html = self.render(show_source_url=False)
        self.assertFalse('<h3>Source</h3>' in html)

    def test_no_library(self):
        doc = build(comment('@todo one') + comment('@class Solo'))
        html = HTMLRenderer(title='My API', description='Hi').render(doc)
        self.assertTrue('<title>My API</title>' in html)
        self.assertTrue('<p id="libdesc">Hi</p>' in html)
        # No pages, but classes and todos are still listed.
        self.assertTrue('<h2>Classes</h2>' in html)
        self.assertTrue('Todos (1)' in html)
        self.assertFalse('<h2>Pages</h2>' in html)

    def test_errors_section(self):
        html = self.render()
        error = self.doc.errors[0]
        self.assertTrue('<div id="errors-%d"><h2>Error %d</h2>'
                        '<p>test.js on line %d</p>' %
                        (error.id, error.id, error.line_number) in html)

class HTMLWriterTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_write(self):
        target = os.path.join(self.tmpdir, 'out', 'html')
        filename = HTMLRenderer().write(build(SRC), target)
        self.assertEqual(filename, os.path.join(target, 'index.html'))
        self.assertTrue(os.path.isfile(filename))
        css = open(os.path.join(target, 'docjs.css')).read()
        self.assertEqual(css, STYLESHEETS['default'][0])

    def test_custom_css(self):
        cssfile = os.path.join(self.tmpdir, 'mine.css')
        out = open(cssfile, 'w')
        out.write('body { color: red; }\n')
        out.close()
        HTMLRenderer(css=cssfile).write(build(SRC), self.tmpdir)
        css = open(os.path.join(self.tmpdir, 'docjs.css')).read()
        self.assertEqual(css, 'body { color: red; }\n')

    def test_derived_css(self):
        for name in ('black', 'grayscale'):
            target = os.path.join(self.tmpdir, name)
            HTMLRenderer(css=name).write(build(SRC), target)
            css = open(os.path.join(target, 'docjs.css')).read()
            self.assertEqual(css, STYLESHEETS[name][0])

class StylesheetTestCase(unittest.TestCase):
    def test_selectors_are_kept(self):
        for (name, (css, description)) in STYLESHEETS.items():
            self.assertTrue('#content ' in css, name)
            self.assertTrue('#libversion ' in css, name)
            self.assertFalse('$' in css, name)

    def test_black(self):
        css = STYLESHEETS['black'][0]
        self.assertTrue('background: #000000; color: #ffffff;' in css)

    def test_grayscale(self):
        css = STYLESHEETS['grayscale'][0]
        # nav_bg is #e8f0f8 in the white sheet.
        self.assertTrue('background: #f0f0f0; color: #000000;' in css)
        self.assertFalse('#e8f0f8' in css)

class PlaintextRendererTestCase(unittest.TestCase):
    def test_render(self):
        text = PlaintextRenderer().render(build(SRC))
        self.assertTrue(text.startswith('Widgets 2.1\n===========\n'))
        self.assertTrue('class Bar(string name)\n' in text)
        self.assertTrue('function Baz make(int n)\n' in text)
        self.assertTrue('  Extends Bar\n' in text)
        self.assertTrue('    - Bar get()\n' in text)
        self.assertTrue('TODOS (1)\n' in text)
        self.assertTrue('ERRORS (1)\n' in text)
        self.assertTrue('  Source: test.js\n' in text)

    def test_options(self):
        text = PlaintextRenderer(show_errors=False, show_todos=False,
                                 show_source_url=False).render(build(SRC))
        self.assertFalse('ERRORS' in text)
        self.assertFalse('TODOS' in text)
        self.assertFalse('Source:' in text)

class RendererTestCase(unittest.TestCase):
    def test_abstract(self):
        self.assertRaises(NotImplementedError, Renderer().render, None)

class MarkupTestCase(unittest.TestCase):
    def test_plaintext(self):
        self.assertEqual(to_html('a < b', 'plaintext'),
                         '<pre class="plaintext">a &lt; b</pre>')

    def test_markdown(self):
        self.assertTrue('<em>x</em>' in to_html('*x*', 'markdown'))
        self.assertTrue('<code>' in to_html('```\ncode()\n```', 'md'))

    def test_restructuredtext(self):
        self.assertTrue('<em>x</em>' in to_html('*x*', 'restructuredtext'))

    def test_unknown(self):
        self.assertEqual(normalize_docformat('nonsense'), None)
        self.assertEqual(to_html('*x*', 'nonsense'),
                         '<pre class="plaintext">*x*</pre>')
        self.assertEqual(to_html(None), '')

    def test_aliases(self):
        self.assertEqual(normalize_docformat('RST'), 'restructuredtext')
        self.assertEqual(normalize_docformat(None), 'markdown')

def testsuite():
    load = unittest.defaultTestLoader.loadTestsFromTestCase
    return unittest.TestSuite([ load(globals()[k])
        for k in globals().keys() if k.endswith('TestCase') ])

if __name__ == '__main__':
    unittest.main()
