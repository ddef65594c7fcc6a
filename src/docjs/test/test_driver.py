# docjs -- Driver tests
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Regression testing for L{docjs.driver}.
"""

import unittest
from docjs.docwriter.html import HTMLRenderer
from docjs.docwriter.plaintext import PlaintextRenderer
from docjs.driver import DEFAULT_OPTIONS, build_doc, generate, \
     get_renderer, make_options
from docjs.loader import FileLoader, LoadError

FILES = {
    'lib.js': ('/**\n'
               ' * @library Shapes\n'
               ' * @version 0.1\n'
               ' */\n'),
    'square.js': ('/**\n'
                  ' * @class Square\n'
                  ' * @param number side\n'
                  ' */\n'
                  'function Square(side) {}\n'
                  'this.side = side; /// @property number side\n'),
    }

class FakeLoader(FileLoader):
    def load(self, name):
        if name not in FILES:
            raise LoadError('No such file')
        return FILES[name]

class OptionsTestCase(unittest.TestCase):
    def test_defaults(self):
        options = make_options()
        self.assertEqual(options, DEFAULT_OPTIONS)
        self.assertFalse(options is DEFAULT_OPTIONS)

    def test_aliases(self):
        options = make_options(showErrors=False, show_todos=False,
                               fileLoader='x')
        self.assertEqual(options['show_errors'], False)
        self.assertEqual(options['show_todos'], False)
        self.assertEqual(options['file_loader'], 'x')

    def test_unknown_options(self):
        options = make_options(colour='blue')
        self.assertFalse('colour' in options)

    def test_source_url_default(self):
        options = make_options(format_source_url=None)
        self.assertEqual(options['format_source_url']('a.js', 3), 'a.js')

class BuildDocTestCase(unittest.TestCase):
    def test_build_doc(self):
        doc = build_doc(['lib.js', 'square.js'], file_loader=FakeLoader())
        self.assertEqual(doc.library.get_name(), 'Shapes')
        square = doc.name_to_class('Square')
        self.assertEqual(square.get_property_name(0), 'side')
        self.assertEqual(square.get_filename(), 'square.js')
        self.assertEqual(doc.errors, [])

    def test_missing_file(self):
        doc = build_doc(['square.js', 'nope.js'], fileLoader=FakeLoader())
        self.assertEqual(len(doc.classes), 1)
        self.assertEqual([e.message for e in doc.errors],
                         ['Could not load file nope.js: No such file'])

    def test_ids_per_run(self):
        first = build_doc(['square.js'], file_loader=FakeLoader())
        second = build_doc(['square.js'], file_loader=FakeLoader())
        self.assertEqual(first.classes[0].global_id,
                         second.classes[0].global_id)

class GenerateTestCase(unittest.TestCase):
    def test_default_renderer(self):
        self.assertTrue(isinstance(get_renderer(make_options()),
                                   HTMLRenderer))

    def test_generate_html(self):
        html = generate(['lib.js', 'square.js'], file_loader=FakeLoader())
        self.assertTrue('<title>Shapes</title>' in html)
        self.assertTrue('<section id="classes-square">' in html)

    def test_generate_text(self):
        text = generate(['square.js'], file_loader=FakeLoader(),
                        renderer=PlaintextRenderer(title='Geometry'))
        self.assertTrue(text.startswith('Geometry\n========\n'))
        self.assertTrue('class Square(number side)' in text)

def testsuite():
    load = unittest.defaultTestLoader.loadTestsFromTestCase
    return unittest.TestSuite([ load(globals()[k])
        for k in globals().keys() if k.endswith('TestCase') ])

if __name__ == '__main__':
    unittest.main()
