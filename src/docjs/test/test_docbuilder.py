# docjs -- Documentation assembly tests
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Regression testing for the assembly of entities from comment blocks.
"""

import unittest
from docjs.block import Block
from docjs.context import BuildContext
from docjs.docbuilder import build_documentation, classify_block, \
     parse_blocks
from docjs.tagparser import parse_commands

def comment(*lines):
    return '/**\n' + ''.join([' * %s\n' % line for line in lines]) + ' */\n'

def build(src, filename='test.js'):
    context = BuildContext()
    errors = []
    blocks = parse_blocks(src, filename, errors, context)
    return build_documentation(blocks, errors, context)

class ClassTestCase(unittest.TestCase):
    def test_class_with_return(self):
        doc = build(comment('@class Foo', '@return int'))
        self.assertEqual(doc.classes, [])
        self.assertEqual([e.message for e in doc.errors],
                         ['@class blocks may not contain @return'])

    def test_class_extends_itself(self):
        doc = build(comment('@class Foo', '@extends Foo'))
        self.assertEqual(doc.classes, [])
        self.assertEqual([e.message for e in doc.errors],
                         ['A class may not extend itself!'])

    def test_inheritance(self):
        doc = build(comment('@class A') +
                    comment('@class B', '@extends A'))
        b = doc.name_to_class('B')
        self.assertEqual(doc.get_inheritance_list(b), ['B', 'A'])
        self.assertEqual(b.get_extended_class_name(), 'A')
        self.assertEqual(doc.errors, [])

    def test_inheritance_cycle(self):
        doc = build(comment('@class C', '@extends D') +
                    comment('@class D', '@extends C'))
        c = doc.name_to_class('C')
        self.assertEqual(doc.get_inheritance_list(c), ['C', 'D'])
        self.assertEqual(len(doc.errors), 2)
        for error in doc.errors:
            self.assertTrue(error.message.startswith('The class '))
        self.assertEqual(doc.errors[0].message,
                         'The class C inherits from itself: C -> D -> C')

    def test_functions_are_sorted(self):
        doc = build(comment('@function zeta') + comment('@function Alpha') +
                    comment('@function beta'))
        self.assertEqual([f.get_name() for f in doc.functions],
                         ['Alpha', 'beta', 'zeta'])

class MemberTestCase(unittest.TestCase):
    def test_method_memberof_fallback(self):
        doc = build(comment('@class Baz') + comment('@method go'))
        self.assertEqual(len(doc.methods), 1)
        method = doc.methods[0]
        self.assertEqual(method.get_class_name(), 'Baz')
        # The block itself is left alone.
        self.assertEqual(method.get_block().get_commands('memberof'), [])
        self.assertEqual(doc.name_to_class('Baz').get_methods(), [method])

    def test_method_without_class(self):
        doc = build(comment('@method go'))
        self.assertEqual(doc.methods, [])
        self.assertEqual(doc.errors, [])

    def test_method_of_unknown_class(self):
        doc = build(comment('@method go', '@memberof Nope'))
        self.assertEqual([e.message for e in doc.errors],
                         ['Could not add method go to the class Nope, '
                          'could not find that class.'])
        self.assertEqual(doc.errors[0].line_number, 1)

    def test_property_memberof_fallback(self):
        doc = build(comment('@class Box') +
                    '/// @property int size The size\n')
        box = doc.name_to_class('Box')
        self.assertEqual(box.num_properties(), 1)
        self.assertEqual(box.get_property_name(0), 'size')
        self.assertEqual(box.get_property_data_type(0), 'int')
        self.assertEqual(box.get_property_brief(0), 'The size')
        self.assertEqual(doc.errors, [])

    def test_trailing_property_comment(self):
        doc = build(comment('@class Bar') +
                    'this.id = 0; /// @property int id\n')
        bar = doc.name_to_class('Bar')
        self.assertEqual(bar.get_property_name(0), 'id')
        self.assertEqual(bar.get_property_brief(0), None)

    def test_property_without_class(self):
        doc = build('/// @property int size\n')
        self.assertEqual(doc.properties, [])
        self.assertEqual([e.message for e in doc.errors],
                         ['A @property block requires exactly 1 @memberof '
                          'command, got 0.'])

    def test_property_with_two_classes(self):
        doc = build(comment('@class A') +
                    comment('@property int x', '@memberof A', '@memberof B'))
        self.assertEqual(doc.properties, [])
        self.assertEqual([e.message for e in doc.errors],
                         ['A @property block requires exactly 1 @memberof '
                          'command, got 2.'])

class AssemblyTestCase(unittest.TestCase):
    SRC = (comment('@library Foo', '@version 1.0', '@brief A library.') +
           'var x = 1;\n' +
           comment('@class Bar', '@param string name The name',
                   '@brief A bar.') +
           'function Bar(name) {}\n' +
           comment('@method baz', '@memberof Bar',
                   '@return int The count'))

    def setUp(self):
        self.doc = build(self.SRC)

    def test_entities(self):
        doc = self.doc
        self.assertEqual(doc.errors, [])
        self.assertEqual(doc.library.get_name(), 'Foo')
        self.assertEqual(doc.library.get_version(), '1.0')
        self.assertEqual(doc.library.get_brief(), 'A library.')
        self.assertEqual(len(doc.classes), 1)
        bar = doc.classes[0]
        self.assertEqual(bar.get_name(), 'Bar')
        self.assertEqual(bar.get_brief(), 'A bar.')
        self.assertEqual(bar.num_params(), 1)
        self.assertEqual(bar.get_param_name(0), 'name')
        self.assertEqual(bar.get_param_data_type(0), 'string')
        self.assertEqual(bar.get_param_description(0), 'The name')
        self.assertEqual([m.get_name() for m in bar.get_methods()], ['baz'])
        baz = bar.get_method(0)
        self.assertEqual(baz.get_return_data_type(), 'int')
        self.assertEqual(baz.get_return_description(), 'The count')

    def test_ids(self):
        doc = self.doc
        entities = [doc.library, doc.classes[0], doc.methods[0]]
        self.assertEqual([e.global_id for e in entities], [1, 2, 3])
        self.assertEqual([e.id for e in entities], [0, 0, 0])
        self.assertEqual([b.get_block().id for b in entities], [1, 2, 3])

    def test_line_numbers(self):
        self.assertEqual(self.doc.classes[0].get_line_number(), 7)

class PageTestCase(unittest.TestCase):
    def test_page(self):
        doc = build(comment('@page Getting Started', 'Some *prose*.', '',
                            'More.'))
        self.assertEqual(len(doc.pages), 1)
        self.assertEqual(doc.pages[0].get_name(), 'Getting Started')
        self.assertEqual(doc.pages[0].get_content(),
                         'Some *prose*.\n\nMore.')
        self.assertEqual(doc.errors, [])

    def test_page_has_priority(self):
        doc = build(comment('@page Intro', '@class Foo'))
        self.assertEqual(len(doc.pages), 1)
        self.assertEqual(doc.classes, [])

class ErrorTestCase(unittest.TestCase):
    def test_residual_text(self):
        doc = build(comment('@class Foo', 'stray words'))
        self.assertEqual(len(doc.errors), 1)
        self.assertEqual(doc.errors[0].message,
                         'There was unparsed code:\n\nLine 4: stray words\n')
        self.assertEqual(doc.errors[0].line_number, 4)
        self.assertEqual(doc.errors[0].filename, 'test.js')

    def test_error_ids(self):
        doc = build(comment('@param x') +
                    comment('@class A', '@return int'))
        self.assertEqual([e.id for e in doc.errors], [1, 2])

    def test_duplicate_library(self):
        doc = build(comment('@library First') + comment('@library Second'))
        self.assertEqual(doc.library.get_name(), 'Second')
        self.assertEqual(len(doc.errors), 1)
        self.assertEqual(doc.errors[0].message,
                         'Only one @library may be documented; Second '
                         'replaces First.')

    def test_malformed_tag_is_reported_once(self):
        doc = build(comment('@class Foo', '@param oops'))
        self.assertEqual(len(doc.errors), 1)
        self.assertTrue(doc.errors[0].message.startswith(
            'Line contained @param'))
        self.assertEqual(len(doc.classes), 1)

    def test_tag_mentioned_in_description(self):
        doc = build(comment('@function make',
                            '@param Widget w The @class to build'))
        make = doc.functions[0]
        self.assertEqual(make.num_params(), 1)
        self.assertEqual(make.get_param_name(0), 'w')
        self.assertEqual(make.get_param_description(0),
                         'The @class to build')
        self.assertEqual(len(doc.errors), 1)
        self.assertTrue(doc.errors[0].message.startswith(
            'Line contained @class but'))

    def test_empty_description(self):
        doc = build(comment('@function go', '@description', '@brief Goes.'))
        go = doc.functions[0]
        self.assertEqual(go.get_description(), None)
        self.assertEqual(go.get_brief(), 'Goes.')
        self.assertEqual([e.message for e in doc.errors],
                         ['There was unparsed code:\n\nLine 4: '
                          '@description\n'])

class TodoTestCase(unittest.TestCase):
    def test_todo(self):
        doc = build(comment('@class Foo', '@todo fix'))
        self.assertEqual(len(doc.todos), 1)
        todo = doc.todos[0]
        self.assertEqual(todo.get_content(), 'fix')
        self.assertEqual(todo.get_line(), 4)
        self.assertTrue(todo.get_entity() is doc.classes[0])

    def test_orphan_todo(self):
        doc = build(comment('@todo later'))
        self.assertEqual(len(doc.todos), 1)
        self.assertEqual(doc.todos[0].get_entity(), None)
        self.assertEqual(doc.errors, [])

class MiscTestCase(unittest.TestCase):
    def test_file_block(self):
        doc = build(comment('@file main.js', '@brief The main file.'))
        self.assertEqual([f.get_name() for f in doc.files], ['main.js'])
        self.assertEqual(doc.errors, [])

    def test_function_description(self):
        doc = build(comment('@function go Goes somewhere.'))
        self.assertEqual(doc.functions[0].get_description(),
                         'Goes somewhere.')
        doc = build(comment('@function go Goes somewhere.',
                            '@description Better.'))
        self.assertEqual(doc.functions[0].get_description(), 'Better.')

    def test_function_examples(self):
        doc = build(comment('@function go', '@example', 'go();',
                            '@endexample'))
        go = doc.functions[0]
        self.assertEqual(go.num_examples(), 1)
        self.assertEqual(go.get_example_text(0), 'go();')

    def test_classify_block(self):
        def parsed(src):
            block = Block(src, src, 1, context=BuildContext())
            return parse_commands(block, [])
        self.assertEqual(classify_block(parsed('@page X\n@class Y')), 'page')
        self.assertEqual(classify_block(parsed('@class Y\n@file y.js')),
                         'class')
        self.assertEqual(classify_block(parsed('@method m\n@property t p')),
                         'method')
        self.assertEqual(classify_block(parsed('@brief nothing')), None)

    def test_empty(self):
        doc = build('var x = 1;\n')
        self.assertEqual(doc.library, None)
        self.assertEqual(doc.classes, [])
        self.assertEqual(doc.errors, [])
        doc = build_documentation([])
        self.assertEqual(doc.errors, [])

def testsuite():
    load = unittest.defaultTestLoader.loadTestsFromTestCase
    return unittest.TestSuite([ load(globals()[k])
        for k in globals().keys() if k.endswith('TestCase') ])

if __name__ == '__main__':
    unittest.main()
