# docjs -- Regression testing
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Regression testing.

The tests are ordinary C{unittest} test cases, in the C{test_*.py}
modules of this package; doctest examples are kept in C{*.doctest}
files, which are run by L{docjs.test.test_doctests}.  Use L{main} to
run them all.
"""
__docformat__ = 'epytext en'

import unittest, doctest, docjs, os, os.path

def main():
    # Turn on debugging.
    docjs.DEBUG = True

    # Options for doctest:
    doctest.set_unittest_reportflags(doctest.REPORT_UDIFF)

    # Find all test cases.
    testdir = os.path.join(os.path.split(__file__)[0])
    if testdir == '': testdir = '.'
    suite = unittest.defaultTestLoader.discover(
        testdir, pattern='test_*.py',
        top_level_dir=os.path.dirname(os.path.dirname(testdir)))

    # Run all test cases.
    return unittest.TextTestRunner(verbosity=2).run(suite)

if __name__=='__main__':
    main()
