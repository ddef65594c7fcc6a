#!/usr/bin/env python
#
# Setuptools setup script for docjs
#
# Edward Loper
#

from setuptools import setup
import os.path, re

# Read the package metadata without importing the package, so that
# setup.py works before the dependencies are installed.
_INIT = open(os.path.join(os.path.dirname(os.path.abspath(__file__)),
                          'src', 'docjs', '__init__.py')).read()
def _meta(name):
    return re.search(r"^%s\s*=\s*'([^']*)'" % name, _INIT, re.M).group(1)

VERSION = _meta('__version__')
(AUTHOR, EMAIL) = re.match(r'^(.*?)\s*<(.*)>$', _meta('__author__')).groups()
URL = _meta('__url__')

setup(name="docjs",
      description="Comment-block documentation extractor",
      version=VERSION,
      author=AUTHOR,
      author_email=EMAIL,
      url=URL,
      license=_meta('__license__'),
      package_dir={'': 'src'},
      packages=['docjs', 'docjs.docwriter', 'docjs.markup', 'docjs.test'],
      package_data={'docjs.test': ['*.doctest']},
      scripts=['src/scripts/docjs'],
      install_requires=['markdown', 'docutils'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.6')
