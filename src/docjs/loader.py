# docjs -- Source loading
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
File loaders, which fetch the text of the source files to document.

A loader is any object with a C{load(name)} method that returns the
text of the named source, or raises L{LoadError}.  Two loaders are
provided: L{LocalFileLoader} reads files from the local filesystem,
and L{UrlFileLoader} fetches C{http} and C{https} URLs.
L{DefaultFileLoader} picks between them based on the name.

Loading is the only step of a docjs run that talks to the outside
world, so it is the only step that can fail in ways that have nothing
to do with the documented source.  L{load_sources} turns such failures
into L{ErrorReport}s, and carries on with the remaining files.
"""
__docformat__ = 'epytext en'

import codecs
import os.path
import urllib.error
import urllib.parse
import urllib.request

from docjs import log
from docjs.entity import ErrorReport

class LoadError(IOError):
    """
    An error raised by a loader that could not retrieve a source.
    """

class FileLoader:
    """
    Abstract base class for loaders.
    """
    def load(self, name):
        """
        @return: The text of the source called C{name}.
        @rtype: C{str}
        @raise LoadError: If the source could not be retrieved.
        """
        raise NotImplementedError('FileLoader.load')

class LocalFileLoader(FileLoader):
    """
    A loader that reads files from the local filesystem.

    @ivar encoding: The encoding used to decode the files.
    """
    def __init__(self, encoding='utf-8'):
        self.encoding = encoding

    def load(self, name):
        if not os.path.isfile(name):
            raise LoadError('No such file')
        try:
            stream = codecs.open(name, 'r', self.encoding)
        except (IOError, OSError) as e:
            raise LoadError(e.strerror or str(e))
        try:
            try:
                return stream.read()
            except UnicodeDecodeError as e:
                raise LoadError('Could not decode as %s: %s' %
                                (self.encoding, e))
        finally:
            stream.close()

class UrlFileLoader(FileLoader):
    """
    A loader that fetches sources over C{http} or C{https}.
    """
    def __init__(self, encoding='utf-8', timeout=30):
        self.encoding = encoding
        self.timeout = timeout

    def load(self, name):
        try:
            response = urllib.request.urlopen(name, timeout=self.timeout)
        except urllib.error.HTTPError as e:
            raise LoadError('HTTP error %s' % e.code)
        except (urllib.error.URLError, ValueError, OSError) as e:
            raise LoadError(str(getattr(e, 'reason', e)))
        try:
            charset = response.headers.get_content_charset()
            data = response.read()
        finally:
            response.close()
        try:
            return data.decode(charset or self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise LoadError('Could not decode response: %s' % e)

class DefaultFileLoader(FileLoader):
    """
    A loader that fetches names with an C{http:} or C{https:} scheme
    using a L{UrlFileLoader}, and reads any other name as a local
    file.
    """
    URL_SCHEMES = ('http', 'https')

    def __init__(self, encoding='utf-8'):
        self.local = LocalFileLoader(encoding)
        self.remote = UrlFileLoader(encoding)

    def load(self, name):
        scheme = urllib.parse.urlparse(name)[0].lower()
        if scheme in self.URL_SCHEMES:
            return self.remote.load(name)
        return self.local.load(name)

def load_sources(names, loader=None, errors=None, context=None):
    """
    Load every named source.

    @param names: The names of the sources, in the order in which
        they should be documented.
    @param loader: The L{FileLoader} to use; defaults to a
        L{DefaultFileLoader}.
    @param errors: A list that an L{ErrorReport} is appended to for
        each source that could not be loaded.
    @return: A list of C{(name, text)} pairs for the sources that were
        loaded, in the order of C{names}.
    """
    if loader is None:
        loader = DefaultFileLoader()
    if errors is None:
        errors = []
    sources = []
    for (i, name) in enumerate(names):
        log.progress(float(i)/max(len(names), 1), name)
        try:
            text = loader.load(name)
        except LoadError as e:
            message = 'Could not load file %s: %s' % (name, e)
            log.error(message)
            errors.append(ErrorReport(name, 0, message, context))
            continue
        sources.append((name, text))
    return sources
