# docjs -- Output generation
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Renderers, which convert a L{Documentation<docjs.docindex.Documentation>}
into an output format.

A renderer is constructed with the run's options (see
L{docjs.driver.DEFAULT_OPTIONS}), and its L{render<Renderer.render>}
method returns the rendered output as a string.  Two renderers are
provided: L{HTMLRenderer<docjs.docwriter.html.HTMLRenderer>} and
L{PlaintextRenderer<docjs.docwriter.plaintext.PlaintextRenderer>}.
"""
__docformat__ = 'epytext en'

class Renderer:
    """
    Abstract base class for renderers.

    @ivar options: The options that the renderer was constructed with.
    """
    def __init__(self, **options):
        self.options = options

    def option(self, name, default=None):
        return self.options.get(name, default)

    def render(self, doc):
        """
        @return: The rendered form of C{doc}.
        @rtype: C{str}
        """
        raise NotImplementedError('A renderer must implement render(doc)')

    def source_url(self, entity):
        """
        @return: The source location of C{entity}'s block, formatted
            with the C{format_source_url} option.
        """
        format_source_url = self.option('format_source_url')
        if format_source_url is None:
            return entity.get_filename()
        return format_source_url(entity.get_filename(),
                                 entity.get_line_number())
