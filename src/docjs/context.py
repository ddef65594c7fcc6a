# docjs -- Run context
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Identifier bookkeeping for a single docjs run.

Blocks, error reports and entities all carry sequence ids.  Those ids
are handed out by a L{BuildContext}, which is created once per run and
passed explicitly through the pipeline, so that two runs (or two test
cases) never share counters.
"""
__docformat__ = 'epytext en'

class BuildContext:
    """
    The id counters of one run.

        >>> context = BuildContext()
        >>> context.next_block_id(), context.next_block_id()
        (1, 2)
        >>> context.next_entity_ids('class')
        (0, 1)
        >>> context.next_entity_ids('class')
        (1, 2)
        >>> context.next_entity_ids('function')
        (0, 3)
    """
    def __init__(self):
        self._block_count = 0
        self._error_count = 0
        self._entity_count = 0
        self._entity_counts = {}

    def next_block_id(self):
        self._block_count += 1
        return self._block_count

    def next_error_id(self):
        self._error_count += 1
        return self._error_count

    def next_entity_ids(self, kind):
        """
        Allocate the ids for a new entity of the given kind.

        @return: A tuple C{(local_id, global_id)}.  C{local_id} counts
            entities of kind C{kind}, starting at 0; C{global_id}
            counts all entities, starting at 1.
        """
        if kind in self._entity_counts:
            self._entity_counts[kind] += 1
        else:
            self._entity_counts[kind] = 0
        self._entity_count += 1
        return self._entity_counts[kind], self._entity_count

def get_context(context):
    """
    Return C{context}, or a fresh L{BuildContext} if it is C{None}.
    """
    if context is None:
        return BuildContext()
    return context
