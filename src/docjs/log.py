# docjs -- Logging
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Message and progress reporting.

Every stage of a docjs run reports what it is doing through the
functions of this module (L{warning}, L{start_progress}, ...).  The
functions do nothing themselves: each call is handed to every
L{Logger} that has been registered with L{register_logger}.  The
command-line interface registers a console logger; a program that
uses docjs as a library registers whatever suits it, or nothing, in
which case docjs is silent.

Problems in the documented source (malformed tags, leftover text in a
comment block, ...) are reported at the L{SOURCE_WARNING} level,
grouped by file with L{start_block} and L{end_block}.

@note: The standard C{logging} package has no notion of message
blocks or progress displays, which is why this module exists.

@group Message Severity Levels: DEBUG, INFO, SOURCE_WARNING,
    WARNING, ERROR
@group Logging Functions: log, debug, info, source_warning,
    warning, error, start_block, end_block, start_progress,
    progress, end_progress
"""
__docformat__ = 'epytext en'

import sys

######################################################################
# Message Severity Levels
######################################################################

DEBUG = 10
INFO = 20
SOURCE_WARNING = 25
WARNING = 30
ERROR = 40

LEVEL_NAMES = {DEBUG: 'Debug', INFO: 'Info',
               SOURCE_WARNING: 'Warning', WARNING: 'Warning',
               ERROR: 'Error'}

######################################################################
# Logger Base Class
######################################################################
class Logger:
    """
    Base class for X{loggers}, the objects that show docjs's messages
    and progress to the user.  Every method is a no-op; subclasses
    override the ones they care about.
    """
    def log(self, level, message):
        """
        Show a message.

        @param level: One of L{DEBUG}, L{INFO}, L{SOURCE_WARNING},
            L{WARNING} or L{ERROR}.
        @param message: The message.  It may span several lines, and
            has no trailing newline.
        """

    def start_block(self, header):
        """
        Open a group of messages.  Messages logged before the matching
        L{end_block} belong to the group, and are shown under
        C{header}.  Groups may be nested.
        """

    def end_block(self):
        """
        Close the group opened by the last L{start_block}.
        """

    def start_progress(self, header=None):
        """
        Start reporting progress on a new task, described by
        C{header}.  Tasks are not nested: every C{start_progress} is
        closed by an L{end_progress} before the next one.
        """

    def end_progress(self):
        """
        Stop reporting progress on the current task.
        """

    def progress(self, percent, message=''):
        """
        Report progress on the current task.

        @param percent: The fraction of the task that is done, from
            0.0 to 1.0.
        @param message: What is being worked on (e.g., a file name).
        """

class SimpleLogger(Logger):
    """
    A logger that writes every message at or above a threshold level
    to a stream, prefixed by its severity.  Progress is not displayed.
    """
    def __init__(self, threshold=WARNING, stream=None):
        self.threshold = threshold
        self.stream = stream
        self._headers = []

    def log(self, level, message):
        if level < self.threshold:
            return
        stream = self.stream or sys.stderr
        indent = '  '*len(self._headers)
        for line in ('%s: %s' % (LEVEL_NAMES.get(level, 'Message'),
                                 message)).split('\n'):
            stream.write(indent + line + '\n')

    def start_block(self, header):
        stream = self.stream or sys.stderr
        stream.write('  '*len(self._headers) + header + '\n')
        self._headers.append(header)

    def end_block(self):
        self._headers.pop()

######################################################################
# Logger Registry
######################################################################

_loggers = []
"""The registered loggers."""

def register_logger(logger):
    """
    Add C{logger} to the loggers that receive every message and
    progress report.  Registering a logger twice has no effect.
    """
    if logger not in _loggers:
        _loggers.append(logger)

def remove_logger(logger):
    _loggers.remove(logger)

######################################################################
# Logging Functions
######################################################################
# Each function hands its arguments to the same-named method of every
# registered logger.

def log(level, message):
    message = '%s' % (message,)
    for logger in _loggers: logger.log(level, message)
log.__doc__ = Logger.log.__doc__

def debug(message):
    log(DEBUG, message)

def info(message):
    log(INFO, message)

def source_warning(message):
    """Report a problem found in the documented source."""
    log(SOURCE_WARNING, message)

def warning(message):
    log(WARNING, message)

def error(message):
    log(ERROR, message)

def start_block(header):
    for logger in _loggers: logger.start_block(header)
start_block.__doc__ = Logger.start_block.__doc__

def end_block():
    for logger in _loggers: logger.end_block()
end_block.__doc__ = Logger.end_block.__doc__

def start_progress(header=None):
    for logger in _loggers: logger.start_progress(header)
start_progress.__doc__ = Logger.start_progress.__doc__

def end_progress():
    for logger in _loggers: logger.end_progress()
end_progress.__doc__ = Logger.end_progress.__doc__

def progress(percent, message=''):
    for logger in _loggers: logger.progress(percent, '%s' % (message,))
progress.__doc__ = Logger.progress.__doc__
