# coding: utf-8
import codecs
import logging
import sys

from .shcommon import Control as ctrl
from .shcommon import Escape as esc
from .shcommon import Graphics as graphics

USAGE = """
Usage: rm [options] <files or directories...>
Options:
  -r, -R   : recursive delete (required for directories)
  -f       : force (suppress errors and remove read-only/hidden/system attributes)
  -v       : verbose output
  -?       : display this help

Wildcards like *.txt are supported and expanded like Unix shells.
Colors:
  Green = success
  Red   = failure
"""


def printable(s, encoding=None):
    """
    Make text writable to a stream of the given encoding.

    Undecodable file name bytes (surrogate escapes) are shown as \\xNN and
    characters the encoding lacks as backslash escapes.
    """
    if not isinstance(encoding, str):
        encoding = 'utf-8'
    try:
        codecs.lookup(encoding)
    except LookupError:
        encoding = 'utf-8'
    try:
        return s.encode(encoding, 'surrogateescape').decode(encoding, 'backslashreplace')
    except UnicodeError:
        return s.encode(encoding, 'backslashreplace').decode(encoding, 'backslashreplace')


class RmReporter:
    """
    Writes the outcome of each removal for the user. Successes and the help
    text go to stdout, failures to stderr. Messages are colored only when the
    destination is a terminal and escape sequences are enabled.

    :param outs: stream for success messages, the current sys.stdout if None
    :param errs: stream for error messages, the current sys.stderr if None
    :param bool enable_styles: False to never emit escape sequences
    """

    def __init__(self, outs=None, errs=None, enable_styles=True):
        self._outs = outs
        self._errs = errs
        self.enable_styles = enable_styles
        self.logger = logging.getLogger('RmClone.Reporter')

    # Resolved on every write so that a redirected sys.stdout is honoured
    @property
    def outs(self):
        return self._outs if self._outs is not None else sys.stdout

    @property
    def errs(self):
        return self._errs if self._errs is not None else sys.stderr

    def _wants_styles(self, stream):
        if not self.enable_styles:
            return False
        isatty = getattr(stream, 'isatty', None)
        try:
            return bool(isatty and isatty())
        except ValueError:
            # closed stream
            return False

    def text_color(self, s, color_name='default'):
        """
        Color the given string with ANSI escapes.

        :param str s: String to decorate
        :param str color_name: one of the pyte foreground color names
        :return: the decorated string, unchanged for unknown colors
        """
        color_id = graphics._SGR.get(color_name.lower())
        if color_id is None:
            return s
        fmt_string = '%s%%d%s%%s%s%%d%s' % (ctrl.CSI, esc.SGR, ctrl.CSI, esc.SGR)
        return fmt_string % (color_id, s, graphics._SGR['default'])

    def _write(self, stream, msg, color_name):
        msg = printable(msg, getattr(stream, 'encoding', None))
        if self._wants_styles(stream):
            msg = self.text_color(msg, color_name)
        stream.write(msg + '\n')
        stream.flush()

    def success(self, msg):
        self.logger.debug(msg)
        self._write(self.outs, msg, 'green')

    def error(self, msg):
        self.logger.debug(msg)
        self._write(self.errs, msg, 'red')

    def show_help(self):
        self.outs.write(USAGE)
        self.outs.flush()
