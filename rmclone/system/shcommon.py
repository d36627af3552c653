# -*- coding: utf-8 -*-
"""
Platform helpers: terminal escape tables, console setup and the clearing of
protective file attributes.

The Control, Escape and Graphics tables come from pyte (https://github.com/selectel/pyte)
"""
import ctypes
import logging
import os
import stat
import sys

from pyte import control, escape, graphics


ON_WINDOWS = sys.platform.startswith('win')
HAS_CHFLAGS = hasattr(os, 'chflags')

_SYS_STDERR = sys.stderr

_logger = logging.getLogger('RmClone.Platform')

# Windows file attributes removed before a forced delete
_PROTECTIVE_FILE_ATTRIBUTES = (
    stat.FILE_ATTRIBUTE_READONLY
    | stat.FILE_ATTRIBUTE_HIDDEN
    | stat.FILE_ATTRIBUTE_SYSTEM
)

# BSD file flags removed before a forced delete, see chflags(2)
_PROTECTIVE_FILE_FLAGS = (
    getattr(stat, 'UF_IMMUTABLE', 0)
    | getattr(stat, 'UF_APPEND', 0)
    | getattr(stat, 'UF_HIDDEN', 0)
)

_STD_OUTPUT_HANDLE = -11
_ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004


class RmFileNotFound(Exception):
    pass


class RmIsDirectory(Exception):
    pass


class Control:
    """Control characters, see :mod:`pyte.control`."""

    #: *Escape*: Starts an escape sequence.
    ESC = control.ESC

    #: *Control sequence introducer*: the 7-bit form ``ESC [``.
    CSI = control.ESC + '['


class Escape:
    """Escape sequence finals, see :mod:`pyte.escape`."""

    #: *Select graphics rendition*.
    SGR = escape.SGR


class Graphics:
    """Graphic rendition codes, see :mod:`pyte.graphics`."""

    TEXT = graphics.TEXT
    FG = graphics.FG_ANSI

    # Reverse mapping of all available attributes -- keep this private!
    _SGR = {v: k for k, v in FG.items()}
    _SGR.update({v: k for k, v in TEXT.items()})


def enable_virtual_terminal():
    """
    Make the console interpret ANSI escape sequences.

    Only Windows consoles need this, everywhere else it is a no-op.
    :return: whether escape sequences can be used
    :rtype: bool
    """
    if not ON_WINDOWS:
        return True
    try:
        kernel32 = ctypes.windll.kernel32
        handle = kernel32.GetStdHandle(_STD_OUTPUT_HANDLE)
        mode = ctypes.c_ulong()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            raise ctypes.WinError()
        if not kernel32.SetConsoleMode(handle, mode.value | _ENABLE_VIRTUAL_TERMINAL_PROCESSING):
            raise ctypes.WinError()
    except (AttributeError, OSError) as e:
        _logger.debug('virtual terminal processing unavailable: %s', e)
        return False
    return True


def enable_utf8_output(stream):
    """Switch a terminal text stream to UTF-8, when it allows it."""
    reconfigure = getattr(stream, 'reconfigure', None)
    if reconfigure is None or not stream.isatty():
        return False
    try:
        reconfigure(encoding='utf-8', errors='backslashreplace')
    except (ValueError, OSError) as e:
        _logger.debug('cannot switch %r to utf-8: %s', stream, e)
        return False
    return True


def _set_windows_attributes(path, attributes):
    if not ctypes.windll.kernel32.SetFileAttributesW(os.fspath(path), attributes):
        raise ctypes.WinError()


def clear_attributes(path):
    """
    Remove the read-only, hidden and system markers from a single entry.

    On Windows these are the file attributes of the same names. On POSIX the
    read-only marker is a missing owner write bit; directories also get the
    owner read and search bits so their content can be listed and removed.
    Where chflags is available the immutable, append-only and hidden flags
    are dropped as well.

    The entry itself is changed, symbolic links are not followed.
    :raises OSError: when the entry cannot be read or changed
    """
    st = os.lstat(path)

    if ON_WINDOWS:
        attributes = st.st_file_attributes
        if attributes & _PROTECTIVE_FILE_ATTRIBUTES:
            _set_windows_attributes(path, attributes & ~_PROTECTIVE_FILE_ATTRIBUTES)
        return

    if stat.S_ISLNK(st.st_mode):
        # the mode of a link is meaningless, only its flags count
        if HAS_CHFLAGS and st.st_flags & _PROTECTIVE_FILE_FLAGS:
            os.chflags(path, st.st_flags & ~_PROTECTIVE_FILE_FLAGS, follow_symlinks=False)
        return

    if HAS_CHFLAGS and st.st_flags & _PROTECTIVE_FILE_FLAGS:
        os.chflags(path, st.st_flags & ~_PROTECTIVE_FILE_FLAGS)

    wanted = stat.S_IWUSR
    if stat.S_ISDIR(st.st_mode):
        wanted |= stat.S_IRUSR | stat.S_IXUSR
    mode = stat.S_IMODE(st.st_mode)
    if mode & wanted != wanted:
        os.chmod(path, mode | wanted)
