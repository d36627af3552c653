# -*- coding: utf-8 -*-
import glob
import logging
import os
from collections import namedtuple


#: Behaviour switches of a run, fixed once the arguments are parsed
RmOptions = namedtuple('RmOptions', ['recursive', 'force', 'verbose'])
RmOptions.__new__.__defaults__ = (False, False, False)

_WILDCARDS = ('*', '?')


def has_wildcards(s):
    return any(c in s for c in _WILDCARDS)


class RmShowHelp(Exception):
    """Raised when the usage text should be shown instead of removing anything."""


class RmParser:
    """
    Split the command line into options and targets.

    Only the exact tokens below are flags, anything else (including unknown
    dash arguments) is a target, kept in the order given.
    """

    RECURSIVE = ('-r', '-R')
    FORCE = ('-f',)
    VERBOSE = ('-v',)
    HELP = ('-?', '--help')

    def __init__(self, debug=False):
        self.debug = debug
        self.logger = logging.getLogger('RmClone.Parser')

    def parse(self, args):
        """
        :param args: the command line arguments, without the program name
        :return: the options and the targets
        :rtype: (RmOptions, list)
        :raises RmShowHelp: for a help flag or when no target is given
        """
        recursive = force = verbose = False
        targets = []

        for arg in args:
            if arg in self.RECURSIVE:
                recursive = True
            elif arg in self.FORCE:
                force = True
            elif arg in self.VERBOSE:
                verbose = True
            elif arg in self.HELP:
                raise RmShowHelp(arg)
            else:
                targets.append(arg)

        if not targets:
            raise RmShowHelp('missing operand')

        options = RmOptions(recursive=recursive, force=force, verbose=verbose)
        if self.debug:
            self.logger.debug('options: %r, targets: %r', options, targets)
        return options, targets


class RmExpander:
    """
    Expand wildcards of the targets against a working directory.

    :param cwd: the directory patterns are matched in, os.getcwd() when None
    """

    def __init__(self, cwd=None, debug=False):
        self.cwd = cwd
        self.debug = debug
        self.logger = logging.getLogger('RmClone.Expander')

    def expand(self, targets):
        """
        Generator of the targets to remove.

        A target with '*' or '?' yields every matching entry of the working
        directory, or itself when nothing matches so that it is later handled
        like any other missing target. Other targets are yielded unchanged.
        """
        cwd = self.cwd if self.cwd is not None else os.getcwd()

        for target in targets:
            if not has_wildcards(target):
                yield target
                continue

            matched = False
            for match in self.expand_pattern(cwd, target):
                matched = True
                yield match

            if not matched:
                if self.debug:
                    self.logger.debug('no match for %r in %s', target, cwd)
                # nothing matched, pass through so that -f stays quiet
                yield target

    def expand_pattern(self, cwd, pattern):
        # the directory part must be taken literally, only the pattern globs
        globbable = os.path.join(glob.escape(cwd), pattern)
        for match in glob.iglob(globbable):
            if self.debug:
                self.logger.debug('%r matched %s', pattern, match)
            yield match
