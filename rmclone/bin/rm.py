# -*- coding: utf-8 -*-
"""
Remove (delete) files and directories.

usage: rm [-r] [-f] [-v] paths [paths ...]

positional arguments:
  paths       files, directories or wildcard patterns to delete

optional arguments:
  -?, --help  show the help message and exit
  -r, -R      remove directories and their contents recursively
  -f          ignore nonexistent files and failures, clear read-only,
              hidden and system attributes before deleting
  -v          explain what is being done

Any other argument is a path, even when it starts with a dash.
"""

import logging
import os
import shutil
import sys

from rmclone.core import config_logging
from rmclone.system.shcommon import (RmFileNotFound, RmIsDirectory, clear_attributes,
                                     enable_utf8_output, enable_virtual_terminal)
from rmclone.system.shio import RmReporter
from rmclone.system.shparsers import RmExpander, RmParser, RmShowHelp

logger = logging.getLogger('RmClone.Engine')


def _clear_attributes_quietly(path):
    try:
        clear_attributes(path)
    except OSError as e:
        logger.debug('cannot clear attributes of %s: %s', path, e)


def clear_tree_attributes(path):
    """
    Clear the protective attributes of a directory and of everything below it.

    Directories are cleared before they are listed, so a protected directory
    can still be descended into. Every failure is ignored and the walk goes on.
    """
    _clear_attributes_quietly(path)
    for dirpath, dirnames, filenames in os.walk(path, onerror=_log_walk_error):
        for name in dirnames:
            _clear_attributes_quietly(os.path.join(dirpath, name))
        for name in filenames:
            _clear_attributes_quietly(os.path.join(dirpath, name))


def _log_walk_error(e):
    logger.debug('cannot list %s: %s', e.filename, e)


def rm(target, options):
    """
    Deletes a file or directory based on the provided options.

    :return: what was removed, 'file' or 'directory'
    :raises RmIsDirectory: target is a directory and options.recursive is off
    :raises RmFileNotFound: target does not exist
    :raises OSError: the deletion itself failed
    """
    # a link is removed as itself, whatever it points to
    if os.path.isfile(target) or os.path.islink(target):
        if options.force:
            _clear_attributes_quietly(target)
        os.remove(target)
        logger.info('removed file %s', target)
        return 'file'

    if os.path.isdir(target):
        if not options.recursive:
            raise RmIsDirectory(f"rm: cannot remove '{target}': Is a directory")
        if options.force:
            clear_tree_attributes(target)
        shutil.rmtree(target)
        logger.info('removed directory %s', target)
        return 'directory'

    raise RmFileNotFound(f"rm: cannot remove '{target}': No such file or directory")


def rm_all(targets, options, reporter):
    """Remove every target in turn, a failure never stops the others."""
    for target in targets:
        try:
            kind = rm(target, options)
        except RmIsDirectory as e:
            # -f does not imply -r
            reporter.error(e.args[0])
            continue
        except RmFileNotFound as e:
            if not options.force:
                reporter.error(e.args[0])
            continue
        except OSError as e:
            logger.debug('cannot remove %s: %r', target, e)
            if not options.force:
                reporter.error(f"rm: cannot remove '{target}': {e.strerror or e}")
            continue

        # outside the try, a failing stdout is not a failed removal
        if options.verbose:
            reporter.success(f'removed {kind}: {target}')


def main(args, log_setting=None):
    config_logging(log_setting)
    debug = logger.isEnabledFor(logging.DEBUG)

    enable_utf8_output(sys.stdout)
    reporter = RmReporter(enable_styles=enable_virtual_terminal())

    try:
        options, targets = RmParser(debug=debug).parse(args)
    except RmShowHelp:
        reporter.show_help()
        return

    try:
        rm_all(RmExpander(debug=debug).expand(targets), options, reporter)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user.", file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # the reader went away, e.g. rm -v * | head
        logger.debug('stdout closed, stopping')
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
