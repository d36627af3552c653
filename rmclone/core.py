# coding: utf-8
"""
rmclone - remove files and directories, the Unix way

Version and logging setup shared by the command and its helpers.
"""

__version__ = '1.1.0'

import logging
import logging.handlers

from .system.shcommon import _SYS_STDERR

# Setup logging
LOGGER = logging.getLogger('RmClone')

_LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s] [%(funcName)s] [%(lineno)d] - %(message)s'

# Quiet by default, the user facing report goes through the reporter
_DEFAULT_LOG_SETTING = {
    'level': 'WARNING',
    'file': None,
}


def config_logging(log_setting=None):
    """
    Configure the 'RmClone' logger.

    :param log_setting: dict with the optional keys 'level' (a level name)
                        and 'file' (path of a log file, None for stderr)
    :type log_setting: dict or None
    :return: the configured logger
    :rtype: logging.Logger
    """
    logger = logging.getLogger('RmClone')

    _log_setting = dict(_DEFAULT_LOG_SETTING)
    _log_setting.update(log_setting or {})

    level = {
        'CRITICAL': logging.CRITICAL,
        'ERROR': logging.ERROR,
        'WARNING': logging.WARNING,
        'WARN': logging.WARNING,
        'INFO': logging.INFO,
        'DEBUG': logging.DEBUG,
        'NOTSET': logging.NOTSET,
    }.get(str(_log_setting['level']).upper(),
          logging.WARNING)

    logger.setLevel(level)

    if not logger.handlers:
        if _log_setting['file']:
            _log_handler = logging.handlers.RotatingFileHandler(_log_setting['file'], mode='w')
        else:
            _log_handler = logging.StreamHandler(_SYS_STDERR)
        _log_handler.setLevel(level)
        _log_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(_log_handler)

    return logger
