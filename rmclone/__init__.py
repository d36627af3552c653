# -*- coding: utf-8 -*-
from .core import __version__

__all__ = ('__version__',)
