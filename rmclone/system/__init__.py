# -*- coding: utf-8 -*-
__all__ = (
    'shcommon', 'shio', 'shparsers',
)
