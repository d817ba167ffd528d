# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:42:30
# @Author : pycitra contributors

from .default_ini import SDL2_CONFIG_FILE
from .loader import CONFIG_FILENAME, Config, LoadAttempt
from .schema import SCHEMA, SchemaEntry, default_values, populate

__all__ = [
    'Config', 'LoadAttempt', 'CONFIG_FILENAME', 'SDL2_CONFIG_FILE',
    'SCHEMA', 'SchemaEntry', 'populate', 'default_values'
]
