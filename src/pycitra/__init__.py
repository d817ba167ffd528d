# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 19:58:11
# @Author : pycitra contributors

import logging

from .config import Config, default_values
from .ini import IniClass, IniParser, IniReader
from .settings import Values, values

__all__ = [
    'Config', 'default_values',
    'IniClass', 'IniParser', 'IniReader',
    'Values', 'values'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
