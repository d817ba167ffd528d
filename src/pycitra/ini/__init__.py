# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : pycitra contributors

from .model import IniSection, IniClass
from .parser import IniParser
from .reader import IniReader

__all__ = [
    'IniSection', 'IniClass',
    'IniParser',
    'IniReader'
]
