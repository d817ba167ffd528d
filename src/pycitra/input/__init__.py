# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 15:01:08
# @Author : pycitra contributors

from .consts import Scancode
from .keyboard import generate_analog_param_from_keys, generate_keyboard_param
from .param import ParamPackage

__all__ = [
    'Scancode', 'ParamPackage',
    'generate_keyboard_param', 'generate_analog_param_from_keys'
]
