# -*- encoding: utf-8 -*-
# @File   : keyboard.py
# @Time   : 2024/10/13 15:40:12
# @Author : pycitra contributors

from .param import ParamPackage


def generate_keyboard_param(key_code: int) -> str:
    """Button binding of the `keyboard` engine for one scancode."""
    param = ParamPackage()
    param['engine'] = 'keyboard'
    param['code'] = int(key_code)
    return param.serialize()


def generate_analog_param_from_keys(
    key_up: int, key_down: int, key_left: int, key_right: int,
    key_modifier: int, modifier_scale: float
) -> str:
    """Analog binding of the `analog_from_button` engine,
    i.e. four direction keys plus a modifier key scaling the stick down.
    """
    circle_pad_param = ParamPackage()
    circle_pad_param['engine'] = 'analog_from_button'
    circle_pad_param['up'] = generate_keyboard_param(key_up)
    circle_pad_param['down'] = generate_keyboard_param(key_down)
    circle_pad_param['left'] = generate_keyboard_param(key_left)
    circle_pad_param['right'] = generate_keyboard_param(key_right)
    circle_pad_param['modifier'] = generate_keyboard_param(key_modifier)
    circle_pad_param['modifier_scale'] = float(modifier_scale)
    return circle_pad_param.serialize()
