# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/13 15:02:41
# @Author : pycitra contributors

from enum import Enum


# see SDL_scancode.h, USB HID usage page 0x07.
# only keys the default bindings refer to are listed.
class Scancode(int, Enum):
    A = 4
    B = 5
    D = 7
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    Q = 20
    S = 22
    T = 23
    W = 26
    X = 27
    Z = 29
    NUM_1 = 30
    NUM_2 = 31
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82


KEY_VALUE_SEPARATOR = ':'
PARAM_SEPARATOR = ','
ESCAPE_CHARACTER = '$'
KEY_VALUE_SEPARATOR_ESCAPE = ESCAPE_CHARACTER + '0'
PARAM_SEPARATOR_ESCAPE = ESCAPE_CHARACTER + '1'
ESCAPE_CHARACTER_ESCAPE = ESCAPE_CHARACTER + '2'
