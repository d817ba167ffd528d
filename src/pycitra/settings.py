# -*- encoding: utf-8 -*-
# @File   : settings.py
# @Time   : 2024/10/12 20:15:36
# @Author : pycitra contributors

"""Emulator-wide settings the frontend config is loaded into.

`values` is the instance the rest of an application would share,
while `Config` accepts any other `Values` to fill.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class NativeButton(IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    UP = 4
    DOWN = 5
    LEFT = 6
    RIGHT = 7
    L = 8
    R = 9
    START = 10
    SELECT = 11
    ZL = 12
    ZR = 13
    HOME = 14


NUM_BUTTONS = len(NativeButton)

# key names in [Controls], indexed by NativeButton.
BUTTON_MAPPING: tuple[str, ...] = (
    'button_a', 'button_b', 'button_x', 'button_y',
    'button_up', 'button_down', 'button_left', 'button_right',
    'button_l', 'button_r', 'button_start', 'button_select',
    'button_zl', 'button_zr', 'button_home',
)


class NativeAnalog(IntEnum):
    CIRCLE_PAD = 0
    C_STICK = 1


NUM_ANALOGS = len(NativeAnalog)

ANALOG_MAPPING: tuple[str, ...] = ('circle_pad', 'c_stick')


class CameraIndex(IntEnum):
    OUTER_RIGHT = 0
    INNER = 1
    OUTER_LEFT = 2


NUM_CAMERAS = len(CameraIndex)

# key prefixes in [Camera], indexed by CameraIndex.
CAMERA_MAPPING: tuple[str, ...] = (
    'camera_outer_right', 'camera_inner', 'camera_outer_left')


class LayoutOption(int, Enum):
    DEFAULT = 0
    SINGLE_SCREEN = 1
    LARGE_SCREEN = 2

    @classmethod
    def _missing_(cls, value):
        # unknown layouts are kept as is, the renderer decides what to do.
        if not isinstance(value, int):
            return None
        member = int.__new__(cls, value)
        member._name_ = f'UNKNOWN_{value}'
        member._value_ = value
        return member


REGION_VALUE_AUTO_SELECT = -1


@dataclass
class Values:
    # Controls
    buttons: list[str] = field(default_factory=lambda: [''] * NUM_BUTTONS)
    analogs: list[str] = field(default_factory=lambda: [''] * NUM_ANALOGS)

    # Core
    use_cpu_jit: bool = True

    # Renderer
    use_hw_renderer: bool = True
    use_shader_jit: bool = True
    resolution_factor: float = 1.0
    use_vsync: bool = False
    toggle_framelimit: bool = True

    bg_red: float = 1.0
    bg_green: float = 1.0
    bg_blue: float = 1.0

    # Layout
    layout_option: LayoutOption = LayoutOption.DEFAULT
    swap_screen: bool = False

    # Audio
    sink_id: str = 'auto'
    enable_audio_stretching: bool = True
    audio_device_id: str = 'auto'

    # Data Storage
    use_virtual_sd: bool = True

    # System
    is_new_3ds: bool = False
    region_value: int = REGION_VALUE_AUTO_SELECT

    # Camera
    camera_name: list[str] = field(
        default_factory=lambda: [''] * NUM_CAMERAS)
    camera_config: list[str] = field(
        default_factory=lambda: [''] * NUM_CAMERAS)

    # Miscellaneous
    log_filter: str = '*:Info'

    # Debugging
    use_gdbstub: bool = False
    gdbstub_port: int = 24689


values = Values()
