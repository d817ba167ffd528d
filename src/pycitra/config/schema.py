# -*- encoding: utf-8 -*-
# @File   : schema.py
# @Time   : 2024/10/12 22:31:18
# @Author : pycitra contributors

"""Every field of `sdl2-config.ini`, where it goes in `Values`,
and what it defaults to.

`populate()` walks `SCHEMA` and writes one value per entry:
the one read from the file, or the entry's default when the key is absent
(or, for strings, present but empty). Malformed numbers and booleans
are already turned into "absent" by `IniReader`.
"""

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Sequence

from ..ini import IniReader
from ..input import (
    Scancode,
    generate_analog_param_from_keys,
    generate_keyboard_param
)
from ..settings import (
    ANALOG_MAPPING,
    BUTTON_MAPPING,
    CAMERA_MAPPING,
    REGION_VALUE_AUTO_SELECT,
    LayoutOption,
    Values
)

# indexed by NativeButton.
DEFAULT_BUTTONS: tuple[Scancode, ...] = (
    Scancode.A, Scancode.S, Scancode.Z, Scancode.X, Scancode.T,
    Scancode.G, Scancode.F, Scancode.H, Scancode.Q, Scancode.W,
    Scancode.M, Scancode.N, Scancode.NUM_1, Scancode.NUM_2, Scancode.B,
)

# indexed by NativeAnalog: up, down, left, right, modifier.
DEFAULT_ANALOGS: tuple[tuple[Scancode, ...], ...] = (
    (Scancode.UP, Scancode.DOWN, Scancode.LEFT, Scancode.RIGHT, Scancode.D),
    (Scancode.I, Scancode.K, Scancode.J, Scancode.L, Scancode.D),
)

ANALOG_MODIFIER_SCALE = 0.5

_GETTERS: dict[type, Callable[..., Any]] = {
    bool: IniReader.get_boolean,
    int: IniReader.get_integer,
    float: IniReader.get_real,
    str: IniReader.get,
}


@dataclass(frozen=True)
class SchemaEntry:
    """One `[section] key` of the file, stored at `Values.<dest>`,
    or at `Values.<dest>[index]` for members of an indexed family.

    Give either a literal `default` or a `default_factory`;
    the factory is called every time the default is needed.
    """
    section: str
    key: str
    kind: type
    dest: str
    default: Any = None
    default_factory: Callable[[], Any] | None = None
    index: int | None = None
    convert: Callable[[Any], Any] | None = None

    def default_value(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    def resolve_default(self) -> Any:
        value = self.default_value()
        return self.convert(value) if self.convert else value

    def resolve(self, reader: IniReader) -> Any:
        value = _GETTERS[self.kind](reader, self.section, self.key, None)
        if value is None or (self.kind is str and value == ''):
            return self.resolve_default()
        return self.convert(value) if self.convert else value

    def assign(self, values: Values, value: Any) -> None:
        if self.index is None:
            setattr(values, self.dest, value)
        else:
            getattr(values, self.dest)[self.index] = value


def indexed_family(
    section: str,
    names: Sequence[str],
    dest: str,
    kind: type,
    defaults: Sequence[Any] = (),
    default_factories: Sequence[Callable[[], Any]] = (),
) -> tuple[SchemaEntry, ...]:
    """Expand a family, so that `names[i]` is always stored at `dest[i]`."""
    source = default_factories or defaults
    if len(source) != len(names):
        raise ValueError(
            f'{dest}: {len(names)} keys but {len(source)} defaults')
    return tuple(
        SchemaEntry(
            section, name, kind, dest, index=i,
            **({'default_factory': source[i]} if default_factories
               else {'default': source[i]}))
        for i, name in enumerate(names))


def _to_u16(value: int) -> int:
    return value & 0xFFFF


SCHEMA: tuple[SchemaEntry, ...] = (
    # Controls
    *indexed_family(
        'Controls', BUTTON_MAPPING, 'buttons', str,
        default_factories=[
            partial(generate_keyboard_param, code)
            for code in DEFAULT_BUTTONS]),
    *indexed_family(
        'Controls', ANALOG_MAPPING, 'analogs', str,
        default_factories=[
            partial(generate_analog_param_from_keys,
                    *keys, ANALOG_MODIFIER_SCALE)
            for keys in DEFAULT_ANALOGS]),

    # Core
    SchemaEntry('Core', 'use_cpu_jit', bool, 'use_cpu_jit', True),

    # Renderer
    SchemaEntry('Renderer', 'use_hw_renderer', bool, 'use_hw_renderer', True),
    SchemaEntry('Renderer', 'use_shader_jit', bool, 'use_shader_jit', True),
    SchemaEntry('Renderer', 'resolution_factor', float,
                'resolution_factor', 1.0),
    SchemaEntry('Renderer', 'use_vsync', bool, 'use_vsync', False),
    SchemaEntry('Renderer', 'toggle_framelimit', bool,
                'toggle_framelimit', True),
    SchemaEntry('Renderer', 'bg_red', float, 'bg_red', 1.0),
    SchemaEntry('Renderer', 'bg_green', float, 'bg_green', 1.0),
    SchemaEntry('Renderer', 'bg_blue', float, 'bg_blue', 1.0),

    # Layout
    SchemaEntry('Layout', 'layout_option', int, 'layout_option',
                int(LayoutOption.DEFAULT), convert=LayoutOption),
    SchemaEntry('Layout', 'swap_screen', bool, 'swap_screen', False),

    # Audio
    SchemaEntry('Audio', 'output_engine', str, 'sink_id', 'auto'),
    SchemaEntry('Audio', 'enable_audio_stretching', bool,
                'enable_audio_stretching', True),
    SchemaEntry('Audio', 'output_device', str, 'audio_device_id', 'auto'),

    # Data Storage
    SchemaEntry('Data Storage', 'use_virtual_sd', bool,
                'use_virtual_sd', True),

    # System
    SchemaEntry('System', 'is_new_3ds', bool, 'is_new_3ds', False),
    SchemaEntry('System', 'region_value', int, 'region_value',
                REGION_VALUE_AUTO_SELECT),

    # Camera
    *indexed_family(
        'Camera', [f'{cam}_name' for cam in CAMERA_MAPPING],
        'camera_name', str, defaults=['blank'] * len(CAMERA_MAPPING)),
    *indexed_family(
        'Camera', [f'{cam}_config' for cam in CAMERA_MAPPING],
        'camera_config', str, defaults=[''] * len(CAMERA_MAPPING)),

    # Miscellaneous
    SchemaEntry('Miscellaneous', 'log_filter', str, 'log_filter', '*:Info'),

    # Debugging
    SchemaEntry('Debugging', 'use_gdbstub', bool, 'use_gdbstub', False),
    SchemaEntry('Debugging', 'gdbstub_port', int, 'gdbstub_port', 24689,
                convert=_to_u16),
)


def populate(
    reader: IniReader,
    values: Values,
    schema: Sequence[SchemaEntry] = SCHEMA
) -> None:
    """Write every entry of `schema` into `values`. Never fails."""
    for entry in schema:
        entry.assign(values, entry.resolve(reader))


def default_values(schema: Sequence[SchemaEntry] = SCHEMA) -> Values:
    """A fresh `Values` holding nothing but defaults."""
    ret = Values()
    for entry in schema:
        entry.assign(ret, entry.resolve_default())
    return ret
