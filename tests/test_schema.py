import pytest

from pycitra.config.schema import (
    DEFAULT_ANALOGS,
    DEFAULT_BUTTONS,
    SCHEMA,
    SchemaEntry,
    default_values,
    indexed_family,
    populate
)
from pycitra.ini import IniReader
from pycitra.input import generate_keyboard_param
from pycitra.settings import (
    BUTTON_MAPPING,
    NUM_BUTTONS,
    CameraIndex,
    LayoutOption,
    NativeAnalog,
    NativeButton,
    Values
)


def _reader(write_ini, text: str) -> IniReader:
    return IniReader(write_ini(text))


def test_every_field_of_values_is_owned():
    scalars = {e.dest for e in SCHEMA if e.index is None}
    families = {e.dest for e in SCHEMA if e.index is not None}
    assert scalars | families == set(Values.__dataclass_fields__)
    assert len({(e.section, e.key) for e in SCHEMA}) == len(SCHEMA)


def test_empty_file_gives_defaults(write_ini, values):
    populate(_reader(write_ini, '; nothing here\n'), values)
    assert values == default_values()


def test_defaults(write_ini, values):
    populate(_reader(write_ini, ''), values)
    assert values.use_cpu_jit is True
    assert values.resolution_factor == 1.0
    assert values.layout_option is LayoutOption.DEFAULT
    assert values.sink_id == 'auto'
    assert values.audio_device_id == 'auto'
    assert values.region_value == -1
    assert values.camera_name == ['blank'] * 3
    assert values.camera_config == [''] * 3
    assert values.log_filter == '*:Info'
    assert values.gdbstub_port == 24689
    assert values.buttons[NativeButton.A] == 'code:4,engine:keyboard'
    assert values.buttons[NativeButton.HOME] == 'code:5,engine:keyboard'


def test_values_from_file(write_ini, values):
    populate(_reader(write_ini, (
        '[Core]\nuse_cpu_jit = false\n'
        '[Renderer]\nresolution_factor = 2.5\nbg_green = 0.25\n'
        '[Layout]\nlayout_option = 2\nswap_screen = 1\n'
        '[Audio]\noutput_engine = sdl2\n'
        '[System]\nregion_value = 0x2\nis_new_3ds = yes\n'
        '[Camera]\ncamera_inner_name = image\n'
        'camera_inner_config = /tmp/face.png\n'
        '[Debugging]\nuse_gdbstub = true\ngdbstub_port = 1234\n')), values)
    assert values.use_cpu_jit is False
    assert values.resolution_factor == 2.5
    assert values.bg_green == 0.25
    assert values.bg_red == 1.0
    assert values.layout_option is LayoutOption.LARGE_SCREEN
    assert values.swap_screen is True
    assert values.sink_id == 'sdl2'
    assert values.region_value == 2
    assert values.is_new_3ds is True
    assert values.camera_name[CameraIndex.INNER] == 'image'
    assert values.camera_config[CameraIndex.INNER] == '/tmp/face.png'
    assert values.camera_name[CameraIndex.OUTER_RIGHT] == 'blank'
    assert values.use_gdbstub is True
    assert values.gdbstub_port == 1234


def test_only_use_cpu_jit(write_ini, values):
    populate(_reader(write_ini, '[Core]\nuse_cpu_jit=false\n'), values)
    expected = default_values()
    expected.use_cpu_jit = False
    assert values == expected


def test_empty_string_falls_back_to_default(write_ini, values):
    populate(_reader(write_ini, (
        '[Controls]\nbutton_b=\ncircle_pad=\n'
        '[Audio]\noutput_engine=\n'
        '[Miscellaneous]\nlog_filter=\n')), values)
    assert values.buttons[NativeButton.B] == generate_keyboard_param(
        DEFAULT_BUTTONS[NativeButton.B])
    assert values.analogs[NativeAnalog.CIRCLE_PAD] == (
        default_values().analogs[NativeAnalog.CIRCLE_PAD])
    assert values.sink_id == 'auto'
    assert values.log_filter == '*:Info'


def test_malformed_numbers_fall_back(write_ini, values):
    populate(_reader(write_ini, (
        '[Renderer]\nresolution_factor = fast\nuse_vsync = sometimes\n'
        '[Debugging]\ngdbstub_port = 65537\n')), values)
    assert values.resolution_factor == 1.0
    assert values.use_vsync is False
    # truncated to 16 bits
    assert values.gdbstub_port == 1


def test_unknown_layout_option_is_kept(write_ini, values):
    populate(_reader(write_ini, '[Layout]\nlayout_option = 3\n'), values)
    assert int(values.layout_option) == 3
    assert isinstance(values.layout_option, LayoutOption)
    assert values.layout_option != LayoutOption.DEFAULT


def test_button_family_alignment(write_ini, values):
    text = '[Controls]\n' + ''.join(
        f'{name}=engine:test,index:{i}\n'
        for i, name in enumerate(BUTTON_MAPPING))
    populate(_reader(write_ini, text), values)
    for i in range(NUM_BUTTONS):
        assert values.buttons[i] == f'engine:test,index:{i}'


def test_single_button_lands_on_its_own_index(write_ini, values):
    populate(_reader(write_ini, '[Controls]\nbutton_zl=engine:x\n'), values)
    defaults = default_values()
    for button in NativeButton:
        if button is NativeButton.ZL:
            assert values.buttons[button] == 'engine:x'
        else:
            assert values.buttons[button] == defaults.buttons[button]


def test_generated_defaults_are_deterministic():
    first, second = default_values(), default_values()
    assert first.analogs[0] == second.analogs[0]
    assert first.analogs[0].startswith('down:code$081')
    assert len(DEFAULT_ANALOGS) == len(first.analogs)


def test_populate_overwrites_every_owned_field(write_ini):
    values = Values(use_cpu_jit=False, sink_id='stale',
                    buttons=['stale'] * NUM_BUTTONS)
    populate(_reader(write_ini, ''), values)
    assert values == default_values()


def test_default_factory_is_called_each_time():
    calls = []

    def factory():
        calls.append(None)
        return 'generated'

    entry = SchemaEntry('Controls', 'button_a', str, 'buttons',
                        default_factory=factory, index=0)
    assert entry.default_value() == entry.default_value() == 'generated'
    assert len(calls) == 2


def test_indexed_family_rejects_mismatched_defaults():
    with pytest.raises(ValueError):
        indexed_family('Camera', ['a', 'b'], 'camera_name', str,
                       defaults=['blank'])
