import pytest

from pycitra.settings import Values


@pytest.fixture
def ini_path(tmp_path):
    return str(tmp_path / 'config' / 'sdl2-config.ini')


@pytest.fixture
def write_ini(tmp_path):
    def _write(text: str, name: str = 'sdl2-config.ini') -> str:
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def values():
    return Values()
