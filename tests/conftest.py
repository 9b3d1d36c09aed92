import pytest

import theme


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setattr(theme, "_ENABLE", False)


@pytest.fixture
def data_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    return tmp_path
