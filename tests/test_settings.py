"""Tests for d4events.core.settings — optional JSON settings file."""
import json

from d4events.core.settings import DEFAULTS, Settings


def _write(path, data):
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return path


def test_missing_file_keeps_defaults(tmp_path):
    s = Settings(tmp_path / 'nope.json')
    assert s.to_dict() == DEFAULTS


def test_values_loaded(tmp_path):
    p = _write(tmp_path / 'settings.json', {
        'font_size': 18, 'threshold': 120, 'frontend': 'tk',
        'host': '0.0.0.0', 'port': 8080,
        'window_width': 400, 'window_height': 160,
    })
    s = Settings(p)
    assert s.font_size == 18.0
    assert s.threshold == 120
    assert s.frontend == 'tk'
    assert s.host == '0.0.0.0'
    assert s.port == 8080
    assert (s.window_width, s.window_height) == (400, 160)


def test_malformed_file_keeps_defaults(tmp_path, caplog):
    p = _write(tmp_path / 'settings.json', '{not json')
    s = Settings(p)
    assert s.to_dict() == DEFAULTS
    assert 'Ignoring unreadable settings file' in caplog.text


def test_non_object_keeps_defaults(tmp_path):
    s = Settings(_write(tmp_path / 'settings.json', [1, 2, 3]))
    assert s.to_dict() == DEFAULTS


def test_bad_value_only_affects_its_key(tmp_path):
    p = _write(tmp_path / 'settings.json', {'port': 'eighty', 'threshold': 60})
    s = Settings(p)
    assert s.port == DEFAULTS['port']
    assert s.threshold == 60


def test_unknown_frontend_ignored(tmp_path):
    s = Settings(_write(tmp_path / 'settings.json', {'frontend': 'gtk'}))
    assert s.frontend == 'qt'


def test_file_never_written(tmp_path):
    p = tmp_path / 'sub' / 'settings.json'
    Settings(p)
    assert not p.exists()


def test_null_and_bool_values_rejected(tmp_path):
    p = _write(tmp_path / 'settings.json', {
        'host': None, 'port': True, 'font_size': False, 'frontend': None,
    })
    s = Settings(p)
    assert s.host == DEFAULTS['host']
    assert s.port == DEFAULTS['port']
    assert s.font_size == DEFAULTS['font_size']
    assert s.frontend == DEFAULTS['frontend']


def test_number_for_string_key_rejected(tmp_path):
    s = Settings(_write(tmp_path / 'settings.json', {'host': 127}))
    assert s.host == DEFAULTS['host']


def test_out_of_range_values_rejected(tmp_path):
    p = _write(tmp_path / 'settings.json',
               '{"font_size": Infinity, "threshold": -5}')
    s = Settings(p)
    assert s.font_size == DEFAULTS['font_size']
    assert s.threshold == DEFAULTS['threshold']


def test_zero_font_size_rejected(tmp_path):
    s = Settings(_write(tmp_path / 'settings.json', {'font_size': 0}))
    assert s.font_size == DEFAULTS['font_size']
