"""tests/test_settings.py"""

import types

import pytest

from headerstore.settings import BaseSettings, Settings, get_settings_priority


class TestBaseSettings:
    """Tests for BaseSettings."""

    def test_missing_key_is_none(self):
        """Test reading a missing setting."""
        settings = BaseSettings()
        assert settings['MISSING'] is None
        assert settings.get('MISSING', 'x') == 'x'

    def test_priority(self):
        """Test a lower priority does not override a higher one."""
        settings = BaseSettings({'LOG_LEVEL': 'INFO'}, priority='cmdline')
        settings.set('LOG_LEVEL', 'DEBUG', priority='project')
        assert settings['LOG_LEVEL'] == 'INFO'
        settings.set('LOG_LEVEL', 'ERROR', priority=50)
        assert settings['LOG_LEVEL'] == 'ERROR'
        assert settings.getpriority('LOG_LEVEL') == 50
        assert get_settings_priority('default') == 0

    @pytest.mark.parametrize('value, expected', [
        (1, True), ('1', True), (True, True), ('true', True),
        (0, False), ('0', False), ('False', False),
    ])
    def test_getbool(self, value, expected):
        """Test boolean conversion."""
        assert BaseSettings({'FLAG': value}).getbool('FLAG') is expected

    def test_getbool_rejects_other_strings(self):
        """Test unsupported boolean strings."""
        with pytest.raises(ValueError):
            BaseSettings({'FLAG': 'yes'}).getbool('FLAG')

    def test_copy_is_independent(self):
        """Test changes to a copy do not reach the original."""
        settings = BaseSettings({'H': BaseSettings({'Accept': '*/*'})})
        settings_copy = settings.copy()
        settings_copy['H']['Accept'] = 'text/html'
        assert settings.copy_to_dict() == {'H': {'Accept': '*/*'}}

    def test_accessor_surface(self):
        """Test only the accessors the package uses are provided."""
        for name in ('getint', 'getfloat', 'getlist', 'getdict', 'delete', 'freeze', 'frozencopy'):
            assert not hasattr(BaseSettings, name)

    def test_setmodule(self):
        """Test uppercase module globals become settings."""
        module = types.ModuleType('custom_settings')
        module.HEADERS_ENCODING = 'latin-1'
        module.lowercase = 'ignored'
        settings = BaseSettings()
        settings.setmodule(module)
        assert dict(settings) == {'HEADERS_ENCODING': 'latin-1'}

    def test_delitem(self):
        """Test del removes a setting regardless of priority."""
        settings = BaseSettings({'A': 1}, priority='cmdline')
        del settings['A']
        assert 'A' not in settings
        assert len(settings) == 0


class TestGetHeaders:
    """Tests for BaseSettings.getheaders()."""

    def test_from_dict(self):
        """Test a dict setting, dropping None values."""
        settings = BaseSettings({'H': {'Accept': '*/*', 'User-Agent': None, 'X-List': ['a', 'b']}})
        assert settings.getheaders('H').raw() == {'Accept': '*/*', 'X-List': 'a, b'}

    def test_from_json(self):
        """Test a JSON string setting."""
        settings = BaseSettings({'H': '{"Accept": "*/*"}'})
        assert settings.getheaders('H').all() == {'accept': '*/*'}

    def test_from_pairs(self):
        """Test a list of pairs keeps repeated names."""
        settings = BaseSettings({'H': [('Set-Cookie', 'a=1'), ('Set-Cookie', 'b=2'), ('X', None)]})
        headers = settings.getheaders('H')
        assert headers.get_set_cookie() == ['a=1', 'b=2']
        assert not headers.has('x')

    def test_missing(self):
        """Test a missing setting gives empty headers."""
        assert BaseSettings().getheaders('H').all() == {}


class TestSettings:
    """Tests for Settings defaults."""

    def test_defaults(self, settings):
        """Test the default settings are loaded with default priority."""
        assert settings['HEADERS_ENCODING'] == 'utf-8'
        assert settings.getbool('DEFAULT_HEADERS_ENABLED') is True
        assert settings.getpriority('LOG_LEVEL') == 0

    def test_dict_defaults_are_settings(self, settings):
        """Test dict defaults are wrapped so they can be read as headers."""
        assert isinstance(settings['DEFAULT_REQUEST_HEADERS'], BaseSettings)
        assert settings.getheaders('DEFAULT_REQUEST_HEADERS').has('accept-language')

    def test_override(self):
        """Test values given to Settings override the defaults."""
        settings = Settings({'LOG_LEVEL': 'INFO'})
        assert settings['LOG_LEVEL'] == 'INFO'
        assert settings.copy_to_dict()['LOG_LEVEL'] == 'INFO'
