import logging
import os
import os.path
from configparser import ConfigParser, NoSectionError, NoOptionError

DEFAULT_CONFIG_FILE = '~/.kuroneko'
CONFIG_ENV_VAR = 'KURONEKO_CONFIG'

class ConfigError(Exception):
    """Generic configuration error exception
    """
    pass

class ConfigKeyError(KeyError):
    """Raised when a key is requested from the config but is not found
    """
    pass

class ConfigurationProvider(object):
    """Basic configuration provider interface, other providers should inherit
    from this
    """
    def get_value(self, *keys):
        raise NotImplementedError()

    def get_default(self, default, *keys):
        """Like get_value(), but returns default instead of raising
        ConfigKeyError
        """
        try:
            return self.get_value(*keys)
        except ConfigKeyError:
            return default

    def get_int(self, default, *keys):
        """Like get_default(), converting the value to an int. Raises
        ConfigError if the value is not a number.
        """
        return self._convert(int, default, keys)

    def get_float(self, default, *keys):
        return self._convert(float, default, keys)

    def get_log_level(self, default, *keys):
        """Return the logging level named by the value, raises ConfigError
        for an unknown level name
        """
        name = str(self.get_default(default, *keys)).upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ConfigError('Unknown log level for {keys}: {value!r}'.format(
                keys='.'.join(keys), value=name))
        return name

    def _convert(self, convert, default, keys):
        value = self.get_default(default, *keys)
        try:
            return convert(value)
        except (TypeError, ValueError):
            raise ConfigError('Invalid value for {keys}: {value!r}'.format(
                keys='.'.join(keys), value=value))

class NullConfig(ConfigurationProvider):
    """Simple placeholder provider, raises ConfigKeyError for all keys
    """
    def get_value(self, *keys):
        raise ConfigKeyError('NullConfig provides no values')

class DotFileConfig(ConfigurationProvider):
    """Reads from the ~/.kuroneko config file, or from $KURONEKO_CONFIG when
    set. Can read from an alternative file as well.
    """
    _config = None

    def __init__(self, config_file=None):
        if config_file is None:
            config_file = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)
        config_file = os.path.expanduser(config_file)
        if not os.path.exists(config_file):
            raise ConfigError('Config file does not exist: {file}'.format(
                file=config_file))

        self._config = ConfigParser()
        self._config.read([config_file], encoding='utf-8')

    def get_value(self, *keys):
        try:
            return self._config.get(*keys)
        except (NoSectionError, NoOptionError) as err:
            raise ConfigKeyError(err)

class DictConfig(ConfigurationProvider, dict):
    """Simple config provider that acts like a dict
    """
    def get_value(self, *keys):
        node = self
        for key in keys:
            try:
                node = node[key]
            except (KeyError, TypeError) as err:
                raise ConfigKeyError(err)
        return node

def load_config(config_file=None):
    """Return a DotFileConfig, or a NullConfig when the default config file
    does not exist. An explicitly given file must exist.
    """
    try:
        return DotFileConfig(config_file)
    except ConfigError:
        if config_file is not None:
            raise
        return NullConfig()
