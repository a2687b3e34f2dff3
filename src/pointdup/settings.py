import os
import tomllib
from pathlib import Path


# Settings key constants
SETTING_EXTENSION = 'scan.extension'
SETTING_CONCURRENCY = 'processing.concurrency'
SETTING_REPORT_OUTPUT = 'report.output'
SETTING_LOG_PATH = 'logging.path'
SETTING_LOG_LEVEL = 'logging.level'

DEFAULT_SETTINGS_FILE_NAME = 'pointdup.toml'
SETTINGS_ENVIRONMENT_VARIABLE = 'POINTDUP_CONFIG'


class AnalyzerSettings:
    """Settings manager for duplicate analysis configuration.

    Provides a read-only key-value interface to access settings from a TOML file.
    This class is agnostic to the schema and usage of settings - it simply loads the TOML
    file and provides access to the raw data structure. Consumers of this class are
    responsible for interpreting and validating the settings according to their needs.

    Example:
        settings = AnalyzerSettings(Path('pointdup.toml'))
        extension = settings.get(SETTING_EXTENSION, '.pts')
        concurrency = settings.get('processing.concurrency')
    """

    def __init__(self, settings_file: Path | None = None):
        """Initialize settings from TOML file.

        If settings_file is None or does not exist, an empty settings dictionary is used,
        and all get() calls will return their defaults.

        Args:
            settings_file: Path to the TOML settings file
        """
        self._settings_file = settings_file
        self._settings = {}

        if settings_file is not None and settings_file.exists():
            with open(settings_file, 'rb') as f:
                self._settings = tomllib.load(f)

    @classmethod
    def locate(cls, explicit_path: str | os.PathLike | None = None) -> 'AnalyzerSettings':
        """Load settings from the first available source.

        Lookup order: explicit_path, the POINTDUP_CONFIG environment variable, and
        pointdup.toml in the current working directory.

        Raises:
            FileNotFoundError: explicit_path or POINTDUP_CONFIG names a missing file
        """
        if explicit_path is None:
            explicit_path = os.environ.get(SETTINGS_ENVIRONMENT_VARIABLE)

        if explicit_path is not None:
            settings_file = Path(explicit_path)
            if not settings_file.is_file():
                raise FileNotFoundError(f"Settings file not found: {settings_file}")
            return cls(settings_file)

        return cls(Path.cwd() / DEFAULT_SETTINGS_FILE_NAME)

    @property
    def settings_file(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Get a setting value by key with optional default.

        Supports both simple keys and dot notation for accessing nested keys (e.g.,
        'scan.extension' accesses settings['scan']['extension']). Returns the default
        value if the key path does not exist or if any intermediate value is not a
        dictionary.

        Examples:
            >>> settings.get(SETTING_EXTENSION, '.pts')
            '.pts'
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        keys = key.split('.')
        value = self._settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value
