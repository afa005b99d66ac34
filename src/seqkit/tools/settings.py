import logging as lg
from pathlib import Path
from typing import Any, Dict
import tomllib

from seqkit.common.errors import ConfigError
from seqkit.literal.reader import STYLES


class Settings:
    verbose: bool
    trace: bool
    style: str
    indent: int | None

    def __init__(self):
        self.verbose = False
        self.trace = False
        self.style = 'json'
        self.indent = None

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None,
        style: str | None = None,
        indent: int | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        if style is not None:
            if style not in STYLES:
                raise ConfigError(f'Unknown output style {style}')

            self.style = style

        if indent is not None:
            if indent < 0:
                raise ConfigError(f'Indent must not be negative, got {indent}')

            self.indent = indent

        return self


FIELD_TYPES = {
    'verbose': bool,
    'trace': bool,
    'style': str,
    'indent': int
}


def check_table(table: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in table.items():
        if key not in FIELD_TYPES:
            raise ConfigError(f'Unknown setting {key}')

        expected = FIELD_TYPES[key]

        # bool is an int, but not a valid indent
        if type(value) is not expected:
            raise ConfigError(
                f'Setting {key} must be {expected.__name__}, got {type(value).__name__}'
            )

    return table


def load_settings(path: Path, settings: Settings | None = None) -> Settings:
    if settings is None:
        settings = Settings()

    lg.debug(f'Loading settings from {path}')

    try:
        config = tomllib.loads(path.read_text())

    except OSError as e:
        raise ConfigError(f'Cannot read {path}: {e.strerror}') from e

    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f'Invalid TOML in {path}: {e}') from e

    except UnicodeDecodeError as e:
        raise ConfigError(f'Cannot decode {path}: {e.reason} at byte {e.start}') from e

    table = config.get('seqkit', {})

    if not isinstance(table, dict):
        raise ConfigError(f'[seqkit] in {path} must be a table')

    return settings.update(**check_table(table))
