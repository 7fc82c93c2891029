"""Configuration for airline-codes"""

from pathlib import Path

from dynaconf import Dynaconf, Validator

# Validators for airline-codes settings.
_validators = [
    Validator("logging.format", is_in=["mozlog", "pretty"]),
    Validator("logging.level", is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    Validator("logging.can_propagate", is_type_of=bool),
]

# `root_path` = The directory holding the settings files below.
# `envvar_prefix` = Export envvars with `export AIRLINE_CODES_FOO=bar`.
# `settings_files` = Load these files in the order.
# `environments` = Enable layered environments such as `development`, `production`, `testing` etc.
# `env_switcher` = Switch environments by `export AIRLINE_CODES_ENV=production`. Default: `development`.
# `validators` = Define validators for airline-codes settings.

settings = Dynaconf(
    root_path=str(Path(__file__).parent),
    envvar_prefix="AIRLINE_CODES",
    settings_files=[
        "default.toml",
        "development.toml",
        "production.toml",
        "testing.toml",
    ],
    environments=True,
    env_switcher="AIRLINE_CODES_ENV",
    validators=_validators,
)
