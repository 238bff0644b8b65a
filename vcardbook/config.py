from __future__ import annotations

import logging
import os
import tomllib

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigError, ConfigNotFoundError, ConfigParseError, ConfigValidationError

log = logging.getLogger(__name__)

APP_NAME = "vcardbook"
CONFIG_FILE_NAME = "vcardbook.toml"

CONFIG_NOT_FOUND_TEMPLATE = """\
Configuration Error: {error}

To get started, create a configuration file at:
  {path}

Example configuration:
  [addressbook.personal]
  path = "~/contacts/personal"

  [addressbook.work]
  path = "/path/to/work/contacts"

Make sure the contact directories exist and contain .vcf files.
"""

VALIDATION_FAILED_TEMPLATE = """\
Configuration Error: {error}

Troubleshooting tips:
  - Ensure all addressbook paths exist
  - Check that paths are directories, not files
  - Verify you have read access to the directories
  - Use absolute paths or ~ for home directory

Use --debug for more detailed error information.
"""

PARSE_FAILED_TEMPLATE = """\
Configuration Error: {error}

The configuration file has invalid TOML syntax.
Please check the file format and fix any syntax errors.

Example of correct format:
  [addressbook.name]
  path = "/path/to/contacts"
"""

DEFAULT_ERROR_TEMPLATE = """\
Configuration Error: {error}
Use --debug for more detailed error information.
"""


def default_config_path() -> str:
    return os.path.join(os.path.expanduser("~"), ".config", APP_NAME, CONFIG_FILE_NAME)


def expand_path(path: str) -> str:
    if path.startswith("~/"):
        return os.path.join(os.path.expanduser("~"), path[2:])
    return path


class AddressBook(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    path: str = ""

    @property
    def expanded_path(self) -> str:
        return expand_path(self.path)

    def problem(self) -> str | None:
        """Describe why this address book is unusable, or None if it is fine."""
        if not self.path:
            return f"address book '{self.name}': path cannot be empty"
        expanded = self.expanded_path
        if not os.path.exists(expanded):
            return (
                f"address book '{self.name}': path does not exist: {expanded}"
                f" (expanded from: {self.path})"
            )
        if not os.path.isdir(expanded):
            return f"address book '{self.name}': path must be a directory, got file: {expanded}"
        if not os.access(expanded, os.R_OK | os.X_OK):
            return f"address book '{self.name}': directory is not readable: {expanded}"
        return None


class Config(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    address_books: dict[str, AddressBook] = Field(default_factory=dict, alias="addressbook")

    @model_validator(mode="after")
    def _name_address_books(self) -> "Config":
        for name, ab in self.address_books.items():
            if not ab.name:
                ab.name = name
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigParseError(exc) from exc

    def check_paths(self) -> None:
        if not self.address_books:
            raise ConfigValidationError(
                "no address books configured. Please add at least one "
                "[addressbook.name] section to your config file"
            )
        problems = [p for p in (ab.problem() for ab in self.address_books.values()) if p]
        if problems:
            raise ConfigValidationError(
                "address book validation errors:\n  - " + "\n  - ".join(problems)
            )

    def address_book_paths(self) -> list[str]:
        return [ab.expanded_path for ab in self.address_books.values()]


def load_config(path: str | None = None) -> Config:
    path = path or default_config_path()
    log.debug("Looking for config file at %s", path)
    if not os.path.exists(path):
        raise ConfigNotFoundError(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(exc) from exc

    config = Config.from_dict(data)
    log.debug("Config loaded with %d address books", len(config.address_books))
    for ab in config.address_books.values():
        log.debug("Address book %s -> %s", ab.name, ab.path)
    config.check_paths()
    return config


def render_config_error(err: ConfigError) -> str:
    """User-facing guidance text for a configuration failure."""
    if isinstance(err, ConfigNotFoundError):
        return CONFIG_NOT_FOUND_TEMPLATE.format(error=err, path=err.path)
    if isinstance(err, ConfigValidationError):
        return VALIDATION_FAILED_TEMPLATE.format(error=err)
    if isinstance(err, ConfigParseError):
        return PARSE_FAILED_TEMPLATE.format(error=err)
    return DEFAULT_ERROR_TEMPLATE.format(error=err)


__all__ = [
    "AddressBook",
    "Config",
    "default_config_path",
    "expand_path",
    "load_config",
    "render_config_error",
]
