from __future__ import annotations


class VCardBookError(Exception):
    """Base class for every error raised by vcardbook."""


class SourceError(VCardBookError):
    """A single address book path or vCard file could not be used."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class PathNotFoundError(SourceError):
    def __init__(self, path: str):
        super().__init__(path, f"path does not exist: {path}")


class PathUnreadableError(SourceError):
    def __init__(self, path: str, reason: object = None):
        message = f"cannot read directory {path}"
        if reason:
            message += f": {reason}"
        super().__init__(path, message)


class NoEligibleFilesError(SourceError):
    def __init__(self, path: str):
        super().__init__(path, f"no .vcf files found in directory: {path}")


class NoValidFilesInPathError(SourceError):
    def __init__(self, path: str):
        super().__init__(path, f"failed to process any vCard files in directory: {path}")


class FileDecodeError(SourceError):
    def __init__(self, path: str, reason: object):
        super().__init__(path, f"failed to decode vCard: {reason}")


class NoValidContactsError(SourceError):
    def __init__(self, path: str):
        super().__init__(path, "no valid contacts found in file")


class AllSourcesFailedError(VCardBookError):
    def __init__(self, failures: list[SourceError]):
        self.failures = list(failures)
        lines = "\n  - ".join(f"{f.path}: {f}" for f in self.failures)
        super().__init__(f"failed to load contacts from any address book:\n  - {lines}")


class OutputDestinationExistsError(VCardBookError):
    def __init__(self, path: str):
        super().__init__(f"output file already exists: {path}")
        self.path = path


class UnsupportedExportFormatError(VCardBookError):
    def __init__(self, fmt: str):
        super().__init__(f"unsupported format: {fmt}")
        self.format = fmt


class ConfigError(VCardBookError):
    pass


class ConfigNotFoundError(ConfigError):
    def __init__(self, path: str):
        super().__init__(f"config file not found at {path}")
        self.path = path


class ConfigParseError(ConfigError):
    def __init__(self, reason: object):
        super().__init__(f"failed to parse config file: {reason}")


class ConfigValidationError(ConfigError):
    def __init__(self, reason: object):
        super().__init__(f"configuration validation failed: {reason}")


__all__ = [
    "VCardBookError",
    "SourceError",
    "PathNotFoundError",
    "PathUnreadableError",
    "NoEligibleFilesError",
    "NoValidFilesInPathError",
    "FileDecodeError",
    "NoValidContactsError",
    "AllSourcesFailedError",
    "OutputDestinationExistsError",
    "UnsupportedExportFormatError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
