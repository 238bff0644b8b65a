from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .errors import (
    AllSourcesFailedError,
    NoEligibleFilesError,
    NoValidContactsError,
    NoValidFilesInPathError,
    PathNotFoundError,
    PathUnreadableError,
    SourceError,
)
from .models import Contact
from .vcards import parse_vcards

log = logging.getLogger(__name__)

VCARD_EXTENSION = ".vcf"


def load_vcard_file(path: str, logger: logging.Logger | None = None) -> list[Contact]:
    """Decode one .vcf file; raises a SourceError subclass on failure."""
    logger = logger or log
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise PathUnreadableError(path, exc) from exc
    contacts = parse_vcards(data.decode("utf-8", errors="ignore"), source_file=path, logger=logger)
    if not contacts:
        raise NoValidContactsError(path)
    return contacts


def _iter_vcard_files(root: str, logger: logging.Logger):
    root_norm = os.path.normpath(root)

    def on_error(err: OSError) -> None:
        if os.path.normpath(err.filename or "") == root_norm:
            raise PathUnreadableError(root, err.strerror or err)
        logger.warning("Error accessing %s during directory walk: %s", err.filename, err)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = os.path.join(dirpath, filename)
            if not filename.lower().endswith(VCARD_EXTENSION):
                logger.debug("Skipping non-vcf file %s", file_path)
                continue
            yield file_path


def load_contacts_from_path(path: str, logger: logging.Logger | None = None) -> list[Contact]:
    """Load every contact below one address book directory.

    Files that fail to decode are logged and skipped. Raises a SourceError
    when the path as a whole is unusable.
    """
    logger = logger or log
    logger.debug("Loading contacts from path %s", path)

    if not os.path.exists(path):
        raise PathNotFoundError(path)
    if not os.path.isdir(path):
        raise PathUnreadableError(path, "not a directory")

    contacts: list[Contact] = []
    vcf_count = processed = errors = 0
    for file_path in _iter_vcard_files(path, logger):
        vcf_count += 1
        logger.debug("Processing vCard file %s", file_path)
        try:
            contacts.extend(load_vcard_file(file_path, logger))
        except SourceError as exc:
            logger.warning("Failed to process vCard file %s: %s", file_path, exc)
            errors += 1
            continue
        processed += 1

    logger.debug(
        "Finished %s: %d vcf files, %d processed, %d errors, %d contacts",
        path,
        vcf_count,
        processed,
        errors,
        len(contacts),
    )

    if vcf_count == 0:
        raise NoEligibleFilesError(path)
    if processed == 0:
        raise NoValidFilesInPathError(path)
    return contacts


def load_contacts(paths: Iterable[str], logger: logging.Logger | None = None) -> list[Contact]:
    """Load contacts from every address book path, in order.

    A failing path is recorded and skipped. AllSourcesFailedError is raised
    only when at least one path failed and no contact was collected.
    """
    logger = logger or log
    paths = list(paths)
    contacts: list[Contact] = []
    failures: list[SourceError] = []

    for path in paths:
        try:
            contacts.extend(load_contacts_from_path(path, logger))
        except SourceError as exc:
            failures.append(exc)

    if failures and not contacts:
        raise AllSourcesFailedError(failures)

    for failure in failures:
        logger.warning("Failed to load contacts from address book %s: %s", failure.path, failure)

    if not contacts:
        logger.info("No contacts found in any address book")
    else:
        logger.debug("Loaded %d contacts from %d paths", len(contacts), len(paths))
    return contacts


__all__ = ["load_contacts", "load_contacts_from_path", "load_vcard_file", "VCARD_EXTENSION"]
