"""
Temporary on-disk staging of uploaded files.
"""
import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Iterator

from werkzeug.datastructures import FileStorage

from portfolio.errors import LocalIOError

logger = logging.getLogger(__name__)


@contextmanager
def staged_upload(upload: FileStorage, suffix: str, directory: str = None) -> Iterator[str]:
    """Write ``upload`` to a temp file and yield its path.

    The file is removed when the block exits, whatever the outcome.
    """
    try:
        fd, path = tempfile.mkstemp(prefix="resume-", suffix=suffix, dir=directory)
    except OSError as e:
        logger.exception("Could not create temp file in %s", directory or tempfile.gettempdir())
        raise LocalIOError("Failed to create temp file") from e

    try:
        try:
            with os.fdopen(fd, "wb") as fh:
                upload.save(fh)
        except OSError as e:
            logger.exception("Could not stage upload to %s", path)
            raise LocalIOError("Failed to write uploaded file") from e
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
