"""
Reading and writing document text at a location.

Locations may be:
    - a filesystem path (str or Path)
    - a file: URI                       file:///home/me/model.nlogo
    - an http(s) URL                    https://example.org/model.nlogo
    - a member of a zip/jar archive     zip:/path/models.zip!/Fire.nlogo
                                        jar:file:/path/models.jar!/Fire.nlogo

Only local paths and file: URIs can be written.
"""

from __future__ import annotations

import io
import logging
import os
import stat
import tempfile
import urllib.request
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from nlogofmt.errors import UnsupportedLocation

logger = logging.getLogger(__name__)

Location = Union[str, Path]

ENCODING = "utf-8"

_ARCHIVE_SCHEMES = ("zip:", "jar:")


def _uri_path(uri: str) -> Path:
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise UnsupportedLocation(f"Not a file URI: {uri}")
    return Path(url2pathname(parsed.path))


def _archive_parts(location: str) -> tuple[Path, str]:
    inner = location.split(":", 1)[1]
    if "!/" not in inner:
        raise UnsupportedLocation(f"Archive location needs an '!/' member separator: {location}")
    archive, member = inner.split("!/", 1)
    archive_path = _uri_path(archive) if archive.startswith("file:") else Path(archive)
    return archive_path, member


@contextmanager
def open_for_read(location: Location) -> Iterator[TextIO]:
    """Open a location as a text stream. The stream is closed on exit."""
    if isinstance(location, Path):
        with open(location, encoding=ENCODING, newline="") as f:
            yield f
        return

    if location.startswith(_ARCHIVE_SCHEMES):
        archive_path, member = _archive_parts(location)
        with zipfile.ZipFile(archive_path) as archive:
            with archive.open(member) as raw:
                yield io.TextIOWrapper(raw, encoding=ENCODING, newline="")
        return

    scheme = urlparse(location).scheme
    if scheme in ("http", "https"):
        with urllib.request.urlopen(location) as response:
            yield io.TextIOWrapper(response, encoding=ENCODING, newline="")
        return

    path = _uri_path(location) if scheme == "file" else Path(location)
    with open(path, encoding=ENCODING, newline="") as f:
        yield f


def read_text(location: Location) -> str:
    with open_for_read(location) as stream:
        return stream.read()


def writable_path(location: Location) -> Path:
    """Resolve a location to a local path that can be written."""
    if isinstance(location, Path):
        return location
    if location.startswith(_ARCHIVE_SCHEMES):
        raise UnsupportedLocation(f"Cannot write into an archive: {location}")
    scheme = urlparse(location).scheme
    if scheme == "file":
        return _uri_path(location)
    if scheme in ("http", "https"):
        raise UnsupportedLocation(f"Cannot write to a remote location: {location}")
    return Path(location)


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write(path: Path, text: str) -> None:
    """
    Write text to path atomically.

    Writes to a temporary file in the same directory, then renames
    (os.replace) it into place, so a failed write leaves any existing
    file untouched.

    The written file keeps the permissions of the file it replaces; a new
    file gets the default mode allowed by the umask.
    """
    mode = _target_mode(path)
    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, newline="") as tmp_handle:
            tmp_handle.write(text)
            tmp_handle.flush()
            os.fsync(tmp_handle.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, str(path))
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
    logger.debug(f"Wrote {len(text)} characters to {path}")
