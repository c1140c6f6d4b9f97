"""Module for ShareItem class."""

import datetime
import logging
from typing import Any, Dict, Mapping, Optional

import shareitem.utils as u
from fs.errors import FSError

log = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 24 * 60 * 60
DEFAULT_SHARE_LIMIT = 5
UINT32_MAX = 2**32 - 1

# Serialized key -> attribute, in serialization order.
WIRE_FIELDS = (
    ("filename", "basename"),
    ("hash", "hash"),
    ("max-age", "max_age"),
    ("share-limit", "share_limit"),
    ("share-count", "share_count"),
)


def _uint32(name, value) -> int:
    """Return `value` if it fits the unsigned 32-bit wire type."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("{0} must be an int, not {1}".format(
            name, type(value).__name__))
    if not 0 <= value <= UINT32_MAX:
        raise ValueError("{0} must be between 0 and {1}, got {2}".format(
            name, UINT32_MAX, value))
    return value


class ShareItem(object):
    """A file that is offered to other machines.

    Attributes:
        hash (str): Content hash, typically SHA-256 in lowercase hex, or
            ``None`` if unset.
        basename (str): Name of the published file without any directory,
            or ``None`` if unset.
        max_age (int): Maximum permitted age of the file in seconds. Defaults
            to ``86400``.
        share_limit (int): Maximum number of times the file may be shared.
            Defaults to ``5``.
        share_count (int): Number of times the file has been shared already.
        file (FileRef): Location of the local file. Not serialized.
        ctime (datetime.datetime): Creation time of the local file, or its
            metadata change time where the filesystem records no birth time.
            Not serialized.

    """

    def __init__(self, **fields):
        self._hash = None
        self._basename = None
        self._max_age = DEFAULT_MAX_AGE
        self._share_limit = DEFAULT_SHARE_LIMIT
        self._share_count = 0
        self._file = None
        self._ctime = None

        for name, value in fields.items():
            if not isinstance(getattr(type(self), name, None), property):
                raise TypeError(
                    "ShareItem() got an unexpected keyword argument {0!r}".format(name))
            setattr(self, name, value)

    @property
    def hash(self) -> Optional[str]:
        return self._hash

    @hash.setter
    def hash(self, value: Optional[str]) -> None:
        # not changed
        if self._hash == value:
            return
        self._hash = value

    @property
    def basename(self) -> Optional[str]:
        return self._basename

    @basename.setter
    def basename(self, value: Optional[str]) -> None:
        # not changed
        if self._basename == value:
            return
        self._basename = value

    @property
    def max_age(self) -> int:
        return self._max_age

    @max_age.setter
    def max_age(self, value: int) -> None:
        self._max_age = _uint32("max_age", value)

    @property
    def share_limit(self) -> int:
        return self._share_limit

    @share_limit.setter
    def share_limit(self, value: int) -> None:
        self._share_limit = _uint32("share_limit", value)

    @property
    def share_count(self) -> int:
        return self._share_count

    @share_count.setter
    def share_count(self, value: int) -> None:
        self._share_count = _uint32("share_count", value)

    @property
    def file(self) -> Optional[u.FileRef]:
        return self._file

    @file.setter
    def file(self, value: Optional[u.FileRef]) -> None:
        if self._file is value:
            return

        old, self._file = self._file, value

        # Filesystems opened by resolve() are not shared with the caller.
        if old is not None and old.owned and (value is None or value.fs is not old.fs):
            old.fs.close()

    @property
    def ctime(self) -> Optional[datetime.datetime]:
        return self._ctime

    @ctime.setter
    def ctime(self, value: Optional[datetime.datetime]) -> None:
        if self._ctime is value:
            return
        self._ctime = value

    @classmethod
    def from_path(cls,
                  path: str,
                  fs: Optional[u.FSLike] = None,
                  algorithm: str = u.DEFAULT_ALGORITHM) -> "ShareItem":
        """Return a new item loaded from the file at `path`.

        Raises:
            IOError: If the file can't be inspected or read.
        """
        item = cls()
        item.load(path, fs=fs, algorithm=algorithm)
        return item

    def load(self,
             path: str,
             fs: Optional[u.FSLike] = None,
             algorithm: str = u.DEFAULT_ALGORITHM) -> None:
        """Load the item from a file.

        :attr:`file` and :attr:`ctime` are always replaced, while
        :attr:`basename` and :attr:`hash` are only filled in when unset. The
        load is not atomic: on failure the fields set by earlier steps are
        kept.

        Args:
            path: OS path of the file, or its path inside `fs`.
            fs (optional): Filesystem instance or FS URL holding `path`.
            algorithm (str, optional): ``hashlib`` algorithm used for the
                content hash. Defaults to ``'sha256'``.

        Raises:
            IOError: If the file metadata or content can't be read.

        """
        log.debug("loading share item from %s", path)

        ref = u.resolve(path, fs)
        self.file = ref

        try:
            info = ref.fs.getinfo(ref.path, namespaces=["details"])
        except FSError as exc:
            log.debug("could not query %s: %s", path, exc)
            raise IOError("Could not query file {0}: {1}".format(path, exc)) from exc

        # POSIX stat has no birth time, so fall back to the metadata change time.
        self.ctime = info.created or info.metadata_changed

        if self.basename is None:
            self.basename = ref.basename

        if self.hash is None:
            try:
                self.hash = u.digest(ref.path, fs=ref.fs, algorithm=algorithm)
            except IOError as exc:
                log.debug("could not hash %s: %s", path, exc)
                raise
            log.debug("computed %s hash %s for %s", algorithm, self.hash, path)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the item.

        Returns:
            Mapping with the keys ``filename``, ``hash``, ``max-age``,
            ``share-limit`` and ``share-count``. Unset names and hashes are
            serialized as empty strings.

        """
        data = {}
        for key, attr in WIRE_FIELDS:
            value = getattr(self, attr)
            if value is None:
                value = ""
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShareItem":
        """Create a new item from serialized data. Unknown keys are ignored and
        missing keys keep their defaults.
        """
        item = cls()
        for key, attr in WIRE_FIELDS:
            if key not in data:
                continue

            setattr(item, attr, data[key])

        return item

    def to_text(self) -> str:
        """Build a text representation of the item for logs."""
        return "{0} {1} (max-age: {2}, share-count: {3}, share-limit: {4})".format(
            self.hash,
            self.basename,
            self.max_age,
            self.share_count,
            self.share_limit,
        )

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return "{0}(hash={1!r}, basename={2!r})".format(
            type(self).__name__, self.hash, self.basename)
