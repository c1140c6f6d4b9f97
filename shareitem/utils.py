# -*- coding: utf-8 -*-


"""
common utils for shareitem
"""


import hashlib
import os
from collections import namedtuple
from contextlib import closing
from typing import Optional, Union

import fs as pyfs
from fs.base import FS
from fs.errors import FSError
from fs.osfs import OSFS

DEFAULT_ALGORITHM = "sha256"

FSLike = Union[FS, str]


class FileRef(namedtuple("FileRef", ["fs", "path", "owned"], defaults=(False,))):
    """Location of a file: the filesystem it lives on and its path inside that
    filesystem.

    Attributes:
        fs (fs.base.FS): Filesystem holding the file.
        path (str): Path of the file relative to :attr:`fs`.
        owned (bool): Whether :attr:`fs` was opened by this package rather
            than passed in, in which case it is closed once an item stops
            referencing it.
    """

    @property
    def basename(self) -> str:
        """Final component of :attr:`path`."""
        return pyfs.path.basename(self.path)


def to_bytes(text):
    if not isinstance(text, bytes):
        text = bytes(text, "utf8")
    return text


def load_fs(root: FSLike) -> FS:
    """Return `root` when it is already a filesystem, else open it as an FS
    URL or directory path.

    Raises:
      IOError: If the filesystem can't be opened.
    """
    if isinstance(root, FS):
        return root

    try:
        return pyfs.open_fs(root)
    except FSError as exc:
        raise IOError("Could not open filesystem {0}: {1}".format(root, exc)) from exc


def resolve(path: str, fs: Optional[FSLike] = None) -> FileRef:
    """Build the :class:`FileRef` for `path`.

    Args:
      path: Path inside `fs`, or an OS path when `fs` is ``None``.
      fs: Filesystem instance or FS URL.

    Returns:
      Reference to the (possibly missing) file.

    """
    if fs is not None:
        return FileRef(load_fs(fs), path, owned=not isinstance(fs, FS))

    # OS paths get a filesystem rooted at their drive so that a missing parent
    # directory is reported when the file is used rather than here.
    drive, rest = os.path.splitdrive(os.path.abspath(path))
    return FileRef(OSFS(drive + os.sep), rest.replace(os.sep, "/"), owned=True)


class Stream(object):
    """Common interface for file-like objects.

    The input `obj` can be a file-like object or a path to a file in `fs`. If
    `obj` is a path, then it will be opened until :meth:`close` is called.
    If `obj` is a file-like object, then it's original position will be
    restored when :meth:`close` is called instead of closing the object
    automatically. Closing of the stream is deferred to whatever process passed
    the stream in.

    Successive readings of the stream is supported without having to manually
    set it's position back to ``0``.
    """

    def __init__(self, obj, fs: Optional[FS] = None, buffer_size=8192):
        if hasattr(obj, "read"):
            pos = obj.tell()
        elif fs is not None and fs.isfile(obj):
            obj = fs.openbin(obj)
            pos = None
        else:
            raise ValueError(
                "Object must be a valid file path or a readable object.")

        self._obj = obj
        self._pos = pos
        self._buffer_size = buffer_size

    def __iter__(self):
        """Read underlying IO object and yield results. Return object to
        original position if we didn't open it originally.
        """
        self._obj.seek(0)

        while True:
            data = self._obj.read(self._buffer_size)

            if not data:
                break

            yield data

        if self._pos is not None:
            self._obj.seek(self._pos)

    def close(self):
        """Close underlying IO object if we opened it, else return it to
        original position.
        """
        if self._pos is None:
            self._obj.close()
        else:
            self._obj.seek(self._pos)


def computehash(stream: Stream, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Compute the lowercase hex digest of everything `stream` yields."""
    hashobj = hashlib.new(algorithm)
    for data in stream:
        hashobj.update(to_bytes(data))
    return hashobj.hexdigest()


def digest(content,
           fs: Optional[FSLike] = None,
           algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Return the content hash of a file.

    Args:
      content: Readable object, or path to a file (inside `fs` if given).
      fs: Filesystem instance or FS URL holding `content`.
      algorithm: Name of a ``hashlib`` algorithm.

    Returns:
      Lowercase hexadecimal digest of the full file content.

    Raises:
      IOError: If the file can't be read.

    """
    if hasattr(content, "read"):
        with closing(Stream(content)) as stream:
            return computehash(stream, algorithm)

    ref = resolve(content, fs)
    try:
        if not ref.fs.isfile(ref.path):
            raise IOError("Could not read file: {0}".format(content))

        with closing(Stream(ref.path, fs=ref.fs)) as stream:
            return computehash(stream, algorithm)

    except FSError as exc:
        raise IOError("Could not read file {0}: {1}".format(content, exc)) from exc

    finally:
        if ref.owned:
            ref.fs.close()
