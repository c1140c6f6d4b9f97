# -*- coding: utf-8 -*-
"""shareitem describes one file that a host offers to its peers. What does
that mean? Simply, that a :class:`ShareItem` records the file's content hash,
its name, how long it may be offered and how many times it may be served.

Typical use cases for this kind of record are ones where:

- Files are identified by content rather than by name (e.g. firmware caches).
- A daemon decides what to advertise and evict from a bounded set of files.
- Records are stored or transmitted as small key-value dictionaries.
"""

from .__meta__ import (
    __title__,
    __summary__,
    __url__,
    __version__,
    __author__,
    __email__,
    __license__,
)

from .shareitem import (
    ShareItem,
    WIRE_FIELDS,
    DEFAULT_MAX_AGE,
    DEFAULT_SHARE_LIMIT,
)
from .utils import DEFAULT_ALGORITHM, FileRef, digest


__all__ = (
    "ShareItem",
    "FileRef",
    "digest",
    "WIRE_FIELDS",
    "DEFAULT_MAX_AGE",
    "DEFAULT_SHARE_LIMIT",
    "DEFAULT_ALGORITHM",
)
