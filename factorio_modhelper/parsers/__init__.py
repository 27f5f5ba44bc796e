"""Parsers read mod metadata files into validated models.

Each parser should inherit from :class:`~factorio_modhelper.parsers.base.BaseParser`
and implement its :py:meth:`parse` method.
"""

from .base import BaseParser
from .info import METADATA_FILE, InfoParser, ModInfo

__all__ = [
    "BaseParser",
    "InfoParser",
    "METADATA_FILE",
    "ModInfo",
]
