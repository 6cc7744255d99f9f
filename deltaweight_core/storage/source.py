"""DeltaWeight Line Sources - Class Document Input.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, List
from deltaweight_core.errors import SourceUnavailable

logger = logging.getLogger(__name__)

@dataclass
class SourceConfig:
    """Line source configuration."""
    encoding: str = "utf-8"
    errors: str = "strict"

class LineSource(ABC):
    """Iterable of document lines for one class."""

    def __init__(self, config: SourceConfig = None):
        self.config = config or SourceConfig()

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    def read_lines(self) -> List[str]:
        return list(self)

class MemoryLineSource(LineSource):
    """Lines held in memory."""

    def __init__(self, lines: Iterable[str], name: str = "memory", config: SourceConfig = None):
        super().__init__(config)
        self._lines = list(lines)
        self._name = name

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    @property
    def description(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._lines)

class FileLineSource(LineSource):
    """Lines of a text file, one document per line.

    The file is opened for the duration of one iteration and closed
    whether or not the iteration completes.
    """

    def __init__(self, path: str, config: SourceConfig = None):
        super().__init__(config)
        self.path = os.fspath(path)

    @property
    def description(self) -> str:
        return self.path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def __iter__(self) -> Iterator[str]:
        try:
            with open(self.path, "r", encoding=self.config.encoding, errors=self.config.errors) as f:
                logger.debug(f"Reading lines from {self.path}")
                for line in f:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(self.path, str(e)) from e

__all__ = ["FileLineSource", "LineSource", "MemoryLineSource", "SourceConfig"]
