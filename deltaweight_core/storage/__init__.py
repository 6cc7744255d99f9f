"""DeltaWeight Input Sources.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from deltaweight_core.storage.source import FileLineSource, LineSource, MemoryLineSource, SourceConfig

__all__ = ["FileLineSource", "LineSource", "MemoryLineSource", "SourceConfig"]
