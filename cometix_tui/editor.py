"""Tracks which segment is being edited."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass
class EditorComponent:
    editing_segment: Optional[Hashable] = None

    def edit_segment(self, segment_id: Hashable) -> None:
        self.editing_segment = segment_id

    def stop_editing(self) -> None:
        self.editing_segment = None

    def is_editing(self, segment_id: Hashable) -> bool:
        return self.editing_segment is not None and self.editing_segment == segment_id