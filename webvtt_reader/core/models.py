"""Parsed cue and result containers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Cue:
    start: Optional[float]
    end: Optional[float]
    text: str  # block lines concatenated without separator

    def as_dict(self) -> Dict[str, Any]:
        return {'start': self.start, 'end': self.end, 'text': self.text}


@dataclass
class ParseResult:
    cues: List[Cue] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {'cues': [cue.as_dict() for cue in self.cues]}
