from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

@dataclass
class Results:
    """Files walked during an extraction and the scenarios gathered from them.

    Scenarios are ordered by file (enumeration order), then by position of
    the marker call inside the file.
    """
    walked: List[str] = field(default_factory=list)
    scenarios: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Results":
        return Results(
            walked=[str(x) for x in d.get("walked", [])],
            scenarios=[str(x) for x in d.get("scenarios", [])],
        )
