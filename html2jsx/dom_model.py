"""Simple DOM model for parsed markup documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Text:
    content: str


@dataclass
class Element:
    name: str
    # None marks an absent value, which is not the same as "".
    attrs: Dict[str, Optional[str]] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)


Node = Element | Text
Document = List[Node]
