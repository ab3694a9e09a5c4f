from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Book:
    id: Optional[int] = None
    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None
