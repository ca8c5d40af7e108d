from __future__ import annotations
from typing import Any, Dict, Protocol

class MovieUpstreamPort(Protocol):
    def popular(self, page: int = 1) -> Dict[str, Any]: ...
    def search(self, query: str, page: int = 1) -> Dict[str, Any]: ...
    def details(self, movie_id: int) -> Dict[str, Any]: ...
    def recommendations(self, movie_id: int, page: int = 1) -> Dict[str, Any]: ...
