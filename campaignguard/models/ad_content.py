from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MediaInfo:
    type: str  # image | video
    url: str = ""
    tags: List[str] = field(default_factory=list)
    duration: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaInfo":
        return cls(
            type=data.get("type", ""),
            url=data.get("url", ""),
            tags=list(data.get("tags") or []),
            duration=data.get("duration"),
        )


@dataclass(frozen=True)
class AdContent:
    headline: Optional[str] = None
    body: Optional[str] = None
    cta: Optional[str] = None
    media: Optional[MediaInfo] = None

    def text_elements(self) -> List[tuple]:
        """(element, text) pairs in scan order, empty fields skipped."""
        pairs = [("headline", self.headline), ("body", self.body), ("cta", self.cta)]
        return [(name, text) for name, text in pairs if text]

    def element_text(self, element: str) -> Optional[str]:
        if element in ("headline", "body", "cta"):
            return getattr(self, element)
        return None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AdContent":
        if not data:
            return cls()
        media = data.get("media")
        return cls(
            headline=data.get("headline"),
            body=data.get("body"),
            cta=data.get("cta"),
            media=MediaInfo.from_dict(media) if media else None,
        )
