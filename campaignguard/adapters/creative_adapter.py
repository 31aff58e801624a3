from typing import Any, Dict

from campaignguard.models.ad_content import AdContent, MediaInfo


def _first(creative: Dict[str, Any], *keys: str):
    for key in keys:
        value = creative.get(key)
        if value:
            return value
    return None


def extract_text_content(creative: Dict[str, Any]) -> AdContent:
    """
    Normalizes a creative record into lintable ad content.

    Creatives coming from generation, uploads and integrations name their
    copy fields differently; the first populated alias wins.
    """
    media = _first(creative, "media", "image", "video")

    return AdContent(
        headline=_first(creative, "headline", "title"),
        body=_first(creative, "body", "description", "content"),
        cta=_first(creative, "cta", "callToAction"),
        media=MediaInfo.from_dict(media) if isinstance(media, dict) else None,
    )
