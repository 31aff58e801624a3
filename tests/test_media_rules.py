from campaignguard.catalog.loader import get_default_catalog
from campaignguard.models.ad_content import AdContent, MediaInfo
from campaignguard.models.violation import ContentElement, ViolationSeverity
from campaignguard.rules.media import MediaContentRule


def _evaluate(media, platform="meta"):
    rule = MediaContentRule(get_default_catalog())
    return rule.evaluate(AdContent(media=media), platform, "beauty")


def test_before_after_tag_is_an_error():
    violations = _evaluate(MediaInfo(type="image", url="a.jpg", tags=["Before and After shot"]))

    assert len(violations) == 1
    assert violations[0].id == "before_after_image"
    assert violations[0].severity == ViolationSeverity.ERROR
    assert violations[0].location.element == ContentElement.IMAGE


def test_transformation_tag_is_an_error_on_any_platform():
    violations = _evaluate(MediaInfo(type="image", url="a.jpg", tags=["transformation"]), "google")

    assert len(violations) == 1


def test_lifestyle_image_is_fine():
    assert _evaluate(MediaInfo(type="image", url="a.jpg", tags=["lifestyle"])) == []


def test_long_video_warns_on_meta_only():
    long_video = MediaInfo(type="video", url="v.mp4", duration=30)

    meta = _evaluate(long_video, "meta")
    assert len(meta) == 1
    assert meta[0].severity == ViolationSeverity.WARNING
    assert meta[0].description == "Videos longer than 15 seconds may have reduced reach on Facebook"

    assert _evaluate(long_video, "google") == []


def test_short_video_is_fine():
    assert _evaluate(MediaInfo(type="video", url="v.mp4", duration=10)) == []
    assert _evaluate(MediaInfo(type="video", url="v.mp4", duration=15)) == []
