"""Page metadata: title, description, Open Graph, Twitter card, canonical
and alternate-language links, and robots directives."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from django.conf import settings

from frontend.i18n import get_catalog, localize_path, strip_locale, supported_locales

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


@dataclass(frozen=True)
class OpenGraphImage:
    url: str
    alt: str
    width: int = OG_IMAGE_WIDTH
    height: int = OG_IMAGE_HEIGHT


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    keywords: str
    canonical_url: str
    alternates: dict[str, str]
    og_locale: str
    site_name: str
    og_image: OpenGraphImage | None
    twitter_card: str
    twitter_handle: str
    robots_index: bool
    og_type: str = "website"
    robots_follow: bool = True
    googlebot_extras: dict[str, str] = field(default_factory=dict)

    @property
    def robots(self) -> str:
        index = "index" if self.robots_index else "noindex"
        follow = "follow" if self.robots_follow else "nofollow"
        return f"{index}, {follow}"

    @property
    def googlebot(self) -> str:
        parts = [self.robots] + [f"{key}:{value}" for key, value in self.googlebot_extras.items()]
        return ", ".join(parts)


def absolute_url(url: str, base_url: str) -> str:
    if url.startswith(("http://", "https://")):
        return url
    return f"{base_url}{url}"


def join_keywords(keywords: str | Iterable[str] | None) -> str:
    if keywords is None:
        return ""
    if isinstance(keywords, str):
        return keywords
    return ", ".join(keyword for keyword in keywords if keyword)


def language_alternates(url: str, base_url: str) -> dict[str, str]:
    """The same page in every supported locale."""
    path = urlsplit(url).path if url.startswith(("http://", "https://")) else url
    rest = strip_locale(path)
    return {locale: f"{base_url}{localize_path(rest, locale)}" for locale in supported_locales()}


def build_page_metadata(
    *,
    title: str,
    description: str,
    locale: str,
    url: str,
    keywords: str | Iterable[str] | None = None,
    image_url: str | None = None,
    image_alt: str | None = None,
    twitter_card: str = "summary_large_image",
    robots_index: bool = True,
    site_name: str | None = None,
    base_url: str | None = None,
) -> PageMetadata:
    base_url = (base_url if base_url is not None else settings.SITE_BASE_URL).rstrip("/")
    og_image = None
    if image_url:
        og_image = OpenGraphImage(url=absolute_url(image_url, base_url), alt=image_alt or title)

    googlebot_extras = {}
    if robots_index:
        googlebot_extras = {
            "max-video-preview": "-1",
            "max-image-preview": "large",
            "max-snippet": "-1",
        }

    return PageMetadata(
        title=title,
        description=description,
        keywords=join_keywords(keywords),
        canonical_url=absolute_url(url, base_url),
        alternates=language_alternates(url, base_url),
        og_locale=get_catalog(locale).format.og_locale,
        site_name=site_name or settings.SITE_NAME,
        og_image=og_image,
        twitter_card=twitter_card,
        twitter_handle=settings.TWITTER_HANDLE,
        robots_index=robots_index,
        googlebot_extras=googlebot_extras,
    )
