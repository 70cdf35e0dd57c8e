import datetime
from typing import Optional, Tuple

from markupsafe import Markup

from homepage.components.renderer import TemplateRenderer
from homepage.schemas.blog import Link, Track
from homepage.settings import settings

TWITTER_URL = "https://twitter.com/samuelkraft"

FOOTER_LINKS: Tuple[Link, ...] = (
    Link(name="Home", url="/"),
    Link(name="Twitter", url=TWITTER_URL),
    Link(name="Newsletter", url="/newsletter"),
    Link(name="About", url="/about"),
    Link(name="Github", url="https://github.com/samuelkraft"),
    Link(name="RSS", url="/feed.xml"),
    Link(name="Blog", url="/blog"),
    Link(name="Dribbble", url="https://dribbble.com/samuelkraft"),
    Link(name="Percentage change calc", url="/percentagechange"),
    Link(name="Books", url="/books"),
    Link(name="Instagram", url="https://www.instagram.com/samuelkraft"),
    Link(name="Changelog", url="/changelog"),
)

HEADER_LINKS: Tuple[Link, ...] = (
    Link(name="About", url="/about"),
    Link(name="Blog", url="/blog"),
    Link(name="Books", url="/books"),
    Link(name="Newsletter", url="/newsletter"),
)


def render_header(
    renderer: TemplateRenderer,
    current_path: str = "/",
    site_title: Optional[str] = None,
) -> Markup:
    return renderer.render(
        "header.html",
        site_title=site_title or settings.SITE_TITLE,
        links=HEADER_LINKS,
        current_path=current_path,
    )


def render_now_playing(renderer: TemplateRenderer, track: Optional[Track]) -> Markup:
    return renderer.render("nowplaying.html", track=track)


def render_page_transition(
    renderer: TemplateRenderer, children: Markup, transition_key: str
) -> Markup:
    return renderer.render(
        "pagetransition.html", children=children, transition_key=transition_key
    )


def render_page(
    children: Markup,
    *,
    renderer: TemplateRenderer,
    now_playing: Optional[Track] = None,
    current_path: str = "/",
    today: Optional[datetime.date] = None,
    author: Optional[str] = None,
    site_title: Optional[str] = None,
) -> Markup:
    """
    Wrap a rendered child tree in the site shell.

    The copyright year is taken from `today`, defaulting to the date at
    render time.
    """
    year = (today or datetime.date.today()).year
    return renderer.render(
        "page.html",
        header=render_header(renderer, current_path, site_title),
        content=render_page_transition(renderer, children, current_path),
        links=FOOTER_LINKS,
        now_playing=render_now_playing(renderer, now_playing),
        author=author or settings.SITE_AUTHOR,
        year=year,
        rel_me_url=TWITTER_URL,
    )


def render_document(
    body: Markup,
    *,
    renderer: TemplateRenderer,
    title: Optional[str] = None,
    description: Optional[str] = None,
    site_title: Optional[str] = None,
) -> str:
    site_title = site_title or settings.SITE_TITLE
    page_title = f"{title} – {site_title}" if title else site_title
    return str(
        renderer.render(
            "document.html",
            title=page_title,
            description=description,
            site_title=site_title,
            body=body,
        )
    )
