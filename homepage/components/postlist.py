import dataclasses as dc
from typing import List, Optional, Sequence

from markupsafe import Markup

from homepage.components.renderer import TemplateRenderer
from homepage.schemas.blog import BlogPost
from homepage.utils import format_date, resolve_slug

# The one post that ships with its own animated cover.
PARALLAX_COVER_SLUG = "spring-parallax-framer-motion-guide"
NO_RESULTS_TEXT = "🧐 No posts found"


@dc.dataclass
class PostListEntry:
    slug: str
    href: str
    title: str
    summary: str
    published_at: str
    published_label: str
    reading_time: str
    cover_image: Optional[Markup] = None
    parallax_cover: Optional[Markup] = None


def post_href(slug: str) -> str:
    return f"/blog/{slug}"


def render_blog_image(renderer: TemplateRenderer, src: str, alt: str) -> Markup:
    return renderer.render("blogimage.html", src=src, alt=alt)


def render_parallax_cover(renderer: TemplateRenderer) -> Markup:
    return renderer.render("parallaxcover.html")


def build_entry(post: BlogPost, renderer: TemplateRenderer) -> PostListEntry:
    meta = post.meta
    slug = resolve_slug(post)
    return PostListEntry(
        slug=slug,
        href=post_href(slug),
        title=meta.title,
        summary=meta.summary,
        published_at=meta.publishedAt,
        published_label=format_date(meta.publishedAt),
        reading_time=meta.readingTime.text,
        cover_image=(
            render_blog_image(renderer, meta.image, meta.title) if meta.image else None
        ),
        parallax_cover=(
            render_parallax_cover(renderer) if slug == PARALLAX_COVER_SLUG else None
        ),
    )


def build_post_list(
    posts: Sequence[BlogPost], renderer: TemplateRenderer
) -> List[PostListEntry]:
    """One entry per post, in the order given."""
    return [build_entry(post, renderer) for post in posts]


def render_post_list(posts: Sequence[BlogPost], *, renderer: TemplateRenderer) -> Markup:
    return renderer.render(
        "postlist.html",
        entries=build_post_list(posts, renderer),
        no_results_text=NO_RESULTS_TEXT,
    )
