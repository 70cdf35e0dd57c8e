import textwrap

import pytest

from homepage.components.renderer import TemplateRenderer
from homepage.schemas.blog import BlogPost, PostDetail, PostMeta, ReadingTime


@pytest.fixture
def renderer():
    return TemplateRenderer()


def make_post(
    file_path: str = "hello-world.mdx",
    *,
    title: str = "Hello World",
    summary: str = "A first post",
    published_at: str = "2021-01-05",
    reading_time: str = "3 min read",
    image: str | None = None,
    slug: str | None = None,
) -> BlogPost:
    return BlogPost(
        filePath=file_path,
        meta=PostMeta(
            title=title,
            summary=summary,
            publishedAt=published_at,
            readingTime=ReadingTime(text=reading_time),
            image=image,
            slug=slug,
        ),
    )


def make_detail(content: str = "Body text", **kwargs) -> PostDetail:
    post = make_post(**kwargs)
    return PostDetail(**post.model_dump(), content=content)


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    Sources are dedented so tests can indent frontmatter inline.
    """

    def __init__(self, sources: dict[str, str]):
        self.sources = {
            path: textwrap.dedent(src).lstrip() for path, src in sources.items()
        }
        self.calls = []

    def list_blog_docs(self):
        self.calls.append("list")
        return [
            {"filePath": path, "source": src} for path, src in self.sources.items()
        ]

    def get_blog_doc(self, slug):
        self.calls.append(slug)
        for ext in (".mdx", ".md"):
            path = f"{slug}{ext}"
            if path in self.sources:
                return {"filePath": path, "source": self.sources[path]}
        return None


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, error=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._error = error
        self.queries = []

    def list_posts(self):
        if self._error:
            raise self._error
        return self._list_posts_return

    def search(self, query):
        self.queries.append(query)
        return self.list_posts()

    def get_post(self, slug: str):
        return self._get_post_return
