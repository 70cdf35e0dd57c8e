import datetime
import logging
from typing import Callable, List, Optional

import frontmatter

from homepage.schemas.blog import BlogPost, PostDetail
from homepage.services.image_service import (
    process_frontmatter_image,
    process_image_references,
)
from homepage.settings import settings
from homepage.utils import POST_EXTENSION_RE, calculate_reading_time, resolve_slug

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        *,
        show_drafts: Optional[bool] = None,
        base_image_url: Optional[str] = None,
        process_image_refs: Optional[Callable[[str, str], str]] = None,
    ):
        self.repo = repo
        self.show_drafts = settings.SHOW_DRAFTS if show_drafts is None else show_drafts
        self.base_image_url = base_image_url or settings.IMAGE_BASE_URL
        self.process_image_refs = process_image_refs or process_image_references

    def list_posts(self) -> List[BlogPost]:
        posts = []
        for doc in self.repo.list_blog_docs():
            post_data = parse_post_data(doc, base_image_url=self.base_image_url)
            if not post_data:
                continue
            if post_data["meta"]["draft"] and not self.show_drafts:
                logger.debug(f"Hiding draft {doc['filePath']}")
                continue
            posts.append(BlogPost(**post_data))

        posts.sort(key=lambda p: p.meta.publishedAt, reverse=True)
        return posts

    def search(self, query: Optional[str]) -> List[BlogPost]:
        posts = self.list_posts()
        needle = (query or "").strip().lower()
        if not needle:
            return posts
        return [
            p
            for p in posts
            if needle in p.meta.title.lower() or needle in p.meta.summary.lower()
        ]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        doc = self.repo.get_blog_doc(slug)
        if doc:
            post = self._to_detail(doc)
            # a file whose frontmatter renames it no longer answers to its filename
            if post and resolve_slug(post) == slug:
                return post

        for doc in self.repo.list_blog_docs():
            post = self._to_detail(doc)
            if post and resolve_slug(post) == slug:
                return post
        return None

    def _to_detail(self, doc: dict) -> Optional[PostDetail]:
        post_data = parse_post_data(
            doc,
            include_content=True,
            base_image_url=self.base_image_url,
            process_image_refs=self.process_image_refs,
        )
        if not post_data:
            return None
        if post_data["meta"]["draft"] and not self.show_drafts:
            return None
        return PostDetail(**post_data)


def parse_post_data(
    doc: dict,
    include_content: bool = False,
    *,
    base_image_url: Optional[str] = None,
    process_image_refs: Optional[Callable[[str, str], str]] = None,
) -> Optional[dict]:
    """Parse frontmatter and return standardized post data"""
    file_path = doc.get("filePath", "")
    try:
        source = doc.get("source")
        if not source:
            logger.warning(f"No markdown content found for post {file_path}")
            return None

        parsed = frontmatter.loads(source)
        metadata = parsed.metadata or {}

        published_at = _convert_date(metadata.get("publishedAt"))
        if not published_at:
            logger.warning(f"Post {file_path} has no publishedAt, skipping")
            return None

        base_url = base_image_url or settings.IMAGE_BASE_URL
        slug = metadata.get("slug")

        post_data = {
            "filePath": file_path,
            "meta": {
                "title": _derive_title(metadata, slug or _normalize_slug(file_path)),
                "summary": metadata.get("summary") or "",
                "publishedAt": published_at,
                "readingTime": calculate_reading_time(parsed.content),
                "image": process_frontmatter_image(metadata.get("image"), base_url),
                "slug": str(slug) if slug else None,
                "tags": _normalize_tags(metadata.get("tags")),
                "draft": bool(metadata.get("draft", False)),
            },
        }

        if include_content:
            rewrite = process_image_refs or process_image_references
            post_data["content"] = rewrite(parsed.content, base_url)

        return post_data
    except Exception as e:
        logger.warning(f"Failed to parse post {file_path}: {e}")
        return None


def _normalize_slug(file_path: str) -> str:
    return POST_EXTENSION_RE.sub("", file_path)


def _derive_title(metadata: dict, slug: str) -> str:
    if metadata and metadata.get("title"):
        return str(metadata["title"])
    clean_slug = slug.rsplit("/", 1)[-1]
    clean_slug = clean_slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)
