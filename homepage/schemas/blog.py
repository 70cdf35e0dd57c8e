from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class ReadingTime(BaseModel):
    text: str
    minutes: int = 1
    words: int = 0


class PostMeta(BaseModel):
    title: str
    summary: str = ""
    publishedAt: str
    readingTime: ReadingTime
    image: Optional[str] = None
    slug: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    draft: bool = False


class BlogPost(BaseModel):
    meta: PostMeta
    filePath: str


class PostDetail(BlogPost):
    content: str  # Markdown content without frontmatter


class Track(BaseModel):
    title: str
    artist: str
    songUrl: Optional[str] = None
