import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

POST_EXTENSIONS = (".mdx", ".md")


class FilesystemPostsRepo:
    """Reads blog post sources from a directory of Markdown / MDX files."""

    def __init__(self, posts_dir: Path):
        self.posts_dir = Path(posts_dir)

    def list_blog_docs(self) -> List[dict]:
        if not self.posts_dir.is_dir():
            logger.warning(f"Posts directory does not exist: {self.posts_dir}")
            return []

        paths = sorted(
            path
            for path in self.posts_dir.rglob("*")
            if path.is_file() and path.suffix in POST_EXTENSIONS
        )
        return [self._read(path) for path in paths]

    def get_blog_doc(self, slug: str) -> Optional[dict]:
        for ext in POST_EXTENSIONS:
            path = self.posts_dir / f"{slug}{ext}"
            if self._is_valid(path):
                return self._read(path)
        return None

    def _read(self, path: Path) -> dict:
        return {
            "filePath": path.relative_to(self.posts_dir).as_posix(),
            "source": path.read_text(encoding="utf-8"),
        }

    def _is_valid(self, path: Path) -> bool:
        try:
            resolved = path.resolve()
            resolved.relative_to(self.posts_dir.resolve())
        except ValueError:
            # slug walked out of the posts directory
            return False
        return resolved.is_file()
