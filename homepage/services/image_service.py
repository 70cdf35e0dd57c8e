import logging
import re
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def get_image_from_disk(
    image_path: str, images_dir: Path
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read an image below images_dir, refusing paths that escape it
    """
    try:
        root = Path(images_dir).resolve()
        target = (root / image_path).resolve()
        if not target.is_relative_to(root):
            logger.warning(f"Rejected image path outside images dir: {image_path}")
            return None, None

        if not target.is_file():
            logger.warning(f"Image not found on disk: {image_path}")
            return None, None

        image_data = target.read_bytes()
        if not image_data:
            logger.warning(f"No image data found for: {image_path}")
            return None, None

        return image_data, get_content_type_from_filename(image_path)

    except OSError as e:
        logger.error(f"Error reading image {image_path}: {e}")
        return None, None


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    elif filename.endswith(".avif"):
        return "image/avif"
    else:
        return "application/octet-stream"


def process_frontmatter_image(image_path: Optional[str], base_url: str) -> Optional[str]:
    """
    Point a /img/ frontmatter image at the images endpoint
    """
    if not image_path:
        return image_path
    if image_path.startswith("/img/"):
        filename = image_path[len("/img/") :]
        return f"{base_url}/{filename}"
    return image_path


def process_image_references(content: str, base_url: str) -> str:
    """
    Rewrite markdown image references to use the images endpoint
    """
    obsidian_pattern = re.compile(r"!\[\[([^\]]+\.(?:png|jpg|jpeg|gif|svg|webp|avif))\]\]")
    absolute_path_pattern = re.compile(r"!\[\s*(.*?)\s*\]\(\s*/img/([^)]+)\s*\)")

    content = obsidian_pattern.sub(r"![](" + base_url + r"/\1)", content)
    content = absolute_path_pattern.sub(r"![\1](" + base_url + r"/\2)", content)

    return content
