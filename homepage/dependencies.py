from functools import lru_cache

from fastapi import Depends

from homepage.components.renderer import TemplateRenderer
from homepage.repos.posts_repo import FilesystemPostsRepo
from homepage.services.now_playing_service import NowPlayingService
from homepage.services.posts_service import PostsService
from homepage.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


@lru_cache
def get_renderer() -> TemplateRenderer:
    return TemplateRenderer()


def get_now_playing_service(
    current_settings: Settings = Depends(get_settings),
) -> NowPlayingService:
    return NowPlayingService.from_settings(current_settings)


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.posts_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo,
        show_drafts=current_settings.SHOW_DRAFTS,
        base_image_url=current_settings.IMAGE_BASE_URL,
    )
