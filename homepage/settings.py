from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site
    SITE_AUTHOR: str = "Samuel Kraft"
    SITE_TITLE: str = "Samuel Kraft"

    # Content
    POSTS_DIR: str = "data/posts"
    IMAGES_DIR: str = "public/images"
    IMAGE_BASE_URL: str = "/images"
    SHOW_DRAFTS: bool = False
    HOME_POST_LIMIT: int = 3

    # Now playing
    NOW_PLAYING_TITLE: str = ""
    NOW_PLAYING_ARTIST: str = ""
    NOW_PLAYING_URL: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def images_path(self) -> Path:
        return Path(self.IMAGES_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
