from pathlib import Path

from homepage.settings import Settings, choose_env_file


def test_paths_follow_settings():
    s = Settings(POSTS_DIR="content/posts", IMAGES_DIR="content/images")
    assert s.posts_path == Path("content/posts")
    assert s.images_path == Path("content/images")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SHOW_DRAFTS", "true")
    monkeypatch.setenv("HOME_POST_LIMIT", "5")

    s = Settings()

    assert s.SHOW_DRAFTS is True
    assert s.HOME_POST_LIMIT == 5


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
