import logging
from typing import Optional

import markdown as md
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from markupsafe import Markup

from homepage import dependencies as deps
from homepage.components.page import render_document, render_page
from homepage.components.postlist import render_blog_image, render_post_list
from homepage.components.renderer import TemplateRenderer
from homepage.services.now_playing_service import NowPlayingService
from homepage.services.posts_service import PostsService
from homepage.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home(
    service: PostsService = Depends(deps.get_posts_service),
    renderer: TemplateRenderer = Depends(deps.get_renderer),
    now_playing: NowPlayingService = Depends(deps.get_now_playing_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Intro and the latest posts."""
    try:
        posts = service.list_posts()[: current_settings.HOME_POST_LIMIT]
        content = renderer.render(
            "home.html",
            author=current_settings.SITE_AUTHOR,
            post_list=render_post_list(posts, renderer=renderer),
        )
        return _render_shell(content, "/", renderer, now_playing, current_settings)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering home page: {e}")
        raise HTTPException(status_code=500, detail="Failed to render page")


@router.get("/blog", response_class=HTMLResponse)
def blog(
    q: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: TemplateRenderer = Depends(deps.get_renderer),
    now_playing: NowPlayingService = Depends(deps.get_now_playing_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """All published posts, optionally filtered by a search query."""
    try:
        posts = service.search(q)
        content = renderer.render(
            "blog.html",
            query=q or "",
            post_list=render_post_list(posts, renderer=renderer),
        )
        return _render_shell(
            content, "/blog", renderer, now_playing, current_settings, title="Blog"
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering blog listing: {e}")
        raise HTTPException(status_code=500, detail="Failed to render blog")


@router.get("/blog/{slug:path}", response_class=HTMLResponse)
def blog_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: TemplateRenderer = Depends(deps.get_renderer),
    now_playing: NowPlayingService = Depends(deps.get_now_playing_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """A single post rendered from Markdown."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")

        cover_image = (
            render_blog_image(renderer, post.meta.image, post.meta.title)
            if post.meta.image
            else None
        )
        body = Markup(md.markdown(post.content, extensions=["tables", "fenced_code"]))
        content = renderer.render(
            "post.html", post=post, cover_image=cover_image, body=body
        )
        return _render_shell(
            content,
            f"/blog/{slug}",
            renderer,
            now_playing,
            current_settings,
            title=post.meta.title,
            description=post.meta.summary or None,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")


def _render_shell(
    content: Markup,
    path: str,
    renderer: TemplateRenderer,
    now_playing: NowPlayingService,
    current_settings: Settings,
    *,
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> HTMLResponse:
    page = render_page(
        content,
        renderer=renderer,
        now_playing=now_playing.get_now_playing(),
        current_path=path,
        author=current_settings.SITE_AUTHOR,
        site_title=current_settings.SITE_TITLE,
    )
    return HTMLResponse(
        render_document(
            page,
            renderer=renderer,
            title=title,
            description=description,
            site_title=current_settings.SITE_TITLE,
        )
    )
