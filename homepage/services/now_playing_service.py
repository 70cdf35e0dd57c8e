import logging
from typing import Optional

from homepage.schemas.blog import Track
from homepage.settings import Settings

logger = logging.getLogger(__name__)


class NowPlayingService:
    """Holds the track shown in the footer, if any."""

    def __init__(self, track: Optional[Track] = None):
        self._track = track

    @classmethod
    def from_settings(cls, current_settings: Settings) -> "NowPlayingService":
        title = current_settings.NOW_PLAYING_TITLE
        artist = current_settings.NOW_PLAYING_ARTIST
        if not (title and artist):
            return cls()
        logger.debug(f"Now playing from settings: {title} by {artist}")
        return cls(
            Track(
                title=title,
                artist=artist,
                songUrl=current_settings.NOW_PLAYING_URL or None,
            )
        )

    def get_now_playing(self) -> Optional[Track]:
        return self._track
