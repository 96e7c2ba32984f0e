"""Player controller: every command's business rules live here."""

import random
from typing import List, Optional

from .catalog import VideoCatalog
from .errors import (
    AlreadyFlaggedError,
    NotFlaggedError,
    PlaylistExistsError,
    PlaylistNotFoundError,
    VideoAlreadyInPlaylistError,
    VideoNotInPlaylistError,
)
from .flags import FlagStore
from .logging_config import get_logger
from .models import Video
from .playlists import PlaylistStore
from .results import Result, Status

logger = get_logger(__name__)


def sort_by_title(videos: List[Video]) -> List[Video]:
    """Sort videos by title, ignoring case."""
    return sorted(videos, key=lambda video: video.title.lower())


class PlaybackSlot:
    """The currently selected video, if any.

    Either empty, or holding a video that is playing or paused.
    """

    def __init__(self) -> None:
        self.video: Optional[Video] = None
        self.is_playing = False

    @property
    def is_empty(self) -> bool:
        return self.video is None

    @property
    def is_paused(self) -> bool:
        return self.video is not None and not self.is_playing

    def select(self, video: Video) -> None:
        """Select a video and start playing it."""
        self.video = video
        self.is_playing = True

    def clear(self) -> Optional[Video]:
        """Empty the slot, returning the video that was selected."""
        video = self.video
        self.video = None
        self.is_playing = False
        return video

    def __repr__(self) -> str:
        if self.video is None:
            return "PlaybackSlot(empty)"
        state = "playing" if self.is_playing else "paused"
        return f"PlaybackSlot({self.video.video_id}, {state})"


class PlayerController:
    """Orchestrates the catalog, playlists, flags and playback slot.

    Each public method runs one command to completion and returns a Result.
    User-facing failures are reported through the Result status, never raised.
    """

    def __init__(
        self,
        catalog: VideoCatalog,
        rng: Optional[random.Random] = None,
        playlists: Optional[PlaylistStore] = None,
        flags: Optional[FlagStore] = None,
    ) -> None:
        """Initialize controller.

        Args:
            catalog: The video catalog for this session
            rng: Random source for play_random. Pass a seeded instance for
                reproducible selection.
            playlists: Playlist store, a new empty one by default
            flags: Flag store, a new empty one by default
        """
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random()
        self.playlists = playlists if playlists is not None else PlaylistStore()
        self.flags = flags if flags is not None else FlagStore()
        self.slot = PlaybackSlot()

    def _describe(self, video: Video) -> str:
        """Video details, annotated with the flag reason when flagged."""
        reason = self.flags.reason_for(video.video_id)
        if reason is None:
            return video.details()
        return f"{video.details()} - FLAGGED (reason: {reason})"

    def _stop_current(self) -> List[str]:
        """Stop whatever is selected and return the notice lines."""
        video = self.slot.clear()
        if video is None:
            return []
        logger.debug("Stopped %s", video.video_id)
        return [f"Stopping video: {video.title}"]

    # Library

    def count(self) -> Result:
        """Report the number of videos in the catalog."""
        return Result.success(f"{len(self.catalog)} videos in the library")

    def list_all(self) -> Result:
        """List every video sorted by title, with flag annotations."""
        videos = sort_by_title(self.catalog.list_all())
        if not videos:
            return Result.failure(Status.NO_VIDEOS, "No videos available")
        lines = ["Here's a list of all available videos:"]
        lines.extend(self._describe(video) for video in videos)
        return Result.success(*lines, videos=videos)

    # Playback

    def play(self, video_id: str) -> Result:
        """Play a video, stopping the current selection first."""
        video = self.catalog.find(video_id)
        if video is None:
            return Result.failure(Status.NO_SUCH_VIDEO, "Cannot play video: Video does not exist")
        reason = self.flags.reason_for(video_id)
        if reason is not None:
            return Result.failure(
                Status.FLAGGED,
                f"Cannot play video: Video is currently flagged (reason: {reason})",
                reason=reason,
            )

        lines = self._stop_current()
        self.slot.select(video)
        logger.debug("Playing %s", video_id)
        lines.append(f"Playing video: {video.title}")
        return Result.success(*lines, videos=[video])

    def stop(self) -> Result:
        """Stop the selected video."""
        if self.slot.is_empty:
            return Result.failure(
                Status.NOTHING_SELECTED, "Cannot stop video: No video is currently playing"
            )
        return Result.success(*self._stop_current())

    def play_random(self) -> Result:
        """Play a random video that is not flagged."""
        candidates = [
            video for video in self.catalog.list_all() if not self.flags.is_flagged(video.video_id)
        ]
        if not candidates:
            return Result.failure(Status.NONE_AVAILABLE, "No videos available")
        video = self.rng.choice(candidates)
        logger.debug("Randomly picked %s from %d candidates", video.video_id, len(candidates))
        return self.play(video.video_id)

    def pause(self) -> Result:
        """Pause the selected video."""
        if self.slot.is_empty:
            return Result.failure(
                Status.NOTHING_SELECTED, "Cannot pause video: No video is currently playing"
            )
        title = self.slot.video.title
        if self.slot.is_paused:
            return Result.failure(Status.ALREADY_PAUSED, f"Video already paused: {title}")
        self.slot.is_playing = False
        logger.debug("Paused %s", self.slot.video.video_id)
        return Result.success(f"Pausing video: {title}")

    def resume(self) -> Result:
        """Continue the paused video."""
        if self.slot.is_empty:
            return Result.failure(
                Status.NOTHING_SELECTED, "Cannot continue video: No video is currently playing"
            )
        if self.slot.is_playing:
            return Result.failure(Status.NOT_PAUSED, "Cannot continue video: Video is not paused")
        self.slot.is_playing = True
        logger.debug("Resumed %s", self.slot.video.video_id)
        return Result.success(f"Continuing video: {self.slot.video.title}")

    def show_current(self) -> Result:
        """Show the selected video and whether it is paused."""
        if self.slot.is_empty:
            return Result.failure(Status.NOTHING_SELECTED, "No video is currently playing")
        video = self.slot.video
        suffix = " - PAUSED" if self.slot.is_paused else ""
        return Result.success(f"Currently playing: {video.details()}{suffix}", videos=[video])

    # Playlists

    def create_playlist(self, name: str) -> Result:
        try:
            self.playlists.create(name)
        except PlaylistExistsError:
            return Result.failure(
                Status.ALREADY_EXISTS,
                "Cannot create playlist: A playlist with the same name already exists",
            )
        logger.debug("Created playlist %s", name)
        return Result.success(f"Successfully created new playlist: {name}")

    def add_to_playlist(self, name: str, video_id: str) -> Result:
        prefix = f"Cannot add video to {name}"
        playlist = self.playlists.get(name)
        if playlist is None:
            return Result.failure(Status.NO_SUCH_PLAYLIST, f"{prefix}: Playlist does not exist")
        video = self.catalog.find(video_id)
        if video is None:
            return Result.failure(Status.NO_SUCH_VIDEO, f"{prefix}: Video does not exist")
        reason = self.flags.reason_for(video_id)
        if reason is not None:
            return Result.failure(
                Status.FLAGGED,
                f"{prefix}: Video is currently flagged (reason: {reason})",
                reason=reason,
            )
        try:
            self.playlists.add_video(playlist, video_id)
        except VideoAlreadyInPlaylistError:
            return Result.failure(Status.ALREADY_IN_PLAYLIST, f"{prefix}: Video already added")
        return Result.success(f"Added video to {name}: {video.title}", videos=[video])

    def show_all_playlists(self) -> Result:
        playlists = self.playlists.list_all()
        if not playlists:
            return Result.failure(Status.NO_PLAYLISTS, "No playlists exist yet")
        return Result.success("Showing all playlists:", *(p.name for p in playlists))

    def show_playlist(self, name: str) -> Result:
        """Show the videos of a playlist in playlist order."""
        playlist = self.playlists.get(name)
        if playlist is None:
            return Result.failure(
                Status.NO_SUCH_PLAYLIST, f"Cannot show playlist {name}: Playlist does not exist"
            )
        header = f"Showing playlist: {name}"
        if not playlist.video_ids:
            return Result.failure(Status.EMPTY_PLAYLIST, header, "No videos here yet")
        videos = [self.catalog.find(video_id) for video_id in playlist.video_ids]
        return Result.success(header, *(self._describe(v) for v in videos), videos=videos)

    def remove_from_playlist(self, name: str, video_id: str) -> Result:
        prefix = f"Cannot remove video from {name}"
        playlist = self.playlists.get(name)
        if playlist is None:
            return Result.failure(Status.NO_SUCH_PLAYLIST, f"{prefix}: Playlist does not exist")
        video = self.catalog.find(video_id)
        if video is None:
            return Result.failure(Status.NO_SUCH_VIDEO, f"{prefix}: Video does not exist")
        try:
            self.playlists.remove_video(playlist, video_id)
        except VideoNotInPlaylistError:
            return Result.failure(Status.NOT_IN_PLAYLIST, f"{prefix}: Video is not in playlist")
        return Result.success(f"Removed video from {name}: {video.title}", videos=[video])

    def clear_playlist(self, name: str) -> Result:
        playlist = self.playlists.get(name)
        if playlist is None:
            return Result.failure(
                Status.NO_SUCH_PLAYLIST, f"Cannot clear playlist {name}: Playlist does not exist"
            )
        self.playlists.clear(playlist)
        return Result.success(f"Successfully removed all videos from {name}")

    def delete_playlist(self, name: str) -> Result:
        try:
            self.playlists.delete(name)
        except PlaylistNotFoundError:
            return Result.failure(
                Status.NO_SUCH_PLAYLIST, f"Cannot delete playlist {name}: Playlist does not exist"
            )
        logger.debug("Deleted playlist %s", name)
        return Result.success(f"Deleted playlist: {name}")

    # Search

    def _search_results(self, term: str, matches: List[Video]) -> Result:
        if not matches:
            return Result.failure(Status.NO_RESULTS, f"No search results for {term}")
        matches = sort_by_title(matches)
        lines = [f"Here are the results for {term}:"]
        lines.extend(f"{index}) {video.details()}" for index, video in enumerate(matches, 1))
        return Result.success(*lines, videos=matches)

    def _playable(self) -> List[Video]:
        return [v for v in self.catalog.list_all() if not self.flags.is_flagged(v.video_id)]

    def search(self, term: str) -> Result:
        """Find unflagged videos whose title contains the term, ignoring case.

        The matches are numbered from 1 and carried in ``Result.videos`` so the
        caller can offer them for selection with select_search_result.
        """
        term = term.lower()
        matches = [video for video in self._playable() if term in video.title.lower()]
        return self._search_results(term, matches)

    def search_by_tag(self, tag: str) -> Result:
        """Find unflagged videos carrying the tag, ignoring case."""
        tag = tag.lower()
        matches = [
            video for video in self._playable() if any(t.lower() == tag for t in video.tags)
        ]
        return self._search_results(tag, matches)

    def select_search_result(self, result: Result, choice: str) -> Optional[Result]:
        """Play the video picked from a numbered search result.

        Args:
            result: A successful search or search_by_tag result
            choice: Raw user input, expected to be a number from 1 to len(result.videos)

        Returns:
            The play result, or None when the choice is not a valid number in range
        """
        try:
            index = int(choice.strip())
        except (AttributeError, ValueError):
            return None
        if not 1 <= index <= len(result.videos):
            return None
        return self.play(result.videos[index - 1].video_id)

    # Moderation

    def flag(self, video_id: str, reason: Optional[str] = None) -> Result:
        """Flag a video, stopping it if it is the selected one."""
        video = self.catalog.find(video_id)
        if video is None:
            return Result.failure(Status.NO_SUCH_VIDEO, "Cannot flag video: Video does not exist")
        try:
            recorded = self.flags.flag(video_id, reason)
        except AlreadyFlaggedError:
            return Result.failure(
                Status.ALREADY_FLAGGED, "Cannot flag video: Video is already flagged"
            )

        lines = []
        if self.slot.video is not None and self.slot.video.video_id == video_id:
            lines.extend(self._stop_current())
        logger.debug("Flagged %s: %s", video_id, recorded)
        lines.append(f"Successfully flagged video: {video.title} (reason: {recorded})")
        return Result(Status.OK, lines, videos=[video], reason=recorded)

    def unflag(self, video_id: str) -> Result:
        """Remove the flag from a video. Playback is not restored."""
        video = self.catalog.find(video_id)
        if video is None:
            return Result.failure(
                Status.NO_SUCH_VIDEO, "Cannot remove flag from video: Video does not exist"
            )
        try:
            self.flags.unflag(video_id)
        except NotFlaggedError:
            return Result.failure(
                Status.NOT_FLAGGED, "Cannot remove flag from video: Video is not flagged"
            )
        logger.debug("Unflagged %s", video_id)
        return Result.success(f"Successfully removed flag from video: {video.title}")
