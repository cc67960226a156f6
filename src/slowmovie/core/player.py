"""Playback loop: probe the movie, then extract, stamp, show and hold each frame."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator

from slowmovie.media import MediaTools
from slowmovie.utils.durations import expand_seconds, render_days_hours_mins_seconds, render_hms
from slowmovie.utils.io import remove_if_exists, replace_file
from .contracts import PlaybackSummary, PlayerConfig

logger = logging.getLogger(__name__)


def frame_timestamps(runtime: int, frame_interval: int) -> Iterator[int]:
    """Yield frame_interval, 2*frame_interval, ... up to and including runtime."""
    if frame_interval <= 0:
        raise ValueError(f"frame_interval must be positive, got {frame_interval}")
    yield from range(frame_interval, runtime + 1, frame_interval)


def slow_runtime(runtime: int, frame_interval: int, frame_display_delay: int) -> int:
    """Wall-clock seconds the slowed playback takes (integer division, as frames are whole)."""
    return (runtime // frame_interval) * frame_display_delay


class SlowMoviePlayer:
    """Runs one slow playback of config.movie_filename.

    Everything happens in order on the calling thread: each external tool
    call finishes before the next starts, and each frame is held for
    frame_display_delay seconds with no way to skip.
    """

    def __init__(
        self,
        config: PlayerConfig,
        tools: MediaTools,
        sleep: Callable[[float], None] | None = None,
        report: Callable[[str], None] | None = None,
    ):
        self.config = config
        self.tools = tools
        self._sleep = sleep or time.sleep
        # Destination of the two runtime lines, the log unless a caller prints them
        self._report = report or logger.info

    def probe_runtime(self) -> int:
        """Movie duration rounded to whole seconds (half to even, like printf %.0f)."""
        duration = self.tools.prober.duration(self.config.movie_filename)
        runtime = round(duration)
        logger.debug(f"Runtime: {runtime} seconds")
        return runtime

    def show_frame(self, current_frame: int) -> str | None:
        """Extract, optionally stamp, and display the frame at current_frame seconds.

        Returns the seek time shown, or None when ffmpeg wrote no frame.
        """
        cfg = self.config
        frame_path = cfg.tools.frame_path

        logger.debug("Removing previous frame")
        remove_if_exists(frame_path)

        logger.debug(f"Extracting frame {current_frame}")
        seek_time = expand_seconds(current_frame)
        self.tools.extractor.extract(cfg.movie_filename, seek_time, frame_path)
        if not frame_path.exists():
            # Happens for the last frame when the duration was rounded up
            logger.warning(f"No frame extracted at {seek_time}, nothing to display")
            return None

        if cfg.overlay_frame_num:
            logger.debug("Creating frame image with frame number overlay")
            overlay_path = cfg.tools.overlay_path
            remove_if_exists(overlay_path)
            self.tools.annotator.annotate(frame_path, seek_time, overlay_path)
            logger.debug("Renaming frame with overlay")
            replace_file(overlay_path, frame_path)

        logger.debug(f"Displaying frame {current_frame}")
        self.tools.viewer.show(frame_path)
        return seek_time

    def play(self) -> PlaybackSummary:
        cfg = self.config
        t0 = time.time()

        runtime = self.probe_runtime()
        total = slow_runtime(runtime, cfg.frame_interval, cfg.frame_display_delay)
        self._report(f"Normal movie runtime: {render_hms(runtime)}")
        self._report(f"Slow movie runtime: {render_days_hours_mins_seconds(total)}")

        summary = PlaybackSummary(movie=cfg.movie_filename, runtime=runtime, slow_runtime=total)
        try:
            for current_frame in frame_timestamps(runtime, cfg.frame_interval):
                seek_time = self.show_frame(current_frame)
                if seek_time is not None:
                    summary.seek_times.append(seek_time)
                    summary.frames_shown += 1

                logger.debug(f"Sleeping for {cfg.frame_display_delay} seconds")
                self._sleep(cfg.frame_display_delay)
        finally:
            self.tools.viewer.close()

        summary.elapsed_seconds = time.time() - t0
        logger.info(f"Played {summary.frames_shown} frames in {summary.elapsed_seconds:.1f}s")
        return summary
