"""Threaded frame-by-frame playback of a single video file."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any, Optional

import imageio.v3 as iio
import numpy as np

FrameCallback = Callable[[np.ndarray], None]
FinishedCallback = Callable[[], None]
ErrorCallback = Callable[[str], None]

OPEN_ERROR = "Failed to open video file."
DEFAULT_FRAME_DELAY_MS = 40
PAUSED_POLL_SECONDS = 0.1


def _ignore(*_args: Any) -> None:
    """Default callback that does nothing."""


def _frame_delay_from(meta: Mapping[str, Any]) -> int:
    """Milliseconds to wait between frames, taken from the reader's metadata."""
    fps = meta.get("fps")
    if isinstance(fps, (int, float)) and fps > 0:
        return int(1000 / fps)
    duration = meta.get("duration")
    if isinstance(duration, (int, float)) and duration > 0:
        return int(duration)
    return DEFAULT_FRAME_DELAY_MS


def _as_rgb(frame: Any) -> np.ndarray:
    """Return an independent H x W x 3 RGB copy of a decoded frame."""
    pixels = np.asarray(frame)
    if pixels.ndim == 2:
        pixels = np.stack([pixels] * 3, axis=-1)
    elif pixels.shape[-1] == 1:
        pixels = np.repeat(pixels, 3, axis=-1)
    elif pixels.shape[-1] == 4:
        pixels = pixels[..., :3]
    return np.ascontiguousarray(pixels).copy()


class VideoPlayer:
    """Plays one video file on a worker thread, handing RGB frames to a callback.

    Callbacks run on the worker thread, except ``on_error``, which runs in
    the thread that called :meth:`open_file`.
    """

    def __init__(
        self,
        on_frame: Optional[FrameCallback] = None,
        on_finished: Optional[FinishedCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._on_frame = on_frame or _ignore
        self._on_finished = on_finished or _ignore
        self._on_error = on_error or _ignore

        self._lock = threading.Lock()
        self._playing = threading.Event()
        self._stop = threading.Event()
        self._opened = False
        self._thread: Optional[threading.Thread] = None

        self._path: Optional[Path] = None
        self._frames: Optional[Iterator[Any]] = None
        self._name = ""
        self._frame_delay = DEFAULT_FRAME_DELAY_MS

    @property
    def name(self) -> str:
        """File name of the opened video, or an empty string."""
        return self._name

    @property
    def is_playing(self) -> bool:
        return self._playing.is_set()

    @property
    def is_opened(self) -> bool:
        return self._opened

    @property
    def frame_delay(self) -> int:
        """Pause between frames in milliseconds."""
        return self._frame_delay

    def open_file(self, file_name: str | Path) -> bool:
        """Open a video file; report failure through ``on_error`` and return False."""
        path = Path(file_name)
        with self._lock:
            try:
                meta = iio.immeta(path)
            except Exception:  # any reader failure means the file cannot be played
                failed = True
            else:
                failed = False
                self._close_frames()
                self._path = path
                self._frames = iio.imiter(path)
                self._frame_delay = _frame_delay_from(meta)
                self._name = path.name
                self._opened = True
        if failed:
            self._on_error(OPEN_ERROR)
            return False
        return True

    def play(self) -> None:
        """Start or resume playback; starts the worker thread on first use."""
        if not self._opened:
            return
        self._playing.set()
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._run, name=f"player-{self._name}", daemon=True
            )
            self._thread.start()

    def pause(self) -> None:
        self._playing.clear()

    def restart(self) -> None:
        """Rewind to the first frame and mark the player as playing."""
        if not self._opened:
            return
        with self._lock:
            self._close_frames()
            self._frames = iio.imiter(self._path)
            self._playing.set()

    def stop_thread(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        self._stop.set()
        self._playing.clear()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
            self._thread = None

    def close(self) -> None:
        """Stop playback and release the video file."""
        self.stop_thread()
        with self._lock:
            self._close_frames()

    def __enter__(self) -> "VideoPlayer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _close_frames(self) -> None:
        frames, self._frames = self._frames, None
        close = getattr(frames, "close", None)
        if close is not None:
            close()

    def _run(self) -> None:
        delay = self._frame_delay / 1000
        while not self._stop.is_set():
            if not self._playing.is_set():
                self._stop.wait(PAUSED_POLL_SECONDS)
                continue
            with self._lock:
                frame = next(self._frames, None) if self._frames is not None else None
                if frame is None:
                    self._playing.clear()
            if frame is None:
                self._on_finished()
                continue
            self._on_frame(_as_rgb(frame))
            self._stop.wait(delay)