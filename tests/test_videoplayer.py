import threading

import pytest
from PIL import Image

from multivideo.videoplayer import OPEN_ERROR, VideoPlayer

COLORS = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]


class Recorder:
    def __init__(self):
        self.frames = []
        self.errors = []
        self.finished = threading.Event()

    def on_frame(self, frame):
        self.frames.append(frame)

    def on_finished(self):
        self.finished.set()

    def on_error(self, message):
        self.errors.append(message)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def gif_path(tmp_path):
    path = tmp_path / "clip.gif"
    frames = [Image.new("RGB", (8, 8), color) for color in COLORS]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=20, loop=0)
    return path


def _first_pixel(frame):
    return tuple(int(v) for v in frame[0, 0])


def test_open_missing_file_reports_error(tmp_path, recorder):
    with VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error) as player:
        assert player.open_file(tmp_path / "missing.mp4") is False
        assert player.is_opened is False
    assert recorder.errors == [OPEN_ERROR]


def test_open_file_sets_name_and_state(gif_path, recorder):
    with VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error) as player:
        assert player.open_file(gif_path) is True
        assert player.is_opened is True
        assert player.is_playing is False
        assert player.name == "clip.gif"
        assert player.frame_delay > 0
    assert recorder.errors == []


def test_play_without_file_does_nothing(recorder):
    with VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error) as player:
        player.play()
        assert player.is_playing is False
        player.restart()
        assert player.is_playing is False
    assert recorder.frames == []


def test_plays_all_frames_then_finishes(gif_path, recorder):
    with VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error) as player:
        player.open_file(gif_path)
        player.play()
        assert recorder.finished.wait(5)
        assert player.is_playing is False
    assert [_first_pixel(frame) for frame in recorder.frames] == COLORS
    assert all(frame.shape == (8, 8, 3) for frame in recorder.frames)


def test_restart_plays_from_first_frame(gif_path, recorder):
    with VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error) as player:
        player.open_file(gif_path)
        player.play()
        assert recorder.finished.wait(5)
        recorder.frames.clear()
        recorder.finished.clear()
        player.restart()
        assert recorder.finished.wait(5)
    assert len(recorder.frames) == len(COLORS)
    assert _first_pixel(recorder.frames[0]) == COLORS[0]


def test_pause_clears_playing(gif_path, recorder):
    with VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error) as player:
        player.open_file(gif_path)
        player.pause()
        assert player.is_playing is False
        player.restart()
        assert player.is_playing is True
        player.pause()
        assert player.is_playing is False


def test_close_stops_playback(gif_path, recorder):
    player = VideoPlayer(recorder.on_frame, recorder.on_finished, recorder.on_error)
    player.open_file(gif_path)
    player.play()
    player.close()
    assert player.is_playing is False
    count = len(recorder.frames)
    assert count <= len(COLORS)