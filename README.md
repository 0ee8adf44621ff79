# multivideo

A small desktop player that shows four videos at once, arranged in a 2x2
grid. Every cell has its own controls, and a row of buttons underneath
drives all of them together. The window is built with tkinter, so Python
must have Tk available.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
multivideo
```

On platforms that distinguish console and windowed programs, `multivideo-gui`
starts the same window without a console. Neither command takes any
arguments.

The window opens with four empty cells. In each cell:

- **Dosya Aç** opens a file dialog (`*.mp4 *.avi *.mkv *.mov`, or any file).
  Once a file opens, its name is shown below the picture and the other
  buttons are enabled.
- **Başlat** starts or resumes playback.
- **Duraklat** pauses.
- **Yeniden Başlat** jumps back to the first frame.

Frames are scaled to fit the cell while keeping their aspect ratio. When a
file cannot be opened, a warning dialog says "Failed to open video file."

Below the grid:

- **Tümünü Başlat** plays every cell that has a file open.
- **Tümünü Duraklat** pauses every cell that is playing.
- **Tümünü Yeniden Başlat** restarts every cell that has a file open.

Playback stops by itself at the end of a file; restart it to watch again.
Closing the window stops every player. Reading video containers such as MP4
relies on the plugins available to `imageio` on your system.

## What it does not do

The players show pictures only: there is no sound, no volume control, no
seeking to an arbitrary position and no timeline. Files are chosen one at a
time through each cell's dialog; they cannot be given on the command line.

## Using the pieces from code

`multivideo.videoplayer.VideoPlayer` decodes a file on a background thread
and hands each frame to a callback as an RGB `numpy` array of shape
`(height, width, 3)`, paced by `frame_delay` milliseconds (taken from the
file's frame rate, or its frame duration, or 40 ms when neither is known):

```python
from multivideo.videoplayer import VideoPlayer

def show(frame):
    print(frame.shape)

with VideoPlayer(on_frame=show, on_finished=lambda: print("done"),
                 on_error=print) as player:
    if player.open_file("clip.mp4"):
        print(player.name, player.frame_delay)
        player.play()
        ...
```

`on_frame` and `on_finished` run on the worker thread; `on_error` runs in
the thread that called `open_file`. All three callbacks are optional.

- `open_file(file_name)` returns `True` on success; otherwise it reports
  through `on_error` and returns `False`.
- `play()` starts or resumes playback, starting the worker thread the first
  time. It does nothing until a file is open.
- `pause()` pauses.
- `restart()` rewinds to the first frame and marks the player as playing;
  frames flow once the worker thread has been started by `play()`.
- `stop_thread()` stops the worker thread and waits for it.
- `close()`, or leaving the `with` block, stops the thread and releases the
  file.
- `name`, `is_playing`, `is_opened` and `frame_delay` report the player's
  state.

`multivideo.grid.PlayerGrid` groups players and applies `play_all`,
`pause_all` and `restart_all` to them, skipping players that have nothing
open (or, for pausing, are not playing). It can be iterated and has a
length. `position(index)` gives the `(row, column)` a player occupies in the
two-column grid and raises `IndexError` for an index outside the grid.

`multivideo.app.scale_to_fit(image_size, box_size)` returns the largest
`(width, height)` with the image's aspect ratio that fits inside the box. An
image with a zero side gets the box size; negative sizes raise `ValueError`.