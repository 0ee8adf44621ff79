"""Desktop window with four independent video players in a 2x2 grid."""

from __future__ import annotations

import queue
import tkinter as tk
from tkinter import filedialog, messagebox
from typing import Any, Optional

import numpy as np
from PIL import Image, ImageTk

from multivideo.grid import PlayerGrid
from multivideo.videoplayer import VideoPlayer

POLL_MS = 15
PLAYER_COUNT = 4
VIDEO_FILE_TYPES = [
    ("Video Dosyaları", "*.mp4 *.avi *.mkv *.mov"),
    ("Tüm Dosyalar", "*"),
]


def scale_to_fit(image_size: tuple[int, int], box_size: tuple[int, int]) -> tuple[int, int]:
    """Largest size with the image's aspect ratio that fits inside the box."""
    width, height = image_size
    box_width, box_height = box_size
    if min(width, height, box_width, box_height) < 0:
        raise ValueError("sizes must not be negative")
    if width == 0 or height == 0:
        return (box_width, box_height)
    scaled_width = box_height * width // height
    if scaled_width <= box_width:
        return (scaled_width, box_height)
    return (box_width, box_width * height // width)


class VideoPlayerWidget(tk.Frame):
    """One player: video area, file name and its own buttons."""

    def __init__(self, master: Optional[tk.Misc] = None) -> None:
        super().__init__(master)
        self._events: queue.Queue[tuple[str, Any]] = queue.Queue()
        self.player = VideoPlayer(
            on_frame=lambda frame: self._events.put(("frame", frame)),
            on_error=lambda error: self._events.put(("error", error)),
        )
        self._photo: Optional[ImageTk.PhotoImage] = None

        video_area = tk.Frame(self, width=320, height=240, bg="black")
        video_area.pack_propagate(False)
        self._video_label = tk.Label(video_area, bg="black")
        self._video_label.pack(fill=tk.BOTH, expand=True)
        video_area.pack(fill=tk.BOTH, expand=True)

        self._name_label = tk.Label(self, text="Video Seçilmedi")
        self._name_label.pack()

        buttons = tk.Frame(self)
        buttons.pack(fill=tk.X)
        tk.Button(buttons, text="Dosya Aç", command=self.on_open_file).pack(
            side=tk.LEFT, expand=True, fill=tk.X
        )
        self._player_buttons = [
            tk.Button(buttons, text=text, command=command, state=tk.DISABLED)
            for text, command in (
                ("Başlat", self.on_play),
                ("Duraklat", self.on_pause),
                ("Yeniden Başlat", self.on_restart),
            )
        ]
        for button in self._player_buttons:
            button.pack(side=tk.LEFT, expand=True, fill=tk.X)

        self.after(POLL_MS, self._drain_events)

    def on_open_file(self) -> None:
        file_name = filedialog.askopenfilename(
            parent=self, title="Video Dosyası Aç", filetypes=VIDEO_FILE_TYPES
        )
        if not file_name:
            return
        if self.player.open_file(file_name):
            self._name_label.configure(text=self.player.name)
            for button in self._player_buttons:
                button.configure(state=tk.NORMAL)

    def on_play(self) -> None:
        self.player.play()

    def on_pause(self) -> None:
        self.player.pause()

    def on_restart(self) -> None:
        self.player.restart()

    def update_frame(self, frame: np.ndarray) -> None:
        """Show a frame scaled to the video area, keeping its aspect ratio."""
        image = Image.fromarray(frame)
        box = (self._video_label.winfo_width(), self._video_label.winfo_height())
        size = scale_to_fit(image.size, box)
        if size[0] <= 0 or size[1] <= 0:
            return
        image = image.resize(size, Image.Resampling.LANCZOS)
        self._photo = ImageTk.PhotoImage(image)
        self._video_label.configure(image=self._photo)

    def handle_error(self, error: str) -> None:
        messagebox.showwarning("Hata", error, parent=self)

    def _drain_events(self) -> None:
        while True:
            try:
                kind, payload = self._events.get_nowait()
            except queue.Empty:
                break
            if kind == "frame":
                self.update_frame(payload)
            else:
                self.handle_error(payload)
        self.after(POLL_MS, self._drain_events)


class MainWindow:
    """Main window holding four players and controls that act on all of them."""

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        root.title("Çoklu Video Oynatıcı")
        root.geometry("1024x768")

        central = tk.Frame(root)
        central.pack(fill=tk.BOTH, expand=True)

        self._widgets = [VideoPlayerWidget(central) for _ in range(PLAYER_COUNT)]
        self.players = PlayerGrid(widget.player for widget in self._widgets)
        for index, widget in enumerate(self._widgets):
            row, column = self.players.position(index)
            widget.grid(row=row, column=column, sticky="nsew", padx=4, pady=4)
            central.rowconfigure(row, weight=1)
            central.columnconfigure(column, weight=1)

        controls = tk.Frame(central)
        controls.grid(row=2, column=0, columnspan=2, sticky="ew")
        for text, command in (
            ("Tümünü Başlat", self.play_all_videos),
            ("Tümünü Duraklat", self.pause_all_videos),
            ("Tümünü Yeniden Başlat", self.restart_all_videos),
        ):
            tk.Button(controls, text=text, command=command).pack(
                side=tk.LEFT, expand=True, fill=tk.X
            )

        root.protocol("WM_DELETE_WINDOW", self.close)

    def play_all_videos(self) -> None:
        self.players.play_all()

    def pause_all_videos(self) -> None:
        self.players.pause_all()

    def restart_all_videos(self) -> None:
        self.players.restart_all()

    def close(self) -> None:
        """Stop every player and destroy the window."""
        for player in self.players:
            player.close()
        self._root.destroy()


def main(argv: Optional[list[str]] = None) -> int:
    """Open the player window and run until it is closed."""
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0