from __future__ import annotations

import logging
from pathlib import Path
import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from src.config.api import default_config
from src.pipeline.api import JobAlreadyRunningError, JobListener, JobRunner

logger = logging.getLogger(__name__)


class _GuiListener(JobListener):
    """Forwards job events from the worker thread to the Tk main loop."""

    def __init__(self, gui: "ImageFolderPdfGUI") -> None:
        self.gui = gui

    def status(self, message: str) -> None:
        self.gui.after(0, lambda: self.gui.lbl_status.config(text=message))

    def progress(self, percent: int) -> None:
        self.gui.after(0, lambda: self.gui.var_progress.set(percent))

    def finished(self, output_path: str) -> None:
        self.gui.after(0, lambda: self.gui.on_finished(output_path))

    def failed(self, message: str) -> None:
        self.gui.after(0, lambda: self.gui.on_failed(message))


class ImageFolderPdfGUI(tk.Tk):
    """
    Minimal GUI:
    - User enters or picks a folder
    - GUI starts one conversion job in the background (JobRunner)
    - Progress/status are shown, the button is locked while the job runs
    """

    def __init__(self) -> None:
        super().__init__()

        self.config_ = default_config()
        self.runner = JobRunner(self.config_)
        self._is_running = False

        self.title("Image Folder to PDF")
        self.geometry("680x360")
        self.resizable(False, False)

        self._build_ui()

    def _build_ui(self) -> None:
        body = tk.Frame(self)
        body.pack(fill="both", expand=True, padx=24, pady=24)

        header = tk.Label(body, text="Convert all images in a folder to a PDF", font=("TkDefaultFont", 14, "bold"))
        header.pack(anchor="w", pady=(0, 8))

        description = tk.Label(
            body,
            text=(
                "Select or enter a folder path. Images are embedded at 100% resolution and "
                f"exported at {self.config_.dpi} DPI."
            ),
            wraplength=620,
            justify="left",
        )
        description.pack(anchor="w", pady=(0, 16))

        # Folder path
        path_row = tk.Frame(body)
        path_row.pack(fill="x", pady=(0, 16))

        tk.Label(path_row, text="Folder path:").pack(side="left")
        self.ent_path = tk.Entry(path_row)
        self.ent_path.pack(side="left", fill="x", expand=True, padx=(6, 6))

        btn_browse = tk.Button(path_row, text="Browse...", command=self.on_browse)
        btn_browse.pack(side="left")

        # Convert + progress
        action_row = tk.Frame(body)
        action_row.pack(fill="x", pady=(0, 16))

        self.btn_convert = tk.Button(action_row, text="Convert to PDF", command=self.on_convert)
        self.btn_convert.pack(side="left")

        self.var_progress = tk.IntVar(value=0)
        self.progress = ttk.Progressbar(action_row, maximum=100, variable=self.var_progress, mode="determinate")
        self.progress.pack(side="left", fill="x", expand=True, padx=(8, 0))

        # Status line
        self.lbl_status = tk.Label(body, text="Ready", fg="#555")
        self.lbl_status.pack(anchor="w", pady=(0, 16))

        info = tk.Label(
            body,
            text=(
                f"• Output PDF name: {self.config_.output_filename}\n"
                "• Output location: selected folder\n"
                "• Image order: alphabetical by filename"
            ),
            bg="#f6f6f6",
            justify="left",
            padx=12,
            pady=12,
        )
        info.pack(fill="x")

    def on_browse(self) -> None:
        if self._is_running:
            return

        d = filedialog.askdirectory(title="Select a folder with images")
        if not d:
            return

        self.ent_path.delete(0, tk.END)
        self.ent_path.insert(0, d)

    def on_convert(self) -> None:
        if self._is_running:
            return

        folder = self.ent_path.get().strip()
        if not folder:
            messagebox.showwarning("Missing folder", "Please provide a folder path.")
            return

        if not Path(folder).is_dir():
            messagebox.showerror("Invalid folder", "The provided path is not a folder.")
            return

        try:
            self.runner.start(folder, _GuiListener(self))
        except JobAlreadyRunningError as e:
            messagebox.showwarning("Busy", str(e))
            return

        self._is_running = True
        self.btn_convert.config(state="disabled")
        self.var_progress.set(0)
        self.lbl_status.config(text="Preparing conversion...")
        logger.info("conversion started: %s", folder)

    def on_finished(self, output_path: str) -> None:
        self.lbl_status.config(text=f"Done! Saved to {output_path}")
        self._rearm()

    def on_failed(self, message: str) -> None:
        messagebox.showerror("Conversion error", message)
        self.lbl_status.config(text="Ready")
        self.var_progress.set(0)
        self._rearm()

    def _rearm(self) -> None:
        self._is_running = False
        self.btn_convert.config(state="normal")


if __name__ == "__main__":
    app = ImageFolderPdfGUI()
    app.mainloop()
