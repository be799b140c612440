"""
Interactive Hilbert curve viewer.

A black square canvas shows the current curve as a hue-graded polyline; the
"Order" scale regenerates it through :class:`CurveController`.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from .config import Settings, build_settings
from .curve import CurvePath
from .render import render_path
from .state import CurveController

logger = logging.getLogger(__name__)


class HilbertCurveGUI:
    def __init__(self, root: tk.Tk, controller: Optional[CurveController] = None):
        self.root = root
        self.controller = controller or CurveController()
        self.settings: Settings = self.controller.settings
        self.root.title("Hilbert Curve")
        self.root.resizable(False, False)

        self.order_var = tk.IntVar(value=self.controller.order)
        self.status_var = tk.StringVar()

        self.setup_gui()
        self._unsubscribe = self.controller.subscribe(self.draw_path)
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.draw_path(self.controller.path)

    def setup_gui(self):
        """Set up the GUI components."""

        main_frame = ttk.Frame(self.root, padding="10")
        main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        control_frame = ttk.LabelFrame(main_frame, text="Controls", padding="5")
        control_frame.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=(0, 10))

        ttk.Label(control_frame, text="Order").grid(row=0, column=0, padx=(0, 10))

        # tk.Scale supports a resolution, ttk.Scale does not
        self.order_scale = tk.Scale(
            control_frame,
            from_=self.settings.min_order,
            to=self.settings.max_order,
            resolution=1,
            orient=tk.HORIZONTAL,
            variable=self.order_var,
            showvalue=True,
            length=150,
            command=self.on_order_changed,
        )
        self.order_scale.grid(row=0, column=1)

        status_label = ttk.Label(control_frame, textvariable=self.status_var)
        status_label.grid(row=1, column=0, columnspan=2, pady=(5, 0), sticky=tk.W)

        size = self.settings.canvas_size
        self.canvas = tk.Canvas(
            main_frame, width=size, height=size, background="black", highlightthickness=0
        )
        self.canvas.grid(row=1, column=0)

    def on_order_changed(self, value):
        """Scale callback; tk passes the new value as a string."""
        order = int(float(value))
        if order != self.controller.order:
            self.controller.set_order(order)

    def draw_path(self, path: CurvePath):
        """Replace everything on the canvas with ``path``."""

        polylines = render_path(path, self.settings.canvas_size)
        self.canvas.delete("all")
        for polyline in polylines:
            self.canvas.create_line(
                *polyline.coords, fill=polyline.color, width=self.settings.line_width
            )
        self.order_var.set(path.order)
        self.status_var.set(
            f"Order {path.order}: {len(path)} points, {path.side}x{path.side} grid"
        )
        logger.debug("Drew %d polylines for order %d", len(polylines), path.order)

    def close(self):
        self._unsubscribe()
        self.root.destroy()


def main(settings: Optional[Settings] = None):
    """Main GUI function."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    root = tk.Tk()
    HilbertCurveGUI(root, CurveController(settings or build_settings()))
    root.mainloop()


if __name__ == "__main__":
    main()
