from __future__ import annotations
import logging
import os
import tkinter as tk
from typing import Any, Callable, Dict, Optional

from dessert_ledger import SaleLedger, Tier
from dessert_timer import DessertTimer
from lifecycle_clock import LifecycleClock
from sharing import share_score, share_via_mail

logger = logging.getLogger("dessert.app")

# Config
CONFIG: Dict[str, Any] = {
    "title": "Dessert Pusher",
    "geometry": "420x520",
    "currency": "$",
    "notice_ms": 3500,
    "timer_interval_ms": 1000,
    "share_label": "Share",
    "share_shortcut": "<Control-s>",
    "low_memory_shortcut": "<Control-Shift-M>",
    "sharing_not_available": "Sharing Not Available",
    "tier_emoji": {
        "cupcake": "🧁",
        "donut": "🍩",
        "eclair": "🥐",
        "froyo": "🍦",
        "gingerbread": "🍪",
        "honeycomb": "🍯",
        "icecreamsandwich": "🍨",
        "jellybean": "🫘",
        "kitkat": "🍫",
        "lollipop": "🍭",
        "marshmallow": "☁️",
        "nougat": "🥜",
        "oreo": "🥮",
    },
}

def dessert_label(tier: Tier) -> str:
    emoji = CONFIG["tier_emoji"].get(tier.image_id, "🍰")
    return f"{emoji}\n{tier.image_id.capitalize()}"

class DessertPusherApp:
    def __init__(self, root: tk.Tk, share_handler: Callable[[str], None] = share_via_mail):
        self.lifecycle = LifecycleClock()
        self.lifecycle.record("create")
        self.root = root
        self.root.title(CONFIG["title"])
        self.ledger = SaleLedger()
        self.share_handler = share_handler
        self.visible = False
        self.resumed = False
        self._size: Optional[tuple] = None
        self._notice_job: Optional[str] = None

        self.revenue_var = tk.StringVar()
        self.sold_var = tk.StringVar()
        tk.Label(root, textvariable=self.revenue_var, font=("Helvetica", 28, "bold"), pady=8).pack(fill=tk.X)
        self.dessert_btn = tk.Button(
            root,
            font=("Helvetica", 40),
            width=8,
            height=3,
            relief="flat",
            command=self.on_dessert_clicked,
        )
        self.dessert_btn.pack(expand=True)
        tk.Label(root, textvariable=self.sold_var, font=("Helvetica", 14), pady=6).pack()
        self.notice_label = tk.Label(root, text="", fg="white", bg="gray25", padx=10, pady=4)

        menubar = tk.Menu(root)
        menubar.add_command(label=CONFIG["share_label"], command=self.on_share)
        root.config(menu=menubar)

        root.bind_all(CONFIG["share_shortcut"], lambda e: self.on_share())
        root.bind_all(CONFIG["low_memory_shortcut"], lambda e: self.on_low_memory())
        root.bind("<Map>", self._on_map)
        root.bind("<Unmap>", self._on_unmap)
        root.bind("<FocusIn>", self._on_focus_in)
        root.bind("<FocusOut>", self._on_focus_out)
        root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        self.update_score_labels()
        self.show_current_dessert(self.ledger.current_tier())
        self.timer = DessertTimer(root, CONFIG["timer_interval_ms"])
        self.start()
        self.resume()

    def update_score_labels(self) -> None:
        self.revenue_var.set(f"{CONFIG['currency']}{self.ledger.revenue:,}")
        self.sold_var.set(f"{self.ledger.units_sold:,} Desserts Sold")

    def show_current_dessert(self, tier: Tier) -> None:
        self.dessert_btn.config(text=dessert_label(tier))

    def show_temporary(self, text: str, duration_ms: int) -> None:
        if self._notice_job is not None:
            self.root.after_cancel(self._notice_job)
        self.notice_label.config(text=text)
        self.notice_label.pack(side=tk.BOTTOM, pady=10)
        self._notice_job = self.root.after(duration_ms, self._hide_notice)

    def _hide_notice(self) -> None:
        self._notice_job = None
        self.notice_label.pack_forget()

    def on_dessert_clicked(self) -> None:
        self.ledger.record_sale(on_tier_changed=self.show_current_dessert)
        self.update_score_labels()

    def on_share(self) -> None:
        if share_score(self.ledger, self.share_handler):
            self.lifecycle.mark_showing_dialog(True)
        else:
            self.lifecycle.mark_showing_dialog(False)
            self.show_temporary(CONFIG["sharing_not_available"], CONFIG["notice_ms"])

    # Lifecycle

    def start(self) -> None:
        self.visible = True
        self.lifecycle.record("start")
        self.timer.start()

    def resume(self) -> None:
        self.resumed = True
        self.lifecycle.record("resume")

    def pause(self) -> None:
        self.resumed = False
        self.lifecycle.record("pause")

    def stop(self) -> None:
        if self.resumed:
            self.pause()
        self.visible = False
        self.lifecycle.record("stop")
        self.timer.stop()

    def restart(self) -> None:
        self.lifecycle.record("restart")
        self.start()
        self.resume()

    def on_low_memory(self) -> None:
        self.lifecycle.record("low_memory")

    def on_close(self) -> None:
        if self.visible:
            self.stop()
        self.lifecycle.record("destroy")
        self.root.destroy()

    def _on_map(self, event: tk.Event) -> None:
        if event.widget is self.root and not self.visible:
            self.restart()

    def _on_unmap(self, event: tk.Event) -> None:
        if event.widget is self.root and self.visible:
            self.stop()

    def _on_focus_in(self, event: tk.Event) -> None:
        if self.visible and not self.resumed:
            self.resume()

    def _on_focus_out(self, event: tk.Event) -> None:
        # Focus moving between our own widgets also sends FocusOut.
        self.root.after_idle(self._check_focus)

    def _check_focus(self) -> None:
        try:
            focused = self.root.focus_get() is not None
        except KeyError:
            # focus_get() raises for focused menus and native dialogs
            focused = True
        if self.visible and self.resumed and not focused:
            self.pause()

    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        size = (event.width, event.height)
        if self._size is not None and size != self._size:
            self.lifecycle.record("configuration_changed")
        self._size = size

def main() -> None:
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    root = tk.Tk()
    root.geometry(CONFIG["geometry"])
    DessertPusherApp(root)
    root.mainloop()

if __name__ == "__main__":
    main()
