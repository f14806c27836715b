from __future__ import annotations

import argparse
from dataclasses import dataclass, field
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from slidemenu_core.core import InputEvent, SlideMenuHost
from slidemenu_ui import DensityContext, SlideMenu, load_slide_menu_config


APP_DIR = Path(__file__).resolve().parent
CONFIG_TOML = APP_DIR / "slide_menu.toml"
SCREEN_SIZE = (480, 320)
LOGGER = logging.getLogger("slide_menu_demo")


@dataclass
class SlideLog:
    """Records every selection, standing in for the toast a phone app would show."""

    selections: list[str] = field(default_factory=list)

    def on_slide_left(self) -> None:
        self.selections.append("left")
        LOGGER.info("left")

    def on_slide_right(self) -> None:
        self.selections.append("right")
        LOGGER.info("right")


def build_host(density: float = 2.0, config_path: Path = CONFIG_TOML) -> tuple[SlideMenuHost, SlideLog]:
    settings = load_slide_menu_config(config_path)
    widget = SlideMenu(settings.config, dimensions=settings.dimensions, theme=settings.theme)
    log = SlideLog()
    widget.set_on_slide_menu_listener(log)
    host = SlideMenuHost(widget, DensityContext(density), screen_size=SCREEN_SIZE)
    bounds = host.layout_pass(0, 0)
    host.layout_pass((SCREEN_SIZE[0] - bounds.width) // 2, SCREEN_SIZE[1] - bounds.height - 20)
    host.window_focus_changed(True)
    return host, log


def slide_gesture(host: SlideMenuHost, direction: str) -> list[InputEvent]:
    """Touch the button centre, drag into one landing zone and lift."""

    bounds = host.bounds
    if bounds is None:
        raise RuntimeError("host layout pass has not run")
    snapshot = host.widget.layout_snapshot
    zone = snapshot.left_zone if direction == "left" else snapshot.right_zone
    cx = bounds.left + bounds.width / 2.0
    cy = bounds.top + bounds.height / 2.0
    zx = bounds.left + (zone.left + zone.right) / 2.0
    zy = bounds.top + (zone.top + zone.bottom) / 2.0
    return [
        InputEvent("pointer_down", 0.00, x=cx, y=cy),
        InputEvent("pointer_move", 0.05, x=(cx + zx) / 2.0, y=cy),
        InputEvent("pointer_move", 0.10, x=zx, y=zy),
        InputEvent("pointer_up", 0.15, x=zx, y=zy),
    ]


def run_demo(density: float = 2.0, out_dir: Path | None = None) -> SlideLog:
    host, log = build_host(density)
    for direction in ("left", "right"):
        events = slide_gesture(host, direction)
        for event in events[:-1]:
            host.dispatch(event)
        frame = host.draw()
        if out_dir is not None:
            out_dir.mkdir(parents=True, exist_ok=True)
            path = out_dir / f"slide_{direction}.png"
            Image.fromarray(np.ascontiguousarray(frame.numpy())).save(path)
            LOGGER.info("wrote %s", path)
        host.dispatch(events[-1])
    return log


def main() -> None:
    parser = argparse.ArgumentParser(prog="slide-menu-demo")
    parser.add_argument("--density", type=float, default=2.0)
    parser.add_argument("--out-dir", type=Path, default=None)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    log = run_demo(args.density, args.out_dir)
    print(f"selections: {', '.join(log.selections)}")


if __name__ == "__main__":
    main()
