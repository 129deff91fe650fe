from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from luvatrix_guide.config import ChartConfig, load_chart_config
from luvatrix_guide.operators import GuideScenes, render_guides
from luvatrix_guide.raster import composite, save_png
from luvatrix_guide.scene import Scene, sorted_scenes

LOGGER = logging.getLogger(__name__)


def build_scenes(config: ChartConfig) -> list[Scene]:
    rendered: list[GuideScenes] = render_guides(config.guides, config.scales, config.coord)
    scenes: list[Scene] = []
    for pair in rendered:
        scenes.append(pair.grid)
        scenes.append(pair.axis)
    return sorted_scenes(scenes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="luvatrix-guide")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render the axes and grids of a guide config (TOML) to PNG.")
    render.add_argument("config", type=Path)
    render.add_argument("--out", type=Path, required=True)

    describe = sub.add_parser("describe", help="Print the figures of every guide scene.")
    describe.add_argument("config", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config = load_chart_config(args.config)
    scenes = build_scenes(config)
    if args.command == "render":
        rgba = composite(scenes, config.width, config.height, background=config.background)
        save_png(rgba, args.out)
        return 0

    for scene in scenes:
        print(f"{type(scene).__name__} layer={scene.layer} figures={len(scene.figures)}")
        for figure in scene.figures:
            print(f"  {figure}")
    return 0
