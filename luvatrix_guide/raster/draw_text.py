from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from luvatrix_guide.styles import DEFAULT_FONT_FAMILY, Alignment, LabelStyle, Point

LOGGER = logging.getLogger(__name__)

MONO_FONT_FALLBACK_PATTERNS = (
    "comicmono",
    "comic mono",
    "menlo",
    "monaco",
    "courier new",
    "courier",
    "dejavusansmono",
    "dejavu sans mono",
)

_FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_label(dst: np.ndarray, text: str, anchor: Point, style: LabelStyle, align: Alignment) -> tuple[int, int, int, int] | None:
    """Blends `text` so that its box sits on the `align` side of `anchor`; returns the drawn box."""
    if not text:
        return None
    mask = _rotate_mask(_render_mask(text, _load_font(style.font_family, style.font_size_px)), style.rotate_deg)
    h, w = mask.shape
    x, y = aligned_origin(anchor, (w, h), align)
    _blend_mask(dst, x, y, mask, style.color)
    return (x, y, w, h)


def aligned_origin(anchor: Point, size: tuple[int, int], align: Alignment) -> tuple[int, int]:
    w, h = size
    ax, ay = align
    left = anchor[0] - (w / 2.0) * (1.0 - ax)
    top = anchor[1] - (h / 2.0) * (1.0 - ay)
    return (int(round(left)), int(round(top)))


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)

    patch[:, :, :3] = np.clip(out_rgb_num / safe_alpha[:, :, None], 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(out_alpha * 255.0, 0, 255).astype(np.uint8)


@lru_cache(maxsize=256)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    image = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


def _rotate_mask(mask: np.ndarray, rotate_deg: int) -> np.ndarray:
    turns = (rotate_deg // 90) % 4
    if turns == 0:
        return mask
    return np.rot90(mask, k=turns)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        LOGGER.debug("no font file matches `%s`, using the Pillow default font", font_family)
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        LOGGER.debug("font `%s` could not be loaded, using the Pillow default font", font_path)
        return ImageFont.load_default()


@lru_cache(maxsize=16)
def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower()
    candidates: list[Path] = []
    for base in _FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in (wanted,) + MONO_FONT_FALLBACK_PATTERNS:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.stem.lower().replace(" ", "") or p in path.name.lower().replace(" ", ""):
                return path
    return None
