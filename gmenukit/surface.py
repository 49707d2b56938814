"""RGBA drawing surfaces: colours, rectangles, fills, outlines and blits."""

from __future__ import annotations

import enum
import io
import logging
import os
from dataclasses import dataclass

from PIL import Image, ImageChops, UnidentifiedImageError

_log = logging.getLogger(__name__)

_FALLBACK_SIZE = 16
_HEX_DIGITS = "0123456789abcdefABCDEF"


class Align(enum.IntFlag):
    """Horizontal and vertical anchoring of a blit."""

    LEFT = 1
    RIGHT = 2
    CENTER = 4
    TOP = 8
    BOTTOM = 16
    MIDDLE = 32


class ScaleMode(enum.IntEnum):
    """How ``Surface.soft_stretch`` treats the aspect ratio."""

    STRETCH = 0
    MAX = 1
    FIT = 2


@dataclass(frozen=True)
class RGBAColor:
    """An 8-bit-per-channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    w: int
    h: int


def _parse_hex_prefix(chunk: str) -> int:
    """Parse the leading hexadecimal number of ``chunk``; 0 if there is none."""
    text = chunk.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text[:2].lower() == "0x" and text[2:3] and text[2] in _HEX_DIGITS:
        text = text[2:]
    digits = ""
    for ch in text:
        if ch not in _HEX_DIGITS:
            break
        digits += ch
    return sign * int(digits, 16) if digits else 0


def strtorgba(text: str) -> RGBAColor:
    """Parse ``"#rrggbbaa"`` (the ``#`` is optional) into a colour."""
    if not text:
        raise ValueError("empty colour string")
    offset = 1 if text[0] == "#" else 0
    channels = []
    for index in range(4):
        start = offset + 2 * index
        if start > len(text):
            raise ValueError(f"colour string too short: {text!r}")
        value = _parse_hex_prefix(text[start:start + 2])
        channels.append(min(255, max(0, value)))
    return RGBAColor(*channels)


def rgbatostr(color: RGBAColor) -> str:
    """Format a colour as ``"#rrggbbaa"``."""
    return "#{:02x}{:02x}{:02x}{:02x}".format(*color.as_tuple())


def _intersect(a: Rect, b: Rect) -> Rect:
    x0, y0 = max(a.x, b.x), max(a.y, b.y)
    x1, y1 = min(a.x + a.w, b.x + b.w), min(a.y + a.h, b.y + b.h)
    return Rect(x0, y0, max(0, x1 - x0), max(0, y1 - y0))


class Surface:
    """A mutable RGBA pixel buffer with a clipping rectangle."""

    def __init__(self, width: int, height: int) -> None:
        self._image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._clip = Rect(0, 0, width, height)

    @classmethod
    def _wrap(cls, image: Image.Image) -> "Surface":
        surface = cls.__new__(cls)
        surface._image = image.convert("RGBA")
        surface._clip = Rect(0, 0, surface._image.width, surface._image.height)
        return surface

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "Surface":
        """Load an image file; an unreadable file gives a blank 16x16 surface."""
        try:
            with Image.open(path) as image:
                image.load()
                return cls._wrap(image)
        except (OSError, UnidentifiedImageError):
            _log.error("Couldn't load surface '%s'", path)
            return cls(_FALLBACK_SIZE, _FALLBACK_SIZE)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Surface":
        """Decode an encoded image held in memory."""
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.load()
                return cls._wrap(image)
        except (OSError, UnidentifiedImageError) as exc:
            raise ValueError("cannot decode image data") from exc

    @property
    def image(self) -> Image.Image:
        """The underlying Pillow image."""
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def clip_rect(self) -> Rect:
        return self._clip

    def copy(self) -> "Surface":
        """An independent copy of this surface (without its clip rectangle)."""
        return Surface._wrap(self._image.copy())

    def pixel(self, x: int, y: int) -> RGBAColor:
        return RGBAColor(*self._image.getpixel((x, y)))

    def put_pixel(self, x: int, y: int, color: RGBAColor) -> None:
        self._image.putpixel((x, y), color.as_tuple())

    def _bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def set_clip_rect(self, rect: Rect) -> None:
        """Limit drawing to ``rect`` (intersected with the surface)."""
        self._clip = _intersect(rect, self._bounds())

    def clear_clip_rect(self) -> None:
        """Allow drawing on the whole surface again."""
        self._clip = self._bounds()

    def apply_clip_rect(self, rect: Rect) -> Rect:
        """Return ``rect`` clipped against the active clipping rectangle."""
        clip = self._clip
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        if x < clip.x:
            w = max(x + w - clip.x, 0)
            x = clip.x
        if x + w > clip.x + clip.w:
            w = max(clip.x + clip.w - x, 0)
        if y < clip.y:
            h = max(y + h - clip.y, 0)
            y = clip.y
        if y + h > clip.y + clip.h:
            h = max(clip.y + clip.h - y, 0)
        return Rect(x, y, w, h)

    def box(self, rect: Rect, color: RGBAColor) -> None:
        """Fill ``rect``: opaque colours overwrite, translucent ones blend."""
        if color.a == 255:
            clipped = _intersect(self.apply_clip_rect(rect), self._bounds())
            if clipped.w > 0 and clipped.h > 0:
                self._image.paste(color.as_tuple(), (clipped.x, clipped.y,
                                                     clipped.x + clipped.w,
                                                     clipped.y + clipped.h))
        elif color.a != 0:
            self.fill_rect_alpha(rect, color)

    def fill_rect_alpha(self, rect: Rect, color: RGBAColor) -> None:
        """Blend ``color`` over ``rect`` according to its alpha."""
        clipped = _intersect(self.apply_clip_rect(rect), self._bounds())
        if clipped.w == 0 or clipped.h == 0:
            return
        area = (clipped.x, clipped.y, clipped.x + clipped.w, clipped.y + clipped.h)
        alpha = color.a
        inverse = 255 - alpha
        region = self._image.crop(area)
        bands = []
        for band, channel in zip(region.split(), color.as_tuple()):
            fill = (channel * alpha) >> 8
            bands.append(band.point([((v * inverse) >> 8) + fill for v in range(256)]))
        self._image.paste(Image.merge("RGBA", bands), area)

    def rectangle(self, rect: Rect, color: RGBAColor) -> None:
        """Draw a one-pixel outline of ``rect``."""
        if rect.h >= 1:
            self.box(Rect(rect.x, rect.y, rect.w, 1), color)
        if rect.h >= 2:
            self.box(Rect(rect.x, rect.y + rect.h - 1, rect.w, 1), color)
            side_y, side_h = rect.y + 1, rect.h - 2
            if rect.w >= 1:
                self.box(Rect(rect.x, side_y, 1, side_h), color)
            if rect.w >= 2:
                self.box(Rect(rect.x + rect.w - 1, side_y, 1, side_h), color)

    def blend_add(self, target: "Surface", x: int, y: int) -> None:
        """Add this surface's colour channels onto ``target`` at ``(x, y)``, saturating."""
        x0, y0 = max(x, 0), max(y, 0)
        x1 = min(x + self.width, target.width)
        y1 = min(y + self.height, target.height)
        if x1 <= x0 or y1 <= y0:
            return
        source = self._image.crop((x0 - x, y0 - y, x1 - x, y1 - y))
        dest = target._image.crop((x0, y0, x1, y1))
        sr, sg, sb, _ = source.split()
        dr, dg, db, da = dest.split()
        merged = Image.merge("RGBA", (ImageChops.add(dr, sr), ImageChops.add(dg, sg),
                                      ImageChops.add(db, sb), da))
        target._image.paste(merged, (x0, y0, x1, y1))

    def blit(self, destination: "Surface", x: int, y: int,
             align: Align = Align.LEFT | Align.TOP, alpha: int = 255) -> bool:
        """Composite this surface onto ``destination``; report whether anything was drawn."""
        if alpha == 0:
            return False
        if align & Align.CENTER:
            x -= self.width // 2
        elif align & Align.RIGHT:
            x -= self.width
        if align & Align.MIDDLE:
            y -= self.height // 2
        elif align & Align.BOTTOM:
            y -= self.height

        target = _intersect(Rect(x, y, self.width, self.height), destination._clip)
        if target.w == 0 or target.h == 0:
            return False
        source = self._image.crop((target.x - x, target.y - y,
                                   target.x - x + target.w, target.y - y + target.h))
        if alpha < 255:
            scale = alpha / 255
            r, g, b, a = source.split()
            source = Image.merge("RGBA", (r, g, b, a.point([int(v * scale) for v in range(256)])))
        area = (target.x, target.y, target.x + target.w, target.y + target.h)
        composed = Image.alpha_composite(destination._image.crop(area), source)
        destination._image.paste(composed, area)
        return True

    def set_alpha(self, alpha: int) -> None:
        """Scale every pixel's alpha by ``alpha / 255``."""
        scale = alpha / 255
        r, g, b, a = self._image.split()
        self._image = Image.merge("RGBA", (r, g, b, a.point([int(scale * v) for v in range(256)])))

    def soft_stretch(self, width: int, height: int,
                     scale_mode: ScaleMode = ScaleMode.STRETCH) -> None:
        """Resize in place, optionally keeping the aspect ratio."""
        src_ratio = self.width / self.height
        dst_ratio = width / height
        if scale_mode & ScaleMode.MAX:
            if dst_ratio >= src_ratio:
                height = int(width / src_ratio)
            if dst_ratio <= src_ratio:
                width = int(height * src_ratio)
        elif scale_mode & ScaleMode.FIT:
            if dst_ratio >= src_ratio:
                width = int(height * src_ratio)
            if dst_ratio <= src_ratio:
                height = int(width / src_ratio)
        self._image = self._image.resize((width, height), Image.NEAREST)
        self._clip = self._bounds()