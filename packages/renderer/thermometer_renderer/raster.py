"""SVG to PNG rasterization at an arbitrary output scale."""

from __future__ import annotations

import logging
import sys
from io import BytesIO
from xml.etree.ElementTree import ParseError

try:  # pragma: no cover - needs the system cairo library
    import cairosvg
    from cairosvg.parser import Tree
    from cairosvg.surface import PNGSurface
except Exception:  # pragma: no cover
    cairosvg = None
    Tree = None
    PNGSurface = None

try:  # pragma: no cover
    from PIL import Image
except Exception:  # pragma: no cover
    Image = None

from .models import RasterImage

PIXEL_FORMAT = "RGBA"
DPI = 96

# cairo image surfaces cannot exceed 32767 pixels on either side.
MAX_SURFACE_SIDE = 32767

# cairo_status_t values for CAIRO_STATUS_NO_MEMORY and CAIRO_STATUS_INVALID_SIZE.
_CAIRO_ALLOCATION_STATUSES = (1, 32)

# FORMAT_ARGB32 is a native-endian 32-bit word per pixel.
_CAIRO_RAWMODE = "BGRA" if sys.byteorder == "little" else "ARGB"

_LOGGER = logging.getLogger("thermometer.renderer")


class RasterizationError(Exception):
    """Base class for every way a scene can fail to become a bitmap."""


class ParseFailed(RasterizationError):
    pass


class BufferAllocationFailed(RasterizationError):
    pass


class EncodeFailed(RasterizationError):
    pass


def _require_backends() -> None:
    if cairosvg is None:
        raise RuntimeError("CairoSVG (and the cairo library) is required for rasterization")
    _require_pillow()


def _require_pillow() -> None:
    if Image is None:
        raise RuntimeError("Pillow is required for rasterization")


def _length(value: str | None) -> float:
    if not value:
        return 0.0
    text = value.strip()
    if text.endswith("px"):
        text = text[:-2]
    try:
        return float(text)
    except ValueError as exc:
        raise ParseFailed(f"Unsupported SVG length: {value!r}") from exc


def intrinsic_size(tree) -> tuple[float, float]:
    """Width and height in user units, falling back to the viewBox."""
    width = _length(tree.get("width"))
    height = _length(tree.get("height"))
    view_box = tree.get("viewBox")
    if (not width or not height) and view_box:
        parts = view_box.replace(",", " ").split()
        if len(parts) == 4:
            width = width or _length(parts[2])
            height = height or _length(parts[3])
    return width, height


def target_size(width: float, height: float, scale: float) -> tuple[int, int]:
    return round(width * scale), round(height * scale)


def parse_scene(scene: str):
    try:
        return Tree(bytestring=scene.encode("utf-8"))
    except (ParseError, ValueError, TypeError) as exc:
        raise ParseFailed(f"Failed to parse SVG: {exc}") from exc


def _draw(tree, width: int, height: int):
    """Draw ``tree`` into a new ``width`` x ``height`` cairo surface.

    An explicit output size makes cairosvg apply the uniform scale transform,
    and the identity one when it matches the intrinsic size.
    """
    try:
        return PNGSurface(tree, None, DPI, output_width=width, output_height=height).cairo
    except MemoryError as exc:
        raise BufferAllocationFailed(f"Out of memory for a {width}x{height} pixmap") from exc
    except Exception as exc:
        if getattr(exc, "status", None) in _CAIRO_ALLOCATION_STATUSES:
            raise BufferAllocationFailed(f"Failed to create pixmap of {width}x{height}: {exc}") from exc
        raise EncodeFailed(f"Failed to draw SVG: {exc}") from exc


def rasterize(scene: str, scale: float) -> RasterImage:
    """Render ``scene`` into an RGBA buffer ``scale`` times its intrinsic size.

    The caller clamps ``scale``; it is applied here as given. Fonts are
    resolved by cairo through the system fontconfig database.
    """
    _require_backends()
    tree = parse_scene(scene)
    width, height = target_size(*intrinsic_size(tree), scale)

    if not (1 <= width <= MAX_SURFACE_SIDE and 1 <= height <= MAX_SURFACE_SIDE):
        raise BufferAllocationFailed(f"Failed to create pixmap of {width}x{height}")

    surface = _draw(tree, width, height)
    try:
        surface.flush()
        frame = Image.frombuffer(
            PIXEL_FORMAT,
            (width, height),
            bytes(surface.get_data()),
            "raw",
            _CAIRO_RAWMODE,
            surface.get_stride(),
            1,
        )
        pixels = frame.tobytes()
    except MemoryError as exc:
        raise BufferAllocationFailed(f"Out of memory copying a {width}x{height} pixmap") from exc
    except (OSError, ValueError) as exc:
        raise EncodeFailed(f"Failed to read rendered pixels: {exc}") from exc

    _LOGGER.debug("rasterized scene to %dx%d at scale %.2f", width, height, scale)
    return RasterImage(width=width, height=height, pixel_format=PIXEL_FORMAT, pixels=pixels)


def encode_png(image: RasterImage) -> bytes:
    _require_pillow()
    try:
        frame = Image.frombytes(image.pixel_format, (image.width, image.height), image.pixels)
        out = BytesIO()
        frame.save(out, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeFailed(f"Failed to encode PNG: {exc}") from exc
    return out.getvalue()


def rasterize_png(scene: str, scale: float) -> bytes:
    return encode_png(rasterize(scene, scale))
