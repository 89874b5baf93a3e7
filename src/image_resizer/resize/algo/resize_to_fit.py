"""Pure resize-to-fit computation over in-memory image bytes."""

from io import BytesIO

from loguru import logger
from PIL import Image

from ...common.errors import DecodeError, EncodeError, SizeMismatchError
from ...common.schemas import ResizedImage, Size
from ...utils.media_types import ImageFormat, is_gif
from ...utils.profiling import span

JPEG_QUALITY = 80

# Modes Pillow can resample with a real Lanczos filter. Anything else
# (palette, bilevel...) is silently resized with NEAREST, so convert first.
_RESAMPLE_MODES = ("RGB", "RGBA", "L", "LA", "CMYK", "I", "F")

_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)
_ENCODE_ERRORS = (OSError, ValueError, KeyError)


def target_dimensions(original: Size, requested: Size) -> Size:
    """
    Resolve the output size for a requested bounding box.

    A zero axis is derived from the other one so the aspect ratio is kept;
    both axes zero keeps the original size. When both axes are given the
    literal size is used and the aspect ratio is not preserved.

    Args:
        original: Decoded image size
        requested: Requested size, either axis may be 0

    Returns:
        Size to resample to (each axis at least 1)
    """
    width, height = requested
    orig_width, orig_height = original

    if width == 0 and height == 0:
        return Size(orig_width, orig_height)

    if width == 0:
        scale = orig_height / height
        width = int(0.7 + orig_width / scale)
    elif height == 0:
        scale = orig_width / width
        height = int(0.7 + orig_height / scale)

    return Size(max(width, 1), max(height, 1))


def resize_to_fit(
    *,
    content: bytes,
    declared_mimetype: str,
    size: Size,
    exact: bool = False,
    freeze_animation: bool = False,
) -> ResizedImage:
    """
    Transform an encoded image so it matches ``size``.

    GIFs are never resized: they must already have the requested size, and
    are either passed through or frozen to a PNG of their first frame.
    Other rasters are returned untouched when they already match, and are
    otherwise resampled and re-encoded as JPEG (quality 80) or PNG.

    Args:
        content: Encoded image bytes
        declared_mimetype: Content-Type the origin reported for ``content``
        size: Requested size
        exact: Accepted for API compatibility; has no effect on the output
        freeze_animation: Return a GIF's first frame as PNG

    Returns:
        ResizedImage with the output bytes and their mimetype

    Raises:
        DecodeError: If the bytes cannot be decoded
        SizeMismatchError: If a GIF does not already have the requested size
        EncodeError: If re-encoding fails
    """
    _ = exact

    if is_gif(content):
        return _gif_to_fit(content, size, freeze_animation)

    with span("image_decode") as fields:
        try:
            img = Image.open(BytesIO(content))
            img.load()
        except _DECODE_ERRORS as e:
            raise DecodeError(f"failed to decode image: {e}") from e
        image_format = ImageFormat.from_pil(img.format)
        fields["image_format"] = image_format.value

    with img:
        if img.size == size:
            return ResizedImage(mimetype=declared_mimetype, content=content)

        with span("image_resize"):
            source = img if img.mode in _RESAMPLE_MODES else img.convert("RGBA")
            resized = source.resize(
                target_dimensions(Size(*img.size), size),
                Image.Resampling.LANCZOS,
            )

    with span("image_encode") as fields:
        if image_format is ImageFormat.JPEG:
            fields["image_format"] = "jpeg"
            if resized.mode not in ("RGB", "L", "CMYK"):
                resized = resized.convert("RGB")
            try:
                return ResizedImage(
                    mimetype="image/jpeg",
                    content=_encode(resized, "JPEG", quality=JPEG_QUALITY),
                )
            except _ENCODE_ERRORS as e:
                raise EncodeError(f"failed to encode jpeg: {e}") from e

        if image_format is not ImageFormat.PNG:
            logger.warning(f"Unknown image type {image_format.value!r}, default to png output")
        fields["image_format"] = "png"
        try:
            return ResizedImage(mimetype="image/png", content=_encode(resized, "PNG"))
        except _ENCODE_ERRORS as e:
            raise EncodeError(f"failed to encode png: {e}") from e


def _gif_to_fit(content: bytes, size: Size, freeze_animation: bool) -> ResizedImage:
    # Only the first frame is decoded; the animation is assumed well-formed.
    try:
        img = Image.open(BytesIO(content))
        img.load()
    except _DECODE_ERRORS as e:
        raise DecodeError(f"failed to decode gif: {e}") from e

    with img:
        if img.size != size:
            width, height = img.size
            raise SizeMismatchError(
                f"wrong gif size: expected {size.width}x{size.height} but got {width}x{height}"
            )

        if not freeze_animation:
            return ResizedImage(mimetype="image/gif", content=content)

        try:
            frozen = _encode(img, "PNG")
        except _ENCODE_ERRORS as e:
            raise EncodeError(f"failed to encode gif as png: {e}") from e

    return ResizedImage(mimetype="image/png", content=frozen)


def _encode(img: Image.Image, pil_format: str, **save_kwargs: object) -> bytes:
    buf = BytesIO()
    img.save(buf, format=pil_format, **save_kwargs)
    return buf.getvalue()
