"""Request path parsing.

Accepted shapes (no leading slash)::

    key
    WxH/key        Wx/key        xH/key
    exact/key      exact/WxH/key
"""

from ..common.errors import BadRequestShapeError
from ..common.schemas import Size
from .schema import FitSpec, ResizeRequest

EXACT_PREFIX = "exact"


def parse_resize_request(path: str, freeze: bool, max_size: Size) -> ResizeRequest:
    """Parse a request path into a key and an optional fit spec.

    Args:
        path: URL path without the leading slash
        freeze: Whether ``freeze=true`` was present in the query
        max_size: Largest width and height a client may request

    Returns:
        ResizeRequest; ``fit`` is None for a bare key

    Raises:
        BadRequestShapeError: On malformed paths or sizes above ``max_size``
    """
    components = path.split("/")
    if len(components) == 1:
        return ResizeRequest(key=components[0])

    exact = False
    if components[0] == EXACT_PREFIX:
        exact = True
        components = components[1:]

    if len(components) > 2:
        raise BadRequestShapeError(f"too many path components in {path!r}")

    size = Size(0, 0)
    if len(components) == 2:
        size = _parse_requested_size(components[0])
        if size.width > max_size.width or size.height > max_size.height:
            raise BadRequestShapeError(f"requested size {size} exceeds maximum {max_size}")
        key = components[1]
    else:
        key = components[0]

    return ResizeRequest(
        key=key,
        fit=FitSpec(size=size, exact=exact, freeze_animation=freeze),
    )


def _parse_requested_size(spec: str) -> Size:
    parts = spec.split("x")
    if len(parts) != 2:
        raise BadRequestShapeError(f"expected size in the format WxH, got {spec!r}")

    axes: list[int] = []
    for part in parts:
        # An empty axis ("200x", "x200") leaves that axis unconstrained
        if not part:
            axes.append(0)
        elif part.isdecimal() and part.isascii():
            axes.append(int(part))
        else:
            raise BadRequestShapeError(f"invalid size axis {part!r} in {spec!r}")

    return Size(axes[0], axes[1])
