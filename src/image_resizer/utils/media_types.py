from enum import StrEnum

GIF_MAGIC = b"GIF8"


class ImageFormat(StrEnum):
    GIF = "gif"
    JPEG = "jpeg"
    PNG = "png"
    OTHER = "other"

    @classmethod
    def from_pil(cls, pil_format: str | None) -> "ImageFormat":
        """Map a Pillow ``Image.format`` tag (``"JPEG"``, ``"PNG"``...) to a format."""
        if not pil_format:
            return ImageFormat.OTHER
        fmt = pil_format.lower()
        if fmt in ("jpeg", "jpg", "mpo"):
            return ImageFormat.JPEG
        elif fmt == "png":
            return ImageFormat.PNG
        elif fmt == "gif":
            return ImageFormat.GIF
        else:
            return ImageFormat.OTHER


def is_gif(content: bytes) -> bool:
    return content.startswith(GIF_MAGIC)
