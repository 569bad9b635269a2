from __future__ import annotations

import math
from dataclasses import replace

from contentql.models import Image


def _round(value: float) -> int:
    """Round half up, so 12.5 becomes 13 rather than banker's 12."""
    return math.floor(value + 0.5)


def scale_image(image: Image, width: int | None = None, height: int | None = None) -> Image:
    """Scale ``image`` to fit the target width and/or height, keeping its aspect ratio.

    Each target yields a candidate size; the result takes the smaller width and
    the smaller height of the candidates. Without targets the image is returned
    unchanged. A zero original dimension raises ``ZeroDivisionError``.
    """
    candidates: list[tuple[int, int]] = []
    if width is not None:
        candidates.append((width, _round(image.height / (image.width / width))))
    if height is not None:
        candidates.append((_round(image.width / (image.height / height)), height))
    if not candidates:
        return image

    new_width = min(w for w, _ in candidates)
    new_height = min(h for _, h in candidates)
    return replace(image, url=f"{image.url}?w={new_width}&h={new_height}", width=new_width, height=new_height)
