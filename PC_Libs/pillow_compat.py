"""
Compatibility wrapper around Pillow (which provides the `PIL` namespace).

The colorizer modules import `Image`, `ImageFilter` and
`UnidentifiedImageError` from here so the Pillow entry points used by the
library are gathered in one place.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")
_pil_imagefilter = _import("PIL.ImageFilter")

if _pil_image is None or _pil_imagefilter is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image
ImageFilter = _pil_imagefilter

# Raised by Image.open for bytes Pillow cannot identify
UnidentifiedImageError = _pil_image.UnidentifiedImageError
