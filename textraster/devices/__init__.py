# TextRaster - A HarfBuzz/FreeType Text Rasterizer
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Output device registry.

Each device module exposes ``write_image(canvas, stream, **params)`` and
an ``EXTENSIONS`` tuple used to infer the device from an output path.
"""

from __future__ import annotations

import os
from types import ModuleType

from .png import png
from .tiff import tiff

DEVICES: dict[str, ModuleType] = {
    "png": png,
    "tiff": tiff,
}


def available_devices() -> list[str]:
    return sorted(DEVICES)


def get_device(name: str) -> ModuleType:
    """Look up a device module by name.

    Raises:
        ValueError: For unknown device names.
    """
    try:
        return DEVICES[name]
    except KeyError:
        raise ValueError(
            f"unknown output device {name!r} (available: {', '.join(available_devices())})"
        ) from None


def device_for_path(path: str) -> str | None:
    """Device name implied by a file extension, or None."""
    ext = os.path.splitext(path)[1].lower()
    for name, module in DEVICES.items():
        if ext in module.EXTENSIONS:
            return name
    return None
