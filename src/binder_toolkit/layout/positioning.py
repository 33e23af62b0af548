"""
Module: layout.positioning

Purpose:
    Position presets for content inside its content area.

Key Functions:
    - fit_position(): Largest scale that shows the whole image, centred
    - fill_position(): Smallest scale that covers the whole area, centred
    - reset_position(): Original size at the area's top-left corner
"""

from __future__ import annotations

from typing import Callable

from .models import ContentArea, ContentPage, PagePosition


def fit_position(page: ContentPage, area: ContentArea) -> PagePosition:
    """
    Scale the page to fit entirely inside ``area`` and centre it.

    Example:
        >>> fit_position(page, area).scale
        0.5
    """
    return _centred(page, area, min)


def fill_position(page: ContentPage, area: ContentArea) -> PagePosition:
    """Scale the page to cover ``area`` (may overflow) and centre it."""
    return _centred(page, area, max)


def reset_position() -> PagePosition:
    return PagePosition(x_offset_mm=0.0, y_offset_mm=0.0, scale=1.0)


def _centred(
    page: ContentPage,
    area: ContentArea,
    choose: Callable[[float, float], float],
) -> PagePosition:
    # ContentPage guarantees positive pixel dimensions
    width_mm, height_mm = page.size_mm()
    scale = choose(area.width / width_mm, area.height / height_mm)
    return PagePosition(
        x_offset_mm=(area.width - width_mm * scale) / 2,
        y_offset_mm=(area.height - height_mm * scale) / 2,
        scale=scale,
    )
