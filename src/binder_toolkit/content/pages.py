"""
Module: content.pages

Purpose:
    Construction and editing of content pages.

Key Classes:
    - PageFactory: Creates ContentPages with unique ids
    - PageCollection: Ordered, editable set of ContentPages
    - PageNotFoundError: Unknown page id

Notes:
    Each PageFactory owns its own counter; there is no process-wide id
    state. Ids also carry a random suffix so pages from two factories
    never collide.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, Iterator, List, Optional

from PIL import Image

from binder_toolkit.common.thresholds import GEOMETRY
from binder_toolkit.layout.models import ContentKind, ContentPage, PagePosition, PageSide

logger = logging.getLogger(__name__)


class PageNotFoundError(KeyError):
    """No page with the given id in the collection."""
    pass


class PageFactory:
    """
    Creates ContentPages with sequential, unique ids.

    Example:
        >>> factory = PageFactory()
        >>> page = factory.from_image(img)
        >>> page.id
        'page-1-3f2a9c1b'
    """

    def __init__(self, dpi: int = GEOMETRY.content_dpi) -> None:
        self._counter = 0
        self.dpi = dpi

    def next_id(self) -> str:
        self._counter += 1
        return f"page-{self._counter}-{uuid.uuid4().hex[:8]}"

    def from_image(
        self,
        image: Image.Image,
        *,
        kind: ContentKind = ContentKind.IMAGE,
        source_name: str = "",
        side: Optional[PageSide] = None,
    ) -> ContentPage:
        """
        Wrap a decoded raster in a ContentPage.

        Raises:
            InvalidContentDimensionsError: If the image has an empty dimension
        """
        return ContentPage(
            id=self.next_id(),
            kind=kind,
            pixel_width=image.width,
            pixel_height=image.height,
            image=image,
            side=side,
            dpi=self.dpi,
            source_name=source_name,
        )


class PageCollection:
    """
    Ordered collection of content pages with edit operations.

    Pages are immutable; edits replace the stored instance.
    """

    def __init__(self, pages: Optional[Iterable[ContentPage]] = None) -> None:
        self._pages: List[ContentPage] = []
        if pages:
            self.add(pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[ContentPage]:
        return iter(self._pages)

    @property
    def pages(self) -> List[ContentPage]:
        return list(self._pages)

    def add(self, pages: Iterable[ContentPage]) -> List[ContentPage]:
        """
        Append pages, assigning the alternating default side by index.

        Pages that already carry a side keep it.

        Returns:
            The pages as stored
        """
        added: List[ContentPage] = []
        for page in pages:
            if page.side is None:
                page = page.with_side(PageSide.for_index(len(self._pages)))
            self._pages.append(page)
            added.append(page)
        logger.debug(f"Added {len(added)} pages, collection now {len(self._pages)}")
        return added

    def get(self, page_id: str) -> ContentPage:
        return self._pages[self._index_of(page_id)]

    def remove(self, page_id: str) -> ContentPage:
        return self._pages.pop(self._index_of(page_id))

    def clear(self) -> None:
        self._pages.clear()

    def update_position(self, page_id: str, position: PagePosition) -> ContentPage:
        """
        Replace a page's position.

        Raises:
            PageNotFoundError: If page_id is unknown
            ValueError: If position.scale is not positive
        """
        index = self._index_of(page_id)
        self._pages[index] = self._pages[index].with_position(position)
        return self._pages[index]

    def set_side(self, page_id: str, side: PageSide) -> ContentPage:
        index = self._index_of(page_id)
        self._pages[index] = self._pages[index].with_side(side)
        return self._pages[index]

    def toggle_side(self, page_id: str) -> ContentPage:
        page = self.get(page_id)
        current = page.side if page.side is not None else PageSide.LEFT
        return self.set_side(page_id, current.opposite)

    def _index_of(self, page_id: str) -> int:
        for index, page in enumerate(self._pages):
            if page.id == page_id:
                return index
        raise PageNotFoundError(page_id)
