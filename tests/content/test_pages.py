"""
Unit tests for page construction and the page collection.
"""

import pytest
from PIL import Image

from binder_toolkit.content import PageCollection, PageFactory, PageNotFoundError
from binder_toolkit.layout import ContentKind, InvalidContentDimensionsError, PagePosition, PageSide


class TestPageFactory:

    def test_ids_are_unique_and_sequential(self, page_factory):
        ids = [page_factory.next_id() for _ in range(3)]

        assert len(set(ids)) == 3
        assert [i.split("-")[1] for i in ids] == ["1", "2", "3"]

    def test_factories_do_not_share_counters(self):
        first, second = PageFactory(), PageFactory()

        first.next_id()
        assert second.next_id().startswith("page-1-")

    def test_from_image_reads_dimensions(self, page_factory):
        img = Image.new("RGB", (320, 240))

        page = page_factory.from_image(img, source_name="scan.png")

        assert (page.pixel_width, page.pixel_height) == (320, 240)
        assert page.kind is ContentKind.IMAGE
        assert page.image is img
        assert page.side is None
        assert page.source_name == "scan.png"

    def test_from_image_when_empty_image_then_raises(self, page_factory):
        with pytest.raises(InvalidContentDimensionsError):
            page_factory.from_image(Image.new("RGB", (0, 10)))


class TestPageCollection:

    def test_add_assigns_alternating_sides(self, make_page):
        collection = PageCollection()

        collection.add([make_page(), make_page(), make_page()])

        assert [p.side for p in collection] == [PageSide.LEFT, PageSide.RIGHT, PageSide.LEFT]

    def test_add_continues_alternation_across_batches(self, make_page):
        collection = PageCollection([make_page()])

        collection.add([make_page()])

        assert collection.pages[1].side is PageSide.RIGHT

    def test_add_keeps_explicit_side(self, make_page):
        collection = PageCollection([make_page(side=PageSide.RIGHT)])

        assert collection.pages[0].side is PageSide.RIGHT

    def test_remove_and_clear(self, make_page):
        pages = [make_page(), make_page()]
        collection = PageCollection(pages)

        removed = collection.remove(pages[0].id)
        assert removed.id == pages[0].id
        assert len(collection) == 1

        collection.clear()
        assert len(collection) == 0

    def test_unknown_id_raises(self, make_page):
        collection = PageCollection([make_page()])

        with pytest.raises(PageNotFoundError):
            collection.get("missing")
        with pytest.raises(KeyError):
            collection.remove("missing")

    def test_update_position_replaces_page(self, make_page):
        page = make_page()
        collection = PageCollection([page])

        updated = collection.update_position(page.id, PagePosition(5, -3, 1.5))

        assert collection.get(page.id).position == PagePosition(5, -3, 1.5)
        assert updated.id == page.id

    def test_update_position_rejects_zero_scale(self, make_page):
        page = make_page()
        collection = PageCollection([page])

        with pytest.raises(ValueError):
            collection.update_position(page.id, PagePosition(scale=0))
        assert collection.get(page.id).position.scale == 1.0

    def test_toggle_side(self, make_page):
        page = make_page()
        collection = PageCollection([page])

        assert collection.toggle_side(page.id).side is PageSide.RIGHT
        assert collection.toggle_side(page.id).side is PageSide.LEFT

    def test_set_side_accepts_string(self, make_page):
        page = make_page()
        collection = PageCollection([page])

        assert collection.set_side(page.id, "right").side is PageSide.RIGHT
