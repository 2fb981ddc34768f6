from __future__ import annotations

import unittest

from mdbrowse.viewport import Viewport


def _lines(n: int) -> list[str]:
    return [f"line {i}" for i in range(1, n + 1)]


class ViewportTests(unittest.TestCase):
    def test_with_content_resets_offset(self) -> None:
        vp = Viewport(width=20, height=5, lines=_lines(10)).scroll_by(4)
        self.assertEqual(vp.offset, 4)
        vp = vp.with_content(_lines(30))
        self.assertEqual(vp.offset, 0)
        self.assertEqual(vp.total_lines, 30)

    def test_page_down_clamps_to_last_page(self) -> None:
        vp = Viewport(width=20, height=5, lines=_lines(10))
        vp = vp.scroll_by_page(1)
        self.assertEqual(vp.offset, 5)
        vp = vp.scroll_by_page(1)
        self.assertEqual(vp.offset, 5)
        self.assertTrue(vp.at_bottom)

    def test_scroll_up_never_goes_negative(self) -> None:
        vp = Viewport(width=20, height=5, lines=_lines(10))
        self.assertEqual(vp.scroll_by(-3).offset, 0)
        self.assertEqual(vp.scroll_by_page(-1).offset, 0)
        self.assertTrue(vp.at_top)

    def test_short_buffer_renders_everything_and_cannot_scroll(self) -> None:
        vp = Viewport(width=20, height=8, lines=_lines(3))
        self.assertEqual(vp.max_offset, 0)
        self.assertEqual(vp.scroll_by(2).offset, 0)
        self.assertEqual(vp.view(), "line 1\nline 2\nline 3")
        self.assertEqual(vp.scroll_percent, 1.0)

    def test_view_shows_window_at_offset(self) -> None:
        vp = Viewport(width=20, height=3, lines=_lines(10)).scroll_by(2)
        self.assertEqual(vp.visible_lines(), ("line 3", "line 4", "line 5"))

    def test_resize_reclamps_offset(self) -> None:
        vp = Viewport(width=20, height=2, lines=_lines(10)).scroll_to_bottom()
        self.assertEqual(vp.offset, 8)
        vp = vp.resize(30, 6)
        self.assertEqual(vp.offset, 4)
        self.assertEqual(vp.width, 30)
        vp = vp.resize(30, 20)
        self.assertEqual(vp.offset, 0)

    def test_offset_invariant_over_many_sizes(self) -> None:
        base = Viewport(width=10, height=1, lines=_lines(25)).scroll_to_bottom()
        for height in range(0, 40):
            vp = base.resize(10, height)
            self.assertGreaterEqual(vp.offset, 0)
            self.assertLessEqual(vp.offset, max(0, vp.total_lines - vp.height))
            self.assertLessEqual(len(vp.visible_lines()), max(height, 0) or vp.total_lines)

    def test_top_and_bottom(self) -> None:
        vp = Viewport(width=10, height=4, lines=_lines(9))
        self.assertEqual(vp.scroll_to_bottom().offset, 5)
        self.assertEqual(vp.scroll_to_bottom().scroll_to_top().offset, 0)

    def test_empty_buffer(self) -> None:
        vp = Viewport(width=10, height=4)
        self.assertEqual(vp.view(), "")
        self.assertEqual(vp.scroll_by_page(1).offset, 0)


if __name__ == "__main__":
    unittest.main()
