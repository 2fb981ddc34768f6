from __future__ import annotations

import unittest

from mdbrowse.notifier import Notice, ScheduleNoticeClear, clear_notice, expire, raise_notice


class NotifierTests(unittest.TestCase):
    def test_raise_issues_new_token_and_schedules_clear(self) -> None:
        notice, effect = raise_notice("boom", 1.5, last_token=3)
        self.assertEqual(notice, Notice(message="boom", token=4))
        self.assertEqual(effect, ScheduleNoticeClear(token=4, delay=1.5))

    def test_expire_matching_token_clears(self) -> None:
        notice, _ = raise_notice("boom", 1.0, last_token=0)
        self.assertIsNone(expire(notice, notice.token))

    def test_stale_timer_leaves_replacement_in_place(self) -> None:
        first, _ = raise_notice("first", 1.0, last_token=0)
        second, _ = raise_notice("second", 1.0, last_token=first.token)
        self.assertIs(expire(second, first.token), second)
        self.assertIsNone(expire(second, second.token))

    def test_expire_without_notice_is_noop(self) -> None:
        self.assertIsNone(expire(None, 7))
        self.assertIsNone(clear_notice())


if __name__ == "__main__":
    unittest.main()
