"""Tests for the angle conversion in the Qt surface.

Covers: cclock.ui.painter
"""

import math
import os
import tempfile
import unittest

os.environ.setdefault("CCLOCK_HOME", tempfile.mkdtemp(prefix="cclock_test_"))


class TestQtAngles(unittest.TestCase):

    def test_full_ring_from_twelve_oclock(self):
        from cclock.ui.painter import to_qt_angles
        self.assertEqual(to_qt_angles(0.0, 2 * math.pi), (90 * 16, -360 * 16))

    def test_quarter_from_three_oclock(self):
        from cclock.ui.painter import to_qt_angles
        self.assertEqual(to_qt_angles(math.pi / 2, math.pi), (0, -90 * 16))

    def test_empty_sweep(self):
        from cclock.ui.painter import to_qt_angles
        self.assertEqual(to_qt_angles(0.0, 0.0), (90 * 16, 0))


if __name__ == "__main__":
    unittest.main()
