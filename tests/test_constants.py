import unittest

from utils.constants import SEVERITY_COLORS, SEVERITY_HOVER_COLORS


class TestSeverityColors(unittest.TestCase):
    def test_hover_keeps_white_text_readable(self):
        # Toast text is white, so the hover shade must not be white.
        self.assertEqual(set(SEVERITY_HOVER_COLORS), set(SEVERITY_COLORS))
        for severity, hover in SEVERITY_HOVER_COLORS.items():
            self.assertNotIn(hover.lower(), ("#ffffff", "#fff", "white"), severity)
            self.assertNotEqual(hover, SEVERITY_COLORS[severity], severity)


if __name__ == "__main__":
    unittest.main()
