import sys
import unittest
from pathlib import Path
from xml.etree import ElementTree

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from thermometer_renderer import scene
from thermometer_renderer.layout import layout
from thermometer_renderer.models import SceneLabels, Theme
from thermometer_renderer.themes import DARK_PALETTE, LIGHT_PALETTE

SVG_NS = "{http://www.w3.org/2000/svg}"


class SceneTests(unittest.TestCase):
    def setUp(self):
        self.geo = layout(800, 0.75005, Theme.LIGHT)
        self.labels = SceneLabels(title="Animal Shelter Donation Drive", achieved_amount=7500.5, goal_amount=10000.0)

    def test_document_structure(self):
        svg = scene.compose(self.geo, Theme.LIGHT, self.labels)
        root = ElementTree.fromstring(svg)
        self.assertEqual(root.tag, f"{SVG_NS}svg")
        self.assertEqual(root.get("width"), "800")
        self.assertEqual(root.get("height"), "960")
        self.assertEqual(len(root.findall(f".//{SVG_NS}linearGradient")), 1)
        self.assertEqual(len(root.findall(f".//{SVG_NS}line")), 6)

        texts = [t.text for t in root.iter(f"{SVG_NS}text")]
        self.assertIn("Animal Shelter Donation Drive", texts)
        self.assertIn("$7500.50", texts)
        self.assertIn("$10000.00", texts)
        self.assertIn("75%", texts)
        for label in ("100%", "80%", "60%", "40%", "20%", "0%"):
            self.assertIn(label, texts)

    def test_displayed_numbers_match_geometry(self):
        root = ElementTree.fromstring(scene.compose(self.geo, Theme.LIGHT, self.labels))
        fill = [r for r in root.iter(f"{SVG_NS}rect") if r.get("fill") == "url(#fillGradient)"][0]
        self.assertEqual(fill.get("height"), f"{self.geo.fill_height:.2f}")
        self.assertEqual(fill.get("y"), f"{self.geo.fill_y:.2f}")
        self.assertEqual(float(fill.get("height")), self.geo.fill_height)

        lines = root.findall(f".//{SVG_NS}line")
        self.assertEqual([float(line.get("y1")) for line in lines], [m.y for m in self.geo.markers])

    def test_palettes(self):
        light = scene.compose(self.geo, Theme.LIGHT, self.labels)
        dark = scene.compose(self.geo, Theme.DARK, self.labels)
        self.assertIn(LIGHT_PALETTE.fill_start, light)
        self.assertIn(LIGHT_PALETTE.tube_stroke, light)
        self.assertIn(DARK_PALETTE.background, dark)
        self.assertIn(DARK_PALETTE.fill_end, dark)
        self.assertNotIn(DARK_PALETTE.background, light)

    def test_title_is_escaped(self):
        labels = SceneLabels(title="Cats & Dogs <3", achieved_amount=1.0, goal_amount=2.0)
        root = ElementTree.fromstring(scene.compose(self.geo, Theme.LIGHT, labels))
        self.assertIn("Cats & Dogs <3", [t.text for t in root.iter(f"{SVG_NS}text")])

    def test_deterministic(self):
        self.assertEqual(
            scene.compose(self.geo, Theme.DARK, self.labels),
            scene.compose(self.geo, Theme.DARK, self.labels),
        )

    def test_template_failure_falls_back_to_placeholder(self):
        saved_name = scene.TEMPLATE_NAME
        scene.TEMPLATE_NAME = "missing.svg.j2"
        try:
            with self.assertLogs("thermometer.renderer", level="ERROR"):
                svg = scene.compose(self.geo, Theme.LIGHT, self.labels)
        finally:
            scene.TEMPLATE_NAME = saved_name
        self.assertEqual(svg, scene.PLACEHOLDER_SVG)
        ElementTree.fromstring(svg)


if __name__ == "__main__":
    unittest.main()
