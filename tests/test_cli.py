import subprocess
import sys
import unittest
from pathlib import Path
import tempfile

from pagetree.demo import build_demo_renderer


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "pagetree.cli", *args],
        capture_output=True,
        text=True,
    )


class CliTest(unittest.TestCase):
    def test_default_prints_demo_page(self) -> None:
        result = _run()
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, build_demo_renderer().render())

    def test_check_and_out_write_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "site" / "index.html"
            result = _run("--check", "--out", str(out))
            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertEqual(out.read_text(encoding="utf-8"), build_demo_renderer().render())
            self.assertIn(str(out), result.stdout)

    def test_outline_lists_named_nodes(self) -> None:
        result = _run("--outline")
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("head #head", result.stdout)
        self.assertIn("div #favourite", result.stdout)

    def test_layout_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            layout = Path(tmp) / "page.yaml"
            layout.write_text("root:\n  tag: p\n  text: hi\n", encoding="utf-8")
            result = _run("--layout", str(layout))
            self.assertEqual(result.returncode, 0, result.stderr)
            self.assertEqual(result.stdout, "<p>hi</p>")


if __name__ == "__main__":
    unittest.main()
