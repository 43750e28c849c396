"""
Tests for the command line front end.
"""

import io
import logging
import unittest
from unittest import mock

from rich.console import Console

from anglekit.cli import build_parser, main


class TestCli(unittest.TestCase):
    """Test the anglekit command."""

    def setUp(self):
        """Set up a console capturing output."""
        self.buffer = io.StringIO()
        self.console = Console(file=self.buffer, width=120, color_system=None)

    def run_cli(self, *argv):
        status = main(list(argv), console=self.console)
        return status, self.buffer.getvalue()

    def test_convert(self):
        """Test converting between units."""
        status, output = self.run_cli("convert", "200grad", "--to", "deg")
        self.assertEqual(status, 0)
        self.assertIn("200.0 grad", output)
        self.assertIn("180.0 °", output)

    def test_normalize(self):
        """Test symmetric normalization."""
        status, output = self.run_cli("normalize", "270deg")
        self.assertEqual(status, 0)
        self.assertIn("-90.0 °", output)

    def test_normalize_abs(self):
        """Test non-negative normalization."""
        status, output = self.run_cli("normalize", "450deg", "--abs")
        self.assertEqual(status, 0)
        self.assertIn("90.0 °", output)

    def test_trig(self):
        """Test a forward trigonometric function."""
        status, output = self.run_cli("trig", "cos", "0rad")
        self.assertEqual(status, 0)
        self.assertIn("1.0", output)

    def test_inverse(self):
        """Test an inverse trigonometric function."""
        status, output = self.run_cli("inverse", "acos", "1", "--unit", "grad")
        self.assertEqual(status, 0)
        self.assertIn("0.0 grad", output)

    def test_atan2(self):
        """Test atan2 defaults to radians."""
        status, output = self.run_cli("atan2", "0", "1")
        self.assertEqual(status, 0)
        self.assertIn("0.0 rad", output)

    def test_invalid_literal(self):
        """Test that a malformed literal is reported."""
        status, output = self.run_cli("convert", "90turn", "--to", "rad")
        self.assertEqual(status, 2)
        self.assertIn("unknown unit suffix", output)

    def test_invalid_log_level_from_environment(self):
        """Test that an unknown ANGLEKIT_LOG_LEVEL is reported with status 2."""
        with (
            mock.patch.dict("os.environ", {"ANGLEKIT_LOG_LEVEL": "verbose"}),
            mock.patch.object(logging.root, "handlers", []),
        ):
            status, output = self.run_cli("convert", "1deg", "--to", "rad")
        self.assertEqual(status, 2)
        self.assertIn("Invalid log level: verbose", output)

    def test_invalid_arguments(self):
        """Test argparse errors map to exit status 2."""
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            status, _ = self.run_cli("convert", "90deg")
        self.assertEqual(status, 2)

    def test_parser_requires_command(self):
        """Test that a subcommand is required."""
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
