import io
import unittest

from lightset.config.store import load
from lightset.core.models import ConfigValue


class _FailingLines:
    def __init__(self, lines: list[str]) -> None:
        self._lines = lines

    def __iter__(self):
        yield from self._lines
        raise OSError("disk read failed")


class CoreLoadTests(unittest.TestCase):
    def test_end_to_end_document(self) -> None:
        config = load(io.StringIO("a=true\nb=5\n# c=ignored\nd=hello world\ne=5f\n\n"))
        self.assertEqual(len(config), 4)
        self.assertEqual(config["a"], ConfigValue.boolean(True))
        self.assertEqual(config["b"], ConfigValue(kind="byte", value=5))
        self.assertEqual(config["d"], ConfigValue.string("hello world"))
        self.assertEqual(config["e"], ConfigValue(kind="float", value=5.0))
        self.assertNotIn("c", config)

    def test_lines_without_declarations_produce_no_entries(self) -> None:
        config = load(["# comment\n", "\n", "   \n", "noequals\n"])
        self.assertEqual(len(config), 0)

    def test_last_duplicate_wins(self) -> None:
        config = load(["key=1\n", "key=two\n"])
        self.assertEqual(config["key"], ConfigValue.string("two"))

    def test_line_terminators_are_not_part_of_values(self) -> None:
        config = load(["a=1\r\n", "b=x\n", "c=true"])
        self.assertEqual(config.get_raw("a"), 1)
        self.assertEqual(config.get_raw("b"), "x")
        self.assertIs(config.get_raw("c"), True)

    def test_string_values_round_trip(self) -> None:
        config = load(["greeting=hello there \n", "empty=\n"])
        self.assertEqual(str(config["greeting"]), "hello there ")
        self.assertEqual(config["empty"], ConfigValue.string(""))

    def test_spaced_layout_keeps_key_padding_and_parses_numbers(self) -> None:
        config = load(["port = 8080\n", "ratio=0.5 \n", "enabled = true\n"])
        self.assertEqual(config["port "], ConfigValue(kind="float", value=8080.0))
        self.assertEqual(config["ratio"], ConfigValue(kind="float", value=0.5))
        self.assertEqual(config["enabled "], ConfigValue.string(" true"))

    def test_caller_stream_is_left_open(self) -> None:
        stream = io.StringIO("a=1\n")
        load(stream)
        self.assertFalse(stream.closed)

    def test_read_error_propagates(self) -> None:
        with self.assertRaises(OSError):
            load(_FailingLines(["a=1\n"]))


if __name__ == "__main__":
    unittest.main()
