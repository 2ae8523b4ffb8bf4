"""Line splitting and value type inference."""

from lightset.parser.inference import infer_value, parse_float_literal, parse_integer, to_float32
from lightset.parser.lines import split_line, strip_line_terminator

__all__ = [
    "infer_value",
    "parse_float_literal",
    "parse_integer",
    "split_line",
    "strip_line_terminator",
    "to_float32",
]
