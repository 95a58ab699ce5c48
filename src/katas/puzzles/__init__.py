"""Pure exercise functions -- public re-exports."""

from katas.puzzles.geometry import (
    Box,
    Circle,
    Point,
    do_rectangles_overlap,
    is_inside_circle,
    is_triangle,
)
from katas.puzzles.grids import evaluate_tic_tac_toe_position, get_matrix_product
from katas.puzzles.numbers import (
    digital_root,
    factorial,
    fizzbuzz,
    is_credit_card_number,
    reverse_integer,
    sum_between,
    to_nary_string,
)
from katas.puzzles.text import (
    find_first_single_char,
    get_common_directory_path,
    get_interval_string,
    is_brackets_balanced,
    reverse_string,
)

__all__ = [
    # numbers
    "fizzbuzz",
    "factorial",
    "sum_between",
    "reverse_integer",
    "is_credit_card_number",
    "digital_root",
    "to_nary_string",
    # geometry
    "Point",
    "Circle",
    "Box",
    "is_triangle",
    "do_rectangles_overlap",
    "is_inside_circle",
    # text
    "find_first_single_char",
    "get_interval_string",
    "reverse_string",
    "is_brackets_balanced",
    "get_common_directory_path",
    # grids
    "get_matrix_product",
    "evaluate_tic_tac_toe_position",
]
