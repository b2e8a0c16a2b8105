from decimal import Decimal
import math

import pytest

from ghost_display.ui_components.formatting import (
    FormatKind,
    FormattedNumber,
    NumberFormat,
    format_number,
    group_digits,
    resolve_min_digits,
    to_fixed,
)


def parts(f: FormattedNumber) -> tuple[str, str, str, str]:
    return f.leading_zeros, f.main_content, f.decimal_content, f.trailing_zeros


def test_partial_thousands_gets_balancing_zero():
    f = format_number(3376)
    assert f.leading_zeros == "0"
    assert f.main_content == "3,376"
    assert f.text == "03,376"


def test_complete_thousands_group_is_not_padded():
    f = format_number(13376)
    assert f.leading_zeros == ""
    assert f.main_content == "13,376"


def test_partial_hundred_thousands_keeps_separator_with_padding():
    f = format_number(123456)
    assert f.leading_zeros == "0,"
    assert f.main_content == "123,456"
    assert f.text == "0,123,456"


def test_default_padding_bounds():
    assert format_number(999).leading_zeros == ""
    assert format_number(9999).leading_zeros == "0"
    assert format_number(99999).leading_zeros == ""
    assert format_number(1000000).text == "1,000,000"


def test_negative_values_use_magnitude_for_padding():
    f = format_number(-3376)
    assert f.prefix == "-"
    assert parts(f) == ("0", "3,376", "", "")


def test_percent_padding():
    f = format_number(7, NumberFormat(kind="percent", max=100))
    assert f.leading_zeros == "00"
    assert f.main_content == "7"


def test_percent_defaults_to_three_digits_and_two_below_hundred():
    assert format_number(7, NumberFormat(kind=FormatKind.PERCENT)).leading_zeros == "00"
    assert format_number(7, NumberFormat(kind="percent", max=50)).leading_zeros == "0"
    assert format_number(100, NumberFormat(kind="percent")).leading_zeros == ""


def test_score_padding_matches_max_digits():
    f = format_number(78, NumberFormat(kind="score", max=100))
    assert f.leading_zeros == "0"
    assert f.main_content == "78"
    assert format_number(7, NumberFormat(kind="score", max=10.9)).text == "07"


def test_score_without_max_is_not_padded():
    assert format_number(3376, NumberFormat(kind="score")).text == "3,376"


def test_explicit_min_digits_wins():
    f = format_number(100, NumberFormat(kind="percent", min_digits=7))
    assert f.leading_zeros == "0,000,"
    assert f.main_content == "100"


def test_trailing_zero_isolation():
    f = format_number(1234.50, NumberFormat(decimals=2))
    assert f.decimal_content == ".5"
    assert f.trailing_zeros == "0"
    assert f.text == "01,234.50"

    f = format_number(99.99, NumberFormat(decimals=2))
    assert f.decimal_content == ".99"
    assert f.trailing_zeros == ""


def test_all_zero_decimals_keep_the_dot():
    f = format_number(14, NumberFormat(decimals=2))
    assert parts(f) == ("", "14", ".", "00")


def test_sub_one_dims_integer_zero_only():
    f = format_number(0.0025, NumberFormat(decimals=4))
    assert f.leading_zeros == "0"
    assert f.main_content == ""
    assert f.decimal_content == ".0025"
    assert f.trailing_zeros == ""


def test_zero_with_decimals_is_fully_dimmed():
    f = format_number(0, NumberFormat(decimals=2))
    assert parts(f) == ("0", "", ".", "00")
    assert f.text == "0.00"


def test_zero_without_decimals_stays_main_content():
    assert parts(format_number(0)) == ("", "0", "", "")


def test_sub_one_with_padding_folds_into_leading_zeros():
    f = format_number(0.5, NumberFormat(kind="percent"))
    assert f.leading_zeros == "000"
    assert f.main_content == ""
    assert f.decimal_content == ".5"


def test_negative_sign_joins_prefix():
    f = format_number(-14, NumberFormat(prefix="$"))
    assert f.prefix == "$-"
    assert f.main_content == "14"


def test_negative_zero_has_no_sign():
    assert format_number(-0.0).prefix == ""


def test_suffix_passes_through():
    assert format_number(5, NumberFormat(suffix=" pts")).suffix == " pts"


def test_plain_rendering_drops_integral_fraction_and_exponent():
    assert format_number(3376.0).text == "03,376"
    assert format_number(1.5).text == "1.5"
    f = format_number(1e-7)
    assert f.decimal_content == ".0000001"
    assert f.leading_zeros == "0"


def test_fixed_rounding_is_half_away_from_zero():
    assert to_fixed(2.5, 0) == "3"
    assert to_fixed(0.5, 0) == "1"
    assert format_number(-2.5, NumberFormat(decimals=0)).text == "-3"


def test_fixed_rounding_uses_exact_binary_value():
    # 1.005 is stored slightly below 1.005
    f = format_number(1.005, NumberFormat(decimals=2))
    assert parts(f) == ("", "1", ".", "00")


def test_rounding_up_into_the_next_group():
    f = format_number(999999.5, NumberFormat(decimals=0))
    assert f.leading_zeros == ""
    assert f.main_content == "1,000,000"


def test_custom_separators():
    assert format_number(1234567, NumberFormat(separator=" ")).text == "1 234 567"
    assert format_number(3376, NumberFormat(separator="")).text == "03376"
    f = format_number(123456, NumberFormat(separator="' "))
    assert f.leading_zeros == "0' "
    assert f.main_content == "123' 456"


def test_group_digits():
    assert group_digits("1234567", ",") == "1,234,567"
    assert group_digits("123", ",") == "123"
    assert group_digits("NaN", ",") == "NaN"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
@pytest.mark.parametrize(
    "fmt",
    [NumberFormat(), NumberFormat(decimals=2), NumberFormat(kind="percent"), NumberFormat(kind="score", max=10000)],
)
def test_non_finite_values_do_not_raise(value, fmt):
    f = format_number(value, fmt)
    assert all(isinstance(segment, str) for segment in parts(f))
    assert f.prefix == ("-" if value < 0 else "")


def test_non_finite_text():
    assert format_number(math.nan).text == "NaN"
    assert format_number(-math.inf).text == "-Infinity"


def test_malformed_counts_are_normalized():
    assert NumberFormat(decimals=-2).decimals == 0
    assert NumberFormat(decimals=2.7).decimals == 2
    assert NumberFormat(min_digits=-1).min_digits == 0
    assert NumberFormat(decimals=1000).decimals == 100
    assert NumberFormat(decimals=math.nan).decimals is None
    assert format_number(3.14159, NumberFormat(decimals=-1)).text == "3"


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        NumberFormat(kind="ratio")


def test_non_numeric_value_is_rejected():
    with pytest.raises(TypeError):
        format_number("12")
    with pytest.raises(TypeError):
        format_number(True)


def test_from_mapping_accepts_component_keys():
    fmt = NumberFormat.from_mapping({"type": "score", "max": 100, "minDigits": 4, "prefix": "#", "suffix": None})
    assert fmt.kind is FormatKind.SCORE
    assert fmt.min_digits == 4
    assert fmt.prefix == "#"
    assert fmt.suffix == ""
    with pytest.raises(ValueError):
        NumberFormat.from_mapping({"colour": "red"})


def test_resolve_min_digits():
    assert resolve_min_digits(5000, NumberFormat()) == 5
    assert resolve_min_digits(500000, NumberFormat()) == 7
    assert resolve_min_digits(-5000.7, NumberFormat()) == 5
    assert resolve_min_digits(5, NumberFormat(kind="score", max=1000)) == 4


def test_segments_mark_dimmed_parts():
    segments = list(format_number(1234.5, NumberFormat(decimals=2, prefix="$")).segments())
    assert segments == [
        ("prefix", "$", False),
        ("leading_zeros", "0", True),
        ("main_content", "1,234", False),
        ("decimal_content", ".5", False),
        ("trailing_zeros", "0", True),
    ]


@pytest.mark.parametrize(
    "value,fmt",
    [
        (3376.5, NumberFormat(decimals=2)),
        (123456.789, NumberFormat(decimals=1, prefix="$", suffix=" USD")),
        (-0.25, NumberFormat(decimals=3)),
        (7, NumberFormat(kind="percent", decimals=1, suffix="%")),
        (42, NumberFormat(kind="score", max=1000, decimals=0)),
        (9876543.21, NumberFormat(decimals=2, min_digits=10)),
    ],
)
def test_segments_reassemble_the_conventional_format(value, fmt):
    f = format_number(value, fmt)
    conventional = f"{abs(value):,.{fmt.decimals}f}"
    body = f.leading_zeros + f.main_content + f.decimal_content + f.trailing_zeros
    assert body.endswith(conventional)
    assert set(body[: len(body) - len(conventional)]) <= {"0", ","}
    assert Decimal(body.replace(",", "")) == Decimal(conventional.replace(",", ""))
    assert f.text == f.prefix + body + fmt.suffix


def test_max_is_coerced_at_construction():
    fmt = NumberFormat(kind="percent", max="100")
    assert fmt.max == 100.0
    assert format_number(7, fmt).leading_zeros == "00"
    assert NumberFormat.from_mapping({"type": "score", "max": "50"}).max == 50.0
    assert NumberFormat(kind="score", max=math.inf).max is None
    assert format_number(7, NumberFormat(kind="score", max=math.nan)).text == "7"


def test_non_numeric_max_is_rejected_at_construction():
    with pytest.raises(ValueError):
        NumberFormat(kind="percent", max="lots")
    with pytest.raises(ValueError):
        NumberFormat(kind="score", max=[100])


def test_ints_beyond_float_range_format_as_infinity():
    assert format_number(10**400).text == "Infinity"
    assert format_number(-(10**400), NumberFormat(prefix="$")).text == "$-Infinity"


def test_decimal_values_are_accepted():
    f = format_number(Decimal("1234.50"), NumberFormat(decimals=2))
    assert parts(f) == ("0", "1,234", ".5", "0")
    assert format_number(Decimal("-0.0025"), NumberFormat(decimals=4)).text == "-0.0025"
