# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for parameter views and value parsing."""

import unittest

from argchain.core.params import (
    EMPTY_PARAM,
    INT64_MAX,
    INT64_MIN,
    Param,
    Params,
    parse_bool,
    parse_int,
    parse_real,
)


class ParseIntTests(unittest.TestCase):
    def test_plain_integer(self) -> None:
        self.assertEqual(parse_int("42"), (42, True))

    def test_trailing_garbage_is_tolerated(self) -> None:
        result = parse_int("42abc")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 42)

    def test_non_numeric_fails(self) -> None:
        self.assertFalse(parse_int("abc").ok)

    def test_leading_whitespace_and_sign(self) -> None:
        self.assertEqual(parse_int("  \t-17"), (-17, True))
        self.assertEqual(parse_int("+5"), (5, True))

    def test_sign_without_digits_fails(self) -> None:
        self.assertFalse(parse_int("-").ok)
        self.assertFalse(parse_int("+x").ok)

    def test_empty_and_missing(self) -> None:
        self.assertFalse(parse_int("").ok)
        self.assertFalse(parse_int(None).ok)

    def test_int64_limits(self) -> None:
        self.assertEqual(parse_int(str(INT64_MAX)), (INT64_MAX, True))
        self.assertEqual(parse_int(str(INT64_MIN)), (INT64_MIN, True))

    def test_out_of_range_fails(self) -> None:
        self.assertFalse(parse_int(str(INT64_MAX + 1)).ok)
        self.assertFalse(parse_int(str(INT64_MIN - 1)).ok)

    def test_very_long_numbers_fail_with_clamped_value(self) -> None:
        self.assertEqual(parse_int("9" * 5000), (INT64_MAX, False))
        self.assertEqual(parse_int("-" + "9" * 5000), (INT64_MIN, False))

    def test_leading_zeros_are_not_significant(self) -> None:
        self.assertEqual(parse_int("0" * 5000 + "7"), (7, True))
        self.assertEqual(parse_int("-000"), (0, True))

    def test_long_number_bool_fails(self) -> None:
        self.assertFalse(parse_bool("1" * 5000).ok)
        self.assertEqual(parse_bool("0" * 5000 + "1"), (True, True))

    def test_decimal_point_stops_integer(self) -> None:
        self.assertEqual(parse_int("3.9"), (3, True))


class ParseRealTests(unittest.TestCase):
    def test_plain_and_fraction(self) -> None:
        self.assertEqual(parse_real("2.5"), (2.5, True))
        self.assertEqual(parse_real(".5"), (0.5, True))
        self.assertEqual(parse_real("7."), (7.0, True))

    def test_exponent(self) -> None:
        self.assertEqual(parse_real("1e3"), (1000.0, True))
        self.assertEqual(parse_real("-2.5E-1"), (-0.25, True))

    def test_incomplete_exponent_is_not_consumed(self) -> None:
        self.assertEqual(parse_real("1e"), (1.0, True))

    def test_trailing_garbage_is_tolerated(self) -> None:
        self.assertEqual(parse_real(" 3.25kg"), (3.25, True))

    def test_failures(self) -> None:
        for text in ("abc", ".", "", "inf", "nan", None):
            with self.subTest(text=text):
                self.assertFalse(parse_real(text).ok)

    def test_overflow_fails(self) -> None:
        self.assertFalse(parse_real("1e400").ok)


class ParseBoolTests(unittest.TestCase):
    def test_true_forms(self) -> None:
        self.assertEqual(parse_bool("true"), (True, True))
        self.assertEqual(parse_bool("1"), (True, True))

    def test_false_forms(self) -> None:
        self.assertEqual(parse_bool("false"), (False, True))
        self.assertEqual(parse_bool("0"), (False, True))

    def test_case_sensitive(self) -> None:
        self.assertFalse(parse_bool("True").ok)
        self.assertFalse(parse_bool("FALSE").ok)

    def test_other_integers_fail(self) -> None:
        self.assertFalse(parse_bool("2").ok)
        self.assertFalse(parse_bool("-1").ok)

    def test_missing_fails(self) -> None:
        self.assertFalse(parse_bool(None).ok)
        self.assertFalse(parse_bool("yes").ok)


class ParamsViewTests(unittest.TestCase):
    def setUp(self) -> None:
        self.argv = ["prog", "add", "1", "2", "next"]

    def test_window_over_slice(self) -> None:
        params = Params(self.argv, 2, 2)
        self.assertEqual(len(params), 2)
        self.assertEqual(str(params[0]), "1")
        self.assertEqual(params[1], "2")
        self.assertEqual(params.texts(), ["1", "2"])
        self.assertEqual([str(p) for p in params], ["1", "2"])

    def test_out_of_range_returns_empty_param(self) -> None:
        params = Params(self.argv, 2, 2)
        self.assertIs(params[2], EMPTY_PARAM)
        self.assertIs(params[-1], EMPTY_PARAM)
        self.assertIs(params[100], EMPTY_PARAM)

    def test_empty_param_behaviour(self) -> None:
        self.assertTrue(EMPTY_PARAM.is_empty)
        self.assertFalse(EMPTY_PARAM)
        self.assertEqual(str(EMPTY_PARAM), "")
        self.assertIsNone(EMPTY_PARAM.text)
        self.assertFalse(EMPTY_PARAM.int().ok)

    def test_window_does_not_reach_past_count(self) -> None:
        params = Params(self.argv, 1, 1)
        self.assertEqual(params[0], "add")
        self.assertIs(params[1], EMPTY_PARAM)

    def test_zero_width_window(self) -> None:
        params = Params(self.argv, 5, 0)
        self.assertEqual(len(params), 0)
        self.assertEqual(list(params), [])

    def test_window_outside_args_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Params(self.argv, 4, 2)

    def test_param_helpers_delegate(self) -> None:
        self.assertEqual(Param("12x").int(), (12, True))
        self.assertEqual(Param("0.5").real(), (0.5, True))
        self.assertEqual(Param("false").bool(), (False, True))


if __name__ == "__main__":
    unittest.main()
