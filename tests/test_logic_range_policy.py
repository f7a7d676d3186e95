import unittest

from binary_prefix import (
    ConfigurationError,
    InvalidRangeError,
    RangePlanner,
    RangePolicy,
    range_prefix,
)
from binary_prefix.codec.bits import bits_from_str, bits_to_str

T, F = True, False


class TestLogicRangePolicy(unittest.TestCase):
    def test_default_policy_is_strict(self):
        planner = RangePlanner()
        self.assertEqual(planner.policy, RangePolicy.strict())
        with self.assertRaises(InvalidRangeError):
            planner.plan([T], [T, F])

    def test_strict_allows_longer_start(self):
        result = range_prefix([T, F, F, T], [T, T], policy=RangePolicy.strict())
        self.assertEqual(result, ([T, F], [T, T]))

    def test_padded_shorter_start(self):
        start = [T]
        with self.assertLogs("binary_prefix.api.policy", level="DEBUG"):
            result = range_prefix(start, [T, F], policy=RangePolicy.padded())
        self.assertEqual(result, ([F, T], [T, F]))
        self.assertIsNot(result.start.source, start)

    def test_padded_shorter_end(self):
        result = RangePlanner(RangePolicy.padded()).plan([F, T, T], [T])
        self.assertEqual(result, ([F], [F]))

    def test_padded_equal_lengths_borrow_inputs(self):
        start = [T, F, T, F]
        end = [T, F, T, T]
        result = range_prefix(start, end, policy=RangePolicy.padded())
        self.assertIs(result.start.source, start)
        self.assertIs(result.end.source, end)
        self.assertEqual(result, (start, end))

    def test_max_key_bits(self):
        policy = RangePolicy(max_key_bits=4)
        with self.assertRaises(InvalidRangeError):
            range_prefix([T] * 5, [T] * 5, policy=policy)
        self.assertEqual(range_prefix([T] * 4, [T] * 4, policy=policy), ([T] * 4, [T] * 4))

    def test_invalid_configuration(self):
        with self.assertRaises(ConfigurationError):
            RangePlanner(RangePolicy(length_mismatch="truncate"))
        with self.assertRaises(ConfigurationError):
            RangePolicy(max_key_bits=0).validate()
        with self.assertRaises(ConfigurationError):
            range_prefix([T], [T], policy=RangePolicy(length_mismatch="truncate"))

    def test_plan_bytes(self):
        result = RangePlanner().plan_bytes(b"\x10", b"\x1f")
        self.assertEqual(bits_to_str(result.start), "00010")
        self.assertEqual(bits_to_str(result.end), "00011")

    def test_plan_from_bit_strings(self):
        start = bits_from_str("1010100011")
        end = bits_from_str("1010100111")
        result = RangePlanner(RangePolicy.padded()).plan(start, end)
        self.assertEqual(bits_to_str(result.start), "1010100011")
        self.assertEqual(bits_to_str(result.end), "10101001")


if __name__ == "__main__":
    unittest.main()
