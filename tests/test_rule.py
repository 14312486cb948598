import unittest
from decimal import Decimal

from validly import Rule, valid, invalid
from validly.testing import ValidationAssertions


def counting(rule, box):
    def test(value):
        box["n"] += 1
        return rule.test(value)
    return Rule(test)


class TestRuleOf(ValidationAssertions, unittest.TestCase):
    def test_predicate_holds(self):
        rule = Rule.of(lambda s: len(s) > 3, "too.short")
        self.assertValid(rule.test("hello"), "hello")

    def test_predicate_fails(self):
        rule = Rule.of(lambda s: len(s) > 3, "too.short")
        self.assertInvalid(rule.test("hi"), "too.short")
        self.assertEqual(rule.test("hi").errors[0].paths, ())

    def test_callable(self):
        rule = Rule.of(lambda n: n > 0, "must.be.positive")
        self.assertValid(rule(3), 3)

    def test_none_arguments_fail_immediately(self):
        with self.assertRaises(ValueError) as ctx:
            Rule.of(None, "msg")  # type: ignore[arg-type]
        self.assertEqual(str(ctx.exception), "predicate cannot be None")
        with self.assertRaises(ValueError) as ctx:
            Rule.of(lambda s: True, None)  # type: ignore[arg-type]
        self.assertEqual(str(ctx.exception), "message cannot be None")
        with self.assertRaises(ValueError):
            Rule(None)  # type: ignore[arg-type]

    def test_custom_rule_function(self):
        parsed = Rule(lambda s: valid(s) if s.isdigit() else invalid("must.be.digits").at("raw"))
        self.assertInvalid(parsed.test("x1"), "raw.must.be.digits")

    def test_narrow_is_identity(self):
        positive = Rule.of(lambda n: n > 0, "must.be.positive")
        narrowed = Rule.narrow(positive)
        self.assertIs(narrowed, positive)
        self.assertValid(narrowed.test(Decimal("10")))


class TestAnd(ValidationAssertions, unittest.TestCase):
    def setUp(self):
        self.too_short = Rule.of(lambda s: len(s) > 3, "too.short")
        self.starts_with_h = Rule.of(lambda s: s.startswith("h"), "must.start.with.h")

    def test_both_pass(self):
        self.assertValid(self.too_short.and_(self.starts_with_h).test("hello"), "hello")

    def test_first_fails_second_not_evaluated(self):
        box = {"n": 0}
        second = counting(Rule.of(lambda s: False, "never.reported"), box)
        self.assertInvalid(self.too_short.and_(second).test("hi"), "too.short")
        self.assertEqual(box["n"], 0)

    def test_second_fails(self):
        self.assertInvalid(self.too_short.and_(self.starts_with_h).test("apple"), "must.start.with.h")

    def test_operator(self):
        self.assertInvalid((self.too_short & self.starts_with_h)("apple"), "must.start.with.h")

    def test_mixed_numeric_types(self):
        positive = Rule.of(lambda n: n > 0, "must.be.positive")
        below_1000 = Rule.of(lambda d: d < Decimal("1000"), "must.be.less.than.1000")
        combined = below_1000.and_(positive)
        self.assertValid(combined.test(Decimal("500")))
        self.assertInvalid(combined.test(Decimal("-1")), "must.be.positive")
        self.assertInvalid(combined.test(Decimal("5000")), "must.be.less.than.1000")

    def test_none_other(self):
        with self.assertRaises(ValueError) as ctx:
            self.too_short.and_(None)  # type: ignore[arg-type]
        self.assertEqual(str(ctx.exception), "other rule cannot be None")


class TestOr(ValidationAssertions, unittest.TestCase):
    def setUp(self):
        self.minus_forty_two = Rule.of(lambda d: d == Decimal("-42"), "must.be.minus.forty.two")
        self.positive = Rule.of(lambda n: n > 0, "must.be.positive")

    def test_first_passes_second_not_evaluated(self):
        box = {"n": 0}
        rule = Rule.of(lambda s: len(s) > 3, "too.short").or_(counting(Rule.of(lambda s: False, "x"), box))
        self.assertValid(rule.test("apple"), "apple")
        self.assertEqual(box["n"], 0)

    def test_second_passes(self):
        rule = Rule.of(lambda s: len(s) > 5, "too.short").or_(Rule.of(lambda s: s.startswith("h"), "must.start.with.h"))
        self.assertValid(rule.test("hi"), "hi")

    def test_both_fail_accumulates_in_order(self):
        combined = self.minus_forty_two.or_(self.positive)
        self.assertInvalid(combined.test(Decimal("-1")), "must.be.minus.forty.two", "must.be.positive")

    def test_either_side_passes(self):
        combined = self.minus_forty_two | self.positive
        self.assertValid(combined.test(Decimal("10")), Decimal("10"))
        self.assertValid(combined.test(Decimal("-42")), Decimal("-42"))

    def test_no_deduplication(self):
        never = Rule.of(lambda _: False, "nope")
        self.assertInvalid((never | never).test(1), "nope", "nope")

    def test_none_other(self):
        with self.assertRaises(ValueError) as ctx:
            self.positive.or_(None)  # type: ignore[arg-type]
        self.assertEqual(str(ctx.exception), "other rule cannot be None")

    def test_and_or_compose(self):
        not_empty = Rule.of(lambda s: s != "", "must.not.be.empty")
        is_h = Rule.of(lambda s: s.startswith("h"), "must.start.with.h")
        is_j = Rule.of(lambda s: s.startswith("j"), "must.start.with.j")
        rule = not_empty & (is_h | is_j)
        self.assertValid(rule("john"))
        self.assertInvalid(rule(""), "must.not.be.empty")
        self.assertInvalid(rule("ann"), "must.start.with.h", "must.start.with.j")
