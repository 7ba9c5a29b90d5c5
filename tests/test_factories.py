import datetime
import math
import unittest

from assertion_schema import factories
from assertion_schema import (
    UNDEFINED,
    ArrayConstraints,
    ObjectConstraints,
    RecordConstraints,
    SchemaError,
    StringConstraints,
    assert_number,
    assert_object,
    assert_string,
    is_uuid,
    set_default_assertion_error_factory,
)
from tests._util import SUB_TYPE_ASSERTION


class _FactoryTestCase(unittest.TestCase):
    def setUp(self):
        set_default_assertion_error_factory()

    def assertFailsWith(self, message, fn, *args):
        with self.assertRaises(SchemaError) as cm:
            fn(*args)
        self.assertEqual(str(cm.exception), message)


class FromCheckTests(_FactoryTestCase):
    def test_good_values(self):
        factories.from_check(lambda v: v == "a")("a")
        factories.from_check(is_uuid)("e713d8a0-3480-11ee-be56-0242ac120002")
        factories.from_check(is_uuid)("14425ef5-cf12-44bb-8137-10f34566676a")

    def test_bad_values(self):
        self.assertFailsWith("Check is failed: 'a'", factories.from_check(lambda v: v == "1"), "a")
        self.assertFailsWith("Check is failed: ERR!", factories.from_check(is_uuid, lambda: "ERR!"),
                             "bee076c1-3f83-4637-95b1-ad5a0a825b7")
        self.assertFailsWith("Check is failed: Not NAN", factories.from_check(math.isnan, "Not NAN"), 123)
        self.assertFailsWith("Check is failed: '123'", factories.from_check(math.isnan), 123)
        self.assertFailsWith("Context: '14425ef5-cf12-44bb-8137-x0f34566676a'", factories.from_check(is_uuid),
                             "14425ef5-cf12-44bb-8137-x0f34566676a", "Context")
        self.assertFailsWith("Context: 'x'", factories.from_check(is_uuid), "x", "Context:")

    def test_rendering_of_failed_values(self):
        never = factories.from_check(lambda v: False)
        self.assertFailsWith("Check is failed: [object]", never, {"a": 1})
        self.assertFailsWith("Check is failed: [object]", never, None)
        self.assertFailsWith("Check is failed: 'true'", never, True)
        self.assertFailsWith("Check is failed: 'undefined'", never, UNDEFINED)

    def test_as_schema_field(self):
        self.assertFailsWith(".id: 'x'", assert_object, {"id": "x"}, {"id": factories.from_check(is_uuid)})

    def test_check_must_be_callable(self):
        with self.assertRaisesRegex(SchemaError, '"check" is not a function: 5'):
            factories.from_check(5)

    def test_from_any_check(self):
        is_dt = factories.from_any_check(lambda v: isinstance(v, datetime.datetime))
        is_dt(datetime.datetime.now())
        self.assertFailsWith("Check is failed: '1'", is_dt, 1)
        self.assertFailsWith("Check is failed: 'a'", factories.from_any_check(lambda v: v == "1"), "a")


class ContainerFactoryTests(_FactoryTestCase):
    def test_object_assertion(self):
        check = factories.object_assertion(SUB_TYPE_ASSERTION)
        check({"requiredNumberSubField": 1})
        self.assertFailsWith(".requiredNumberSubField: Not a number <string:x>", check, {"requiredNumberSubField": "x"})

    def test_object_assertion_uses_caller_context(self):
        items = factories.array_assertion(factories.object_assertion(SUB_TYPE_ASSERTION))
        self.assertFailsWith("[0].requiredNumberSubField: Not a number <string:x>", items,
                             [{"requiredNumberSubField": "x"}])

    def test_object_assertion_bound_context_wins(self):
        check = factories.object_assertion(SUB_TYPE_ASSERTION, "bound")
        self.assertFailsWith("bound.requiredNumberSubField: Not a number <undefined>", check, {}, "caller")

    def test_object_assertion_constraints(self):
        check = factories.object_assertion(SUB_TYPE_ASSERTION, constraints=ObjectConstraints(fail_on_unknown_fields=True))
        self.assertFailsWith("property can't be checked: extra", check, {"requiredNumberSubField": 1, "extra": 1})

    def test_array_assertion(self):
        check = factories.array_assertion(assert_string, ArrayConstraints(min_length=1, max_length=2))
        check(["a"])
        check(["a", "b"])
        self.assertFailsWith("array length < min_length. Array length: 0, min_length: 1", check, [])
        self.assertFailsWith("list array length > max_length. Array length: 3, max_length: 2", check,
                             ["a", "b", "c"], "list")

    def test_array_assertion_checks_constraints_eagerly(self):
        with self.assertRaisesRegex(SchemaError, "min_length must be <= max_length"):
            factories.array_assertion(assert_string, ArrayConstraints(min_length=2, max_length=1))
        with self.assertRaisesRegex(SchemaError, "min_length must be a positive number: -1"):
            factories.array_assertion(assert_string, ArrayConstraints(min_length=-1))
        with self.assertRaises(SchemaError):
            factories.array_assertion(assert_string, ArrayConstraints(max_length=-1))

    def test_record_assertion(self):
        check = factories.record_assertion(assert_number, RecordConstraints(key_assertion=factories.from_check(is_uuid)))
        check({"e713d8a0-3480-11ee-be56-0242ac120002": 1})
        self.assertFailsWith("cfg['a']: Not a number <string:1>",
                             factories.record_assertion(assert_number), {"a": "1"}, "cfg")


class ValueOrTests(_FactoryTestCase):
    def test_expected_value_short_circuits(self):
        calls = []

        def fallback(value, ctx=None):
            calls.append(value)
            assert_number(value, ctx)

        check = factories.value_or("n/a", fallback)
        check("n/a")
        self.assertEqual(calls, [])
        check(5)
        self.assertEqual(calls, [5])
        self.assertFailsWith("price: Not a number <string:x>", check, "x", "price")

    def test_numeric_expected_value_matches_int_and_float(self):
        calls = []

        def fallback(value, ctx=None):
            calls.append(value)
            assert_string(value, ctx)

        for expected, value in ((0, 0.0), (0.0, 0), (-1, -1.0)):
            factories.value_or(expected, fallback)(value)
        self.assertEqual(calls, [])
        self.assertFailsWith("Not a string <boolean:false>", factories.value_or(0, fallback), False)

    def test_schema_fallback(self):
        check = factories.value_or(None, SUB_TYPE_ASSERTION)
        check(None)
        check({"requiredNumberSubField": 1})
        self.assertFailsWith(".requiredNumberSubField: Not a number <undefined>", check, {})

    def test_undefined_or(self):
        check = factories.undefined_or(assert_number)
        check(UNDEFINED)
        check(1)
        self.assertFailsWith("Not a number <null>", check, None)

    def test_null_or(self):
        check = factories.null_or(assert_number)
        check(None)
        check(1)
        self.assertFailsWith("Not a number <undefined>", check, UNDEFINED)

    def test_optional_field_in_schema(self):
        schema = {"a": factories.undefined_or(assert_string)}
        assert_object({}, schema)
        assert_object({"a": "x"}, schema)
        self.assertFailsWith(".a: Not a string <null>", assert_object, {"a": None}, schema)


class StringAssertionTests(_FactoryTestCase):
    def _f(self, **kwargs):
        return factories.string_assertion(StringConstraints(**kwargs))

    def test_to_throw_or_not_to_throw(self):
        self._f(min_length=0)("")
        self._f(min_length=1)("1")
        self._f(min_length=0)("1234")
        self._f(max_length=10)("")
        self._f(max_length=1)("1")
        self._f(min_length=1, max_length=2)("1")
        self._f(min_length=1, max_length=2)("12")
        factories.string_assertion()("anything")

        for kwargs, value in [
            ({"min_length": 1}, ""),
            ({"min_length": 10}, "5"),
            ({"max_length": 1}, "12"),
            ({"min_length": 1, "max_length": 2}, "123"),
            ({"min_length": 2, "max_length": 1}, ""),
            ({"min_length": 2, "max_length": 1}, "1"),
            ({"min_length": 2, "max_length": 1}, "12"),
            ({"min_length": 2, "max_length": 1}, "123"),
        ]:
            with self.assertRaises(SchemaError, msg=f"{kwargs} {value!r}"):
                self._f(**kwargs)(value)

    def test_messages_name_the_violated_bound(self):
        self.assertFailsWith("name length is too small 1 < 2", self._f(min_length=2), "a", "name")
        self.assertFailsWith("length is too large 3 > 2", self._f(max_length=2), "abc")
        self.assertFailsWith("name: Not a string <number:5>", self._f(), 5, "name")
