# Copyright 2026-present Kensho Technologies, LLC.
from collections import OrderedDict
import unittest

from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
)
from graphql.pyutils import Undefined

from ..exceptions import InvalidDefaultValueError, UnrecognizedTypeKindError
from ..schema_printing.value_printing import print_string_literal, print_value


COLOR_TYPE = GraphQLEnumType("Color", {"RED": 0, "GREEN": 1, "BLUE": 2})

POINT_TYPE = GraphQLInputObjectType(
    "Point",
    {
        "x": GraphQLInputField(GraphQLNonNull(GraphQLFloat)),
        "y": GraphQLInputField(GraphQLNonNull(GraphQLFloat)),
        "label": GraphQLInputField(GraphQLString),
        "color": GraphQLInputField(COLOR_TYPE),
    },
)

SEGMENT_TYPE = GraphQLInputObjectType(
    "Segment",
    {
        "points": GraphQLInputField(GraphQLList(GraphQLNonNull(POINT_TYPE))),
        "closed": GraphQLInputField(GraphQLBoolean),
    },
)


class ScalarValuePrintingTests(unittest.TestCase):
    def test_float_values(self) -> None:
        self.assertEqual("1.5", print_value(1.5, GraphQLFloat))
        self.assertEqual("3.0", print_value(3, GraphQLFloat))
        self.assertEqual("-0.25", print_value("-0.25", GraphQLFloat))
        self.assertEqual("1e+20", print_value(1e20, GraphQLFloat))

    def test_non_finite_float_values(self) -> None:
        with self.assertRaises(InvalidDefaultValueError):
            print_value(float("inf"), GraphQLFloat)

        with self.assertRaises(InvalidDefaultValueError):
            print_value(float("nan"), GraphQLFloat)

    def test_int_values(self) -> None:
        self.assertEqual("7", print_value(7, GraphQLInt))
        self.assertEqual("-12", print_value(-12, GraphQLInt))
        self.assertEqual("0", print_value(0, GraphQLInt))

    def test_boolean_values(self) -> None:
        self.assertEqual("true", print_value(True, GraphQLBoolean))
        self.assertEqual("false", print_value(False, GraphQLBoolean))

    def test_string_values(self) -> None:
        self.assertEqual('"hello"', print_value("hello", GraphQLString))
        self.assertEqual('""', print_value("", GraphQLString))
        self.assertEqual('"café"', print_value("café", GraphQLString))

    def test_string_escaping(self) -> None:
        self.assertEqual(r'"a \"b\" \\ c\n"', print_value('a "b" \\ c\n', GraphQLString))
        self.assertEqual(r'"tab\there"', print_value("tab\there", GraphQLString))
        self.assertEqual(r'"\u0000"', print_string_literal("\x00"))

    def test_id_values_are_strings(self) -> None:
        self.assertEqual('"5"', print_value(5, GraphQLID))
        self.assertEqual('"abc"', print_value("abc", GraphQLID))

    def test_custom_scalar_values_are_strings(self) -> None:
        date_type = GraphQLScalarType("Date")
        self.assertEqual('"2017-01-01"', print_value("2017-01-01", date_type))

        # Custom scalars are printed as strings even when their values are numbers.
        big_int_type = GraphQLScalarType("BigInt")
        self.assertEqual('"12345678901234567890"', print_value(12345678901234567890, big_int_type))


class EnumValuePrintingTests(unittest.TestCase):
    def test_enum_values_are_printed_by_name(self) -> None:
        self.assertEqual("RED", print_value(0, COLOR_TYPE))
        self.assertEqual("BLUE", print_value(2, COLOR_TYPE))

    def test_unknown_enum_value(self) -> None:
        with self.assertRaises(InvalidDefaultValueError):
            print_value(17, COLOR_TYPE)


class WrappedValuePrintingTests(unittest.TestCase):
    def test_non_null_is_transparent(self) -> None:
        self.assertEqual("4", print_value(4, GraphQLNonNull(GraphQLInt)))
        self.assertEqual('"x"', print_value("x", GraphQLNonNull(GraphQLString)))

    def test_list_values(self) -> None:
        self.assertEqual('["a", "b"]', print_value(["a", "b"], GraphQLList(GraphQLString)))
        self.assertEqual("[1, 2]", print_value((1, 2), GraphQLList(GraphQLNonNull(GraphQLInt))))
        self.assertEqual("[]", print_value([], GraphQLList(GraphQLString)))

    def test_nested_list_values(self) -> None:
        list_of_lists_type = GraphQLNonNull(GraphQLList(GraphQLList(GraphQLNonNull(GraphQLFloat))))
        self.assertEqual("[[1.0], [2.5, 3.0]]", print_value([[1], [2.5, 3]], list_of_lists_type))

    def test_list_of_enum_values(self) -> None:
        self.assertEqual("[GREEN, RED]", print_value([1, 0], GraphQLList(COLOR_TYPE)))

    def test_list_type_requires_sequence(self) -> None:
        with self.assertRaises(InvalidDefaultValueError):
            print_value("ab", GraphQLList(GraphQLString))

        with self.assertRaises(InvalidDefaultValueError):
            print_value(3, GraphQLList(GraphQLInt))


class InputObjectValuePrintingTests(unittest.TestCase):
    def test_input_object_value(self) -> None:
        value = OrderedDict([("x", 1), ("y", 2.5), ("label", "origin"), ("color", 1)])
        self.assertEqual(
            '{x: 1.0, y: 2.5, label: "origin", color: GREEN}', print_value(value, POINT_TYPE)
        )

    def test_input_object_fields_follow_value_order(self) -> None:
        self.assertEqual("{y: 2.0, x: 1.5}", print_value({"y": 2, "x": 1.5}, POINT_TYPE))

    def test_input_object_value_may_omit_fields(self) -> None:
        self.assertEqual("{}", print_value({}, POINT_TYPE))
        self.assertEqual('{label: "a"}', print_value({"label": "a"}, POINT_TYPE))

    def test_nested_input_object_value(self) -> None:
        value = {
            "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1, "color": 2}],
            "closed": False,
        }
        expected = "{points: [{x: 0.0, y: 0.0}, {x: 1.0, y: 1.0, color: BLUE}], closed: false}"
        self.assertEqual(expected, print_value(value, GraphQLNonNull(SEGMENT_TYPE)))

    def test_undeclared_input_field(self) -> None:
        with self.assertRaises(InvalidDefaultValueError) as context:
            print_value({"x": 1, "z": 2}, POINT_TYPE)

        self.assertIsInstance(context.exception.__cause__, KeyError)
        self.assertIn("z", str(context.exception))

    def test_input_object_type_requires_mapping(self) -> None:
        with self.assertRaises(InvalidDefaultValueError):
            print_value([1, 2], POINT_TYPE)


class NullValuePrintingTests(unittest.TestCase):
    def test_null_values_are_rejected(self) -> None:
        with self.assertRaises(InvalidDefaultValueError):
            print_value(None, GraphQLString)

        with self.assertRaises(InvalidDefaultValueError):
            print_value(Undefined, GraphQLInt)

    def test_nested_null_values_are_rejected(self) -> None:
        with self.assertRaises(InvalidDefaultValueError):
            print_value(["a", None], GraphQLList(GraphQLString))

        with self.assertRaises(InvalidDefaultValueError):
            print_value({"x": 1, "label": None}, POINT_TYPE)


class UnprintableValueTypeTests(unittest.TestCase):
    def test_output_type_cannot_carry_literal(self) -> None:
        object_type = GraphQLObjectType("Thing", {"name": GraphQLField(GraphQLString)})

        with self.assertRaises(UnrecognizedTypeKindError):
            print_value({"name": "x"}, object_type)

        with self.assertRaises(UnrecognizedTypeKindError):
            print_value([{"name": "x"}], GraphQLList(object_type))
