import pytest

from phpcodegen.docblock.docblock import Docblock, DocblockParseError
from phpcodegen.docblock.tags import ParamTag
from phpcodegen.model.constant import PhpConstant
from phpcodegen.model.parameter import PhpParameter
from phpcodegen.model.signature import ParameterSignature


class TestPhpParameter:
    @pytest.mark.parametrize("name", ["foo", "bar_baz", "x", None])
    def test_create_sets_name(self, name):
        """
        Test that the factory and the constructor both set the name.
        """
        assert PhpParameter.create(name).get_name() == name
        assert PhpParameter(name).name == name

    def test_create_defaults(self):
        """
        Test that a new parameter has no type, no default and is passed by value.
        """
        parameter = PhpParameter.create("foo")

        assert parameter.get_type() is None
        assert parameter.get_type_description() is None
        assert not parameter.has_value()
        assert not parameter.has_expression()
        assert parameter.is_passed_by_reference() is False

    @pytest.mark.parametrize(
        "flag, expected",
        [(True, True), (False, False), (1, True), (0, False), ("yes", True), ("", False)],
    )
    def test_passed_by_reference_is_coerced_to_bool(self, flag, expected):
        """
        Test that the by-reference flag is stored as a boolean.
        """
        parameter = PhpParameter.create("foo").set_passed_by_reference(flag)

        assert parameter.is_passed_by_reference() is expected

    def test_setters_chain(self):
        """
        Test that setters return the parameter for chaining.
        """
        parameter = (
            PhpParameter.create("foo")
            .set_type("int", "the foo")
            .set_passed_by_reference(True)
            .set_value(3)
        )

        assert isinstance(parameter, PhpParameter)
        assert parameter.type == "int"
        assert parameter.description == "the foo"
        assert parameter.value == 3

    def test_value_then_expression_clears_value(self):
        """
        Test that setting an expression clears a previously set literal.
        """
        parameter = PhpParameter.create("foo").set_value(42).set_expression("PHP_EOL")

        assert parameter.get_expression() == "PHP_EOL"
        assert not parameter.has_value()
        assert parameter.get_value() is None

    def test_expression_then_value_clears_expression(self):
        """
        Test that setting a literal clears a previously set expression.
        """
        parameter = PhpParameter.create("foo").set_expression("[]").set_value("bar")

        assert parameter.get_value() == "bar"
        assert parameter.has_value()
        assert not parameter.has_expression()

    def test_type_description_aliases_description(self):
        """
        Test that the type description accessors alias the description field.
        """
        parameter = PhpParameter.create("foo").set_type_description("the foo")

        assert parameter.get_type_description() == "the foo"
        assert parameter.get_description() == "the foo"

        parameter.set_description("another foo")
        assert parameter.get_type_description() == "another foo"

    def test_docblock_tag(self):
        """
        Test that the docblock tag combines type, variable and description.
        """
        parameter = PhpParameter.create("foo").set_type("int", "the foo")

        tag = parameter.get_docblock_tag()

        assert isinstance(tag, ParamTag)
        assert tag.get_type() == "int"
        assert tag.get_variable() == "$foo"
        assert tag.get_description() == "the foo"
        assert tag.to_string() == "@param int $foo the foo"

    def test_docblock_tag_reflects_current_state(self):
        """
        Test that the tag is built from the parameter at call time.
        """
        parameter = PhpParameter.create("foo").set_type("int")
        first = parameter.get_docblock_tag()

        parameter.set_type("string").set_name("bar")
        second = parameter.get_docblock_tag()

        assert first.type == "int"
        assert first.variable == "$foo"
        assert second.type == "string"
        assert second.variable == "$bar"

    def test_docblock_tag_without_type(self):
        """
        Test that an untyped parameter renders a tag with only the variable.
        """
        tag = PhpParameter.create("foo").get_docblock_tag()

        assert tag.to_string() == "@param $foo"


class TestPhpParameterFromReflection:
    def test_literal_default_without_docblock(self):
        """
        Test reconstruction from a signature with a literal default and no hints.
        """
        signature = ParameterSignature(
            name="foo",
            is_passed_by_reference=True,
            has_default_value=True,
            default_value=42,
        )

        parameter = PhpParameter.from_reflection(signature, Docblock())

        assert parameter.name == "foo"
        assert parameter.is_passed_by_reference() is True
        assert parameter.has_value()
        assert parameter.value == 42
        assert parameter.type is None

    def test_docblock_tag_takes_precedence_over_array_hint(self):
        """
        Test that a matching @param tag sets type and description.
        """
        signature = ParameterSignature(
            name="foo",
            is_passed_by_reference=True,
            has_default_value=True,
            default_value=42,
            is_array=True,
        )
        docblock = Docblock().append_tag(
            ParamTag.create().set_type("int").set_variable("foo").set_description(
                "the foo"
            )
        )

        parameter = PhpParameter.from_reflection(signature, docblock)

        assert parameter.type == "int"
        assert parameter.get_type_description() == "the foo"

    def test_docblock_text_is_parsed(self):
        """
        Test that comment text is parsed and only the matching tag is used.
        """
        comment = """/**
         * Does things.
         *
         * @param string $bar the bar
         * @param int $foo the foo
         * @return void
         */"""
        signature = ParameterSignature(name="foo")

        parameter = PhpParameter.from_reflection(signature, comment)

        assert parameter.type == "int"
        assert parameter.description == "the foo"

    def test_null_default_is_a_value(self):
        """
        Test that a declared null default is kept as a literal.
        """
        signature = ParameterSignature(
            name="foo", has_default_value=True, default_value=None
        )

        parameter = PhpParameter.from_reflection(signature)

        assert parameter.has_value()
        assert parameter.value is None
        assert not parameter.has_expression()

    def test_default_ignored_when_not_available(self):
        """
        Test that a default value is ignored unless declared as available.
        """
        signature = ParameterSignature(name="foo", default_value=42)

        parameter = PhpParameter.from_reflection(signature)

        assert not parameter.has_value()
        assert not parameter.has_expression()

    def test_constant_default_is_a_value(self):
        """
        Test that a constant reference default is stored as a literal.
        """
        constant = PhpConstant.create("FOO", 1)
        signature = ParameterSignature(
            name="foo", has_default_value=True, default_value=constant
        )

        parameter = PhpParameter.from_reflection(signature)

        assert parameter.value is constant

    def test_complex_default_becomes_expression(self):
        """
        Test that non-literal defaults are stored as PHP source.
        """
        signature = ParameterSignature(
            name="foo", has_default_value=True, default_value=[1, 2]
        )

        parameter = PhpParameter.from_reflection(signature)

        assert not parameter.has_value()
        assert parameter.expression == "[1, 2]"

    @pytest.mark.parametrize(
        "hints, expected",
        [
            ({"is_array": True, "class_name": "Foo", "is_callable": True}, "array"),
            ({"class_name": "\\Foo\\Bar", "is_callable": True}, "\\Foo\\Bar"),
            ({"is_callable": True}, "callable"),
            ({}, None),
        ],
    )
    def test_type_hint_fallback_order(self, hints, expected):
        """
        Test the fallback order array, class, callable when no tag matches.
        """
        signature = ParameterSignature(name="foo", **hints)
        docblock = Docblock.parse("/** @param int $other */")

        parameter = PhpParameter.from_reflection(signature, docblock)

        assert parameter.type == expected

    def test_malformed_docblock_propagates(self):
        """
        Test that parse errors from the docblock are not swallowed.
        """
        signature = ParameterSignature(name="foo")

        with pytest.raises(DocblockParseError):
            PhpParameter.from_reflection(signature, "/** @param int $foo")
