import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from jsxparser.errors import JsxSyntaxError
from jsxparser.jsx_ast import (
    ArrayLiteral,
    ArrowFunction,
    Binary,
    Block,
    Call,
    Conditional,
    DefaultPattern,
    ExpressionContainer,
    Identifier,
    Literal,
    Logical,
    MarkupAttribute,
    MarkupElement,
    MarkupFragment,
    MarkupSpreadAttribute,
    MarkupText,
    MemberAccess,
    New,
    ObjectLiteral,
    OptionalChain,
    Property,
    RestElement,
    Return,
    SpreadElement,
    TemplateLiteral,
    Unary,
)
from jsxparser.jsx_grammar import cook_string, parse_expression, parse_markup, wrap_markup


class TestExpressionGrammar(unittest.TestCase):

    def test_precedence(self):
        self.assertEqual(
            parse_expression("1 + 2 * 3"),
            Binary("+", Literal(1), Binary("*", Literal(2), Literal(3))),
        )
        self.assertEqual(
            parse_expression("1 - 2 - 3"),
            Binary("-", Binary("-", Literal(1), Literal(2)), Literal(3)),
        )

    def test_exponent_is_right_associative(self):
        self.assertEqual(
            parse_expression("2 ** 3 ** 2"),
            Binary("**", Literal(2), Binary("**", Literal(3), Literal(2))),
        )

    def test_logical_operators(self):
        self.assertEqual(
            parse_expression("a && b || c"),
            Logical("||", Logical("&&", Identifier("a"), Identifier("b")), Identifier("c")),
        )
        self.assertEqual(
            parse_expression("a ?? 'x'"),
            Logical("??", Identifier("a"), Literal("x")),
        )

    def test_conditional_and_unary(self):
        self.assertEqual(
            parse_expression("!ok ? -1 : +n"),
            Conditional(
                Unary("!", Identifier("ok")),
                Unary("-", Literal(1)),
                Unary("+", Identifier("n")),
            ),
        )

    def test_member_and_call_chain(self):
        self.assertEqual(
            parse_expression("user.items[0].name()"),
            Call(
                MemberAccess(
                    MemberAccess(
                        MemberAccess(Identifier("user"), "items", False, False),
                        Literal(0), True, False,
                    ),
                    "name", False, False,
                ),
                (),
                False,
            ),
        )

    def test_optional_chain_wraps_the_whole_chain(self):
        self.assertEqual(
            parse_expression("a?.b.c"),
            OptionalChain(
                MemberAccess(
                    MemberAccess(Identifier("a"), "b", False, True),
                    "c", False, False,
                )
            ),
        )
        node = parse_expression("fn?.(1)")
        self.assertIsInstance(node, OptionalChain)
        self.assertEqual(node.expression, Call(Identifier("fn"), (Literal(1),), True))

    def test_ternary_does_not_swallow_optional_chaining(self):
        node = parse_expression("a ? .5 : b?.c")
        self.assertIsInstance(node, Conditional)
        self.assertEqual(node.consequent, Literal(0.5))
        self.assertIsInstance(node.alternate, OptionalChain)

    def test_new(self):
        self.assertEqual(
            parse_expression("new Date(0)"),
            New(Identifier("Date"), (Literal(0),)),
        )
        self.assertEqual(parse_expression("new Lib.Thing"), New(
            MemberAccess(Identifier("Lib"), "Thing", False, False), ()
        ))

    def test_array_literal_holes_and_spread(self):
        self.assertEqual(
            parse_expression("[1, , ...rest, 3,]"),
            ArrayLiteral((Literal(1), None, SpreadElement(Identifier("rest")), Literal(3))),
        )
        self.assertEqual(parse_expression("[]"), ArrayLiteral(()))

    def test_object_literal(self):
        self.assertEqual(
            parse_expression("{a: 1, 'b-c': 2, [k]: 3, d, ...e}"),
            ObjectLiteral((
                Property("a", Literal(1), False),
                Property("b-c", Literal(2), False),
                Property(Identifier("k"), Literal(3), True),
                Property("d", Identifier("d"), False),
                SpreadElement(Identifier("e")),
            )),
        )

    def test_template_literal(self):
        self.assertEqual(
            parse_expression("`a${b}c${d + 1}`"),
            TemplateLiteral(
                ("a", "c", ""),
                (Identifier("b"), Binary("+", Identifier("d"), Literal(1))),
            ),
        )
        self.assertEqual(parse_expression("`$5 \\u0041`"), TemplateLiteral(("$5 A",), ()))

    def test_numbers_and_strings(self):
        self.assertEqual(parse_expression("0xff"), Literal(255))
        self.assertEqual(parse_expression("1e3"), Literal(1000))
        self.assertEqual(parse_expression("2.5"), Literal(2.5))
        self.assertEqual(parse_expression(r'"a\"b\n"'), Literal('a"b\n'))
        self.assertEqual(parse_expression("'\\u{1F600}'"), Literal("\U0001F600"))

    def test_comments_are_whitespace(self):
        self.assertEqual(
            parse_expression("1 /* one */ + // plus\n 2"),
            Binary("+", Literal(1), Literal(2)),
        )

    def test_arrow_functions(self):
        node = parse_expression("x => x * 2")
        self.assertEqual(node, ArrowFunction(("x",), Binary("*", Identifier("x"), Literal(2)), False))

        node = parse_expression("(a, b = 1, ...rest) => { return a }")
        self.assertEqual(node.params, ("a", DefaultPattern("b", Literal(1)), RestElement("rest")))
        self.assertEqual(node.body, Block((Return(Identifier("a")),)))

        node = parse_expression("async () => 1")
        self.assertTrue(node.is_async)

    def test_arrow_returning_object_literal(self):
        node = parse_expression("() => ({a: 1})")
        self.assertIsInstance(node.body, ObjectLiteral)

    def test_reserved_words_are_not_identifiers(self):
        for text in ("typeof x", "delete a.b", "x in y", "function () {}"):
            with self.assertRaises(JsxSyntaxError, msg=text):
                parse_expression(text)

    def test_incomplete_expression(self):
        with self.assertRaises(JsxSyntaxError):
            parse_expression("1 +")
        with self.assertRaises(JsxSyntaxError):
            parse_expression("a = 1")

    def test_spans_recover_source_text(self):
        text = "foo.bar( 1 )"
        node = parse_expression(text)
        start, end = node.callee.span
        self.assertEqual(text[start:end].strip(), "foo.bar")


class TestMarkupGrammar(unittest.TestCase):

    def test_wrapped_under_root(self):
        self.assertEqual(wrap_markup("<b/>"), "<root><b/></root>")
        root = parse_markup("<b/>")
        self.assertEqual(root.name, "root")
        self.assertEqual(root.children, (MarkupElement("b", (), ()),))

    def test_element_with_attributes_and_children(self):
        root = parse_markup('<div className="x" hidden data-id={id}>hi {name}</div>')
        self.assertEqual(root.children, (
            MarkupElement(
                "div",
                (
                    MarkupAttribute("className", Literal("x")),
                    MarkupAttribute("hidden", None),
                    MarkupAttribute("data-id", Identifier("id")),
                ),
                (MarkupText("hi "), ExpressionContainer(Identifier("name"))),
            ),
        ))

    def test_spread_attribute(self):
        element = parse_markup("<input {...props} />").children[0]
        self.assertEqual(element.attributes, (MarkupSpreadAttribute(Identifier("props")),))

    def test_element_valued_attribute(self):
        element = parse_markup("<Card header=<b>title</b> />").children[0]
        self.assertEqual(element.attributes[0].value.name, "b")

    def test_dotted_and_namespaced_names(self):
        root = parse_markup('<Lib.Sub.Custom /><svg:rect xlink:href="#a" />')
        self.assertEqual(root.children[0].name, "Lib.Sub.Custom")
        self.assertEqual(root.children[1].name, "svg:rect")
        self.assertEqual(root.children[1].attributes[0].name, "xlink:href")

    def test_fragments(self):
        root = parse_markup("<><>Test</> <>Test</></>")
        outer = root.children[0]
        self.assertIsInstance(outer, MarkupFragment)
        self.assertEqual(len(outer.children), 3)
        self.assertEqual(outer.children[1], MarkupText(" "))

    def test_entities_are_decoded(self):
        root = parse_markup('<p title="&quot;q&quot;">&amp; &lt;</p>')
        paragraph = root.children[0]
        self.assertEqual(paragraph.children, (MarkupText("& <"),))
        self.assertEqual(paragraph.attributes[0].value, Literal('"q"'))

    def test_empty_expression_container(self):
        root = parse_markup("<p>{/* nothing */}{}</p>")
        self.assertEqual(root.children[0].children, (ExpressionContainer(None), ExpressionContainer(None)))

    def test_markup_inside_expressions(self):
        root = parse_markup("<ul>{items.map(item => <li key={item}>{item}</li>)}</ul>")
        call = root.children[0].children[0].expression
        arrow = call.arguments[0]
        self.assertEqual(arrow.body.name, "li")

    def test_mismatched_closing_tag(self):
        with self.assertRaises(JsxSyntaxError) as ctx:
            parse_markup("<h2>No closing tag ")
        self.assertIn("Expected corresponding JSX closing tag for <h2>", str(ctx.exception))

        with self.assertRaises(JsxSyntaxError) as ctx:
            parse_markup("<a><b></a></b>")
        self.assertIn("Expected corresponding JSX closing tag for <b>", str(ctx.exception))

    def test_void_elements_need_closing_by_default(self):
        with self.assertRaises(JsxSyntaxError):
            parse_markup('<img src="/foo.png"><div></div>')

    def test_auto_close_void_elements(self):
        root = parse_markup('<img src="/foo.png"><div>Foo</div>', auto_close_void_elements=True)
        self.assertEqual([c.name for c in root.children], ["img", "div"])
        self.assertEqual(root.children[0].children, ())

        root = parse_markup('<br></br><input />', auto_close_void_elements=True)
        self.assertEqual([c.name for c in root.children], ["br", "input"])

    def test_stray_brace_is_a_syntax_error(self):
        with self.assertRaises(JsxSyntaxError):
            parse_markup("<p>}</p>")


class TestSyntaxErrorDetails(unittest.TestCase):

    def test_line_and_column(self):
        error = JsxSyntaxError("Unexpected token 'x'", 5, "ab\ncdefg")
        self.assertEqual(error.line, 2)
        self.assertEqual(error.column, 2)
        self.assertEqual(str(error), "Unexpected token 'x' (2:2)")

    def test_without_position(self):
        error = JsxSyntaxError("boom")
        self.assertIsNone(error.line)
        self.assertEqual(str(error), "boom")

    def test_cook_string(self):
        self.assertEqual(cook_string(r"\x41\t\\"), "A\t\\")
        self.assertEqual(cook_string("line\\\ncontinued"), "linecontinued")


if __name__ == "__main__":
    unittest.main()
