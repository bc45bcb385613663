"""
Element construction: props, children, components and the deny-lists.
"""

import unittest
import sys
import os
from types import SimpleNamespace

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from jsxparser import FRAGMENT, Element, JsxParser
from jsxparser.errors import (
    BlacklistedTagError,
    UnrecognizedComponentError,
    UnrecognizedElementError,
)


class Custom:
    pass


def parse(markup, **options):
    errors = []
    options.setdefault("disable_key_generation", True)
    options.setdefault("disable_fragments", True)
    children = JsxParser(markup=markup, on_error=errors.append, **options).parse()
    return children, errors


class TestProps(unittest.TestCase):

    def test_literal_and_expression_attributes(self):
        children, errors = parse('<div className="x" data-id={id}>hi</div>', bindings={"id": 3})
        self.assertEqual(errors, [])
        self.assertEqual(children, [Element("div", {"className": "x", "data-id": 3}, "hi")])

    def test_bare_attribute_is_true_and_renamed(self):
        children, _ = parse("<input readonly />")
        self.assertEqual(children, [Element("input", {"readOnly": True})])

    def test_html_attribute_names_are_rewritten(self):
        children, _ = parse('<label class="c" for="name" tabindex="1" />')
        self.assertEqual(children[0].props, {"className": "c", "htmlFor": "name", "tabIndex": "1"})

    def test_spread_attributes_pass_through_the_blacklist(self):
        handler = lambda: None
        props = {"href": "/x", "onClick": handler, "class": "c"}
        children, _ = parse("<a {...props} />", bindings={"props": props})
        self.assertEqual(children[0].props, {"href": "/x", "className": "c"})

    def test_later_attributes_win(self):
        children, _ = parse('<a {...props} href="/y" />', bindings={"props": {"href": "/x"}})
        self.assertEqual(children[0].props, {"href": "/y"})

    def test_shorthand_object_properties_in_attributes(self):
        children, errors = parse("<div x={{foo}} {...{bar, baz: 2}} />", bindings={"foo": 1, "bar": "b"})
        self.assertEqual(errors, [])
        self.assertEqual(children[0].props, {"x": {"foo": 1}, "bar": "b", "baz": 2})

    def test_spread_of_a_plain_object(self):
        class Link:
            def __init__(self):
                self.href = "/x"
                self.title = "home"
                self._secret = "hidden"

        children, errors = parse("<a {...link} />", bindings={"link": Link()})
        self.assertEqual(errors, [])
        self.assertEqual(children[0].props, {"href": "/x", "title": "home"})

    def test_spread_of_nullish_values_adds_nothing(self):
        children, errors = parse("<a {...missing} {...nothing} />", bindings={"nothing": None})
        self.assertEqual(errors, [])
        self.assertEqual(children[0].props, {})

    def test_event_handlers_are_blacklisted_by_default(self):
        children, _ = parse('<div onClick="handleClick()" ONLOAD={fn}>first</div>', bindings={"fn": print})
        self.assertEqual(children[0].props, {})

    def test_custom_attribute_blacklist(self):
        children, _ = parse('<b prefixedFoo="x" other="y" />', blacklisted_attrs=["prefixed[a-z]*"])
        self.assertEqual(children[0].props, {"other": "y"})

    def test_style_strings_are_parsed(self):
        children, _ = parse('<p style="margin: 0 1px; padding-left: 45px" />')
        self.assertEqual(children[0].props["style"], {"margin": "0 1px", "paddingLeft": "45px"})

    def test_style_objects_are_kept(self):
        styles = {"color": "red"}
        children, _ = parse("<p style={styles} />", bindings={"styles": styles})
        self.assertIs(children[0].props["style"], styles)


class TestChildren(unittest.TestCase):

    def test_single_and_multiple_children(self):
        children, _ = parse("<p>only</p><p>a{1}</p><p></p>")
        self.assertEqual([c.children for c in children], ["only", ["a", 1], None])

    def test_table_sections_drop_whitespace(self):
        children, _ = parse("<table>\n  <tbody></tbody>\n</table>")
        self.assertEqual(children[0].children, Element("tbody"))

    def test_other_elements_keep_whitespace(self):
        children, _ = parse("<div> <b/> </div>")
        self.assertEqual(children[0].children, [" ", Element("b"), " "])

    def test_transparent_document_tags(self):
        children, _ = parse("<html><body><p>a</p> <p>b</p></body></html>")
        self.assertEqual(children, [Element("p", {}, "a"), Element("p", {}, "b")])

    def test_option_unwraps_its_element_child(self):
        children, _ = parse("<select><option><span>One</span></option></select>")
        self.assertEqual(children[0].children, Element("option", {}, "One"))

    def test_void_elements_drop_children(self):
        children, _ = parse('<img src="a"><div/></img>')
        self.assertEqual(children, [Element("img", {"src": "a"})])

    def test_entities_in_text(self):
        children, _ = parse("<p>&amp;&copy;</p>")
        self.assertEqual(children[0].children, "&©")

    def test_mapped_children(self):
        children, errors = parse(
            "<ul>{items.map(item => <li key={item}>{item}</li>)}</ul>",
            bindings={"items": ["a", "b"]},
        )
        self.assertEqual(errors, [])
        self.assertEqual(children[0].children, [
            Element("li", {}, "a", "a"),
            Element("li", {}, "b", "b"),
        ])

    def test_text_is_wrapped_in_fragments(self):
        children, _ = parse("<p>hi</p>", disable_fragments=False)
        self.assertEqual(children[0].children, Element(FRAGMENT, {}, "hi"))
        self.assertTrue(children[0].children.is_fragment)


class TestKeys(unittest.TestCase):

    def test_explicit_key_is_not_a_prop(self):
        children, _ = parse('<b key="k1" id="x" /><i key={1} />', disable_key_generation=False)
        self.assertEqual(children[0].key, "k1")
        self.assertEqual(children[0].props, {"id": "x"})
        self.assertEqual(children[1].key, "1")

    def test_generated_keys(self):
        children, _ = parse("<b/><i/>", disable_key_generation=False)
        keys = [c.key for c in children]
        self.assertTrue(all(keys))
        self.assertNotEqual(keys[0], keys[1])

    def test_keys_can_be_disabled(self):
        children, _ = parse("<b/>")
        self.assertIsNone(children[0].key)


class TestComponents(unittest.TestCase):

    def test_component_from_registry(self):
        children, _ = parse('<Custom text="x">inner</Custom>', components={"Custom": Custom})
        self.assertEqual(children, [Element(Custom, {"text": "x"}, "inner")])

    def test_dotted_component_names(self):
        by_dict, _ = parse("<Lib.Custom />", components={"Lib": {"Custom": Custom}})
        self.assertIs(by_dict[0].tag, Custom)

        lib = SimpleNamespace(SubLib=SimpleNamespace(Custom=Custom))
        by_attribute, _ = parse("<Lib.SubLib.Custom />", components={"Lib": lib})
        self.assertIs(by_attribute[0].tag, Custom)

    def test_missing_dotted_component_is_a_plain_tag(self):
        children, errors = parse("<Lib.Missing />", components={"Lib": {}})
        self.assertEqual(errors, [])
        self.assertEqual(children[0].tag, "lib.missing")

    def test_components_only(self):
        children, errors = parse("<div/><Custom/>", components={"Custom": Custom}, components_only=True)
        self.assertEqual(children, [Element(Custom)])
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], UnrecognizedComponentError)
        self.assertIn("<div>", str(errors[0]))

    def test_render_unrecognized_hook(self):
        children, _ = parse(
            "<div/>",
            components_only=True,
            render_unrecognized=lambda name: f"[{name}]",
        )
        self.assertEqual(children, ["[div]"])

    def test_unknown_elements_can_be_disallowed(self):
        children, errors = parse("<foo /><Bar /><my-widget /><p/>", allow_unknown_elements=False)
        self.assertEqual([c.tag for c in children], ["my-widget", "p"])
        self.assertEqual(len(errors), 2)
        self.assertTrue(all(isinstance(e, UnrecognizedElementError) for e in errors))
        self.assertIn("<foo> is unrecognized", str(errors[0]))


class TestTagBlacklist(unittest.TestCase):

    def test_script_is_blacklisted_by_default(self):
        children, errors = parse("<script>alert(1)</script><b/>")
        self.assertEqual(children, [Element("b")])
        self.assertIsInstance(errors[0], BlacklistedTagError)
        self.assertEqual(str(errors[0]), "The tag <script> is blacklisted, and will not be rendered.")

    def test_blacklist_is_case_insensitive(self):
        children, errors = parse("<Foo/><foo>x</foo><b/>", blacklisted_tags=["Foo"])
        self.assertEqual(children, [Element("b")])
        self.assertEqual(len(errors), 2)

    def test_blacklist_beats_components(self):
        children, _ = parse("<Custom/>", components={"Custom": Custom}, blacklisted_tags=["custom"])
        self.assertEqual(children, [])


if __name__ == "__main__":
    unittest.main()
