"""
constants.py

Static tables used by the element builder:

    - ATTRIBUTES            : HTML/SVG attribute name -> element prop name
    - VOID_ELEMENTS         : tags that never hold children
    - NO_WHITESPACE_ELEMENTS: tags whose blank text children are dropped
    - TRANSPARENT_TAGS      : document wrappers whose children are promoted
    - KNOWN_HTML_TAGS       : tags a browser does not classify as unknown
"""

from __future__ import annotations

import re

WRAPPER_CLASS = "jsx-parser"

# ==========================================
# ATTRIBUTE REWRITE TABLE
# ==========================================
# Lookup is exact on the raw attribute name; names missing here pass through.
ATTRIBUTES = {
    # HTML
    "accept-charset": "acceptCharset",
    "accesskey": "accessKey",
    "allowfullscreen": "allowFullScreen",
    "autocapitalize": "autoCapitalize",
    "autocomplete": "autoComplete",
    "autocorrect": "autoCorrect",
    "autofocus": "autoFocus",
    "autoplay": "autoPlay",
    "autosave": "autoSave",
    "cellpadding": "cellPadding",
    "cellspacing": "cellSpacing",
    "charset": "charSet",
    "class": "className",
    "classid": "classID",
    "colspan": "colSpan",
    "contenteditable": "contentEditable",
    "contextmenu": "contextMenu",
    "controlslist": "controlsList",
    "crossorigin": "crossOrigin",
    "datetime": "dateTime",
    "enctype": "encType",
    "enterkeyhint": "enterKeyHint",
    "fetchpriority": "fetchPriority",
    "for": "htmlFor",
    "formaction": "formAction",
    "formenctype": "formEncType",
    "formmethod": "formMethod",
    "formnovalidate": "formNoValidate",
    "formtarget": "formTarget",
    "frameborder": "frameBorder",
    "hreflang": "hrefLang",
    "http-equiv": "httpEquiv",
    "inputmode": "inputMode",
    "itemid": "itemID",
    "itemprop": "itemProp",
    "itemref": "itemRef",
    "itemscope": "itemScope",
    "itemtype": "itemType",
    "keyparams": "keyParams",
    "keytype": "keyType",
    "marginheight": "marginHeight",
    "marginwidth": "marginWidth",
    "maxlength": "maxLength",
    "mediagroup": "mediaGroup",
    "minlength": "minLength",
    "nomodule": "noModule",
    "novalidate": "noValidate",
    "playsinline": "playsInline",
    "radiogroup": "radioGroup",
    "readonly": "readOnly",
    "referrerpolicy": "referrerPolicy",
    "rowspan": "rowSpan",
    "spellcheck": "spellCheck",
    "srcdoc": "srcDoc",
    "srclang": "srcLang",
    "srcset": "srcSet",
    "tabindex": "tabIndex",
    "usemap": "useMap",
    # SVG
    "alignment-baseline": "alignmentBaseline",
    "baseline-shift": "baselineShift",
    "clip-path": "clipPath",
    "clip-rule": "clipRule",
    "color-interpolation": "colorInterpolation",
    "color-interpolation-filters": "colorInterpolationFilters",
    "dominant-baseline": "dominantBaseline",
    "fill-opacity": "fillOpacity",
    "fill-rule": "fillRule",
    "flood-color": "floodColor",
    "flood-opacity": "floodOpacity",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-style": "fontStyle",
    "font-variant": "fontVariant",
    "font-weight": "fontWeight",
    "image-rendering": "imageRendering",
    "letter-spacing": "letterSpacing",
    "lighting-color": "lightingColor",
    "marker-end": "markerEnd",
    "marker-mid": "markerMid",
    "marker-start": "markerStart",
    "paint-order": "paintOrder",
    "pointer-events": "pointerEvents",
    "shape-rendering": "shapeRendering",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-opacity": "strokeOpacity",
    "stroke-width": "strokeWidth",
    "text-anchor": "textAnchor",
    "text-decoration": "textDecoration",
    "text-rendering": "textRendering",
    "vector-effect": "vectorEffect",
    "word-spacing": "wordSpacing",
    "writing-mode": "writingMode",
    "xlink:actuate": "xlinkActuate",
    "xlink:arcrole": "xlinkArcrole",
    "xlink:href": "xlinkHref",
    "xlink:role": "xlinkRole",
    "xlink:show": "xlinkShow",
    "xlink:title": "xlinkTitle",
    "xlink:type": "xlinkType",
    "xml:base": "xmlBase",
    "xml:lang": "xmlLang",
    "xml:space": "xmlSpace",
    "xmlns:xlink": "xmlnsXlink",
}

# ==========================================
# SPECIAL TAGS
# ==========================================
VOID_ELEMENTS = (
    "area", "base", "br", "col", "embed", "hr", "img", "input", "keygen",
    "link", "menuitem", "meta", "param", "source", "track", "wbr",
)

NO_WHITESPACE_ELEMENTS = ("table", "tbody", "tfoot", "thead", "tr")

TRANSPARENT_TAGS = re.compile(r"^(html|head|body)$", re.IGNORECASE)

KNOWN_HTML_TAGS = frozenset("""
    a abbr acronym address applet area article aside audio b base basefont bdi bdo
    bgsound big blink blockquote body br button canvas caption center cite code col
    colgroup data datalist dd del details dfn dialog dir div dl dt em embed fieldset
    figcaption figure font footer form frame frameset h1 h2 h3 h4 h5 h6 head header
    hgroup hr html i iframe img input ins isindex kbd keygen label legend li link
    listing main map mark marquee menu menuitem meta meter multicol nav nextid nobr
    noembed noframes noscript object ol optgroup option output p param picture
    plaintext pre progress q rb rp rt rtc ruby s samp script search section select
    slot small source spacer span strike strong style sub summary sup table tbody td
    template textarea tfoot th thead time title tr track tt u ul var video wbr xmp
""".split())

_CUSTOM_ELEMENT_NAME = re.compile(r"^[a-z][a-z0-9._]*-[a-z0-9._-]*$")


def can_have_children(tag_name: str) -> bool:
    return tag_name.lower() not in VOID_ELEMENTS


def can_have_whitespace(tag_name: str) -> bool:
    return tag_name.lower() not in NO_WHITESPACE_ELEMENTS


def is_unrecognized_tag(tag_name: str) -> bool:
    """True when a browser would create an unknown element for this tag."""
    name = tag_name.strip().lower()
    if name in KNOWN_HTML_TAGS:
        return False
    return not _CUSTOM_ELEMENT_NAME.match(name)
