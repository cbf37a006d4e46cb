"""Canonical dialect table.

Later dialects are built from earlier ones with ``extend``; nothing is
ever removed. A good reference for HTML 4.01 is
http://www.w3schools.com/tags/default.asp and for HTML5
http://www.w3schools.com/html5/html5_reference.asp.
"""

from __future__ import annotations

from markupgen.dialects.model import Dialect, extend, make_dialect

# ── HTML 4.01 ─────────────────────────────────────────────────────

HTML4_STRICT = make_dialect(
    version=["Html4", "Strict"],
    doc_type=[
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN"',
        '    "http://www.w3.org/TR/html4/strict.dtd">',
    ],
    containers=[
        "a", "abbr", "acronym", "address", "b", "bdo", "big", "blockquote",
        "body", "button", "caption", "cite", "code", "colgroup", "dd", "del",
        "dfn", "div", "dl", "dt", "em", "fieldset", "form", "h1", "h2", "h3",
        "h4", "h5", "h6", "head", "html", "i", "ins", "kbd", "label",
        "legend", "li", "map", "noscript", "object", "ol", "optgroup",
        "option", "p", "pre", "q", "samp", "script", "select", "small",
        "span", "strong", "style", "sub", "sup", "table", "tbody", "td",
        "textarea", "tfoot", "th", "thead", "title", "tr", "tt", "ul", "var",
    ],
    voids=[
        "area", "br", "col", "hr", "link", "img", "input", "meta", "param",
    ],
    attributes=[
        "abbr", "accept", "accesskey", "action", "align", "alt", "archive",
        "axis", "border", "cellpadding", "cellspacing", "char", "charoff",
        "charset", "checked", "cite", "class", "classid", "codebase",
        "codetype", "cols", "colspan", "content", "coords", "data", "datetime",
        "declare", "defer", "dir", "disabled", "enctype", "for", "frame",
        "headers", "height", "href", "hreflang", "http-equiv", "id", "label",
        "lang", "maxlength", "media", "method", "multiple", "name", "nohref",
        "onabort", "onblur", "onchange", "onclick", "ondblclick", "onfocus",
        "onkeydown", "onkeypress", "onkeyup", "onload", "onmousedown",
        "onmousemove", "onmouseout", "onmouseover", "onmouseup", "onreset",
        "onselect", "onsubmit", "onunload", "profile", "readonly", "rel",
        "rev", "rows", "rowspan", "rules", "scheme", "scope", "selected",
        "shape", "size", "span", "src", "standby", "style", "summary",
        "tabindex", "title", "type", "usemap", "valign", "value", "valuetype",
        "width",
    ],
    shared=["abbr", "cite", "label", "span", "style", "title"],
    self_closing=False,
)

HTML4_TRANSITIONAL = extend(
    HTML4_STRICT,
    version=["Html4", "Transitional"],
    doc_type=[
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN"',
        '    "http://www.w3.org/TR/html4/loose.dtd">',
    ],
    containers=[
        "applet", "center", "dir", "font", "iframe", "isindex", "menu",
        "noframes", "s", "u",
    ],
    voids=["basefont"],
    attributes=[
        "background", "bgcolor", "clear", "compact", "hspace", "language",
        "noshade", "nowrap", "start", "target", "vspace",
    ],
    shared=["dir"],
)

HTML4_FRAMESET = extend(
    HTML4_TRANSITIONAL,
    version=["Html4", "FrameSet"],
    doc_type=[
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 FrameSet//EN"',
        '    "http://www.w3.org/TR/html4/frameset.dtd">',
    ],
    containers=["frameset"],
    voids=["frame"],
    attributes=["frameborder", "scrolling"],
    shared=["frame"],
)

# ── XHTML 1.0 ─────────────────────────────────────────────────────

XHTML1_STRICT = extend(
    HTML4_STRICT,
    version=["XHtml1", "Strict"],
    doc_type=[
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN"',
        '    "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">',
    ],
    self_closing=True,
)

XHTML1_TRANSITIONAL = extend(
    HTML4_TRANSITIONAL,
    version=["XHtml1", "Transitional"],
    doc_type=[
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN"',
        '    "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">',
    ],
    self_closing=True,
)

XHTML1_FRAMESET = extend(
    HTML4_FRAMESET,
    version=["XHtml1", "FrameSet"],
    doc_type=[
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 FrameSet//EN"',
        '    "http://www.w3.org/TR/xhtml1/DTD/xhtml1-frameset.dtd">',
    ],
    self_closing=True,
)

# ── HTML5 ─────────────────────────────────────────────────────────

HTML5 = make_dialect(
    version=["Html5"],
    doc_type=["<!DOCTYPE HTML>"],
    containers=[
        "a", "abbr", "address", "article", "aside", "audio", "b",
        "bdo", "blockquote", "body", "button", "canvas", "caption", "cite",
        "code", "colgroup", "command", "datalist", "dd", "del", "details",
        "dfn", "div", "dl", "dt", "em", "fieldset", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "head", "header",
        "hgroup", "html", "i", "iframe", "ins", "kbd", "label",
        "legend", "li", "main", "map", "mark", "menu", "meter", "nav",
        "noscript", "object", "ol", "optgroup", "option", "output", "p",
        "pre", "progress", "q", "rp", "rt", "ruby", "samp", "script",
        "section", "select", "small", "span", "strong", "style", "sub",
        "summary", "sup", "table", "tbody", "td", "textarea", "tfoot", "th",
        "thead", "time", "title", "tr", "u", "ul", "var", "video",
    ],
    # http://www.whatwg.org/specs/web-apps/current-work/multipage/syntax.html#void-elements
    voids=[
        "area", "base", "br", "col", "embed", "hr", "img", "input", "keygen",
        "link", "menuitem", "meta", "param", "source", "track", "wbr",
    ],
    attributes=[
        "accept", "accept-charset", "accesskey", "action", "alt", "async",
        "autocomplete", "autofocus", "autoplay", "challenge", "charset",
        "checked", "cite", "class", "cols", "colspan", "content",
        "contenteditable", "contextmenu", "controls", "coords", "data",
        "datetime", "defer", "dir", "disabled", "draggable", "enctype", "for",
        "form", "formaction", "formenctype", "formmethod", "formnovalidate",
        "formtarget", "headers", "height", "hidden", "high", "href",
        "hreflang", "http-equiv", "icon", "id", "ismap", "item", "itemprop",
        "itemscope", "itemtype",
        "keytype", "label", "lang", "list", "loop", "low", "manifest", "max",
        "maxlength", "media", "method", "min", "multiple", "name",
        "novalidate", "onbeforeonload", "onbeforeprint", "onblur", "oncanplay",
        "oncanplaythrough", "onchange", "oncontextmenu", "onclick",
        "ondblclick", "ondrag", "ondragend", "ondragenter", "ondragleave",
        "ondragover", "ondragstart", "ondrop", "ondurationchange", "onemptied",
        "onended", "onerror", "onfocus", "onformchange", "onforminput",
        "onhaschange", "oninput", "oninvalid", "onkeydown", "onkeyup",
        "onload", "onloadeddata", "onloadedmetadata", "onloadstart",
        "onmessage", "onmousedown", "onmousemove", "onmouseout", "onmouseover",
        "onmouseup", "onmousewheel", "ononline", "onpagehide", "onpageshow",
        "onpause", "onplay", "onplaying", "onprogress", "onpropstate",
        "onratechange", "onreadystatechange", "onredo", "onresize", "onscroll",
        "onseeked", "onseeking", "onselect", "onstalled", "onstorage",
        "onsubmit", "onsuspend", "ontimeupdate", "onundo", "onunload",
        "onvolumechange", "onwaiting", "open", "optimum", "pattern", "ping",
        "placeholder", "preload", "pubdate", "radiogroup", "readonly", "rel",
        "required", "reversed", "role", "rows", "rowspan", "sandbox", "scope",
        "scoped", "seamless", "selected", "shape", "size", "sizes", "span",
        "spellcheck", "src", "srcdoc", "start", "step", "style", "subject",
        "summary", "tabindex", "target", "title", "type", "usemap", "value",
        "width", "wrap", "xmlns",
    ],
    shared=["cite", "form", "label", "span", "style", "summary", "title"],
    self_closing=False,
)

XHTML5 = extend(
    HTML5,
    version=["XHtml5"],
    doc_type=["<!DOCTYPE html>"],
    self_closing=True,
)


def all_dialects() -> list[Dialect]:
    """Every cataloged dialect, in declaration order."""
    return [
        HTML4_STRICT,
        HTML4_TRANSITIONAL,
        HTML4_FRAMESET,
        XHTML1_STRICT,
        XHTML1_TRANSITIONAL,
        XHTML1_FRAMESET,
        HTML5,
        XHTML5,
    ]


def dialect_map() -> dict[str, Dialect]:
    """Map lower-case keys (html4-strict, xhtml5, ...) → dialects."""
    return {d.key: d for d in all_dialects()}


def find_dialect(key: str) -> Dialect | None:
    """Look up a dialect by key, case-insensitively."""
    return dialect_map().get(key.lower())
