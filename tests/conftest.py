"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from iconfont.models.icon import IconModuleSource


# Icon modules in the shapes the @wordpress/icons build emits

TWO_PATHS_JS = '''"use strict";
var import_primitives = require("@wordpress/primitives");
var import_jsx_runtime = require("react/jsx-runtime");
var pages_default = /* @__PURE__ */ (0, import_jsx_runtime.jsxs)(import_primitives.SVG, { xmlns: "http://www.w3.org/2000/svg", viewBox: "0 0 24 24", children: [
  /* @__PURE__ */ (0, import_jsx_runtime.jsx)(import_primitives.Path, { d: "M1 1" }),
  /* @__PURE__ */ (0, import_jsx_runtime.jsx)(import_primitives.Path, { d: "M2 2" })
] });
'''

ADD_CARD_JS = '''"use strict";

Object.defineProperty(exports, "__esModule", {
  value: true
});
exports.default = void 0;
var _primitives = require("@wordpress/primitives");
var _jsxRuntime = require("react/jsx-runtime");
const addCard = /*#__PURE__*/(0, _jsxRuntime.jsx)(_primitives.SVG, {
  xmlns: "http://www.w3.org/2000/svg",
  viewBox: "0 0 24 24",
  children: /*#__PURE__*/(0, _jsxRuntime.jsx)(_primitives.Path, {
    d: "M18.5 5.5V8H20V5.5h2.5V4H20V1.5h-1.5V4H16v1.5h2.5zM12 4H6a2 2 0 00-2 2v12a2 2 0 002 2h12a2 2 0 002-2v-6h-1.5v6a.5.5 0 01-.5.5H6a.5.5 0 01-.5-.5V6a.5.5 0 01.5-.5h6V4z"
  })
});
var _default = exports.default = addCard;
'''

EVENODD_JS = '''"use strict";
var import_primitives = require("@wordpress/primitives");
var import_jsx_runtime = require("react/jsx-runtime");
var info_default = /* @__PURE__ */ (0, import_jsx_runtime.jsx)(import_primitives.SVG, { viewBox: "0 0 24 24", xmlns: "http://www.w3.org/2000/svg", children: /* @__PURE__ */ (0, import_jsx_runtime.jsx)(
  import_primitives.Path,
  {
    fillRule: "evenodd",
    clipRule: "evenodd",
    d: "M5.5 12a6.5 6.5 0 1 0 13 0 6.5 6.5 0 0 0-13 0ZM12 4a8 8 0 1 0 0 16 8 8 0 0 0 0-16Zm.75 4v1.5h-1.5V8h1.5Zm0 8v-5h-1.5v5h1.5Z"
  }
) });
'''

CIRCLE_JS = '''"use strict";
var import_primitives = require("@wordpress/primitives");
var import_jsx_runtime = require("react/jsx-runtime");
var dot_default = /* @__PURE__ */ (0, import_jsx_runtime.jsx)(import_primitives.SVG, { xmlns: "http://www.w3.org/2000/svg", viewBox: "0 0 24 24", children: /* @__PURE__ */ (0, import_jsx_runtime.jsx)(import_primitives.Circle, { cx: "12", cy: "12", r: "5" }) });
'''

# Circle before the path in source; circles still come last
MIXED_JS = '''"use strict";
var _primitives = require("@wordpress/primitives");
var _jsxRuntime = require("react/jsx-runtime");
const people = /*#__PURE__*/(0, _jsxRuntime.jsxs)(_primitives.SVG, {
  xmlns: "http://www.w3.org/2000/svg",
  viewBox: "0 0 24 24",
  children: [/*#__PURE__*/(0, _jsxRuntime.jsx)(_primitives.Circle, {
    r: 3,
    cy: 7,
    cx: 12
  }), /*#__PURE__*/(0, _jsxRuntime.jsx)(_primitives.Path, {
    d: "M4 20c0-4.4 3.6-8 8-8s8 3.6 8 8H4Z"
  })]
});
'''

# Two path objects close together; only the second carries style rules
NEIGHBOURS_JS = '''const icon = jsx(SVG, { viewBox: "0 0 24 24", children: [jsx(Path, { d: "M4 4h16v16H4z" }), jsx(Path, { fillRule: "evenodd", d: "M8 8h8v8H8z", clipRule: "evenodd" })] });
'''

NO_VIEWBOX_JS = '''const broken = jsx(SVG, { xmlns: "http://www.w3.org/2000/svg", children: jsx(Path, { d: "M1 1h2v2H1z" }) });
'''

NO_SHAPES_JS = '''const empty = jsx(SVG, { xmlns: "http://www.w3.org/2000/svg", viewBox: "0 0 24 24", id: "empty" });
'''

# Extraction succeeds, but the path data is garbage
BAD_PATH_JS = '''const bad = jsx(SVG, { viewBox: "0 0 24 24", children: jsx(Path, { d: "hello world" }) });
'''

BLANK_VIEWBOX_JS = '''const blank = jsx(SVG, { viewBox: "   ", children: jsx(Path, { d: "M1 1h2v2z" }) });
'''

# Pass extraction but can't become glyphs
BAD_VIEWBOX_JS = '''const badVb = jsx(SVG, { viewBox: "0 0 24", children: jsx(Path, { d: "M1 1h2v2z" }) });
'''

BAD_CIRCLE_JS = '''const badCircle = jsx(SVG, { viewBox: "0 0 24 24", children: jsx(Circle, { cx: "mid", cy: "12", r: "5" }) });
'''

SAMPLE_MODULES = {
    "add-card": ADD_CARD_JS,
    "dot": CIRCLE_JS,
    "info": EVENODD_JS,
    "no-shapes": NO_SHAPES_JS,
    "no-viewbox": NO_VIEWBOX_JS,
    "people": MIXED_JS,
}

SQUARE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M4 4h16v16H4z"/></svg>'
DOT_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle cx="12" cy="12" r="5"/></svg>'
WIDE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 24"><path d="M0 0h48v24H0z" fill-rule="evenodd"/></svg>'


def make_source(name: str, text: str) -> IconModuleSource:
    return IconModuleSource(name=name, path=f"{name}.js", text=text)


@pytest.fixture
def sample_sources() -> list[IconModuleSource]:
    return [make_source(name, text) for name, text in sorted(SAMPLE_MODULES.items())]


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    """A build/library directory with the sample modules plus a source map."""
    d = tmp_path / "library"
    d.mkdir()
    for name, text in SAMPLE_MODULES.items():
        (d / f"{name}.js").write_text(text, encoding="utf-8")
    (d / "add-card.js.map").write_text("{}", encoding="utf-8")
    (d / "README.md").write_text("not an icon", encoding="utf-8")
    return d


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    d = tmp_path / "svgs"
    d.mkdir()
    (d / "square.svg").write_text(SQUARE_SVG, encoding="utf-8")
    (d / "dot.svg").write_text(DOT_SVG, encoding="utf-8")
    return d
