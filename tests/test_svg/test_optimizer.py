"""Tests for the SVG optimizer."""

import pytest

from tests.conftest import ADD_CARD_JS, EVENODD_JS, MIXED_JS

from iconfont.engine.associator import associate_all
from iconfont.engine.config import PipelineConfig
from iconfont.engine.extractor import extract_shapes
from iconfont.errors import OptimizationFailure
from iconfont.models.icon import IconDocument
from iconfont.svg.optimizer import (
    OptimizeOptions,
    compact_path_data,
    format_number,
    optimize,
    tokenize_path,
)
from iconfont.svg.parser import parse_svg
from iconfont.svg.serializer import serialize_icon


def _assembled(text: str) -> tuple[IconDocument, str]:
    ex = extract_shapes(text)
    doc = IconDocument(
        name="icon",
        view_box=ex.view_box,
        shapes=[*associate_all(text, ex, PipelineConfig()), *ex.circles],
    )
    return doc, serialize_icon(doc)


@pytest.mark.parametrize("text", [ADD_CARD_JS, EVENODD_JS, MIXED_JS])
def test_viewbox_and_shape_count_preserved(text):
    doc, svg = _assembled(text)
    optimized = parse_svg(optimize(svg))
    assert optimized.view_box == doc.view_box
    assert len(optimized.shapes) == len(doc.shapes)
    assert [s.kind for s in optimized.shapes] == [s.kind for s in doc.shapes]


def test_evenodd_kept_nonzero_dropped():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
        '<path d="M0 0h4v4H0z" fill-rule="evenodd" clip-rule="nonzero"/></svg>'
    )
    out = optimize(svg)
    assert 'fill-rule="evenodd"' in out
    assert "clip-rule" not in out


def test_metadata_and_comments_removed():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" id="icon">'
        "<!-- generated --><title>Card</title><desc>x</desc>"
        '<path d="M1 1L2 2" class="p"/></svg>'
    )
    assert optimize(svg) == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M1 1L2 2"/></svg>'
    )


def test_circle_numbers_rounded():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle cx="12.0" cy="11.99999" r="5"/></svg>'
    assert '<circle cx="12" cy="12" r="5"/>' in optimize(svg)


def test_remove_viewbox_option():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M1 1"/></svg>'
    assert "viewBox" not in optimize(svg, OptimizeOptions(remove_viewbox=True))
    assert 'viewBox="0 0 24 24"' in optimize(svg)


def test_multipass_is_stable():
    _, svg = _assembled(ADD_CARD_JS)
    once = optimize(svg)
    assert optimize(once) == once


def test_malformed_svg_rejected():
    with pytest.raises(OptimizationFailure, match="Malformed"):
        optimize('<svg viewBox="0 0 24 24"><path d="M1 1"></svg>')


def test_non_svg_root_rejected():
    with pytest.raises(OptimizationFailure):
        optimize('<html><path d="M1 1"/></html>')


def test_bad_path_data_rejected():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="hello world"/></svg>'
    with pytest.raises(OptimizationFailure, match="Invalid path data"):
        optimize(svg)


@pytest.mark.parametrize(
    "d, expected",
    [
        ("M1.23456 2.5L3 4", "M1.235 2.5L3 4"),
        ("M0.5 0.5", "M.5.5"),
        ("M 10 , 20 L -3.0 -4.50 Z", "M10 20L-3-4.5Z"),
        ("M1 1a.5.5 0 01-.5.5z", "M1 1a.5.5 0 0 1-.5.5z"),
        ("M0 0h1v1h-1z m2 2", "M0 0h1v1h-1zm2 2"),
    ],
)
def test_compact_path_data(d, expected):
    assert compact_path_data(d, precision=3) == expected


def test_tokenize_implicit_repeats():
    assert tokenize_path("M0 0 1 1 2 2") == [("M", ["0", "0", "1", "1", "2", "2"])]


@pytest.mark.parametrize("d", ["", "L1 1", "M1", "M1 1 C1 2", "M0 0a1 1 0 2 0 1 1"])
def test_tokenize_rejects_bad_data(d):
    with pytest.raises(ValueError):
        tokenize_path(d)


@pytest.mark.parametrize(
    "value, expected",
    [(1.0, "1"), (-0.0001, "0"), (0.25, ".25"), (-0.25, "-.25"), (12.3456, "12.346"), (100.0, "100")],
)
def test_format_number(value, expected):
    assert format_number(value, 3) == expected


@pytest.mark.parametrize("view_box", ["0 0 24", "0 0 0 24", "0 0 24 -1", "a b c d"])
def test_unusable_viewbox_rejected(view_box):
    svg = f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}"><path d="M1 1"/></svg>'
    with pytest.raises(OptimizationFailure, match="viewBox"):
        optimize(svg)


def test_missing_viewbox_rejected():
    with pytest.raises(OptimizationFailure, match="no viewBox"):
        optimize('<svg xmlns="http://www.w3.org/2000/svg"><path d="M1 1"/></svg>')


@pytest.mark.parametrize("attrs", ['cx="mid" cy="12" r="5"', 'cx="12" cy="12" r="nan"'])
def test_non_numeric_circle_rejected(attrs):
    svg = f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle {attrs}/></svg>'
    with pytest.raises(OptimizationFailure):
        optimize(svg)
