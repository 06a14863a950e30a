import xml.etree.ElementTree as ET

import pytest

from samdrawer.render import build_automaton, generate_dot, generate_svg, render_svg


def local(tag):
    return tag.rsplit("}", 1)[-1]


def elements(svg, name):
    root = ET.fromstring(svg)
    return [e for e in root.iter() if local(e.tag) == name]


def test_build_automaton_splits_on_bar():
    pool = build_automaton("ab|cde")
    assert pool.root.right_size == {0: 2, 1: 3}


def test_build_automaton_single_string():
    pool = build_automaton("abc")
    assert pool.root.right_size == {0: 3}
    assert len(pool.nodes) == 4


def test_generate_dot_matches_pool_graph():
    assert generate_dot("abcbc") == build_automaton("abcbc").generate_graph()
    assert generate_dot("abcbc").startswith("digraph {")


@pytest.mark.parametrize("text", ["abcbc", "ab|ba", "aaaa", ""])
def test_svg_has_one_ellipse_per_state(text):
    pool = build_automaton(text)
    svg = render_svg(pool)
    ellipses = elements(svg, "ellipse")
    assert len(ellipses) == len(pool.nodes)
    assert {e.get("id") for e in ellipses} == {f"node-{n.vtx_id}" for n in pool.nodes}


@pytest.mark.parametrize("text", ["abcbc", "ab|ba", "mississippi"])
def test_svg_edges_match_automaton(text):
    pool = build_automaton(text)
    paths = elements(render_svg(pool), "path")
    links = [p for p in paths if p.get("class") == "link"]
    transitions = [p for p in paths if p.get("class") == "transition"]
    assert len(links) == len(pool.nodes) - 1
    assert all(p.get("stroke") == "red" for p in links)
    assert len(transitions) == sum(len(n.children) for n in pool.nodes)


def test_svg_rows_follow_state_length():
    pool = build_automaton("abracadabra")
    ellipses = {e.get("id"): float(e.get("cy")) for e in elements(render_svg(pool), "ellipse")}
    for node in pool.nodes:
        if node.link is not None:
            assert ellipses[f"node-{node.vtx_id}"] > ellipses[f"node-{node.link.vtx_id}"]


def test_svg_fits_inside_canvas():
    svg = generate_svg("abcbc|bca")
    root = ET.fromstring(svg)
    width, height = float(root.get("width")), float(root.get("height"))
    for e in elements(svg, "ellipse"):
        cx, cy, rx, ry = (float(e.get(k)) for k in ("cx", "cy", "rx", "ry"))
        assert 0 <= cx - rx and cx + rx <= width
        assert 0 <= cy - ry and cy + ry <= height


def test_svg_labels_show_length():
    spans = [e.text for e in elements(generate_svg("ab"), "tspan")]
    assert "Max=0" in spans
    assert "size0=2" in spans