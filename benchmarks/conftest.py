"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_program() -> str:
    """Generate a large Lox program (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(f"""
// Section {i}
class Shape{i} < Base {{
  init(w, h) {{
    this.w = w;
    this.h = h;
  }}

  area() {{
    return this.w * this.h / 2.5;
  }}
}}

var s{i} = Shape{i}({i}, {i}.75);
if (s{i}.area() >= 10 and s{i}.w != nil) {{
  print "section {i}: " + s{i}.area();
}}
""")
    return "\n".join(sections)


@pytest.fixture
def string_heavy_program() -> str:
    """Many long multi-line string literals."""
    body = "lorem ipsum dolor sit amet\n" * 20
    return "\n".join(f'var text{i} = "{body}";' for i in range(200))
