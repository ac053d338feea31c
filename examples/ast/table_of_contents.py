"""Typed IR: collect headers for a table of contents."""

from plumas import extract_text, parse
from plumas.nodes import Header
from plumas.visitor import BaseVisitor


class TocCollector(BaseVisitor[None]):
    """Collect headers for a table of contents."""

    def __init__(self) -> None:
        self.headers: list[tuple[int, str]] = []

    def visit_header(self, node: Header) -> None:
        self.headers.append((node.level, extract_text(node)))


source = """# Introduction

Welcome to the guide.

## Getting *Started*

First steps.

### Installation

How to install.

## Advanced Topics

Deep dive.
"""

collector = TocCollector()
collector.visit(parse(source).document)

print("Table of Contents:")
for level, text in collector.headers:
    indent = "  " * (level - 1)
    print(f"{indent}{'#' * level} {text}")
