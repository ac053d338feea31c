"""Compiled line patterns shared by the block detectors.

Compiled once at import time and never mutated, so every Parser instance
(and every thread) can share them.
"""

import re

# Line splitting: \r\n, lone \r and \n all end a line
LINE_SPLIT = re.compile(r"\r\n|\r|\n")

# Fence line (applied to the stripped line): ``` + optional language tag.
# The same pattern opens and closes a block; the tag is ignored on close.
FENCE_OPEN = re.compile(r"^```([\w+#.-]*)\s*$")

# Single-line fenced code: ```code```
FENCE_INLINE = re.compile(r"^```(.+)```$")

# Footnote definition: [^id]: text
FOOTNOTE_DEF = re.compile(r"^\[\^([^\]\s]+)\]:[ \t]*(.*)$")

# List items; group 1 is the raw indentation
TASK_ITEM = re.compile(r"^(\s*)- \[([ xX])\]\s+(.*)$")
UNORDERED_ITEM = re.compile(r"^(\s*)[-*+\u2022]\s+(.*)$")
ORDERED_ITEM = re.compile(r"^(\s*)(\d+)\.\s+(.*)$")

# ATX header: 1-6 '#' then a space or tab, then content
HEADER = re.compile(r"^(#{1,6})[ \t]+(.*)$")

# Optional closing '#' run of a header, preceded by whitespace
HEADER_CLOSING = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")

# Horizontal rule: 3+ of the same char, optionally whitespace-separated
HORIZONTAL_RULE = re.compile(r"^\s*([-*_])(?:\s*\1){2,}\s*$")

# Footnote reference inside inline text (anchored at the scan position)
FOOTNOTE_REF = re.compile(r"\[\^([^\]\s]+)\]")

# Backslash escapes (ASCII punctuation)
ESCAPE = re.compile(r"\\([!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])")


def process_escapes(text: str) -> str:
    """Replace backslash escapes with the literal character.

    Used for link destinations and alt text, which are not inline-parsed.

    """
    return ESCAPE.sub(r"\1", text)
