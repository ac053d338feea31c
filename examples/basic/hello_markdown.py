"""Parse Markdown into the IR in 3 lines, zero config, zero deps."""

from plumas import parse

result = parse("# Hello **World**\n\n- [x] parsed\n- [ ] rendered")
for block in result.children:
    print(block)
