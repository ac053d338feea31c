"""Serialize the IR to JSON and back, e.g. to hand it to another process."""

from plumas import parse
from plumas.serialization import footnotes_to_dict, from_json, to_json

result = parse("| Name | Qty |\n|:-----|----:|\n| tea | 2 |\n\nSee[^1].\n\n[^1]: Fresh.")

payload = to_json(result.document, indent=2)
print(payload)
print(footnotes_to_dict(result.footnotes))

assert from_json(payload) == result.document
