"""Thread safe: parse 1000 docs in parallel, each with its own config."""

from concurrent.futures import ThreadPoolExecutor

from plumas import ParseConfig, parse

docs = ["# Doc " + str(i) + "\n\n- item " + str(i) + "\n- item" for i in range(1000)]
grouped = ParseConfig(group_lists=True)


def parse_grouped(source: str):
    return parse(source, config=grouped)


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse_grouped, docs))

print(f"Parsed {len(results)} documents in parallel")
print("First doc children:", len(results[0].children))
print("Last doc children:", len(results[-1].children))
