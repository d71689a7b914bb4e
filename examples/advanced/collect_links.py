"""Index which notes refer to which targets without building documents."""

from collections import defaultdict

from unleashed_md import extract_link_targets, tokenize

notes = {
    "ada": "Captain of the [Gull](ships/gull), born in [Port Vell](places/port-vell).",
    "gull": "A sloop. Home port: [Port Vell](places/port-vell).",
}

backlinks: dict[str, list[str]] = defaultdict(list)
for name, raw in notes.items():
    for target in extract_link_targets(tokenize(raw)):
        backlinks[target].append(name)

for target, sources in sorted(backlinks.items()):
    print(f"{target}: {', '.join(sources)}")
