"""Thread safe — parse 1000 notes in parallel."""

from concurrent.futures import ThreadPoolExecutor

from unleashed_md import parse_markup

notes = [f"**Note {i}**\nVisit [room {i}](rooms/{i})" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse_markup, notes))

print(f"Parsed {len(results)} notes in parallel")
print("First note segments:", results[0].text)
print("Last note styles:", len(results[-1].styles))
