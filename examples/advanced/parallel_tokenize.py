"""Lexers share nothing: tokenize 1000 sources in parallel."""

from concurrent.futures import ThreadPoolExecutor

from mallex import tokenize

sources = [f"(def x{i} [{i} {i + 1}]) ; source {i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, sources))

print(f"Tokenized {len(results)} sources in parallel")
print("First:", [t.text for t in results[0]])
print("Last:", [t.text for t in results[-1]])
