"""Two ways to notice an unterminated string."""

from mallex import ScanConfig, TokenStream, TruncatedInput, scan_into, tokenize

source = '(println "never closed)'

# Lenient scan, then check the result
out = []
result = scan_into(source, out)
print([t.text for t in out], "truncated:", result.truncated, "at offset", result.consumed)

# Strict mode raises at the stop position
try:
    tokenize(source, source_file="repl.mal", config=ScanConfig(strict=True))
except TruncatedInput as e:
    print("error:", e)

# A stream built from the same source remembers the truncation
stream = TokenStream.from_source(source)
print([t.text for t in stream], "stream truncated:", stream.truncated)
