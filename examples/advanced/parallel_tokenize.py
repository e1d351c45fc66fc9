"""Thread safe — tokenize 1000 templates in parallel."""

from concurrent.futures import ThreadPoolExecutor

from mustachio import tokenize

templates = ["{{#user" + str(i) + "}}Hi {{name}}{{/user" + str(i) + "}}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, templates))

print(f"Tokenized {len(results)} templates in parallel")
print("First template tokens:", len(results[0]))
