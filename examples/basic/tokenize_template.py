"""Tokenize a Mustache template in 3 lines."""

from mustachio import tokenize

for token in tokenize("Hello {{name}}!\n{{#items}}- {{.}}\n{{/items}}"):
    print(token.lineno, token.type.name, repr(token.content))
