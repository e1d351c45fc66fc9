"""Switch delimiters mid-template; earlier tags keep the pair they were scanned with."""

from mustachio import tokenize

for token in tokenize("{{greeting}} {{=<% %>=}}<% name %> {{literal}}"):
    print(f"{token.type.name:<18} {token.text!r:<16} {token.tag_delimiter_pair}")
