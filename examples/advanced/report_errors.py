"""Report lexical errors with their location."""

from linscan import LexError, tokenize

for source in ["1.2.3", "foo'bar", '"open', "λ"]:
    try:
        tokenize(source, source_file="<demo>")
    except LexError as err:
        print(f"{source!r:>10} -> {err} (scanned {err.lexeme!r})")
