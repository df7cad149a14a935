"""Cache a token stream to JSON and regenerate source from it."""

from pathlib import Path

from linscan import tokenize
from linscan.serialization import detokenize, from_json, to_json

path = Path(__file__).resolve().parent.parent / "01.lin"
tokens = tokenize(path.read_text(encoding="utf-8"), source_file=path.name)

json_str = to_json(tokens)
restored = from_json(json_str)

print("Original == restored:", tokens == restored)
print("Canonical source:", detokenize(restored))
