"""Tokenize a lin script and print its tokens."""

from linscan import tokenize

for token in tokenize("'n 10 { dup print } times"):
    print(token)
