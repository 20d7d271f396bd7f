"""
Line tokenizer for treeshell commands.

Double quotes group words into a single token; there is no other quoting or
escaping.
"""

QUOTE = '"'


def tokenize(line: str) -> list[str]:
    """
    Split a command line into tokens.

    Splitting alternates on the double quote character: segments outside
    quotes are split on whitespace, segments inside quotes are kept whole with
    the quotes stripped. Empty segments produce no token.

    Params:
        line: Command line with redirection markers already removed

    Returns:
        Tokens in input order

    Examples:
        'echo "hello world" now' -> ['echo', 'hello world', 'now']
        'set name ""' -> ['set', 'name']
    """
    tokens: list[str] = []
    for position, segment in enumerate(line.strip().split(QUOTE)):
        if not segment:
            continue
        if position % 2 == 0:
            tokens.extend(segment.split())
        else:
            tokens.append(segment)
    return tokens
