""" Join raw tokens that touch in the source into shell words. """
from lexer import RawToken


def assemble(raw_tokens: list[RawToken]) -> list[str]:
    """
    Concatenate tokens with no gap between them, so 'foo'"bar"baz is the
    single word foobarbaz while 'foo' "bar" stays two words.
    """
    words = []
    current = None
    last_end = None

    for tok in raw_tokens:
        if current is not None and tok.start == last_end + 1:
            current.append(tok.text)
        else:
            if current is not None:
                words.append("".join(current))
            current = [tok.text]
        last_end = tok.end

    if current is not None:
        words.append("".join(current))

    return words
