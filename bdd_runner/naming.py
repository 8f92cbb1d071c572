"""Conversion of identifiers into human-readable names."""

import re

_SEPARATORS = re.compile(r"[_\-\s]+")


def _split_camel_case(identifier: str) -> str:
    chars: list[str] = []
    for index, char in enumerate(identifier):
        if index and char.isupper():
            previous = identifier[index - 1]
            following = identifier[index + 1 : index + 2]
            # Acronyms stay together: HTTPServer -> HTTP Server.
            if (
                previous.islower()
                or previous.isdigit()
                or (previous.isupper() and following.islower())
            ):
                chars.append(" ")
        chars.append(char)
    return "".join(chars)


def format_name(identifier: str) -> str:
    """Format an identifier as a space separated phrase.

    Underscores and hyphens become spaces and camelCase words are split,
    while the original casing is kept: ``Step_one`` gives ``Step one`` and
    ``userClickedLogin`` gives ``user Clicked Login``. Letter case is taken
    from Unicode, so ``créerÉtape`` gives ``créer Étape``.
    Empty or whitespace-only input gives an empty string.
    """
    return _SEPARATORS.sub(" ", _split_camel_case(identifier)).strip()
