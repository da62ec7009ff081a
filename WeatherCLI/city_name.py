"""City name normalization."""


def _capitalise(word: str) -> str:
    first = word[:1].upper()
    # Characters such as "ß" upper-case to two characters; keep them as-is.
    if len(first) != 1:
        first = word[:1]
    return first + word[1:].lower()


def normalize_city_name(name: str) -> str:
    """
    Title-case a free-form city name.

    Each whitespace-separated word gets an upper-case first character and a
    lower-case remainder; words are rejoined with single spaces.

    >>> normalize_city_name("  new   YORK ")
    'New York'
    """
    return " ".join(_capitalise(word) for word in name.split())
