import io

MAX_NUMBER = 999_999_999_999_999_999

_ONES = {
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
}
_TENS = {
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
}

# Most significant first. The ones group has no scale word.
SCALES = (
    (1_000_000_000_000_000, "quadrillion"),
    (1_000_000_000_000, "trillion"),
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
    (1, ""),
)


def _check_number(num):
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"num must be an int, got {type(num).__name__}.")
    if num < 0 or num > MAX_NUMBER:
        raise ValueError(
            f"num {num} is out of range; supported values are 0 to {MAX_NUMBER:_}."
        )


def _words_1_to_99(value):
    if value < 20:
        return _ONES[value]
    tens = (value // 10) * 10
    ones = value % 10
    if ones == 0:
        return _TENS[tens]
    return f"{_TENS[tens]} {_ONES[ones]}"


def _words_1_to_999(value):
    if value < 100:
        return _words_1_to_99(value)
    hundreds = value // 100
    remainder = value % 100
    if remainder == 0:
        return f"{_ONES[hundreds]} hundred"
    return f"{_ONES[hundreds]} hundred and {_words_1_to_99(remainder)}"


def scale_groups(num):
    """Yield ``(group, scale_name)`` for each non-zero 0-999 group of ``num``.

    Groups come out most significant first. ``num`` must already be within
    ``0..MAX_NUMBER``; zero yields nothing.
    """
    for divisor, name in SCALES:
        group = (num // divisor) % 1000
        if group:
            yield group, name


def _phrase_parts(num):
    if num == 0:
        yield _ONES[0]
        return
    emitted = False
    for group, name in scale_groups(num):
        if name:
            yield f"{_words_1_to_999(group)} {name}"
        elif emitted and group < 100:
            yield f"and {_words_1_to_99(group)}"
        else:
            yield _words_1_to_999(group)
        emitted = True


def shortscale(num):
    """Return the English words for ``num`` using the short scale.

    Supports integers from 0 to 999_999_999_999_999_999 (``MAX_NUMBER``).
    Raises ``ValueError`` for values outside that range and ``TypeError`` for
    anything that is not an int.

    >>> shortscale(420_000_999_015)
    'four hundred and twenty billion nine hundred and ninety nine thousand and fifteen'
    """
    _check_number(num)
    return " ".join(_phrase_parts(num))


def shortscale_writer(buffer, num):
    """Append the words for ``num`` to ``buffer`` (anything with ``write(str)``).

    Seekable buffers are moved to their end first, so the phrase always lands
    after the existing content and never overwrites it. Nothing is written
    when ``num`` is rejected.
    """
    _check_number(num)
    seekable = getattr(buffer, "seekable", None)
    if seekable is not None and seekable():
        buffer.seek(0, io.SEEK_END)
    for index, part in enumerate(_phrase_parts(num)):
        if index:
            buffer.write(" ")
        buffer.write(part)
