"""Positional-argument bookkeeping and option value lookup."""

from dockcomp.engine.tokens import FlagSet, TokenKind, step, word_at


def first_free_position(words, start: int, flags=None, cword: int | None = None) -> int:
    """Return the index of the first free (non-flag) word after ``start``.

    ``flags`` are the value-consuming flags of the command; their values are
    skipped along with them.  When the walk runs past ``cword`` without
    finding a free word, the returned index is greater than ``cword``.
    Callers only offer positional candidates when the result equals the
    cursor index.
    """
    flags = FlagSet.coerce(flags).valued()
    if cword is None:
        cword = len(words) - 1
    index = start + 1
    while index <= cword:
        kinds, following = step(words, index, flags)
        if kinds[0] is TokenKind.FREE:
            return index
        index = following
    return index


def positional_slot(words, start: int, flags=None, cword: int | None = None) -> int | None:
    """Return which positional argument the cursor word is, or None.

    Slot 0 is the first free word after ``start``, slot 1 the next one,
    and so on.  None means the cursor is not on a free word.
    """
    flags = FlagSet.coerce(flags).valued()
    if cword is None:
        cword = len(words) - 1
    position = first_free_position(words, start, flags, cword)
    slot = 0
    while position < cword:
        position = first_free_position(words, position, flags, cword)
        slot += 1
    return slot if position == cword else None


def value_of(words, start: int, cword: int, flag_pattern) -> str | None:
    """Return the value given to ``flag_pattern`` before the cursor.

    Only words strictly between ``start`` and ``cword`` are scanned, so a
    flag typed after the cursor never influences completion.  The value
    must itself lie before the cursor.
    """
    flags = FlagSet.coerce(flag_pattern)
    for index in range(start + 1, cword):
        hit = flags.match(words[index])
        if hit is None:
            continue
        _, joined = hit
        if joined:
            return joined
        following = index + 1
        if word_at(words, following) == "=":
            following += 1
        if following >= cword:
            return None
        return words[following]
    return None
