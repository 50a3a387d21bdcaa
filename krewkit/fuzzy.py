"""Fuzzy matching of a pattern against a list of strings.

Characters of the pattern must appear in order in a candidate string.
Matches get bonuses for starting the string, following a separator,
hitting a camel-case boundary or being adjacent to the previous match.
They get penalties for unmatched leading and unmatched characters.
"""

from dataclasses import dataclass, field

FIRST_CHAR_MATCH_BONUS = 10
MATCH_FOLLOWING_SEPARATOR_BONUS = 20
CAMEL_CASE_MATCH_BONUS = 20
ADJACENT_MATCH_BONUS = 5
UNMATCHED_LEADING_CHAR_PENALTY = -5
MAX_UNMATCHED_LEADING_CHAR_PENALTY = -15

_SEPARATORS = frozenset("/-_ .\\")


@dataclass
class Match:
    """A string that matched the pattern.

    ``index`` is its position in the searched data, ``matched_indexes`` are
    the UTF-8 byte offsets of the matched characters.
    """

    text: str
    index: int
    matched_indexes: list = field(default_factory=list)
    score: int = 0


def _equal_fold(a, b):
    """Compare two characters ignoring simple case differences."""
    if a == b:
        return True
    if not a or not b:
        return False
    return a.lower() == b.lower() or a.upper() == b.upper()


def _byte_offsets(text):
    offset = 0
    for char in text:
        yield offset, char
        offset += len(char.encode("utf-8", "surrogatepass"))


def _match(pattern, text, position):
    """Return a Match for ``text`` or None when not every pattern character is found."""
    chars = list(_byte_offsets(text))
    total_bytes = len(text.encode("utf-8", "surrogatepass"))

    matched = []
    total_score = 0
    pattern_index = 0
    best_score = -1
    matched_index = -1
    adjacent_bonus = 0
    last = ""
    last_index = 0

    for k, (offset, candidate) in enumerate(chars):
        if _equal_fold(candidate, pattern[pattern_index]):
            score = FIRST_CHAR_MATCH_BONUS if offset == 0 else 0
            if last.islower() and candidate.isupper():
                score += CAMEL_CASE_MATCH_BONUS
            if offset != 0 and last in _SEPARATORS:
                score += MATCH_FOLLOWING_SEPARATOR_BONUS
            if matched:
                bonus = adjacent_bonus * 2 + ADJACENT_MATCH_BONUS if matched[-1] == last_index else 0
                score += bonus
                adjacent_bonus += bonus
            if score > best_score:
                best_score = score
                matched_index = offset

        next_pattern = pattern[pattern_index + 1] if pattern_index < len(pattern) - 1 else ""
        next_char = chars[k + 1][1] if k + 1 < len(chars) else ""

        # The best candidate for the current pattern character is settled
        # once the next pattern character comes up or the string ends.
        if (_equal_fold(next_pattern, next_char) or not next_char) and matched_index > -1:
            if not matched:
                best_score += max(
                    matched_index * UNMATCHED_LEADING_CHAR_PENALTY,
                    MAX_UNMATCHED_LEADING_CHAR_PENALTY,
                )
            total_score += best_score
            matched.append(matched_index)
            best_score = -1
            pattern_index += 1

        last_index = offset
        last = candidate

    total_score += len(matched) - total_bytes
    if len(matched) != len(pattern):
        return None
    return Match(text=text, index=position, matched_indexes=matched, score=total_score)


def find(pattern, data):
    """Return the strings of ``data`` matching ``pattern``, best score first.

    An empty pattern matches nothing. Matches with equal scores keep the
    order they have in ``data``.
    """
    if not pattern:
        return []
    pattern = list(pattern)
    matches = (_match(pattern, text, position) for position, text in enumerate(data))
    return sorted((m for m in matches if m is not None), key=lambda m: -m.score)