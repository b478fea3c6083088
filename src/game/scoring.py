from typing import Dict, Iterable


# Points by word length; anything longer than the table scores LONG_WORD_POINTS
SCORING: Dict[int, int] = {
    3: 1,
    4: 1,
    5: 2,
    6: 3,
    7: 5,
}
LONG_WORD_LENGTH = 8
LONG_WORD_POINTS = 11


def score_word(word: str) -> int:
    """Points for a word, by length only. Words under 3 letters score 0."""
    length = len(word)
    if length >= LONG_WORD_LENGTH:
        return LONG_WORD_POINTS
    return SCORING.get(length, 0)


def total_score(words: Iterable[str]) -> int:
    """Sum of `score_word` over `words`."""
    return sum(score_word(word) for word in words)
