"""Checking and recording submitted words against the round state."""

from ..solver import Dictionary, Language, MIN_WORD_LENGTH, normalize_word
from .models import RoundState, SubmissionResult
from .scoring import score_word


def submit_word(
    state: RoundState,
    word: str,
    dictionary: Dictionary,
    language: Language = "tr",
    auto: bool = False,
) -> SubmissionResult:
    """
    Validate a candidate word and record it if accepted.

    Checks run in order: length, duplicate, dictionary membership. A rejected
    word leaves the state untouched. An accepted word is appended to
    `state.found_words` and its points are added to `state.score`.

    Args:
        state: The round being played
        word: Candidate word, in any case
        dictionary: Word list to check membership against
        language: Casing rules for normalising `word`
        auto: Whether the word came from releasing a drag

    Returns:
        SubmissionResult describing the outcome
    """
    word = normalize_word(word, language)

    if len(word) < MIN_WORD_LENGTH:
        # Short drag releases are reported silently
        return SubmissionResult(
            word=word,
            outcome="TOO_SHORT",
            total_score=state.score,
            auto=auto,
            silent=auto,
        )

    if state.has_found(word):
        return SubmissionResult(word=word, outcome="DUPLICATE", total_score=state.score, auto=auto)

    if not dictionary.contains(word):
        return SubmissionResult(word=word, outcome="NOT_IN_DICTIONARY", total_score=state.score, auto=auto)

    points = score_word(word)
    state.found_words.append(word)
    state.score += points
    return SubmissionResult(
        word=word,
        outcome="ACCEPTED",
        points=points,
        total_score=state.score,
        auto=auto,
    )
