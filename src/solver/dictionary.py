# Trie-backed word dictionary used by the solver and the submission flow.
# The node walk follows the same shape as a DAWG lookup: follow one child per
# letter and fail fast when a letter has no edge.

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Literal, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

Language = Literal["tr", "en"]

# Turkish dotted/dotless i pairs that str.upper() gets wrong
_TURKISH_UPPER = str.maketrans({"i": "İ", "ı": "I"})


def normalize_word(text: str, language: Language = "tr") -> str:
    """Uppercase `text` using the casing rules of `language`."""
    text = text.strip()
    if language == "tr":
        text = text.translate(_TURKISH_UPPER)
    return text.upper()


@runtime_checkable
class Dictionary(Protocol):
    """Membership and prefix tests over an uppercase word set."""

    def contains(self, word: str) -> bool: ...

    def has_prefix(self, prefix: str) -> bool: ...


class _Node(object):
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: Dict[str, "_Node"] = {}
        self.is_word = False


class TrieDictionary(object):
    """
    Immutable-after-load dictionary backed by a character trie.

    Both `contains` and `has_prefix` cost O(len(word)), independent of the
    number of stored words.
    """

    def __init__(self, words: Iterable[str] = (), language: Language = "tr", min_length: int = 1):
        self.language = language
        self.min_length = min_length
        self._root = _Node()
        self._size = 0
        for word in words:
            self.add(word)

    @classmethod
    def from_words(cls, words: Iterable[str], language: Language = "tr", min_length: int = 1) -> "TrieDictionary":
        return cls(words, language=language, min_length=min_length)

    def add(self, word: str) -> bool:
        """Insert a word; returns False if it was empty, too short or already present."""
        word = normalize_word(word, self.language)
        if not word or len(word) < self.min_length:
            return False
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                child = node.children[letter] = _Node()
            node = child
        if node.is_word:
            return False
        node.is_word = True
        self._size += 1
        return True

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for letter in text:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size

    def words(self) -> Iterable[str]:
        """Yield every stored word in sorted order."""
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for letter in sorted(node.children, reverse=True):
                stack.append((node.children[letter], prefix + letter))


def load_dictionary(
    dictionary_path: str | Path,
    language: Language = "tr",
    min_length: int = 3,
) -> TrieDictionary:
    """
    Load a word list into a TrieDictionary.

    Accepts a plain text file (one word per line, blank lines and lines
    starting with '#' skipped) or a JSON array of strings when the file ends
    in `.json`. Words shorter than `min_length` are skipped.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a JSON file does not hold a list of strings
    """
    path = Path(dictionary_path)
    if not path.is_file():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
            if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
                raise ValueError(f"Expected a JSON array of words in {path}")
            words = data
        else:
            words = [line for line in f if line.strip() and not line.lstrip().startswith("#")]

    dictionary = TrieDictionary(words, language=language, min_length=min_length)
    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary
