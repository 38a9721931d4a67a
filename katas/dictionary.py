"""A word dictionary with explicit add, update and delete operations."""


class DictionaryError(Exception):
    """Base error for dictionary operations."""

    message = "dictionary error"

    def __init__(self, word: str) -> None:
        super().__init__(self.message)
        self.word = word


class WordNotFoundError(DictionaryError):
    """The searched word is not in the dictionary."""

    message = "could not find the word you were looking for"


class WordExistsError(DictionaryError):
    """The word to add is already in the dictionary."""

    message = "cannot add word because it already exists"


class WordDoesNotExistError(DictionaryError):
    """The word to update or delete is not in the dictionary."""

    message = "cannot perform operation on word because it does not exist"


class Dictionary(dict):
    """Mapping of words to their definitions."""

    def search(self, word: str) -> str:
        """Return the definition of ``word``."""
        try:
            return self[word]
        except KeyError:
            raise WordNotFoundError(word) from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; fail if it is already defined."""
        if word in self:
            raise WordExistsError(word)
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Replace the definition of an existing word."""
        if word not in self:
            raise WordDoesNotExistError(word)
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove an existing word."""
        if word not in self:
            raise WordDoesNotExistError(word)
        del self[word]