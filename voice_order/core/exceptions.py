"""Domain exceptions."""


class VoiceOrderError(Exception):
    """Base class for voice order errors."""


class TokenizationError(VoiceOrderError):
    """Raised when the morphological tokenizer cannot process an utterance."""


class VocabularyError(VoiceOrderError):
    """Raised when the vocabulary data file is missing or malformed."""
