class TranscriptError(ValueError):
    """Base class for failures while turning source into a transcript."""
