"""Exception types for the title analysis pipeline.

WHY: Callers (CLI, HTTP API, embedding applications) need to tell apart
the three ways an analysis can fail: bad input bytes, a broken analyzer,
and an unrenderable result. Each is terminal for that single title.

HOW: A common base class, TitleWrapError, with one subclass per failure
kind. They are raised where the failure is detected and caught only at
entry points.

RULES:
- No partial results: a raised error means no tokens and no break indices.
- No retries inside the library; retry policy belongs to the caller.
- The normalizer, classifier and selector never raise these.
"""


class TitleWrapError(Exception):
    """Base class for all title analysis failures."""


class InputDecodingError(TitleWrapError, ValueError):
    """Raised when raw input bytes are not valid UTF-8.

    WHY: The byte-level entry point receives buffers from other runtimes;
    a bad buffer must fail loudly instead of being analyzed as garbage.

    RULES:
    - Message includes the decoder's description of the bad position
    """


class AnalyzerError(TitleWrapError):
    """Raised when the morphological analyzer cannot segment the text.

    WHY: The dictionary may fail to load, or tokenization may fail. The
    pipeline must propagate this rather than return an empty token list,
    which would be indistinguishable from an empty title.

    RULES:
    - The original exception is chained as __cause__
    """


class SerializationError(TitleWrapError):
    """Raised when an analysis cannot be rendered as a JSON record.

    RULES:
    - Covers both JSON encoding failures and schema validation failures
    """
