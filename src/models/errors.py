"""
Exceptions raised at the boundaries of the external collaborators.
"""


class FeedbackPipelineError(Exception):
    """Base class for feedback pipeline errors."""


class ProviderFailure(FeedbackPipelineError):
    """The language model provider could not produce a completion."""


class StoreFailure(FeedbackPipelineError):
    """The feedback store could not complete a read or write."""
