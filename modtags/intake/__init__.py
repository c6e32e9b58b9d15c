"""
Issue intake - submissions add records, disputes remove them.
"""

# Package initialization for intake module
from .results import ProcessResult
from .verify import ModrinthVerifier, VerificationResult, VerificationStatus
from .submission import SubmissionProcessor
from .dispute import DisputeProcessor

__all__ = [
    'ProcessResult',
    'ModrinthVerifier',
    'VerificationResult',
    'VerificationStatus',
    'SubmissionProcessor',
    'DisputeProcessor'
]
