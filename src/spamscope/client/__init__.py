# =============================================================================
# Client Module
# =============================================================================
# Talks to the remote spam-classification service over HTTP.
#
# Features:
#   - Text analysis (JSON body)
#   - File analysis (multipart upload)
#   - Result-record parsing and validation
#   - One exception hierarchy for every way a request can fail
# =============================================================================

from spamscope.client.classifier import (
    ClassifierClient,
    ClassifierError,
    ClassifierConnectionError,
    ClassifierHTTPError,
    ClassifierResponseError,
    UploadError,
)

__all__ = [
    "ClassifierClient",
    "ClassifierError",
    "ClassifierConnectionError",
    "ClassifierHTTPError",
    "ClassifierResponseError",
    "UploadError",
]
