# =============================================================================
# Analysis Result Model
# =============================================================================
# The classifier service answers every analysis request with a "result record"
# - a small JSON object describing its verdict:
#
#   {
#     "prediction": "spam",          # "spam", "ham" or "error"
#     "confidence": 97.2,            # percentage, 0-100
#     "latency": 12.4,               # milliseconds spent classifying
#     "spam_keywords": ["won", ...], # optional, ordered
#     "spam_probability": 97.2,      # optional, percentage
#     "ham_probability": 2.8,        # optional, percentage
#     "cleaned_text": "...",         # optional
#     "filename": "mail.eml"         # optional, file analyses only
#   }
#
# This module turns that JSON into a typed dataclass and rejects bodies that
# are missing the required fields.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Prediction(str, Enum):
    """The classifier's verdict for a message."""
    SPAM = "spam"
    HAM = "ham"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisResult:
    """
    A parsed classification result.

    Attributes:
        prediction: Verdict reported by the classifier.
        confidence: Confidence of the verdict, as a percentage (0-100).
        latency: Time the classifier spent on the request, in milliseconds.
        spam_keywords: Words that pushed the message towards spam, in the
                       order the classifier reported them. None if the
                       classifier did not report any.
        spam_probability: Explicit spam probability (percentage), if reported.
        ham_probability: Explicit ham probability (percentage), if reported.
        cleaned_text: Normalized text the classifier actually scored.
        filename: Name of the uploaded file (file analyses only).
        error: Error detail reported alongside an "error" prediction.
    """
    prediction: Prediction
    confidence: int | float
    latency: int | float
    spam_keywords: tuple[str, ...] | None = None
    spam_probability: int | float | None = None
    ham_probability: int | float | None = None
    cleaned_text: str | None = None
    filename: str | None = None
    error: str | None = None

    @property
    def is_spam(self) -> bool:
        """Returns True if the classifier flagged the message as spam."""
        return self.prediction is Prediction.SPAM

    @classmethod
    def from_dict(cls, data: Any) -> "AnalysisResult":
        """
        Build a result from a decoded JSON response body.

        Args:
            data: The decoded JSON value.

        Returns:
            The parsed AnalysisResult.

        Raises:
            ResultFormatError: If the body is not an object, is missing a
                               required field, or has a field of the wrong type.
        """
        if not isinstance(data, dict):
            raise ResultFormatError(f"Expected a JSON object, got {type(data).__name__}")

        try:
            prediction = Prediction(data["prediction"])
        except KeyError:
            raise ResultFormatError("Missing field: prediction") from None
        except ValueError:
            raise ResultFormatError(f"Unknown prediction: {data['prediction']!r}") from None

        keywords = data.get("spam_keywords")
        if keywords is not None:
            if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
                raise ResultFormatError("spam_keywords must be a list of strings")
            keywords = tuple(keywords)

        return cls(
            prediction=prediction,
            confidence=_required_number(data, "confidence"),
            latency=_required_number(data, "latency"),
            spam_keywords=keywords,
            spam_probability=_optional_number(data, "spam_probability"),
            ham_probability=_optional_number(data, "ham_probability"),
            cleaned_text=_optional_str(data, "cleaned_text"),
            filename=_optional_str(data, "filename"),
            error=_optional_str(data, "error"),
        )


def _is_number(value: Any) -> bool:
    # bool is an int subclass, but true/false is never a valid percentage
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _required_number(data: dict[str, Any], key: str) -> int | float:
    if key not in data:
        raise ResultFormatError(f"Missing field: {key}")
    value = data[key]
    if not _is_number(value):
        raise ResultFormatError(f"Field {key} must be a number, got {value!r}")
    return value


def _optional_number(data: dict[str, Any], key: str) -> int | float | None:
    value = data.get(key)
    if value is None:
        return None
    if not _is_number(value):
        raise ResultFormatError(f"Field {key} must be a number, got {value!r}")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return str(value)


class ResultFormatError(ValueError):
    """Raised when a response body is not a valid result record."""
    pass
