"""Outcome reason value object."""

from enum import StrEnum, auto


class OutcomeReason(StrEnum):
    """Why a token was skipped or failed."""

    NO_MATCHING_REGISTRY = auto()
    DECODE_ERROR = auto()
    RESOLVE_ERROR = auto()
    DIRECTORY_ERROR = auto()
    CREDENTIAL_STORE_ERROR = auto()
    AMBIGUOUS_CREDENTIAL_STATE = auto()
    PARTIAL_CREATE_FAILURE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def requires_operator(self) -> bool:
        """Check if this reason needs manual cleanup in Rancher."""
        return self in {
            OutcomeReason.AMBIGUOUS_CREDENTIAL_STATE,
            OutcomeReason.PARTIAL_CREATE_FAILURE,
        }

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case OutcomeReason.NO_MATCHING_REGISTRY:
                return "No matching registry"
            case OutcomeReason.DECODE_ERROR:
                return "Token decode error"
            case OutcomeReason.RESOLVE_ERROR:
                return "Endpoint resolve error"
            case OutcomeReason.DIRECTORY_ERROR:
                return "Registry directory error"
            case OutcomeReason.CREDENTIAL_STORE_ERROR:
                return "Credential store error"
            case OutcomeReason.AMBIGUOUS_CREDENTIAL_STATE:
                return "Ambiguous credential state"
            case OutcomeReason.PARTIAL_CREATE_FAILURE:
                return "Partial create failure"
