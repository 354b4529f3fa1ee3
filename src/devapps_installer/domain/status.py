from enum import Enum

class OutcomeStatus(Enum):
    SUCCESS = "Success"
    UPDATED = "Updated"
    ALREADY_LATEST = "AlreadyLatest"
    SKIPPED = "Skipped"
    FAILED = "Failed"

    @property
    def counts_as_success(self) -> bool:
        return self in (OutcomeStatus.SUCCESS, OutcomeStatus.UPDATED, OutcomeStatus.ALREADY_LATEST)

    @property
    def label(self) -> str:
        return self.value
