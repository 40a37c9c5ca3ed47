"""Failure signals raised by services, distinct from database errors."""


class ProfileRequiredError(Exception):
    """A profile-scoped operation was attempted without a resolved profile.

    Correct navigation never gets here: accounts without a profile are sent
    to onboarding first.
    """

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Cannot {action}: no profile for this account")


class StorageError(Exception):
    """The object storage collaborator rejected a request."""

    def __init__(self, action: str, status_code: int, detail: str):
        self.action = action
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Storage {action} failed: status={status_code}, body={detail}")
