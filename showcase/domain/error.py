"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before any write when a required field is missing or malformed.
    """

    pass


class NotAuthorizedError(DomainError):
    """Raised when a profile attempts to change a work it does not own."""

    def __init__(self, resource: str, resource_id: str, profile_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.profile_id = profile_id
        super().__init__(
            f"Profile {profile_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyVotedError(DomainError):
    """Raised when a profile votes twice for the same work."""

    def __init__(self, work_id: str):
        self.work_id = work_id
        super().__init__("Already voted for this work")


class VoteInProgressError(DomainError):
    """Raised when a vote for the same (profile, work) pair is still in flight."""

    def __init__(self, work_id: str):
        self.work_id = work_id
        super().__init__("A vote for this work is already in progress")


class ProfileCreationError(DomainError):
    """Raised when a new profile could not be stored."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Profile creation failed")


class UploadTooLargeError(DomainError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File is {size} bytes; the limit is {limit} bytes")
