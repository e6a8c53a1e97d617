"""Domain lookup errors."""

from uuid import UUID


class UnknownProfileError(LookupError):
    """Raised when a profile id is not part of the household."""

    def __init__(self, profile_id: UUID) -> None:
        super().__init__(f"Unknown profile: {profile_id}")
        self.profile_id = profile_id


class UnknownMealTemplateError(LookupError):
    """Raised when a meal template id is not in the catalog."""

    def __init__(self, template_id: UUID) -> None:
        super().__init__(f"Unknown meal template: {template_id}")
        self.template_id = template_id
