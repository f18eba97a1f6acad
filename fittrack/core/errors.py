"""Domain errors. Each carries the HTTP status the API answers with."""


class FitTrackError(Exception):
    """Base for errors surfaced synchronously to the caller."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProfileAlreadyExistsError(FitTrackError):
    status_code = 409

    def __init__(self):
        super().__init__("Profile already exists. Use update instead.")


class ProfileNotFoundError(FitTrackError):
    status_code = 404

    def __init__(self):
        super().__init__("No profile found. Create one first.")


class RecordNotFoundError(FitTrackError):
    status_code = 404

    def __init__(self, table: str, record_id):
        super().__init__(f"{table} record {record_id} not found")
        self.table = table
        self.record_id = record_id


class DailyLogConflictError(FitTrackError):
    """Two recomputes raced to create the first daily log for a date."""

    status_code = 409

    def __init__(self, date: str):
        super().__init__(f"Daily log for {date} was created concurrently; recalculate again.")
        self.date = date


class UnknownAssistantError(FitTrackError):
    status_code = 404

    def __init__(self, name: str):
        super().__init__(f"Unknown assistant: {name}")


class UnknownToolError(FitTrackError):
    status_code = 404

    def __init__(self, assistant: str, tool: str):
        super().__init__(f"Assistant '{assistant}' has no tool '{tool}'")


class AssistantRuntimeUnavailableError(FitTrackError):
    status_code = 503

    def __init__(self):
        super().__init__("Assistant runtime is not configured.")
