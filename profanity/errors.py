from pathlib import Path


class ProfanityError(Exception):
    """Base user-facing error that aborts a scan."""


class RuleFileError(ProfanityError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RuleParseError(RuleFileError):
    """Raised when a rule-definition file cannot be deserialized."""


class GlobPatternError(ProfanityError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid glob pattern '{pattern}' ({detail})")


class RulePatternError(ProfanityError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid regex '{pattern}' ({detail})")
