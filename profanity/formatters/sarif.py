"""SARIF (Static Analysis Results Interchange Format) formatter for profanity.

SARIF is a standard format for static analysis tool output.
Specification: https://docs.oasis-open.org/sarif/sarif/v2.1.0/sarif-v2.1.0.html
"""

from sarif_pydantic import (  # type: ignore[import-untyped]
    ArtifactLocation,
    Level,
    Location,
    Message,
    PhysicalLocation,
    Region,
    ReportingDescriptor,
    Result,
    Run,
    Sarif,
    Tool,
    ToolDriver,
)

from profanity import __version__
from profanity.models import ScanResult, Violation

_RULE_DESCRIPTIONS: dict[str, str] = {
    "contains": "File contains a forbidden string",
    "notContains": "File is missing a required string",
    "regex": "File matches a forbidden regular expression",
    "unset": "Rule declares no check",
}


def format_as_sarif(result: ScanResult, *, pretty: bool = True) -> str:
    """Format scan results as SARIF JSON.

    Args:
        result: The scan result to format
        pretty: If True, format with indentation for readability

    Returns:
        SARIF-formatted JSON string
    """
    sarif_log = _create_sarif_log(result)

    if pretty:
        json_output: str = sarif_log.model_dump_json(indent=2, exclude_none=True, by_alias=True)
        return json_output
    json_output = sarif_log.model_dump_json(exclude_none=True, by_alias=True)
    return json_output


def _create_sarif_log(result: ScanResult) -> Sarif:
    """Create a SARIF log object from scan results."""
    return Sarif(
        version="2.1.0",
        schema_uri="https://json.schemastore.org/sarif-2.1.0.json",
        runs=[_create_run(result)],
    )


def _create_run(result: ScanResult) -> Run:
    """Create a SARIF run object."""
    return Run(
        tool=_create_tool(),
        results=[_create_result(violation) for violation in result.violations],
    )


def _rule_id(check: str | None) -> str:
    return f"profanity/{check or 'unset'}"


def _create_tool() -> Tool:
    """Create the SARIF tool descriptor with one rule per check kind."""
    return Tool(
        driver=ToolDriver(
            name="profanity",
            version=__version__,
            semanticVersion=__version__,
            rules=[
                ReportingDescriptor(
                    id=_rule_id(check),
                    name=check,
                    shortDescription=Message(text=description),
                    defaultConfiguration={"level": "error"},
                )
                for check, description in _RULE_DESCRIPTIONS.items()
            ],
        )
    )


def _create_result(violation: Violation) -> Result:
    """Create a SARIF result from a violation."""
    message_text = violation.reason
    if violation.message:
        message_text = f"{violation.message} ({violation.reason})"

    physical_location = PhysicalLocation(
        artifactLocation=ArtifactLocation(
            uri=violation.path.as_posix(),
            uriBaseId="%SRCROOT%",
        ),
        region=Region(startLine=violation.line) if violation.line is not None else None,
    )

    return Result(
        ruleId=_rule_id(violation.check),
        level=Level.ERROR,
        message=Message(text=message_text),
        locations=[Location(physicalLocation=physical_location)],
        properties={
            "rulesFile": violation.rule_file.as_posix(),
            "include": violation.include,
            "exclude": violation.exclude,
        },
    )
