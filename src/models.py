from typing import TypedDict, Optional, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Entity(BaseModel):
    """One resolved entity (usually a person) mentioned in a command.

    Every field is optional. Values of the wrong type degrade to the default
    instead of failing the whole analysis.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    name: Optional[str] = Field(default=None, description="Full name")
    department: Optional[str] = Field(default=None, description="Department, inferred from context")
    position: Optional[str] = Field(default=None, description="Current position")
    traits: list[str] = Field(default_factory=list, description="Key characteristics")

    @field_validator("name", "department", "position", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("traits", mode="before")
    @classmethod
    def _string_traits(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        return [trait for trait in value if isinstance(trait, str)]


class AnalysisResult(BaseModel):
    """Structured analysis of one user command."""
    model_config = ConfigDict(frozen=True)

    instructions: list[str] = Field(
        default_factory=list,
        description="Most important instruction (at most one after normalization)"
    )
    actions: list[str] = Field(
        default_factory=list,
        description="Verb+object actions (at most two after normalization)"
    )
    resolved_entities: dict[str, Entity] = Field(
        default_factory=dict,
        description="Entity key (e.g. a person's name) mapped to its record"
    )

    @field_validator("instructions", "actions", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("resolved_entities", mode="before")
    @classmethod
    def _drop_malformed_entities(cls, value: Any) -> Any:
        # Non-object entries are skipped, not treated as a decode failure
        if value is None:
            return {}
        if isinstance(value, dict):
            return {key: details for key, details in value.items() if isinstance(details, (dict, Entity))}
        return value


class CommandState(TypedDict):
    # Input
    user_input: str

    # Analysis (from analyze node, replaced by normalize node)
    analysis: Optional[AnalysisResult]
    raw_response: Optional[str]            # Model's raw text, kept for error reports

    # Failure details (from analyze node)
    error: Optional[str]

    # Workflow status
    status: str  # "pending" | "analyzed" | "normalized" | "presented" | "failed"
