"""
Pydantic models for Clockify API types.

Attributes are snake_case; the camelCase names used on the wire are aliases,
and `dump` writes them back out in wire form.
"""

from typing import Annotated, Any, List, Optional, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ticktock_mcp.api.errors import DECODE_ERROR, ClockifyAPIError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Clockify sends null for flags it has no value for
Flag = Annotated[bool, BeforeValidator(lambda value: False if value is None else value)]


class ClockifyModel(BaseModel):
    """Base model: camelCase aliases, unknown fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- Entities ---

class Workspace(ClockifyModel):
    id: str
    name: Optional[str] = None


class User(ClockifyModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    active_workspace: Optional[str] = None


class Project(ClockifyModel):
    id: str
    name: Optional[str] = None
    client_id: Optional[str] = None
    billable: Flag = False
    color: Optional[str] = None
    archived: Flag = False


class Task(ClockifyModel):
    id: str
    name: Optional[str] = None
    project_id: Optional[str] = None
    billable: Flag = False
    status: Optional[str] = None  # ACTIVE or DONE


class Tag(ClockifyModel):
    id: str
    name: Optional[str] = None
    workspace_id: Optional[str] = None
    archived: Flag = False


class ClockifyClient(ClockifyModel):
    """Billing client, not to be confused with the API client."""
    id: str
    name: Optional[str] = None
    workspace_id: Optional[str] = None
    archived: Flag = False


class TimeInterval(ClockifyModel):
    start: Optional[str] = None  # ISO 8601
    end: Optional[str] = None  # null while the timer is running
    duration: Optional[Union[str, int]] = None  # ISO 8601 string, seconds in reports


class TimeEntry(ClockifyModel):
    id: str
    description: Optional[str] = None
    project_id: Optional[str] = None
    task_id: Optional[str] = None
    tag_ids: Optional[List[str]] = None
    billable: Flag = False
    time_interval: TimeInterval = Field(default_factory=TimeInterval)
    user_id: Optional[str] = None

    @field_validator("time_interval", mode="before")
    @classmethod
    def _null_interval(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_running(self) -> bool:
        return self.time_interval.end is None


# --- Request bodies ---

class ProjectCreate(ClockifyModel):
    name: str
    client_id: Optional[str] = None
    billable: bool = False
    color: Optional[str] = None
    is_public: bool = True


class ProjectUpdate(ClockifyModel):
    name: Optional[str] = None
    client_id: Optional[str] = None
    billable: Optional[bool] = None
    color: Optional[str] = None
    archived: Optional[bool] = None


class TaskCreate(ClockifyModel):
    name: str
    billable: bool = False


class TaskUpdate(ClockifyModel):
    name: Optional[str] = None
    billable: Optional[bool] = None
    status: Optional[str] = None


class TagCreate(ClockifyModel):
    name: str


class TagUpdate(ClockifyModel):
    name: Optional[str] = None
    archived: Optional[bool] = None


class ClientCreate(ClockifyModel):
    name: str


class ClientUpdate(ClockifyModel):
    name: Optional[str] = None
    archived: Optional[bool] = None


class TimeEntryCreate(ClockifyModel):
    start: str
    end: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[str] = None
    task_id: Optional[str] = None
    tag_ids: Optional[List[str]] = None
    billable: bool = False


class TimeEntryUpdate(ClockifyModel):
    start: str
    end: Optional[str] = None
    description: Optional[str] = None
    project_id: Optional[str] = None
    task_id: Optional[str] = None
    tag_ids: Optional[List[str]] = None
    billable: Optional[bool] = None


# --- Reports ---

class ReportFilter(ClockifyModel):
    """User or project filter of a report request."""
    ids: Optional[List[str]] = None
    contains: Optional[str] = None
    status: Optional[str] = None


class SummaryFilter(ClockifyModel):
    groups: List[str] = Field(default_factory=lambda: ["PROJECT", "TIMEENTRY"])


class DetailedFilter(ClockifyModel):
    page: Optional[int] = None
    page_size: Optional[int] = None


class SummaryReportRequest(ClockifyModel):
    date_range_start: str
    date_range_end: str
    summary_filter: SummaryFilter = Field(default_factory=SummaryFilter)
    users: Optional[ReportFilter] = None
    projects: Optional[ReportFilter] = None


class DetailedReportRequest(ClockifyModel):
    date_range_start: str
    date_range_end: str
    detailed_filter: DetailedFilter = Field(default_factory=DetailedFilter)
    users: Optional[ReportFilter] = None
    projects: Optional[ReportFilter] = None
    sort_column: Optional[str] = None
    sort_order: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class ReportTotal(ClockifyModel):
    total_time: Optional[int] = None
    total_billable_time: Optional[int] = None
    total_amount: Optional[float] = None


class ReportGroup(ClockifyModel):
    name: Optional[str] = None
    duration: Optional[int] = None


class SummaryReport(ClockifyModel):
    totals: Optional[List[Optional[ReportTotal]]] = None
    group_one: Optional[List[ReportGroup]] = None


class DetailedReportEntry(ClockifyModel):
    description: Optional[str] = None
    project_name: Optional[str] = None
    user_name: Optional[str] = None
    time_interval: Optional[TimeInterval] = None
    duration: Optional[int] = None


class DetailedReport(ClockifyModel):
    time_entries: Optional[List[DetailedReportEntry]] = Field(default=None, alias="timeentries")
    totals_count: Optional[int] = None


# --- Marshaling helpers ---

def dump(model: BaseModel) -> dict:
    """Wire form of a model: camelCase keys, unset optionals dropped."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode(model: Type[ModelT], data: Any) -> Optional[ModelT]:
    """Validate a decoded JSON object into `model`; None stays None."""
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ClockifyAPIError(DECODE_ERROR, f"unmarshal response: {e}") from e


def decode_list(model: Type[ModelT], data: Any) -> List[ModelT]:
    """Validate a decoded JSON array into a list of `model`; None becomes []."""
    if data is None:
        return []
    try:
        return TypeAdapter(List[model]).validate_python(data)
    except ValidationError as e:
        raise ClockifyAPIError(DECODE_ERROR, f"unmarshal response: {e}") from e
