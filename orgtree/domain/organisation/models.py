"""Organisation domain models.

Pure domain models for the organisation tree. Uses Pydantic so trees can
be validated from JSON input and dumped back out for the sample command.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EmployeeRole(str, Enum):
    """Known employee role codes.

    Employees store the raw code, so codes outside this enum are still
    valid input and render with a fallback label.
    """

    MANAGER = "C"
    SUPERVISOR = "B"
    WORKER = "A"
    CONTRACTOR = "X"


class Task(BaseModel):
    """A unit of work owned by an employee. Duration is in hours."""

    model_config = ConfigDict(frozen=True)

    id: int
    duration: int = Field(ge=0)


class Department(BaseModel):
    """A grouping node. Children are rendered in the order given."""

    model_config = ConfigDict(frozen=True)

    type: Literal["department"] = "department"
    name: str
    children: list["Unit"] = Field(default_factory=list)


class Employee(BaseModel):
    """A leaf unit holding a role code and a list of tasks."""

    model_config = ConfigDict(frozen=True)

    type: Literal["employee"] = "employee"
    name: str
    role: str
    tasks: list[Task] = Field(default_factory=list)


Unit = Annotated[Union[Department, Employee], Field(discriminator="type")]  # noqa: UP007

Department.model_rebuild()
