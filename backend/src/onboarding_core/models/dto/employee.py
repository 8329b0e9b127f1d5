"""Employee DTOs."""

from datetime import date

from pydantic import BaseModel, EmailStr, Field

from onboarding_core.constants.validation import MAX_DEPARTMENT_LENGTH, MAX_NAME_LENGTH


class EmployeeCreate(BaseModel):
    """DTO for creating an employee profile."""

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH, description="Full name of the employee")
    email: EmailStr = Field(description="Employee email address")
    department: str | None = Field(default=None, max_length=MAX_DEPARTMENT_LENGTH, description="Department name")
    start_date: date | None = Field(default=None, description="Employment start date")


class EmployeeUpdate(BaseModel):
    """DTO for editing an employee profile."""

    name: str | None = Field(
        default=None, min_length=1, max_length=MAX_NAME_LENGTH, description="Full name of the employee"
    )
    email: EmailStr | None = Field(default=None, description="Employee email address")
    department: str | None = Field(default=None, max_length=MAX_DEPARTMENT_LENGTH, description="Department name")
    start_date: date | None = Field(default=None, description="Employment start date")
