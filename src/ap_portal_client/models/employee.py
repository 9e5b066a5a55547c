"""Employee records used for global search in the employee list."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ap_portal_client.models.occupation import Occupation


class Organization(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    org_id: int = Field(alias="orgId")
    org_label: str = Field(default="", alias="orgLabel")
    org_descr: str | None = Field(default=None, alias="orgDescr")


class Branch(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    branch_id: int = Field(alias="branchId")
    branch_name: str = Field(default="", alias="branchName")
    address: str | None = None
    city: str | None = None
    province: str | None = None
    phone: str | None = None


class Employee(BaseModel):
    """Employee row.

    Nested occupation, organization and branch records are reached with dotted
    field paths such as ``occupation.occ_name``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    emp_id: str = Field(alias="empId")
    email: str = ""
    full_name: str = Field(default="", alias="fullName")
    first_name: str = Field(default="", alias="firstName")
    middle_name: str = Field(default="", alias="middleName")
    last_name: str = Field(default="", alias="lastName")
    phone: str | None = None
    hire_dt: date | None = Field(default=None, alias="hireDt")
    termination_dt: date | None = Field(default=None, alias="terminationDt")
    citizen_id_card: str | None = Field(default=None, alias="citizenIdCard")
    passport: str | None = None
    contract_id: str | None = Field(default=None, alias="contractId")
    occupation: Occupation | None = None
    organization: Organization | None = None
    branch: Branch | None = None
    work_status: str | None = Field(default=None, alias="workStatus")
    create_user: str | None = Field(default=None, alias="createUser")
    create_timestamp: datetime | None = Field(default=None, alias="createTimestamp")
    last_update_user: str | None = Field(default=None, alias="lastUpdateUser")
    last_update_timestamp: datetime | None = Field(default=None, alias="lastUpdateTimestamp")
