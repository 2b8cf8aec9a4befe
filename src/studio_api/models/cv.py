from typing import List, Literal, Optional
from uuid import uuid4
from pydantic import BaseModel, Field


class WorkExperience(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    job_title: str = ""
    company: str = ""
    start_date: str = Field("", description="ISO date, e.g. 2020-01-01")
    end_date: str = ""
    description: str = ""


class Education(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    institution: str = ""
    degree: str = ""
    start_date: str = ""
    end_date: str = ""


class CVData(BaseModel):
    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""
    linkedin: str = ""
    professional_summary: str = ""
    work_experience: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)


CVField = Literal["professional_summary", "work_description"]


class CVFieldTarget(BaseModel):
    """A CV field the model should (re)write."""
    field: CVField
    index: Optional[int] = Field(None, ge=0, description="Work experience index, required for work_description")

    @property
    def key(self) -> str:
        if self.field == "work_description":
            return f"work_description:{self.index}"
        return self.field


class CVStreamUpdate(BaseModel):
    """One keyed update emitted while a CV field is being streamed."""
    key: str
    field: CVField
    index: Optional[int] = None
    kind: Literal["reset", "chunk", "completed", "error"]
    delta: str = ""
    error: Optional[str] = None
