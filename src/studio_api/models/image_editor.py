from typing import List
from pydantic import BaseModel, Field


class EditingStep(BaseModel):
    name: str = Field(description="Name of the transformation function, e.g. 'remove_background'")
    description: str = Field(description="Human-readable description of what this step does")
    parameters: str = Field(description="Key-value parameters, e.g. 'contrast: 1.2, brightness: 0.1'")


class EstimatedCompute(BaseModel):
    gpu_seconds: float = Field(ge=0, description="Estimated GPU seconds for the entire pipeline")


class EditingPlan(BaseModel):
    steps: List[EditingStep] = Field(description="Ordered list of editing transformations")
    estimated_compute: EstimatedCompute
