from pydantic import BaseModel, Field
from typing import Optional

class AutomobileBase(BaseModel):
    make: Optional[str] = Field(None, description="Manufacturer, e.g. Toyota")
    model: Optional[str] = Field(None, description="Model name, e.g. Corolla")
    year: Optional[int] = Field(None, description="Model year")
    vin: Optional[str] = Field(None, description="Vehicle identification number (not enforced unique)")

class AutomobileCreate(AutomobileBase):
    """Schema for adding a new automobile"""
    pass

class AutomobileUpdate(AutomobileBase):
    """Schema for replacing an automobile; omitted fields are stored as null"""
    pass

class Automobile(AutomobileBase):
    """Schema for reading an automobile (output)"""
    id: int

    class Config:
        from_attributes = True

class DeleteConfirmation(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str = Field(..., description="Raw message of the underlying store error")
