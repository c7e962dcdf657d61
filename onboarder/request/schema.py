"""Pydantic models for the structural decode of a request document."""
from typing import List, Optional
from pydantic import BaseModel, StrictInt, StrictStr

class OptionalEntry(BaseModel):
    """A single entry of the optionals array, before any value checks."""
    name: StrictStr
    count: StrictInt
    unit: Optional[StrictStr] = None

class RequestDocument(BaseModel):
    """Root request schema.

    Every top-level field may be absent here so that a missing value is
    reported by the presence check rather than as a structural error.
    """
    projectname: Optional[StrictStr] = None
    environment: Optional[StrictStr] = None
    role: Optional[StrictStr] = None
    optionals: Optional[List[OptionalEntry]] = None
