"""
Event model definitions for self-reported activity records.
"""
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel

class WellnessEntry(BaseModel):
    """
    Represents a daily tracker entry, including the cycle phase the user logged.
    """
    user_id: str
    entry_date: date
    cycle_phase: Optional[str] = None
    notes: Optional[str] = None

class CheckInLog(BaseModel):
    """
    Represents a quick check-in where the user reported how they are feeling.
    """
    user_id: str
    feeling_id: str
    feeling_label: Optional[str] = None
    created_at: datetime
