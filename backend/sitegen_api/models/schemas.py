"""API request/response schemas"""

from typing import Optional, List
from pydantic import BaseModel, Field


class IntentRequest(BaseModel):
    """POST /intent request"""
    tamilText: Optional[str] = Field(default=None, description="Tamil text describing the wanted site")


class IntentResponse(BaseModel):
    """POST /intent response"""
    success: bool
    intent: Optional[str] = None
    error: Optional[str] = None


class GenerateCodeRequest(BaseModel):
    """POST /generate-code request"""
    intent: Optional[str] = Field(default=None, description="English intent returned by /intent")


class GenerateCodeResponse(BaseModel):
    """POST /generate-code response"""
    success: bool
    files: Optional[List[str]] = None
    error: Optional[str] = None
