"""
Pydantic schemas for the assistant and SPARC APIs.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CodeRequest(BaseModel):
    """Selected code from the editor."""

    code: str = Field(..., description="Text of the current selection")


class GenerateRequest(BaseModel):
    """Free-text description of the code to generate."""

    prompt: str


class RefactorRequest(BaseModel):
    code: str
    instructions: str = Field(..., description="e.g. 'Make it more efficient, add error handling'")


class AssistantResponse(BaseModel):
    """Result of an assistant command and where the host should put it."""

    title: str
    content: str = ""
    language: str = "markdown"
    target: str = Field("document", description="document | insert")
    success: bool = True
    error: Optional[str] = None

    class Config:
        from_attributes = True


class ChatRequest(BaseModel):
    message: str
    session_id: str = Field("default", description="Chat panel id; history is kept per id")


class ChatMessageSchema(BaseModel):
    role: str
    content: str

    class Config:
        from_attributes = True


class ChatResponse(BaseModel):
    session_id: str
    reply: ChatMessageSchema
    history: List[ChatMessageSchema]


class SparcPhaseInfo(BaseModel):
    key: str
    name: str
    description: str
    next_phase: Optional[str] = None

    class Config:
        from_attributes = True


class SparcAssistanceRequest(BaseModel):
    """Editor context used to ground SPARC guidance."""

    selection: Optional[str] = None
    file_name: Optional[str] = None
    language_id: Optional[str] = None


class SparcReviewRequest(BaseModel):
    document: str = Field(..., description="Full text of the open phase document")
