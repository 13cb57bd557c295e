from pydantic import BaseModel, Field
from typing import Optional, List


class SearchRequest(BaseModel):
    platform: Optional[str] = Field(None, description="google, chatgpt, deepseek, gemini or mistral")
    query: Optional[str] = Field(None, description="Search query or chat prompt")


class SearchResult(BaseModel):
    title: Optional[str] = None
    link: Optional[str] = None
    snippet: Optional[str] = None


class SearchResults(BaseModel):
    results: List[SearchResult]


class MessageResponse(BaseModel):
    message: str
