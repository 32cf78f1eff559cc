from datetime import datetime

from pydantic import BaseModel, Field


class File(BaseModel):
    """A named blob held by the backing store"""
    name: str = Field(..., description="File name, unique within the store")
    content: str = Field(default="", description="File content")
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)

    def read(self) -> str:
        return self.content

    def write(self, content: str) -> None:
        self.content = content
        self.modified_at = datetime.now()
