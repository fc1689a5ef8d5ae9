from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class ProcessReq(BaseModel):
    # Untyped so the endpoint checks images first and answers with its own 400 messages
    images: Optional[Any] = Field(default=None, description="Self-describing image strings (data URIs).")
    mode: Optional[Any] = Field(default=None, description="One of 'roast', 'compliment', 'judging'.")

class ProcessResp(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    text: str
    audio_base64: str = Field(alias="audioBase64", description="MP3 bytes, standard base64")

class ErrorResp(BaseModel):
    success: bool = False
    message: str

class ProcessResult(BaseModel):
    text: str
    audio_base64: str
