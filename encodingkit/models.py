from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class DetectionResult(BaseModel):
    encoding: Optional[str] = Field(default=None, examples=["UTF-8"])
    bom: bool = False
    chaos: Optional[float] = None
    coherence: Optional[float] = None
    bytes_sampled: int = 0
    truncated: bool = False

    @property
    def detected(self) -> bool:
        return self.encoding is not None


class ConversionReport(BaseModel):
    input_path: str
    output_path: str
    from_encoding: str
    to_encoding: str
    characters: int = 0
    bytes_written: int = 0
    streamed: bool = False


class DetectResponse(BaseModel):
    filename: Optional[str] = None
    size: int
    detection: DetectionResult


class ConvertedFile(BaseModel):
    sha256: str
    encoding: str
    content_b64: str


class ConvertResponse(BaseModel):
    filename: Optional[str] = None
    from_encoding: str
    converted: ConvertedFile


class HealthResponse(BaseModel):
    ok: bool = True
