import base64
import hashlib
import io

from fastapi import FastAPI, UploadFile, File, Form, HTTPException

from .charsets import display_name
from .config import configure_logging, get_settings
from .errors import UnsupportedEncodingError
from .files import detect_stream, transcode
from .models import ConvertResponse, DetectResponse, HealthResponse

configure_logging(get_settings().log_level)

app = FastAPI(
    title="encodingkit",
    description="Character encoding detection and conversion",
    version="0.1.0",
)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/detect", response_model=DetectResponse)
async def detect_upload(file: UploadFile = File(...)):
    raw = await file.read()
    detection = detect_stream(io.BytesIO(raw))
    return DetectResponse(filename=file.filename, size=len(raw), detection=detection)


@app.post("/convert", response_model=ConvertResponse)
async def convert_upload(
    file: UploadFile = File(...),
    from_encoding: str = Form(...),
    to_encoding: str = Form(...),
):
    raw = await file.read()
    try:
        converted = transcode(raw, from_encoding, to_encoding)
    except UnsupportedEncodingError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnicodeError as e:
        raise HTTPException(status_code=422, detail=f"Cannot convert from {from_encoding} to {to_encoding}: {e}")

    return {
        "filename": file.filename,
        "from_encoding": display_name(from_encoding),
        "converted": {
            "sha256": hashlib.sha256(converted).hexdigest(),
            "encoding": display_name(to_encoding),
            "content_b64": base64.b64encode(converted).decode("ascii"),
        },
    }
