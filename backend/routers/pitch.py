import io
import os
import traceback

from fastapi import APIRouter, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from models import FrameAnalysis, FrameRequest, TrackAnalysis
from tuner.config import (
    ALLOWED_EXTENSIONS,
    MAX_FILE_SIZE,
    MAX_FRAME_LENGTH,
    YIN_THRESHOLD,
)
from tuner.preprocessing import load_audio
from tuner.tracker import analyze_frame, track_pitch

router = APIRouter(prefix="/api")


@router.post("/pitch", response_model=FrameAnalysis)
async def detect_frame(request: FrameRequest):
    """Estimate pitch and note for a single frame of samples."""
    if len(request.samples) > MAX_FRAME_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Frame too long: {len(request.samples)} samples, max {MAX_FRAME_LENGTH}",
        )

    threshold = request.threshold if request.threshold is not None else YIN_THRESHOLD
    try:
        return await run_in_threadpool(
            analyze_frame, request.samples, request.sample_rate, threshold=threshold
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=f"Pitch detection failed: {e}")


@router.post("/analyze", response_model=TrackAnalysis)
async def analyze_audio(file: UploadFile):
    """Track pitch frame by frame over an uploaded audio file."""
    print(f"[analyze] Received file: {file.filename}")

    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = os.path.splitext(file.filename)[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        allowed = ", ".join(sorted(e.lstrip(".").upper() for e in ALLOWED_EXTENSIONS))
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type: {ext}. Allowed: {allowed}.",
        )

    content = await file.read()
    print(f"[analyze] File transfer complete: {len(content)} bytes")

    if len(content) > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {MAX_FILE_SIZE // (1024*1024)}MB",
        )

    try:
        samples, sr = await run_in_threadpool(load_audio, io.BytesIO(content))
    except RuntimeError as e:
        raise HTTPException(status_code=400, detail=f"Could not decode audio: {e}")

    print(f"[analyze] Decoded {len(samples)} samples @ {sr}Hz")
    try:
        return await run_in_threadpool(track_pitch, samples, sr)
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=f"Analysis failed: {e}")
