from fastapi import APIRouter, HTTPException, Depends, Request
from pydantic import BaseModel
from breakpeak.entity import PeakWindow, Rejection
from breakpeak.service import BreakAccumulatorService

router = APIRouter(
  prefix='/breaks',
  tags=['breaks']
)

class BreakRecord(BaseModel):
    record: str

class BusiestResponse(BaseModel):
    peak: PeakWindow
    summary: str

class CountsResponse(BaseModel):
    counts: list[int]
    area: int
    accepted: int

def get_accumulator(request: Request) -> BreakAccumulatorService:
    return request.app.state.accumulator

def _busiest(peak: PeakWindow) -> dict:
    return {
        "peak": peak,
        "summary": peak.describe()
    }

@router.post("", response_model=BusiestResponse)
async def submit_break(
    body: BreakRecord,
    accumulator: BreakAccumulatorService = Depends(get_accumulator)
):
    result = accumulator.submit(body.record)
    if isinstance(result, Rejection):
        raise HTTPException(
            status_code=422,
            detail={
                "kind": result.kind.value,
                "field": result.field,
                "message": result.message
            }
        )

    return _busiest(result)

@router.get("/busiest", response_model=BusiestResponse)
async def busiest(accumulator: BreakAccumulatorService = Depends(get_accumulator)):
    return _busiest(accumulator.find_peak())

@router.get("/counts", response_model=CountsResponse)
async def counts(accumulator: BreakAccumulatorService = Depends(get_accumulator)):
    return {
        "counts": accumulator.counts,
        "area": accumulator.area,
        "accepted": accumulator.accepted
    }
