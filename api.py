from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from reachability.reachable import analyze_reachability


class ReachRequest(BaseModel):
    grid: list[list[int]] = Field(..., description="Rows of integers; rows may have different lengths")
    steps: int = Field(..., description="Maximum number of orthogonal moves from any positive cell")
    use_shortcut: bool = Field(
        default=True,
        description="Allow the rectangular-grid shortcut. Disabling it never changes the count.",
    )
    trace: bool = Field(default=False, description="Include exploration trace output in the response")


class ReachResponse(BaseModel):
    count: int
    strategy: str
    source_cells: int
    message: str
    grid_rows: list[str]
    trace: Optional[list[str]] = None


app = FastAPI(
    title="Reachable Cells API",
    description="Count grid cells reachable from any positive cell within a bounded number of orthogonal moves.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://127.0.0.1:5173", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/reach", response_model=ReachResponse)
def reach(request: ReachRequest) -> ReachResponse:
    try:
        trace_log: list[str] = []
        result = analyze_reachability(
            grid=request.grid,
            steps=request.steps,
            use_shortcut=request.use_shortcut,
            trace=request.trace,
            trace_log=trace_log,
        )
        return ReachResponse(
            count=result["count"],
            strategy=result["strategy"],
            source_cells=result["source_cells"],
            message=result["message"],
            grid_rows=_format_grid_rows(request.grid),
            trace=trace_log if request.trace else None,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _format_grid_rows(grid: list[list[int]]) -> list[str]:
    return [" ".join(str(value) for value in row) for row in grid]
