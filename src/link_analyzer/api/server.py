"""
FastAPI server for link analysis.

Runs analyses, keeps the bounded history, and serves top entries and CSV
exports for stored analyses.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from link_analyzer.aggregation import top_entries
from link_analyzer.api.models import AnalyzeRequest, TopEntriesResponse, TopEntry
from link_analyzer.config import get_config
from link_analyzer.exceptions import ExportError, HistoryError
from link_analyzer.export import distribution, export_filename, to_csv
from link_analyzer.models import AnalyzeOptions, LinkAnalysis
from link_analyzer.pipeline import LinkAnalyzer
from link_analyzer.storage import HistoryStore

logger = logging.getLogger(__name__)

# Process-wide collaborators, created on startup
_analyzer: Optional[LinkAnalyzer] = None
_history: Optional[HistoryStore] = None


def get_analyzer() -> LinkAnalyzer:
    """Get or create the analyzer used by the API."""
    global _analyzer
    if _analyzer is None:
        _analyzer = LinkAnalyzer()
    return _analyzer


def get_history() -> HistoryStore:
    """Get or create the history store used by the API."""
    global _history
    if _history is None:
        _history = HistoryStore()
    return _history


def init_history(store: Optional[HistoryStore] = None) -> HistoryStore:
    """Install a history store (defaults to one built from config)."""
    global _history
    _history = store or HistoryStore()
    return _history


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Opens the history store on startup.
    """
    store = get_history()
    logger.info(f"Starting up: history at {store.path} ({len(store.load())} analyses)")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Link Analyzer API",
    description="Normalize, validate and summarize lists of links",
    version="0.1.0",
    lifespan=lifespan,
)


def _require_analysis(store: HistoryStore, analysis_id: str) -> LinkAnalysis:
    analysis = store.get(analysis_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail=f"Analysis not found: {analysis_id}")
    return analysis


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Link Analyzer API is running"}


@app.post("/v1/analyze", response_model=LinkAnalysis, response_model_exclude_none=True)
def analyze(
    request: AnalyzeRequest,
    analyzer: LinkAnalyzer = Depends(get_analyzer),
    store: HistoryStore = Depends(get_history),
) -> LinkAnalysis:
    """
    Analyze a block of links and optionally store the result in history.

    Args:
        request: Input text and options (unset options use config defaults)

    Returns:
        The LinkAnalysis record
    """
    defaults = get_config().analysis
    options = AnalyzeOptions(
        assume_https=(
            defaults.assume_https if request.assume_https is None else request.assume_https
        ),
        dedupe=defaults.dedupe if request.dedupe is None else request.dedupe,
    )

    analysis = analyzer.analyze(request.input, options)

    if request.save:
        try:
            store.add(analysis)
        except HistoryError as e:
            logger.error(f"Error saving analysis {analysis.id}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    return analysis


@app.get(
    "/v1/history", response_model=list[LinkAnalysis], response_model_exclude_none=True
)
def list_history(store: HistoryStore = Depends(get_history)) -> list[LinkAnalysis]:
    """List stored analyses, most recent first."""
    return store.load()


@app.delete("/v1/history", status_code=204)
def clear_history(store: HistoryStore = Depends(get_history)) -> Response:
    """Remove all stored analyses."""
    try:
        store.clear()
    except HistoryError as e:
        logger.error(f"Error clearing history: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")
    return Response(status_code=204)


@app.get(
    "/v1/history/{analysis_id}",
    response_model=LinkAnalysis,
    response_model_exclude_none=True,
)
def get_analysis(
    analysis_id: str, store: HistoryStore = Depends(get_history)
) -> LinkAnalysis:
    """
    Get a stored analysis.

    Raises:
        404: If the analysis is not in history
    """
    return _require_analysis(store, analysis_id)


@app.get("/v1/history/{analysis_id}/top/{field}", response_model=TopEntriesResponse)
def get_top_entries(
    analysis_id: str,
    field: str,
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Maximum entries"),
    store: HistoryStore = Depends(get_history),
) -> TopEntriesResponse:
    """
    Get the most frequent keys of a protocol/domain/tld distribution.

    Raises:
        400: If field is not a known distribution
        404: If the analysis is not in history
    """
    analysis = _require_analysis(store, analysis_id)
    limit = limit or get_config().analysis.top_limit

    try:
        entries = top_entries(distribution(analysis, field), limit)
    except ExportError as e:
        logger.warning(f"Top entries lookup failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return TopEntriesResponse(
        analysis_id=analysis.id,
        field=field,
        entries=[TopEntry(key=key, count=count) for key, count in entries],
    )


@app.get("/v1/history/{analysis_id}/export.csv")
def export_analysis(
    analysis_id: str, store: HistoryStore = Depends(get_history)
) -> Response:
    """Download a stored analysis as CSV."""
    analysis = _require_analysis(store, analysis_id)
    filename = export_filename(analysis)
    return Response(
        content=to_csv(analysis),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Custom 500 handler."""
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def main():
    """Run the server (for development)."""
    import uvicorn

    config = get_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
