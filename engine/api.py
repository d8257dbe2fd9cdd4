"""
FastAPI backend for SupplierScan.

Endpoints:
- POST /api/scan: Scan a supplier URL
- POST /api/score: Score raw supplier metrics
- GET /api/platforms: List known marketplaces
- GET /api/history: Recent scans for a user
- DELETE /api/history: Clear a user's recent scans
- GET /api/marketplace/search: Search the supplier catalog
- GET /api/events: Fetch recent events
- GET /api/status: System health check
"""
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from engine.pipeline import scan_pipeline
from engine.scoring.trust_score_engine import trust_score_engine
from engine.history.scan_history import scan_history
from engine.marketplace.search import marketplace_search
from engine.logging.event_logger import logger
from engine.schemas import (
    ScanRequest, ScanResponse, SupplierMetrics, ScoringResult,
    Platform, SystemStatus, EventLevel
)
import config

# Create FastAPI app
app = FastAPI(
    title="SupplierScan API",
    version=config.API_VERSION,
    description="SupplierScan: Trust scores for marketplace suppliers"
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)


# ==================== Scan Endpoints ====================

@app.post("/api/scan", response_model=ScanResponse)
async def scan_supplier(payload: Optional[ScanRequest] = None):
    """
    Scan a supplier URL.

    Detects the marketplace, scores the supplier, and suggests alternatives.
    The scan is also added to the caller's recent history.
    """
    url = payload.url if payload else None
    if not url or not isinstance(url, str):
        raise HTTPException(status_code=400, detail="Missing or invalid 'url' in body")

    try:
        return await scan_pipeline.scan(url, user_id=payload.user_id)
    except Exception as e:
        try:
            await logger.log_scan_failure(url, str(e), user_id=payload.user_id)
        except OSError as log_error:
            # Event log itself is unwritable; still answer with JSON
            print(f"ERROR writing scan failure event: {log_error}")
        raise HTTPException(status_code=500, detail="Internal error while scanning supplier")


@app.get("/api/scan")
async def scan_wrong_method():
    """Scans are POST only"""
    raise HTTPException(status_code=405, detail="Use POST /api/scan")


@app.post("/api/score", response_model=ScoringResult)
async def score_metrics(metrics: SupplierMetrics):
    """
    Score supplier metrics directly.

    Any metric may be omitted; missing ones fall back to category baselines.
    """
    try:
        return trust_score_engine.score(metrics)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/platforms")
async def list_platforms():
    """Known marketplaces and their display names"""
    platforms = scan_pipeline.known_platforms()
    return {"platforms": [p.model_dump(by_alias=True) for p in platforms]}


# ==================== History Endpoints ====================

@app.get("/api/history")
async def get_history(user_id: str = "demo-user"):
    """Recent scans for user, newest first"""
    entries = scan_history.list(user_id)
    return {
        "user_id": user_id,
        "history": [e.model_dump(by_alias=True) for e in entries],
        "total_count": len(entries)
    }


@app.delete("/api/history")
async def clear_history(user_id: str = "demo-user"):
    """Clear recent scans for user"""
    try:
        removed = scan_history.clear(user_id)
        await logger.log_history_cleared(user_id=user_id, removed=removed)
        return {"status": "cleared", "user_id": user_id, "removed": removed}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# ==================== Marketplace Endpoints ====================

@app.get("/api/marketplace/search")
async def search_marketplace(
    q: str = "",
    platform: Optional[Platform] = None,
    min_score: Optional[int] = Query(default=None, ge=0, le=100),
    limit: int = Query(default=config.MARKETPLACE_DEFAULT_LIMIT, ge=1, le=50)
):
    """
    Search the supplier catalog.

    Args:
        q: Text to match against supplier name, category and notes
        platform: Restrict to one marketplace
        min_score: Minimum trust score
        limit: Maximum number of results
    """
    try:
        results = marketplace_search.search(
            query=q,
            platform=platform,
            min_score=min_score,
            limit=limit
        )
        await logger.log_marketplace_search(q, len(results), platform=platform)
        return {
            "query": q,
            "results": [r.model_dump(by_alias=True) for r in results],
            "total_count": len(results)
        }
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


# ==================== Event & System Endpoints ====================

@app.get("/api/events")
async def get_events(limit: int = Query(default=100, ge=1), level: Optional[str] = None):
    """
    Fetch recent events from log.

    Args:
        limit: Maximum number of events to return
        level: Filter by event level (Information, Warning, Error, Critical)
    """
    try:
        event_level = EventLevel(level) if level else None
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown event level: {level}")

    try:
        events = logger.read_events(limit=limit, level=event_level)
        return {"events": [e.model_dump() for e in events]}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/status", response_model=SystemStatus)
async def system_status():
    """System health check"""
    try:
        return SystemStatus(
            status="healthy",
            version=config.API_VERSION,
            known_platforms=len(config.PLATFORM_PATTERNS),
            history_entries=scan_history.count(),
            event_count=logger.get_event_count()
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/")
async def root():
    """Health check"""
    return {
        "status": "SupplierScan API running",
        "version": config.API_VERSION,
        "endpoints": {
            "docs": "/docs",
            "scan": "/api/scan",
            "marketplace": "/api/marketplace/search"
        }
    }


# ==================== Startup/Shutdown ====================

@app.on_event("startup")
async def startup():
    """Log service start"""
    print("Starting SupplierScan API...")

    try:
        await scan_pipeline.initialize()
        print(f"Known platforms: {len(config.PLATFORM_PATTERNS)}")
        print("SupplierScan API ready!")
    except OSError as e:
        print(f"ERROR during startup: {e}")


@app.on_event("shutdown")
async def shutdown():
    """Cleanup on shutdown"""
    print("Shutting down SupplierScan API...")
