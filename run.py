"""
SupplierScan server launcher.

Serves the trust score API with uvicorn on config.API_HOST:config.API_PORT.
"""
import uvicorn
import sys

import config


def banner() -> str:
    """Startup banner listing the scan and lookup routes"""
    base_url = f"http://localhost:{config.API_PORT}"
    lines = [
        "=" * 60,
        f"SupplierScan v{config.API_VERSION} - Supplier Trust Scores",
        "=" * 60,
        "",
        f"Listening on {config.API_HOST}:{config.API_PORT}",
        f"Scan a supplier:    POST {base_url}/api/scan",
        f"Score raw metrics:  POST {base_url}/api/score",
        f"Marketplace search: GET  {base_url}/api/marketplace/search",
        f"Recent scans:       GET  {base_url}/api/history",
        f"Event log:          {config.EVENT_LOG_FILE}",
        f"API Docs:           {base_url}/docs",
        "",
        "Press Ctrl+C to stop",
        "=" * 60,
    ]
    return "\n".join(lines)


if __name__ == "__main__":
    print(banner())
    print()

    try:
        uvicorn.run(
            "engine.api:app",
            host=config.API_HOST,
            port=config.API_PORT,
            reload=False,
            log_level="info"
        )
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        sys.exit(0)
