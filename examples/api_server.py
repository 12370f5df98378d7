"""
Example: API Server

Demonstrates running the FastAPI server for link analysis.

Start the server and query it:
```bash
# Start the server
uv run python examples/api_server.py

# In another terminal, analyze some links:
curl -X POST http://localhost:8000/v1/analyze \
     -H "Content-Type: application/json" \
     -d '{"input": "https://vercel.com\\nnextjs.org/docs\\nnota-url"}'
curl http://localhost:8000/v1/history
```
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run the API server."""
    import uvicorn

    from link_analyzer.api.server import app
    from link_analyzer.config import get_config

    config = get_config()

    print("=" * 80)
    print("Starting Link Analyzer API Server")
    print("=" * 80)
    print()
    print(f"The server will start on http://{config.server.host}:{config.server.port}")
    print(f"History is stored under {config.history.base_path}")
    print()
    print("API Endpoints:")
    print("  GET    /                                  - Health check")
    print("  POST   /v1/analyze                        - Analyze links")
    print("  GET    /v1/history                        - List saved analyses")
    print("  DELETE /v1/history                        - Clear history")
    print("  GET    /v1/history/{id}                   - Get one analysis")
    print("  GET    /v1/history/{id}/top/{field}       - Top protocol/domain/tld entries")
    print("  GET    /v1/history/{id}/export.csv        - Download as CSV")
    print()
    print("=" * 80)
    print()

    # Run server
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level="info")


if __name__ == "__main__":
    main()
