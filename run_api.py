#!/usr/bin/env python3
"""
Startup script for the Safe Routing API server.
"""

import os
import uvicorn
import argparse


def main():
    """Start the FastAPI server."""
    parser = argparse.ArgumentParser(description="Safe Routing API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    parser.add_argument("--zones", default=None, help="Safety zone JSON file (sets SAFE_ROUTING_ZONES_PATH)")
    parser.add_argument("--osrm-url", default=None, help="OSRM server URL (sets SAFE_ROUTING_OSRM_URL)")

    args = parser.parse_args()

    if args.zones:
        os.environ["SAFE_ROUTING_ZONES_PATH"] = os.path.abspath(args.zones)
    if args.osrm_url:
        os.environ["SAFE_ROUTING_OSRM_URL"] = args.osrm_url

    print("Starting Safe Routing API Server")
    print(f"URL: http://{args.host}:{args.port}")
    print(f"Documentation: http://{args.host}:{args.port}/docs")
    print(f"Health check: http://{args.host}:{args.port}/health")
    print("-" * 50)

    # Ensure we're in the right directory
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=True
    )


if __name__ == "__main__":
    main()
