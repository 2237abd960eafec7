import argparse
import json
import logging
import sys
from pathlib import Path

from .setting import LOG_LEVELS, get_settings


def setup_logging(log_level: str = "INFO", stream=None) -> None:
    """Configure application logging (stdout unless another stream is given)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(stream or sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def run_analyze(path: str, language: str = "") -> int:
    """Analyze a local file and print the response envelope as JSON."""
    from .api.core import (
        analyze_submission,
        resolve_submission,
        success_response,
        validate_submission,
    )

    file_path = Path(path)
    try:
        content = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        return 1

    submission = resolve_submission(None, language, filename=file_path.name, file_content=content)
    _, rejection = validate_submission(submission, get_settings().max_code_bytes)
    payload = rejection or success_response(analyze_submission(submission), submission.filename)

    print(json.dumps(payload, indent=4))
    return 0 if payload["success"] else 1


def run_server(port: int, log_level: str, debug: bool) -> None:
    """Build the FastAPI app and launch it with uvicorn."""
    from .api.app import create_app
    import uvicorn

    logger.info(f"Starting FastAPI server on http://0.0.0.0:{port}")
    print(f"\n  CodeSketch is running at: http://localhost:{port}")
    print(f"  API docs at: http://localhost:{port}/docs\n")

    if debug:
        # Reload needs an import string, not an app instance
        uvicorn.run(
            "codesketch.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=port,
            log_level=log_level.lower(),
            reload=True,
        )
    else:
        uvicorn.run(
            create_app(),
            host="0.0.0.0",
            port=port,
            log_level=log_level.lower(),
        )


def main():
    """Main entry point for CodeSketch."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="CodeSketch - Code to UML structure service")
    parser.add_argument(
        "--port",
        type=int,
        default=9005,
        help="Port for the API server"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.log_level,
        choices=LOG_LEVELS,
        help="Logging level"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run in debug mode (auto-reload)"
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("serve", help="Run the HTTP API (default)")
    analyze_parser = subparsers.add_parser("analyze", help="Print the structure of a local file")
    analyze_parser.add_argument("path", help="Source file to analyze")
    analyze_parser.add_argument(
        "--language",
        type=str,
        default="",
        help="java, php or python (detected when omitted)"
    )
    args = parser.parse_args()

    if args.command == "analyze":
        # stdout carries the JSON payload
        setup_logging(args.log_level, stream=sys.stderr)
        sys.exit(run_analyze(args.path, args.language))

    setup_logging(args.log_level)

    logger.info("Starting CodeSketch")
    run_server(args.port, args.log_level, args.debug)


if __name__ == "__main__":
    main()
