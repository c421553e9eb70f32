"""Entry point for the ghost-web CLI."""

from __future__ import annotations

import argparse
import logging

from ghost.ai.models import DEFAULT_MODEL_ID, DEFAULT_PROVIDER


def main() -> None:
    parser = argparse.ArgumentParser(description="ghost-web: inline ghost-text completion server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    parser.add_argument("--provider", default=DEFAULT_PROVIDER, help=f"Model provider (default: {DEFAULT_PROVIDER})")
    parser.add_argument("--model", default=DEFAULT_MODEL_ID, help=f"Model id (default: {DEFAULT_MODEL_ID})")
    parser.add_argument("--settings", default=None, help="Path to a JSON settings file")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    from ghost.web.config import Config

    config = Config(host=args.host, port=args.port, provider=args.provider, model_id=args.model)
    if args.settings:
        config.settings_path = args.settings

    from ghost.web.app import create_app

    app = create_app(config)

    import uvicorn

    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
