#!/usr/bin/env python3
"""
SecurBank Services Entry Point

Starts the FastAPI server with the SecurBank account and PDF endpoints.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from securbank.api import run_server
from securbank.config import get_config


if __name__ == "__main__":
    config = get_config()

    print("🏦 Starting SecurBank Services...")
    if config.forms_output_url:
        print(f"📄 Forms output service: {config.forms_output_url}")
    else:
        print("⚠️  Forms output service not configured, PDF generation disabled")
    print(f"🌐 API available at: http://localhost:{config.api_port}")
    print(f"📚 Documentation at: http://localhost:{config.api_port}/docs")
    print()

    try:
        run_server(
            host=config.api_host,
            port=config.api_port,
            workers=config.api_workers
        )
    except KeyboardInterrupt:
        print("\n👋 Shutting down SecurBank Services...")
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        sys.exit(1)
