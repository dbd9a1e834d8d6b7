#!/usr/bin/env python
"""
Run the Streamlit pizza pricing page.

The port comes from settings (PIZZA_PRICING_UI_PORT, default 8501).

Usage:
    python scripts/run_app.py
"""
import subprocess
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from pizza_pricing.config.settings import get_settings


def build_command(ui_path: Path, port: int) -> list[str]:
    return [
        sys.executable, '-m', 'streamlit', 'run', str(ui_path),
        '--server.port', str(port),
        '--server.headless', 'true',
    ]


def main():
    settings = get_settings()
    ui_path = project_root / 'src' / 'pizza_pricing' / 'ui' / 'app_streamlit.py'
    
    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)
    
    cmd = build_command(ui_path, settings.ui_port)
    print(f"Starting Pizza Pricing page on port {settings.ui_port}: {' '.join(cmd)}")
    
    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nApplication stopped.")


if __name__ == "__main__":
    main()
