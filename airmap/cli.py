"""
AIRMAP Command Line Interface

Loads airports and routes, replays pointer events and renders the result.

Examples:
    # Render all airports
    airmap-render --output airports.html

    # Focus an airport and show its direct routes
    airmap-render --click SFO --output sfo.html

    # Download the OpenFlights data first
    airmap-render --download --click LHR
"""

import argparse
import sys
import traceback
import webbrowser
from pathlib import Path
from typing import List, Optional

from .app import AirportMap
from .config import Config
from .data.loader import download_dataset
from .exceptions import AirmapError
from .utils import setup_logging
from .visualization.map_generator import MAP_TILE_URLS


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="AIRMAP - Explore airports and their direct routes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render all airports:
    airmap-render --output airports.html

  Focus an airport:
    airmap-render --click SFO

  Toggle focus off again:
    airmap-render --click SFO --click SFO

  Click at a window pixel:
    airmap-render --click-at 412 230
        """,
    )

    # Data options
    parser.add_argument(
        "--config",
        type=str,
        default="data/config.yaml",
        help="Path to config file (default: data/config.yaml)",
    )
    parser.add_argument("--airports", type=str, help="Path to airports.dat (default: from config)")
    parser.add_argument("--routes", type=str, help="Path to routes.dat (default: from config)")
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download the OpenFlights data files before loading",
    )

    # Events, replayed in order: clicks, then hover
    parser.add_argument(
        "--click",
        action="append",
        default=[],
        metavar="CODE",
        help="Click an airport by IATA code (repeatable)",
    )
    parser.add_argument(
        "--click-at",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        help="Click at a window pixel after any --click events",
    )
    parser.add_argument("--hover", type=str, metavar="CODE", help="Hover an airport by IATA code")

    # Output options
    parser.add_argument("--output", type=str, default="airmap.html", help="Output filename")
    parser.add_argument(
        "--style",
        type=str,
        choices=list(MAP_TILE_URLS),
        help="Map style (default: from config)",
    )
    parser.add_argument("--zoom", type=int, help="Initial zoom level")
    parser.add_argument("--open", action="store_true", help="Open the map in a web browser")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for map rendering."""
    args = build_parser().parse_args(argv)

    config = Config(args.config)
    setup_logging(config)

    if args.airports:
        config.set("data.airports_path", args.airports)
    if args.routes:
        config.set("data.routes_path", args.routes)
    if args.style:
        config.set("map.style", args.style)

    try:
        if args.download:
            print("⬇️  Downloading OpenFlights data...")
            airports_path, routes_path = download_dataset(
                Path(config.airports_path).parent, timeout=config.download_timeout
            )
            config.set("data.airports_path", str(airports_path))
            config.set("data.routes_path", str(routes_path))

        print("📂 Loading airports and routes...")
        app = AirportMap.from_config(config)

        for code in args.click:
            state = app.click_airport(code)
            print(f"🖱️  Click {code.upper()}: {state.mode}")

        if args.click_at:
            x, y = args.click_at
            state = app.mouse_clicked(x, y)
            location = app.viewport.to_location(x, y)
            print(
                f"🖱️  Click at {x:.0f},{y:.0f} "
                f"({location.latitude:.2f}, {location.longitude:.2f}): {state.mode}"
            )

        if args.hover:
            app.hover_airport(args.hover)

        focus = app.controller.focused_marker(app.state)
        if focus is not None:
            print(
                f"📍 {focus.title}: {len(app.layers.index.edges_from(focus.airport_id))} routes"
            )

        app.render(args.output, zoom=args.zoom)

        if args.open:
            webbrowser.open(Path(args.output).resolve().as_uri())

    except AirmapError as e:
        print(f"❌ Error: {e}")
        return 1
    except Exception as e:
        print(f"❌ Fatal error: {e}")
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
