# src/swatch_namer/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI: name hex swatches against a palette, optionally with ranked alternatives and name lookups."""
    from dotenv import load_dotenv

    load_dotenv()

    from .naming.color.logic import ColorMatcher, lookup_color_hex
    from .naming.color.vocab import PALETTE_SOURCES, get_default_palette, load_palette

    parser = argparse.ArgumentParser(
        prog="swatch-namer",
        description="Name hex colors by their nearest named color (CIE Lab ΔE).",
    )
    parser.add_argument(
        "colors",
        nargs="*",
        help="Hex colors to name (e.g. '#1e90ff' 8b4513)",
    )
    parser.add_argument(
        "--palette",
        choices=PALETTE_SOURCES,
        default=None,
        help="Palette source (default: $SWATCH_NAMER_PALETTE or 'bundled')",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=1,
        dest="top_k",
        help="Ranked candidates to show per color",
    )
    parser.add_argument(
        "--name",
        action="append",
        default=[],
        dest="names",
        help="Color name to resolve back to a hex (repeatable)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    colors = args.colors or ([] if args.names else ["#1e90ff"])

    try:
        palette = load_palette(args.palette) if args.palette else get_default_palette()
        matcher = ColorMatcher(palette)
        result = {"palette": palette.source, "colors": [], "names": {}}
        for hex_str in colors:
            match = matcher.match(hex_str)
            entry = {"input": hex_str, "status": match.status.value, "name": match.name}
            if args.top_k > 1:
                entry["candidates"] = [
                    {"name": c.name, "hex": c.hex, "delta_e": round(c.distance, 4)}
                    for c in matcher.nearest_color_names(hex_str, top_k=args.top_k)
                ]
            result["colors"].append(entry)
        for name in args.names:
            result["names"][name] = lookup_color_hex(name, palette)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
