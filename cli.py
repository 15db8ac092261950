import argparse
import logging
import sys

import render
from terrain import TerrainError, generate_terrain, load_config, THEMES


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _overrides(args) -> dict:
    out = {}
    if args.theme:
        out["theme"] = args.theme
    if args.noise_seed is not None:
        out["noise_seed"] = args.noise_seed
    if args.rng_seed is not None:
        out["rng_seed"] = args.rng_seed
    if args.no_fixtures:
        out["fixtures"] = False
    return out


def _generate(args):
    cfg = load_config(args.config, _overrides(args))
    return generate_terrain(cfg)


def cmd_generate(args):
    result = _generate(args)
    print(result.summary())


def cmd_preview(args):
    result = _generate(args)
    img = render.render_topdown(result, pixels_per_unit=args.pixels_per_unit,
                                show_clouds=args.clouds)
    img.save(args.out)
    print(f"Saved {args.out}")


def _add_common(p):
    p.add_argument("--config", default=None, help="JSON config file")
    p.add_argument("--theme", choices=sorted(THEMES), default=None)
    p.add_argument("--noise-seed", type=int, default=None)
    p.add_argument("--rng-seed", type=int, default=None)
    p.add_argument("--no-fixtures", action="store_true",
                   help="Skip the sea plane, rim and floor")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Hex terrain generator")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers()

    ap_gen = sub.add_parser("generate", help="Generate terrain and print a summary")
    _add_common(ap_gen)
    ap_gen.set_defaults(func=cmd_generate)

    ap_prev = sub.add_parser("preview", help="Render a top-down PNG preview")
    _add_common(ap_prev)
    ap_prev.add_argument("--out", default="terrain.png")
    ap_prev.add_argument("--pixels-per-unit", type=float, default=12.0)
    ap_prev.add_argument("--clouds", action="store_true", help="Outline cloud footprints")
    ap_prev.set_defaults(func=cmd_preview)

    args = ap.parse_args(argv)
    setup_logging(args.verbose)
    if not hasattr(args, "func"):
        ap.print_help()
        return 0
    try:
        args.func(args)
    except TerrainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
