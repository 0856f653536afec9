#!/usr/bin/env python3
#
# PROJECT: ascii3d
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ascii3d.camera import Camera
from ascii3d.config import RenderConfig, RenderMode, ShadingStyle
from ascii3d.demo import build_particles, build_scene, load_shape, main
from ascii3d.logging_config import setup_logging


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                       Spinning box, Braille wireframe
  %(prog)s pyramid --mode ascii                  Pyramid in plain ASCII
  %(prog)s text --text "HI 3D" --mode braille-culled
  %(prog)s box --mode solid-ascii --shading lit  Lit solid cube
  %(prog)s cobra.obj --particles sphere          OBJ model with a particle halo
  %(prog)s box --once --width 60 --height 20     Print a single frame to stdout
"""
    parser = argparse.ArgumentParser(
        description="Terminal 3D renderer demo",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("shape", nargs='?', default="box",
                        help="box, pyramid, text or a path to an .obj file (default: box)")
    parser.add_argument("--text", default="HELLO",
                        help="String drawn by the text shape (default: HELLO)")
    parser.add_argument("--mode", choices=[m.value for m in RenderMode], default=None,
                        help="Render mode (default: detected from the terminal)")
    parser.add_argument("--shading", choices=[s.value for s in ShadingStyle], default="lit",
                        help="Shading style for solid modes (default: lit)")
    parser.add_argument("--particles", choices=["none", "point", "box", "sphere"],
                        default="none", help="Attach a particle emitter (default: none)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the particle random source")
    parser.add_argument("--once", action="store_true",
                        help="Print one frame to stdout instead of running the curses demo")
    parser.add_argument("--width", type=int, default=80,
                        help="Frame width in cells for --once (default: 80)")
    parser.add_argument("--height", type=int, default=24,
                        help="Frame height in cells for --once (default: 24)")
    parser.add_argument("--azimuth", type=float, default=0.6,
                        help="Camera azimuth in radians for --once (default: 0.6)")
    parser.add_argument("--elevation", type=float, default=0.4,
                        help="Camera elevation in radians for --once (default: 0.4)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def render_once(args) -> str:
    config = RenderConfig.detect_terminal()
    if args.mode:
        config.render_mode = RenderMode(args.mode)
    config.shading_style = ShadingStyle(args.shading)

    particles = build_particles(args.particles, args.seed)
    if particles is not None:
        # Let the emitter run for a second so there is something to see
        for _ in range(30):
            particles.update(1 / 30)

    camera = Camera.orbit(distance=5.0, azimuth=args.azimuth, elevation=args.elevation)
    scene = build_scene(load_shape(args.shape, args.text), camera, config,
                        particle_system=particles)
    return scene.render(args.width, args.height)


if __name__ == "__main__":
    args = parse_args()
    if args.once:
        setup_logging(log_file=args.log_file, debug=args.debug)
        print(render_once(args))
        sys.exit(0)

    # Never log to the console while curses owns the screen
    setup_logging(log_file=args.log_file, debug=args.debug, console=False)
    try:
        curses.wrapper(lambda s: main(s, args))
    except KeyboardInterrupt:
        pass
