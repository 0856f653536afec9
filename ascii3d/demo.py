#
# PROJECT: ascii3d
# MODULE: ascii3d/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .camera import Camera
from .config import RenderConfig, RenderMode, ShadingStyle
from .math_utils import Mat4
from .mesh import Box, Mesh, MeshLoadError, Pyramid
from .particles import BoxEmitter, ParticleSystem, PointEmitter, SphereEmitter
from .scene import ParticleSceneNode, Scene, SceneNode
from .text_mesh import Text3D

logger = logging.getLogger(__name__)

EMITTERS = {
    'point': lambda: PointEmitter(speed=0.6),
    'box': lambda: BoxEmitter(size=1.0, speed=0.3, chars=('·', '∙', '•', '°', '✦')),
    'sphere': lambda: SphereEmitter(radius=0.6, speed=0.4),
}


def load_shape(shape: str, text: str = 'HELLO'):
    """Resolve a shape name (box, pyramid, text) or an OBJ path to a Shape.

    An OBJ file that fails to load falls back to a box.
    """
    if shape == 'box':
        return Box()
    if shape == 'pyramid':
        return Pyramid()
    if shape == 'text':
        return Text3D(text)
    try:
        return Mesh.from_obj(shape)
    except MeshLoadError as e:
        logger.warning("%s; falling back to the demo box", e)
        return Box()


def build_particles(kind: str, seed=None):
    if kind not in EMITTERS:
        return None
    return ParticleSystem(EMITTERS[kind](), max_particles=150, emission_rate=30,
                          particle_lifetime=3.0, brownian_strength=0.2, seed=seed)


def build_scene(shape, camera: Camera, config: RenderConfig, spin: float = 0.0,
                particle_system=None) -> Scene:
    """One demo frame: the shape spinning around Y, particles at the origin."""
    nodes = [SceneNode.rotated(spin * 0.3, spin, 0.0, shape=shape)]
    particle_nodes = []
    if particle_system is not None:
        particle_nodes.append(ParticleSceneNode(particle_system, Mat4.identity()))
    return Scene(camera, nodes, particle_nodes, config)


class DemoApp:
    """
    Interactive curses harness: orbit camera, mode/shading toggles,
    animated spin and an optional particle system, with a HUD line.
    """

    MODES = list(RenderMode)
    STYLES = [ShadingStyle.LIT, ShadingStyle.DEPTH, ShadingStyle.SOLID, ShadingStyle.WIREFRAME]

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True
        self.paused = False

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        config = RenderConfig.detect_terminal()
        if args.mode:
            config.render_mode = RenderMode(args.mode)
        config.shading_style = ShadingStyle(args.shading)
        self.config = config

        self.shape = load_shape(args.shape, args.text)
        self.particles = build_particles(args.particles, args.seed)

        # ── Orbit state ─────────────────────────────────────────────────
        self.azimuth = 0.0
        self.elevation = 0.3
        self.distance = 5.0
        self.fov = 1.0
        self.spin = 0.0

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def camera(self) -> Camera:
        return Camera.orbit(distance=self.distance, azimuth=self.azimuth,
                            elevation=self.elevation, fov=self.fov)

    def _cycle(self, options, current):
        return options[(options.index(current) + 1) % len(options)]

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        config = self.config
        if key == ord('q'):
            self.running = False
        elif key == curses.KEY_UP:
            self.elevation = min(1.5, self.elevation + 0.1)
        elif key == curses.KEY_DOWN:
            self.elevation = max(-1.5, self.elevation - 0.1)
        elif key == curses.KEY_RIGHT:
            self.azimuth += 0.1
        elif key == curses.KEY_LEFT:
            self.azimuth -= 0.1
        elif key in (ord('='), ord('+')):
            self.distance = max(1.0, self.distance - 0.5)
        elif key == ord('-'):
            self.distance += 0.5
        elif key == ord('['):
            self.fov = max(0.2, self.fov - 0.1)
        elif key == ord(']'):
            self.fov = min(2.8, self.fov + 0.1)
        elif key == ord('m'):
            config.render_mode = self._cycle(self.MODES, config.render_mode)
        elif key == ord('s'):
            config.shading_style = self._cycle(self.STYLES, config.shading_style)
        elif key == ord('r') and self.particles is not None:
            self.particles.reset()
        elif key == ord(' '):
            self.paused = not self.paused

    def run(self):
        last = time.time()
        while self.running:
            start_time = time.time()
            dt = start_time - last
            last = start_time

            self.handle_input()
            if not self.paused:
                self.spin += dt * 0.5
                if self.particles is not None:
                    self.particles.update(dt)

            th, tw = self.stdscr.getmaxyx()
            width, height = tw - 1, th - 1
            scene = build_scene(self.shape, self.camera(), self.config,
                                self.spin, self.particles)
            frame = scene.render(width, height)

            self.stdscr.erase()
            for y, line in enumerate(frame.split('\n')):
                try:
                    self.stdscr.addstr(y + 1, 0, line)
                except curses.error:
                    pass

            # ── HUD overlay (line 0) ────────────────────────────────────
            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            ms = (now - start_time) * 1000
            n_particles = len(self.particles) if self.particles is not None else 0
            hdr = (f" {self.config.render_mode.value}"
                   f" | {self.config.shading_style.value}"
                   f" | V:{len(self.shape.vertices)}"
                   f" F:{len(self.shape.faces)}"
                   f" | P:{n_particles}"
                   f" | FPS:{self.fps}"
                   f" | {ms:.1f}ms ")
            try:
                self.stdscr.addstr(0, 0, hdr.center(max(0, tw - 1), '='),
                                   curses.color_pair(0) | curses.A_BOLD)
            except curses.error:
                pass

            self.stdscr.refresh()
            time.sleep(max(0.0, 0.033 - (time.time() - start_time)))


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
