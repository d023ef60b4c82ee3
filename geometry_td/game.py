"""Turtle front end: draws snapshots and forwards input to the simulation."""

import logging
import math
import time
import turtle

from . import config
from .models import EnemyVariant, PayloadKind, TowerType
from .simulation import Simulation
from .sound import SoundManager

logger = logging.getLogger(__name__)

BUILD_KEYS = {
    "b": TowerType.BASIC,
    "s": TowerType.SPLASH,
    "l": TowerType.BEAM,
}


def to_screen(x, y):
    """Canvas coordinates (origin top-left, y down) to turtle coordinates."""
    return x - config.CANVAS_WIDTH / 2, config.CANVAS_HEIGHT / 2 - y


def to_world(x, y):
    """Turtle coordinates to canvas coordinates."""
    return x + config.CANVAS_WIDTH / 2, config.CANVAS_HEIGHT / 2 - y


def color_for_hardness(hp):
    """Enemy tint by hit points."""
    if hp < 50:
        return "#8bd9a3"
    if hp < 110:
        return "#ffd166"
    if hp < 180:
        return "#f4a261"
    if hp < 280:
        return "#ef4444"
    return "#8b5cf6"


class TowerDefenseGame:
    """Main game window."""

    def __init__(self, settings=None):
        """Initialize the game.

        Args:
            settings: GameSettings for the session
        """
        self.simulation = Simulation(settings)
        self.sound_manager = SoundManager(enabled=self.simulation.settings.sound)

        self.screen = turtle.Screen()
        self.screen.setup(width=config.CANVAS_WIDTH + 40, height=config.CANVAS_HEIGHT + 40)
        self.screen.bgcolor(config.COLOR_BACKGROUND)
        self.screen.title("Geometry TD")
        self.screen.tracer(0)

        self.build_type = None
        self.last_frame_time = None
        self.running = False

        self.setup_graphics()
        self.setup_input()

    def setup_graphics(self):
        """Set up the drawing turtles."""
        self.map_drawer = self._make_drawer()
        self.object_drawer = self._make_drawer()
        self.ui_drawer = self._make_drawer()
        self.draw_map()

    def _make_drawer(self):
        drawer = turtle.Turtle()
        drawer.hideturtle()
        drawer.speed(0)
        drawer.penup()
        return drawer

    def setup_input(self):
        """Set up keyboard and mouse input."""
        for key, tower_type in BUILD_KEYS.items():
            self.screen.onkey(lambda tower_type=tower_type: self.toggle_build(tower_type), key)
        self.screen.onkey(self.simulation.upgrade_selected_tower, "u")
        self.screen.onkey(self.simulation.start_wave, "space")
        self.screen.onkey(lambda: self.simulation.set_auto_wave(not self.simulation.auto_wave), "a")
        self.screen.onkey(lambda: self.simulation.set_turbo(not self.simulation.turbo), "t")
        self.screen.onkey(self.reset_game, "r")
        self.screen.onkey(self.cancel, "Escape")
        self.screen.listen()

        self.screen.onclick(self.on_click)

    def toggle_build(self, tower_type):
        """Select a tower type to place, or clear it if already selected."""
        self.build_type = tower_type if self.build_type is not tower_type else None

    def cancel(self):
        self.build_type = None
        self.simulation.select_tower(None)

    def on_click(self, x, y):
        """Select the tower under the cursor, or place the chosen tower type.

        Args:
            x: X coordinate of click
            y: Y coordinate of click
        """
        wx, wy = to_world(x, y)
        hit = self.simulation.tower_at(wx, wy)
        if hit is not None:
            self.simulation.select_tower(hit)
            return
        if self.build_type is not None:
            self.simulation.place_tower((wx, wy), self.build_type)
            return
        self.simulation.select_tower(None)

    def reset_game(self):
        """Reset the simulation and restart the frame loop if it had stopped."""
        self.simulation.reset_game()
        self.build_type = None
        if not self.running:
            self.start_loop()

    def start_loop(self):
        self.running = True
        self.last_frame_time = time.perf_counter()
        self.screen.ontimer(self.frame, int(1000 / config.FPS))

    def frame(self):
        """One display refresh: advance, play sounds, draw, reschedule."""
        now = time.perf_counter()
        dt = now - self.last_frame_time
        self.last_frame_time = now

        self.simulation.tick(dt)
        self.sound_manager.play_events(self.simulation.drain_events())
        self.draw()

        if self.simulation.game_over:
            self.running = False
            logger.debug("Frame loop stopped")
            return
        self.screen.ontimer(self.frame, int(1000 / config.FPS))

    def draw(self):
        """Draw the current snapshot."""
        snapshot = self.simulation.snapshot()
        self.object_drawer.clear()
        self.ui_drawer.clear()

        self.draw_towers(snapshot)
        self.draw_beams(snapshot)
        self.draw_projectiles(snapshot)
        self.draw_enemies(snapshot)
        self.draw_ui(snapshot)

        self.screen.update()

    def draw_map(self):
        """Draw the path once; it never changes."""
        points = [to_screen(x, y) for x, y in self.simulation.path.points]
        for color, width in ((config.COLOR_PATH, 28), (config.COLOR_PATH_INNER, 14)):
            self.map_drawer.color(color)
            self.map_drawer.pensize(width)
            self.map_drawer.penup()
            self.map_drawer.goto(points[0])
            self.map_drawer.pendown()
            for point in points[1:]:
                self.map_drawer.goto(point)
            self.map_drawer.penup()

    def draw_towers(self, snapshot):
        """Draw towers, their level pips and the selection ring."""
        pen = self.object_drawer
        for tower in snapshot.towers:
            x, y = to_screen(*tower.position)
            pen.goto(x, y)
            pen.color(tower.tower_type.color)
            pen.dot(24)
            pen.color("#a0b8ff")
            for i in range(min(tower.level, 10)):
                pen.goto(x - 10 + i * 5, y - 12)
                pen.dot(4)
            if tower.selected:
                self._circle(x, y, tower.stats.range, config.COLOR_SELECTION)

    def _circle(self, x, y, radius, color):
        pen = self.object_drawer
        pen.color(color)
        pen.pensize(1)
        pen.goto(x, y - radius)
        pen.setheading(0)
        pen.pendown()
        pen.circle(radius)
        pen.penup()

    def draw_beams(self, snapshot):
        pen = self.object_drawer
        pen.color(TowerType.BEAM.color)
        pen.pensize(3)
        for beam in snapshot.beams:
            pen.goto(to_screen(*beam.start))
            pen.pendown()
            pen.goto(to_screen(*beam.end))
            pen.penup()

    def draw_projectiles(self, snapshot):
        """Draw projectiles."""
        pen = self.object_drawer
        for projectile in snapshot.projectiles:
            pen.goto(to_screen(*projectile.position))
            pen.color(config.COLOR_PROJECTILE)
            pen.dot(9 if projectile.kind is PayloadKind.SPLASH else 6)

    def draw_enemies(self, snapshot):
        """Draw enemies with their remaining hit points."""
        pen = self.object_drawer
        for enemy in snapshot.enemies:
            x, y = to_screen(*enemy.position)
            pen.goto(x, y)
            if enemy.variant is EnemyVariant.NORMAL:
                pen.color(color_for_hardness(enemy.max_hp))
            else:
                pen.color(enemy.variant.spec["color"])
            pen.dot(enemy.radius * 2)
            pen.goto(x, y - 6)
            pen.color(config.COLOR_UI_TEXT)
            pen.write(str(max(0, math.ceil(enemy.hp))), align="center", font=("Arial", 9, "bold"))

    def draw_ui(self, snapshot):
        """Draw the HUD and overlays."""
        pen = self.ui_drawer
        pen.color(config.COLOR_UI_TEXT)
        left = -config.CANVAS_WIDTH / 2 + 10
        top = config.CANVAS_HEIGHT / 2 - 24

        status = f"Money: {snapshot.money}   Lives: {snapshot.lives}   Wave: {snapshot.wave_number}"
        if snapshot.auto_wave:
            status += "   [auto]"
        if snapshot.turbo:
            status += "   [x2]"
        pen.goto(left, top)
        pen.write(status, font=("Arial", 14, "bold"))

        build = self.build_type.label if self.build_type else "-"
        pen.goto(left, top - 22)
        pen.write(f"Build: {build}   (B/S/L select, U upgrade, SPACE wave, A auto, T turbo, R reset)",
                  font=("Arial", 10, "normal"))

        selected = next((t for t in snapshot.towers if t.selected), None)
        if selected:
            pen.goto(left, -config.CANVAS_HEIGHT / 2 + 10)
            pen.write(
                f"{selected.tower_type.label} L{selected.level}  dmg {selected.stats.damage:.0f}  "
                f"rate {selected.stats.fire_rate:.2f}  range {selected.stats.range:.0f}  "
                f"upgrade {selected.upgrade_cost}",
                font=("Arial", 11, "normal"),
            )

        if snapshot.wave_report:
            report = snapshot.wave_report
            pen.goto(0, 40)
            pen.write(f"Wave {report.wave_number} complete!", align="center", font=("Arial", 28, "bold"))
            pen.goto(0, 10)
            pen.write(f"+{report.reward} reward  +{report.bonus} bonus", align="center", font=("Arial", 16, "normal"))

        if snapshot.auto_wave_countdown is not None:
            pen.goto(0, -20)
            pen.write(f"Next wave in {snapshot.auto_wave_countdown:.1f}s", align="center", font=("Arial", 14, "normal"))

        if snapshot.game_over:
            pen.goto(0, 0)
            pen.color(config.COLOR_INVALID)
            pen.write("GAME OVER", align="center", font=("Arial", 40, "bold"))
            pen.goto(0, -40)
            pen.color(config.COLOR_UI_TEXT)
            pen.write("Press R to restart", align="center", font=("Arial", 20, "normal"))

    def run(self):
        """Start the frame loop and hand control to the window."""
        self.start_loop()
        try:
            turtle.mainloop()
        except KeyboardInterrupt:
            pass
        finally:
            self.sound_manager.stop_all()
