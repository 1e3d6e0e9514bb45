# pathviz/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer — paint a grid, watch A* search it.

- Mouse:
    click / drag on the grid -> paint with the current mode
- Keyboard:
    [S]/[E]/[W]  -> paint mode: start / end / wall
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset search (keeps walls)
    [C]          -> clear grid
    [+]/[-]      -> speed
    [H]          -> cycle heuristic
    [M]          -> cycle bundled maps
    [Q]/[ESC]    -> quit

Settings: see pathviz.config (PATHVIZ_* env vars or --key=value args).
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import pygame

from pathviz.app.editor import GridEditor, new_grid
from pathviz.app.playback import NO_PATH, Playback
from pathviz.config import SPEEDS, ViewerConfig, resolve_config
from pathviz.core.grid import Grid, bundled_maps, load_map
from pathviz.core.heuristics import HEURISTICS
from pathviz.core.types import Coord

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font
SPEED_ORDER = ["slow", "medium", "fast"]

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
ASPHALT_GRAY= (200,200,200)
WALL_DARK   = ( 40, 44, 52)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
WARN_RED    = (255,120,110)


def resolve_map_path(name: str) -> Path:
    p = Path(name)
    if p.is_file():
        return p
    maps = bundled_maps()
    if name in maps:
        return maps[name]
    raise ValueError(f"no map file or bundled map named {name!r}; bundled: {sorted(maps)}")


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, config: ViewerConfig, grid: Grid, map_key: Optional[str] = None):
        pygame.init()

        self.config = config
        self.editor = GridEditor(grid)
        self.playback = Playback(config.delay_ms)
        self.speed = config.speed
        self.heuristic = config.heuristic
        self.selected_map_key = map_key or "custom"

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        cs = self._auto_cell_size(grid)
        win_w = GRID_MARGIN*2 + grid.cols * cs + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.rows * cs, 620)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding — A* Visualizer")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.running = False
        self.state = "Idle"
        self.clock = pygame.time.Clock()
        self._quit = False

    @property
    def grid(self) -> Grid:
        return self.editor.grid

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(6, min(avail_w // self.grid.cols, avail_h // self.grid.rows)))

        grid_plate_w = self.grid.cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.rows * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (GRID_MARGIN, top_y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(8, min(28, target_h // grid.rows))

    def cell_at_pixel(self, pos: Tuple[int, int]) -> Optional[Coord]:
        ox, oy = self._grid_origin
        x, y = pos
        if x < ox or y < oy:
            return None
        coord = ((y - oy) // self.cell_size, (x - ox) // self.cell_size)
        return coord if self.grid.in_bounds(coord) else None

    # ---------- loop ----------
    def run(self):
        while not self._quit:
            dt = self.clock.tick(60)
            self._handle_events()
            if self.running:
                self._tick_playback(dt)
            self._draw()
        pygame.quit()

    def _tick_playback(self, dt_ms: float):
        self.playback.advance(dt_ms)
        self._sync_state()

    def _sync_state(self):
        pb = self.playback
        if pb.finished:
            self.running = False
            self.state = "No path found" if pb.phase == NO_PATH else "Done"
        elif pb.error is not None:
            self.running = False
            self.state = f"Can't search: {pb.error}"
        elif pb.active:
            self.state = "Running" if self.running else "Paused"
        self.editor.locked = pb.active
        self._refresh_active_states()

    def _ensure_search(self) -> bool:
        """Start a search if none is in flight; False if the endpoints are invalid."""
        if self.playback.active:
            return True
        if not self.playback.start(self.grid, self.heuristic):
            self.state = f"Can't search: {self.playback.error}"
            logger.warning("%s", self.state)
            return False
        return True

    def toggle_run(self):
        if self.running:
            self.running = False
        elif self._ensure_search():
            self.running = True
        self._sync_state()

    def step_once(self):
        if self.running or not self._ensure_search():
            return
        self.playback.tick()
        self._sync_state()

    def reset_search(self):
        self.running = False
        self.playback.clear()
        self.state = "Idle"
        self._sync_state()

    def clear_grid(self):
        self.reset_search()
        self.editor.full_reset()
        self._layout(*self.screen.get_size())

    def set_mode(self, mode: str):
        self.editor.set_mode(mode)
        self._refresh_active_states()

    def bump_speed(self, dv: int):
        i = SPEED_ORDER.index(self.speed)
        self.speed = SPEED_ORDER[max(0, min(len(SPEED_ORDER) - 1, i + dv))]
        self.playback.delay_ms = SPEEDS[self.speed]

    def cycle_heuristic(self):
        names = list(HEURISTICS)
        self.heuristic = names[(names.index(self.heuristic) + 1) % len(names)]
        self.reset_search()

    def cycle_map(self):
        maps = bundled_maps()
        if not maps:
            return
        keys = list(maps)
        i = keys.index(self.selected_map_key) + 1 if self.selected_map_key in keys else 0
        self.switch_map(keys[i % len(keys)])

    def switch_map(self, key: str):
        try:
            grid = load_map(resolve_map_path(key))
        except (OSError, ValueError, KeyError) as ex:
            logger.error("Failed to load map %s: %s", key, ex)
            return
        self.reset_search()
        self.editor.grid = grid
        self.selected_map_key = key
        pygame.display.set_caption(f"Pathfinding — {key}")
        self._layout(*self.screen.get_size())

    def paint(self, pos: Tuple[int, int], dragging: bool = False):
        coord = self.cell_at_pixel(pos)
        if coord is None:
            return
        changed = self.editor.drag(coord) if dragging else self.editor.click(coord)
        if changed and self.playback.finished:
            # stale overlays would no longer match the edited grid
            self.reset_search()

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit = True
            elif e.type == pygame.KEYDOWN:
                self.on_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if not any(b.handle_mouse(e) for b in self._buttons):
                    self.paint(e.pos)
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if e.buttons[0]:
                    self.paint(e.pos, dragging=True)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self.editor.release()

    def on_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit = True
        elif key == pygame.K_SPACE:
            self.toggle_run()
        elif key == pygame.K_n:
            self.step_once()
        elif key == pygame.K_r:
            self.reset_search()
        elif key == pygame.K_c:
            self.clear_grid()
        elif key == pygame.K_s:
            self.set_mode("start")
        elif key == pygame.K_e:
            self.set_mode("end")
        elif key == pygame.K_w:
            self.set_mode("wall")
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self.bump_speed(+1)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self.bump_speed(-1)
        elif key == pygame.K_h:
            self.cycle_heuristic()
        elif key == pygame.K_m:
            self.cycle_map()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, coord: Coord) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = coord
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _fill_overlay(self, coords, rgba):
        cs = self.cell_size
        s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(rgba)
        for c in coords:
            self.screen.blit(s, self._cell_rect(c).topleft)

    def _draw_grid(self):
        for line in self.grid.cells:
            for cell in line:
                rect = self._cell_rect(cell.coord)
                pygame.draw.rect(self.screen, WALL_DARK if cell.obstacle else ASPHALT_GRAY, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        pb = self.playback
        self._fill_overlay(pb.visited, NEON_MAG_A)
        self._fill_overlay(pb.open_cells(), NEON_CYAN_A)
        for c in pb.path_shown:
            pygame.draw.rect(self.screen, NEON_MINT, self._cell_rect(c).inflate(-4, -4), border_radius=4)

        self._draw_badge(self.grid.start, BLUE, "S")
        self._draw_badge(self.grid.end, RED, "G")

    def _draw_badge(self, cell: Optional[Coord], color: Tuple[int,int,int], label: str):
        if cell is None:
            return
        rect = self._cell_rect(cell)
        pygame.draw.circle(self.screen, color, rect.center, max(4, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self.toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self.step_once);      y += h + gap
        add("Reset Search", self.reset_search); y += h + gap
        add("Clear Grid", self.clear_grid);     y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self.bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self.bump_speed(+1)))
        y += h + gap

        third = (w - 16) // 3
        for i, mode in enumerate(("start", "end", "wall")):
            rect = pygame.Rect(x + i * (third + 8), y, third, h)
            btn = UIButton(mode.capitalize(), rect, lambda m=mode: self.set_mode(m), togglable=True)
            self._buttons.append(btn)
            setattr(self, f"btn_mode_{mode}", btn)
        y += h + gap

        add("Next Heuristic", self.cycle_heuristic); y += h + gap
        add("Next Map", self.cycle_map)

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))
        for mode in ("start", "end", "wall"):
            btn = getattr(self, f"btn_mode_{mode}", None)
            if btn is not None:
                btn.set_active(self.editor.mode == mode)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 230
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self.playback.metrics
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Visited: {m.get('visited', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"Map: {self.selected_map_key}  Mode: {self.editor.mode}")
        line(f"Heuristic: {self.heuristic}  Speed: {self.speed}")
        warn = self.state.startswith("Can't") or self.state == "No path found"
        line(self.state, color=WARN_RED if warn else TEXT_LIGHT)

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    config = resolve_config(argv=argv)
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    map_key = None
    if config.map:
        grid = load_map(resolve_map_path(config.map))
        map_key = config.map
    else:
        grid = new_grid(config.rows, config.cols)
    Viewer(config, grid, map_key).run()


if __name__ == "__main__":
    main()
