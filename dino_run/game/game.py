# dino_run/game/game.py
import sys, argparse, random, logging
from pathlib import Path
import pygame
from pygame import K_SPACE, K_UP, K_ESCAPE, K_RETURN
from .config import (
    WIDTH, HEIGHT, FPS, SEED_DEFAULT, ASSET_DIR_DEFAULT,
    COLOR_FG, COLOR_PANEL, COLOR_PANEL_EDGE, COLOR_PANEL_TEXT
)
from .audio import PygameAudio
from .log import setup_logging
from .render import PygameRenderer
from .session import Session
from .timers import Scheduler

log = logging.getLogger(__name__)


class OverlayUi:
    """UI sink: keeps the text the HUD and the start/restart panel show."""

    def __init__(self):
        self.title = "Press ENTER to start"
        self.button = "Start Run"
        self.score = 0
        self.show_panel = True

    def on_ready(self):
        self.title = "Ready?"
        self.show_panel = False

    def on_score_changed(self, score: int):
        self.score = score

    def on_game_over(self, score: int):
        self.title = f"Game Over - Score: {score}"
        self.button = "Try Again"
        self.score = score
        self.show_panel = True


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--assets", type=str, default=ASSET_DIR_DEFAULT,
                   help="Folder with optional sprites and sounds")
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--log-level", type=str, default="info")
    return p.parse_args()


def run():
    args = parse_args()
    setup_logging(args.log_level)

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = random.randrange(0, 2**32 - 1)
    else:
        launch_seed = args.seed
    log.info("obstacle seed %d", launch_seed)

    pygame.init()
    pygame.display.set_caption("Dino Run")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)
    big_font = pygame.font.SysFont("jetbrainsmono", 30)

    asset_dir = Path(args.assets)
    ui = OverlayUi()
    scheduler = Scheduler()
    session = Session(
        scheduler=scheduler,
        render=PygameRenderer(screen, asset_dir),
        audio=PygameAudio(asset_dir),
        ui=ui,
        rng=random.Random(launch_seed),
    )

    btn_w, btn_h = 200, 60
    button_rect = pygame.Rect((WIDTH - btn_w)//2, (HEIGHT - btn_h)//2 + 30, btn_w, btn_h)

    while True:
        dt_ms = clock.tick(args.fps)
        if dt_ms > 1000 / 30:  # clamp stalls
            dt_ms = 1000 / 30

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in (K_SPACE, K_UP):
                    session.request_jump()
                if event.key == K_RETURN and not session.playing:
                    session.start()
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if ui.show_panel and button_rect.collidepoint(event.pos):
                    session.start()
                else:
                    session.request_jump()

        # Spawner fires on wall-clock time, then one frame of simulation + draw
        scheduler.advance(dt_ms)
        if not scheduler.run_frame():
            # Idle / game over: loop is cancelled, keep showing the frozen scene
            session.render.draw_frame(session.frame_view())

        # --- HUD ---
        hud = f"Score: {ui.score}   Speed: {session.speed:.1f}"
        screen.blit(font.render(hud, True, COLOR_FG), (12, 10))
        screen.blit(font.render("SPACE jump | ENTER start | ESC quit", True, COLOR_FG), (12, 32))

        if ui.show_panel:
            title = big_font.render(ui.title, True, COLOR_FG)
            screen.blit(title, (WIDTH//2 - title.get_width()//2, button_rect.top - 60))
            pygame.draw.rect(screen, COLOR_PANEL, button_rect, border_radius=10)
            pygame.draw.rect(screen, COLOR_PANEL_EDGE, button_rect, width=2, border_radius=10)
            btn_txt = font.render(ui.button, True, COLOR_PANEL_TEXT)
            screen.blit(btn_txt, (button_rect.centerx - btn_txt.get_width()//2,
                                  button_rect.centery - btn_txt.get_height()//2))

        pygame.display.flip()

if __name__ == "__main__":
    run()
