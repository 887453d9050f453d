import pygame
import sys

from game import Game2048
from levels import LevelProgress, MAX_LEVEL, grid_size_for_level
from tiles import tile_style, text_size, tile_label
from controls import key_direction, swipe_direction
from game_events import EVENT_WON, EVENT_GAME_OVER, EVENT_HIGHEST_TILE
from sounds import GameSounds


COLORS = {
    'background': (10, 10, 26),
    'grid_background': (15, 23, 42),
    'text': (226, 232, 240),
    'accent': (0, 229, 255),
    'win': (255, 215, 0),
    'lose': (255, 69, 90),
}


class GameGUI:
    def __init__(self, level=1, highest_unlocked=None):
        """initialize game GUI"""
        pygame.init()

        self.progress = LevelProgress(max(highest_unlocked or level, level), level)
        self.game = None
        self.message = ""
        self.drag_start = None
        self.sound_on = True
        self.sounds = None

        # GUI settings
        self.grid_pixels = 460
        self.cell_margin = 10
        self.header_height = 140

        # window size
        self.window_width = self.grid_pixels
        self.window_height = self.grid_pixels + self.header_height

        # create window
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("2048 Nexus")

        # fonts
        self.fonts = {
            'large': pygame.font.Font(None, 48),
            'medium': pygame.font.Font(None, 36),
            'small': pygame.font.Font(None, 24),
        }

        # game clock
        self.clock = pygame.time.Clock()

        self.start_level(level)

    @property
    def cell_size(self):
        size = self.game.size
        return (self.grid_pixels - (size + 1) * self.cell_margin) // size

    def start_level(self, level):
        """open a fresh session for an unlocked level"""
        self.progress.select(level)
        self.game = Game2048(level=level)
        self.message = ""

        self.game.bus.subscribe(EVENT_WON, self.on_won)
        self.game.bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.game.bus.subscribe(EVENT_HIGHEST_TILE, self.on_highest_tile)
        self.sounds = GameSounds(self.game.bus, enabled=self.sound_on)

        print(f"Level {level}: {grid_size_for_level(level)}x{grid_size_for_level(level)} grid, "
              f"reach {self.game.target} to win")

    def on_won(self, sender, level, score, target):
        unlocked = self.progress.complete(level)
        self.message = f"Level {level} complete! N for next level"
        print(f"Level {level} complete with {score} points")
        if unlocked:
            print(f"Unlocked level {unlocked}")

    def on_game_over(self, sender, level, score, highest_tile, move_count):
        self.message = "Game Over! Press R to restart"
        print(f"Game over on level {level}: score {score}, best tile {highest_tile}, {move_count} moves")
        print(self.game.share_text())

    def on_highest_tile(self, sender, value):
        if value >= 128:
            print(f"New highest tile: {value}")

    def draw_board(self):
        """draw the game board"""
        self.screen.fill(COLORS['background'])

        self.draw_header()

        grid_rect = pygame.Rect(0, self.header_height, self.grid_pixels, self.grid_pixels)
        pygame.draw.rect(self.screen, COLORS['grid_background'], grid_rect)

        for row in range(self.game.size):
            for col in range(self.game.size):
                self.draw_cell(row, col)

    def draw_header(self):
        """draw the header with score, level and instructions"""
        game = self.game
        score_text = self.fonts['large'].render(f"Score: {game.score}", True, COLORS['text'])
        self.screen.blit(score_text, (20, 15))

        stats = (f"Best: {game.high_score}   Moves: {game.move_count}   "
                 f"Level {game.level}   Target: {game.target}")
        stats_surface = self.fonts['small'].render(stats, True, COLORS['accent'])
        self.screen.blit(stats_surface, (20, 60))

        if self.message:
            color = COLORS['lose'] if game.game_over else COLORS['win']
            text = self.message
        elif game.paused:
            color = COLORS['accent']
            text = "Paused - press P to resume"
        else:
            color = COLORS['text']
            text = "Arrow keys or drag to move"

        instruction_surface = self.fonts['small'].render(text, True, color)
        self.screen.blit(instruction_surface, (20, 85))

        help_text = self.fonts['small'].render("R restart, P pause, S sound, N/B level, ESC quit", True, COLORS['text'])
        self.screen.blit(help_text, (20, 110))

    def draw_cell(self, row, col):
        """draw a single cell of the grid"""
        value = self.game.board[row][col]
        style = tile_style(value)
        cell_size = self.cell_size

        x = col * (cell_size + self.cell_margin) + self.cell_margin
        y = row * (cell_size + self.cell_margin) + self.cell_margin + self.header_height

        cell_rect = pygame.Rect(x, y, cell_size, cell_size)
        pygame.draw.rect(self.screen, style.background, cell_rect, border_radius=8)
        if (row, col) == self.game.last_spawn:
            pygame.draw.rect(self.screen, style.glow, cell_rect, width=2, border_radius=8)

        label = tile_label(value)
        if label:
            text_surface = self.fonts[text_size(value)].render(label, True, style.text)
            text_rect = text_surface.get_rect()
            text_rect.center = (x + cell_size // 2, y + cell_size // 2)
            self.screen.blit(text_surface, text_rect)

    def handle_keypress(self, key):
        """keyboard input, returns False to quit"""
        if key == pygame.K_ESCAPE:
            return False

        elif key == pygame.K_r:
            self.game.reset()
            self.message = ""
            print("Game restarted!")

        elif key == pygame.K_p:
            self.game.toggle_pause()

        elif key == pygame.K_s:
            self.sound_on = self.sounds.toggle()
            print(f"Sound {'on' if self.sound_on else 'off'}")

        elif key == pygame.K_n:
            next_level = self.game.level + 1
            if next_level <= MAX_LEVEL and self.progress.is_unlocked(next_level):
                self.start_level(next_level)

        elif key == pygame.K_b:
            if self.game.level > 1:
                self.start_level(self.game.level - 1)

        else:
            direction = key_direction(key)
            if direction:
                self.game.make_move(direction)

        return True

    def handle_drag(self, start, end):
        """treat a mouse drag as a swipe"""
        direction = swipe_direction(end[0] - start[0], end[1] - start[1])
        if direction:
            self.game.make_move(direction)
        return direction

    def handle_event(self, event):
        """returns False to quit"""
        if event.type == pygame.QUIT:
            return False
        elif event.type == pygame.KEYDOWN:
            return self.handle_keypress(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.drag_start = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and self.drag_start is not None:
            self.handle_drag(self.drag_start, event.pos)
            self.drag_start = None
        return True

    def run(self):
        """main loop"""
        print("2048 Nexus started!")
        print("Use arrow keys or drag to move tiles")
        print("Press R to restart, P to pause, S for sound, ESC to quit")
        print()

        running = True
        while running:
            # one event at a time, each move finishes before the next
            for event in pygame.event.get():
                running = self.handle_event(event)
                if not running:
                    break

            self.draw_board()

            pygame.display.flip()

            # frame rate
            self.clock.tick(60)

        pygame.quit()


def main():
    # ===================================================================
    # GAME CONFIGURATION
    # ===================================================================

    # level to start on
    LEVEL = 1

    # highest level the player may pick with N
    HIGHEST_UNLOCKED = 1

    # ===================================================================

    try:
        game = GameGUI(level=LEVEL, highest_unlocked=HIGHEST_UNLOCKED)
        game.run()
    except Exception as e:
        print(f"Error running game: {e}")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
