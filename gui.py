# gui.py
# pygame viewer for found solutions

from __future__ import annotations

import calendar
from typing import Dict, List, Sequence, Tuple

import pygame

from board import BoardLayout, LabelKind
from pieces import STANDARD_PIECES, Piece
from solver import Solution

CELL_SIZE = 64
TOP_BAR_HEIGHT = 120

# Colors – dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
ILLEGAL = (45, 45, 49)

DATE_BORDER = (220, 90, 90)

PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "C": (60, 200, 80),
    "Gamma": (45, 140, 255),
    "L": (255, 190, 60),
    "Lamedh": (190, 70, 210),
    "O": (90, 220, 220),
    "P": (250, 80, 80),
    "T": (210, 145, 50),
    "Z": (110, 120, 255),
}
FALLBACK_COLOR = (160, 160, 165)


def _month_short_name(month: int) -> str:
    return calendar.month_abbr[month].title()


def window_size(board: BoardLayout) -> Tuple[int, int]:
    return board.cols * CELL_SIZE, board.rows * CELL_SIZE + TOP_BAR_HEIGHT


def _cell_text(board: BoardLayout, cell: int) -> str:
    label = board.label_of(cell)
    if label is None:
        return ""
    if label.kind is LabelKind.MONTH:
        return _month_short_name(label.value).upper()
    return str(label.value)


def _blit_centered(screen: pygame.Surface, surf: pygame.Surface, x: int, y: int) -> None:
    screen.blit(
        surf,
        (
            x + (CELL_SIZE - surf.get_width()) // 2,
            y + (CELL_SIZE - surf.get_height()) // 2,
        ),
    )


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    current_idx: int,
    total_solutions: int,
    month: int,
    day: int,
):
    width = screen.get_width()
    pygame.draw.rect(screen, BG, (0, 0, width, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, width - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Calendar Puzzle", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    month_name = _month_short_name(month)
    date_surf = label_font.render(f"{month_name} {day}", True, TEXT_MAIN)
    date_x = card_rect.right - date_surf.get_width() - 20
    screen.blit(date_surf, (date_x, card_rect.y + 12))

    if total_solutions:
        sol_text = f"Solution {current_idx + 1} of {total_solutions}"
    else:
        sol_text = "No solution"
    sol_surf = label_font.render(sol_text, True, TEXT_SECONDARY)
    screen.blit(sol_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_solution_grid(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    board: BoardLayout,
    excluded: Tuple[int, int],
    solution: Solution | None,
    pieces: Sequence[Piece] = STANDARD_PIECES,
):
    """
    Draws the board below the top bar.
    Date cells are outlined and keep their label; covered cells show the
    piece letter on the piece color.
    """
    letters = {piece.name: piece.label for piece in pieces}
    cell_map = solution.cell_map() if solution is not None else {}

    for r in range(board.rows):
        for c in range(board.cols):
            x = c * CELL_SIZE
            y = TOP_BAR_HEIGHT + r * CELL_SIZE
            rect = pygame.Rect(x + 2, y + 2, CELL_SIZE - 4, CELL_SIZE - 4)

            cell = board.cell_at(r, c)
            if cell is None:
                pygame.draw.rect(screen, ILLEGAL, rect, border_radius=12)
                continue

            if cell in excluded:
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, DATE_BORDER, rect, width=2, border_radius=12)
                text_surf = cell_font.render(_cell_text(board, cell), True, TEXT_MAIN)
                _blit_centered(screen, text_surf, x, y)
                continue

            if cell in cell_map:
                name = cell_map[cell].piece
                color = PIECE_COLORS.get(name, FALLBACK_COLOR)
                pygame.draw.rect(screen, color, rect, border_radius=12)
                text_surf = cell_font.render(letters.get(name, name[0]), True, (255, 255, 255))
                _blit_centered(screen, text_surf, x, y)
            else:
                # Empty playable cell
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)


def run_viewer(
    solutions: List[Solution],
    board: BoardLayout,
    excluded: Tuple[int, int],
    month: int,
    day: int,
) -> None:
    """Window paging through ``solutions`` with the arrow keys; Esc quits."""
    pygame.init()
    screen = pygame.display.set_mode(window_size(board))
    pygame.display.set_caption("Calendar Puzzle")

    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 24)
    cell_font = pygame.font.SysFont("SF Pro Text", 24, bold=True)

    clock = pygame.time.Clock()
    current_sol_idx = 0

    running = True
    while running:
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT and current_sol_idx < len(solutions) - 1:
                    current_sol_idx += 1
                elif event.key == pygame.K_LEFT and current_sol_idx > 0:
                    current_sol_idx -= 1

        screen.fill(BG)
        draw_top_bar(
            screen, title_font, label_font, current_sol_idx, len(solutions), month, day
        )
        current = solutions[current_sol_idx] if solutions else None
        draw_solution_grid(screen, cell_font, board, excluded, current)
        pygame.display.flip()

    pygame.quit()
