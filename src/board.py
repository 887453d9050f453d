"""
board engine: pure slide/merge, spawning and terminal checks

boards are plain lists of lists of ints (0 = empty). every function here
returns a new board and never modifies the one it was given.
"""
from collections import namedtuple


DIRECTIONS = ('up', 'down', 'left', 'right')

# 90% chance for 2 and 10% chance for 4
SPAWN_TWO_PROBABILITY = 0.9

MoveResult = namedtuple('MoveResult', ['board', 'points', 'moved'])


def new_board(size):
    """empty size x size board"""
    return [[0 for _ in range(size)] for _ in range(size)]


def copy_board(board):
    return [list(row) for row in board]


def validate_board(board):
    """
    check that board is square and every cell is 0 or a power of two >= 2

    raises ValueError on a malformed board, returns a copy otherwise
    """
    size = len(board)
    if size < 2:
        raise ValueError(f"board must be at least 2x2, got {size} rows")

    for row in board:
        if len(row) != size:
            raise ValueError(f"board must be square, got a row of length {len(row)} in a {size}-row board")
        for value in row:
            if value == 0:
                continue
            if value < 2 or value & (value - 1):
                raise ValueError(f"invalid tile value: {value}")

    return copy_board(board)


def slide_row(row):
    """
    slide one row towards index 0 and merge equal neighbours

    a merged tile does not merge again in the same slide

    returns:
        new_row: same length as row
        points: sum of the merged tile values
    """
    tiles = [value for value in row if value != 0]

    merged_row = []
    points = 0
    i = 0
    while i < len(tiles):
        if i < len(tiles) - 1 and tiles[i] == tiles[i + 1]:
            merged_value = tiles[i] * 2
            merged_row.append(merged_value)
            points += merged_value
            i += 2  # skip the partner tile
        else:
            merged_row.append(tiles[i])
            i += 1

    merged_row += [0] * (len(row) - len(merged_row))
    return merged_row, points


def transpose(board):
    return [list(column) for column in zip(*board)]


def reverse_rows(board):
    return [row[::-1] for row in board]


# each direction is a transform into "slide left" space; all of them are
# their own inverse, down applies transpose then reverse and undoes in
# the opposite order
_TO_LEFT = {
    'left': (),
    'right': (reverse_rows,),
    'up': (transpose,),
    'down': (transpose, reverse_rows),
}


def resolve_move(board, direction):
    """
    compute the board after sliding in a direction

    args:
        board: N x N board
        direction: 'up', 'down', 'left' or 'right'

    returns:
        MoveResult(board, points, moved)
    """
    if direction not in _TO_LEFT:
        raise ValueError(f"unknown direction: {direction!r}")

    transforms = _TO_LEFT[direction]

    original = copy_board(board)
    work = original
    for transform in transforms:
        work = transform(work)

    points = 0
    slid = []
    for row in work:
        new_row, row_points = slide_row(row)
        slid.append(new_row)
        points += row_points

    for transform in reversed(transforms):
        slid = transform(slid)

    return MoveResult(slid, points, slid != original)


def empty_cells(board):
    """(row, col) of every empty cell, in row-major order"""
    return [(i, j)
            for i, row in enumerate(board)
            for j, value in enumerate(row)
            if value == 0]


def spawn_tile(board, rng):
    """
    place a 2 or a 4 in a random empty cell

    args:
        board: board with at least one empty cell
        rng: random source with random() and choice(), e.g. random.Random

    returns:
        new_board: copy of board with the tile placed
        position: (row, col) of the new tile
    """
    cells = empty_cells(board)
    if not cells:
        raise ValueError("cannot spawn a tile on a full board")

    row, col = rng.choice(cells)
    value = 2 if rng.random() < SPAWN_TWO_PROBABILITY else 4

    spawned = copy_board(board)
    spawned[row][col] = value
    return spawned, (row, col)


def max_tile(board):
    return max(max(row) for row in board)


def has_won(board, target):
    """any tile reached the target value"""
    return max_tile(board) >= target


def can_move(board):
    """check if any direction would change the board"""
    size = len(board)
    for i in range(size):
        for j in range(size):
            if board[i][j] == 0:
                return True
            # horizontal neighbour
            if j < size - 1 and board[i][j] == board[i][j + 1]:
                return True
            # vertical neighbour
            if i < size - 1 and board[i][j] == board[i + 1][j]:
                return True
    return False


def is_game_over(board):
    """full board with no equal neighbours in any direction"""
    return not can_move(board)
