"""
Snapshot parsing for page-style square records.

Each square on the page is described by its element id ("x_y") and
its class attribute ("square open3", "square bombflagged", ...).
"""
from typing import Dict, Iterable, Tuple

from .board import Board
from .cell import BLANK, EXPLODED, FLAGGED, MAX_COUNT, Cell, CellState, Position
from .errors import MalformedSnapshot


SquareRecord = Tuple[str, str]

# Closed label set understood by the parser.
LABELS: Dict[str, CellState] = {
    "square blank": BLANK,
    "square bombflagged": FLAGGED,
    "square bombdeath": EXPLODED,
}
LABELS.update(
    {f"square open{count}": CellState.opened(count) for count in range(MAX_COUNT + 1)}
)


def state_from_label(class_name: str) -> CellState:
    """
    Map a square's class attribute to its state.

    Raises:
        MalformedSnapshot: If the label is not one of LABELS.
    """
    try:
        return LABELS[class_name]
    except KeyError:
        raise MalformedSnapshot(f"Unknown class name: {class_name!r}") from None


def label_for_state(state: CellState) -> str:
    """Inverse of state_from_label."""
    for label, candidate in LABELS.items():
        if candidate == state:
            return label
    raise ValueError(f"No label for state {state}")


def parse_position(element_id: str) -> Position:
    """
    Parse an "x_y" element id into a position.

    Raises:
        MalformedSnapshot: If the id is not two underscore-separated integers.
    """
    parts = element_id.split("_")
    if len(parts) != 2:
        raise MalformedSnapshot(f"Could not parse x and y from {element_id!r}")
    try:
        x, y = (int(part) for part in parts)
    except ValueError:
        raise MalformedSnapshot(
            f"Could not parse x and y from {element_id!r}"
        ) from None
    return Position(x, y)


def parse_board(squares: Iterable[SquareRecord]) -> Board:
    """
    Build a board snapshot from square records.

    Args:
        squares: (element_id, class_name) pairs in page order.

    Returns:
        Board with cells in the same order as the records.

    Raises:
        MalformedSnapshot: On a bad id or label, a duplicate position, or
            an opened count larger than the cell's neighbor count.
        GameOver: If any square is an exploded mine.
    """
    cells = []
    seen = set()
    for element_id, class_name in squares:
        position = parse_position(element_id)
        if position in seen:
            raise MalformedSnapshot(f"Duplicate position {tuple(position)}")
        seen.add(position)
        cells.append(Cell(position, state_from_label(class_name)))

    board = Board.from_cells(cells)
    for cell in board:
        if cell.is_opened and cell.state.count > len(board.neighbors(cell.position)):
            raise MalformedSnapshot(
                f"Cell {tuple(cell.position)} shows {cell.state.count} mines "
                f"but has only {len(board.neighbors(cell.position))} neighbors"
            )
    return board
