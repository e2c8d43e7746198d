"""
Game-related API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_game_service
from app.schemas import game as game_schemas
from app.services.game_service import GameService

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={404: {"description": "Game not found"}}
)


@router.post("", response_model=game_schemas.GameState)
def create_game(
        game: game_schemas.GameCreate,
        service: GameService = Depends(get_game_service)
):
    """
    Create a new game session.

    - pvp: two humans alternate moves, X first
    - pve: the human plays X, the computer plays O at the chosen difficulty
    """
    session = service.create_game(game.board_size, game.mode, game.difficulty)
    return service.get_game_state(session.id)


@router.post("/{game_id}/move", response_model=game_schemas.MoveResponse)
def make_move(
        game_id: int,
        move: game_schemas.MoveCreate,
        service: GameService = Depends(get_game_service)
):
    """
    Make a move for the player whose turn it is.

    Coordinates are 1-indexed. In pve games the computer's reply is
    played in the same request and listed after the human move.

    Fails with:
    - INVALID_MOVE when the cell is off the board or occupied
    - GAME_ENDED when the game is already won or drawn
    """
    return service.make_move(game_id, move.row - 1, move.col - 1)


@router.get("/{game_id}", response_model=game_schemas.GameState)
def get_game_state(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """
    Get the current state of a game.

    Returns:
    - Current board
    - Game status and winner (if any)
    - Mark to move (if running)
    - Move count and elapsed time
    """
    return service.get_game_state(game_id)


@router.get("/{game_id}/moves", response_model=List[game_schemas.MoveRecordResponse])
def get_move_log(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """Get the ordered move log (1-indexed coordinates)."""
    return service.get_move_log(game_id)


@router.post("/{game_id}/save", response_model=game_schemas.SaveResponse)
def save_game(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """Write the game's move history to a text file on the server."""
    path = service.save_game(game_id)
    return {"game_id": game_id, "filename": path.name}


@router.delete("/{game_id}")
def delete_game(
        game_id: int,
        service: GameService = Depends(get_game_service)
):
    """Drop a game from the server, whether or not it has finished."""
    service.delete_game(game_id)
    return {"message": f"Game {game_id} deleted"}
