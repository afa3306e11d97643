"""Saving and loading franchise runs as JSON."""

import json
import logging
from pathlib import Path
from typing import Union

from hardwood.management.state import GameState


logger = logging.getLogger(__name__)


def save_game(state: GameState, path: Union[str, Path]) -> Path:
    """Save a run to a JSON file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(state.to_dict(), f, indent=2)
    logger.info("Saved run %s (season %d) to %s", state.session_id, state.season, path)
    return path


def load_game(path: Union[str, Path]) -> GameState:
    """Load a run from a JSON file."""
    with open(Path(path), "r") as f:
        data = json.load(f)
    state = GameState.from_dict(data)
    logger.info("Loaded run %s (season %d) from %s", state.session_id, state.season, path)
    return state
