from fastapi import APIRouter, HTTPException, Depends
from typing import Dict, Any
import logging

from word_ladder.exceptions import (
    IncompatibleLengthsError,
    InvalidStrategyError,
    InvalidWordError,
)
from word_ladder.solver import SolverRequest, SolverResponse, WordLadderSolver
from backend.dependencies import get_solver

router = APIRouter(prefix="/api/solver", tags=["solver"])
logger = logging.getLogger(__name__)


@router.post("/path", response_model=SolverResponse)
def find_path(
    request: SolverRequest,
    solver: WordLadderSolver = Depends(get_solver)
) -> SolverResponse:
    """
    Find a word ladder between two dictionary words.

    A pair with no ladder is a normal result: 200 with `found` set to false.
    """
    try:
        response = solver.find_path(request.start_word, request.end_word, request.strategy)
    except InvalidWordError as e:
        logger.warning(f"Path finding rejected: {e}")
        raise HTTPException(status_code=404, detail=e.message)
    except (IncompatibleLengthsError, InvalidStrategyError) as e:
        logger.warning(f"Path finding rejected: {e}")
        raise HTTPException(status_code=400, detail=e.message)

    logger.info(
        f"Path request: {response.start} -> {response.goal} "
        f"({response.strategy.display_name}, found={response.found}, "
        f"{response.computation_time_ms:.1f}ms)"
    )
    return response


@router.get("/validate/{word}")
def validate_word(word: str, solver: WordLadderSolver = Depends(get_solver)) -> Dict[str, Any]:
    """
    Check if a word exists in the dictionary.

    Useful for validating user input before attempting path finding.
    """
    exists = solver.validate_word(word)
    return {
        "word": word,
        "exists": exists,
        "message": "Word found in dictionary" if exists else "Word not found in dictionary"
    }
