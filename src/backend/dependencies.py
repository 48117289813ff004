from fastapi import Request

from word_ladder.solver import WordLadderSolver


async def get_solver(request: Request) -> WordLadderSolver:
    """Dependency provider to get the shared WordLadderSolver instance."""
    return request.app.state.solver
