import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.api.solver import router as solver_router
from word_ladder.config import SolverConfig
from word_ladder.dictionary import WordDictionary
from word_ladder.logging_config import setup_logging
from word_ladder.solver import WordLadderSolver

config = SolverConfig.from_env()

logger = logging.getLogger(__name__)


def create_app(solver: Optional[WordLadderSolver] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        solver: Pre-built solver to serve. If None, the dictionary named by the
            configuration is loaded at startup; a DictionaryUnavailableError
            aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        logger.info("Starting Word Ladder API...")

        if solver is None:
            dictionary = WordDictionary.from_file(config.dictionary_file)
            app.state.solver = WordLadderSolver(dictionary, use_neighbor_cache=config.use_neighbor_cache)
        else:
            app.state.solver = solver
        logger.info(f"WordLadderSolver created with {len(app.state.solver.dictionary):,} words")

        yield

        logger.info("Word Ladder API shutdown complete")

    app = FastAPI(
        title="Word Ladder API",
        description="API for finding word ladders with UCS, Greedy Best-First and A* search",
        version="0.1.0",
        debug=config.debug,
        lifespan=lifespan
    )

    app.include_router(solver_router)

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "message": "Word Ladder API",
            "version": "0.1.0",
            "strategies": ["UCS", "Greedy", "A*"],
            "docs": "/docs",
            "health": "/health",
            "solver_api": "/api/solver"
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "word-ladder-api",
            "version": "0.1.0",
            "dictionary_size": len(request.app.state.solver.dictionary),
        }

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": "An unexpected error occurred"
            }
        )

    return app


app = create_app()

if __name__ == "__main__":
    setup_logging(level=config.log_level)
    uvicorn.run(
        "backend.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="info"
    )
