import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from . import config
from .routes import router

app = FastAPI(
    title="Tic Tac Toe Minimax",
    description="Computes the optimal next tic tac toe move and reports the game status.",
    version="0.1.0",
    openapi_tags=[
        {"name": "Move", "description": "Best-move endpoints for X and O."},
    ]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Move endpoints
app.include_router(router)

@app.get("/", tags=["General"])
def health_check():
    """Health Check endpoint for backend"""
    return {"message": "Healthy"}


# PUBLIC_INTERFACE
def run():
    """Start the service with uvicorn using the environment configuration."""
    logging.basicConfig(level=config.LOG_LEVEL.upper())
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL)
