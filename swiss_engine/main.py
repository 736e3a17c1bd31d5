import uvicorn
from fastapi import FastAPI

from swiss_engine.api.endpoints import matches as match_endpoints
from swiss_engine.api.endpoints import tournaments as tournament_endpoints
from swiss_engine.core.config import settings
from swiss_engine.core.logging import setup_logger

setup_logger("swiss_engine", level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

app = FastAPI(title=settings.APP_TITLE)

app.include_router(tournament_endpoints.router, prefix="/api/tournaments", tags=["Tournaments"])
app.include_router(match_endpoints.router, prefix="/api/matches", tags=["Matches"])

@app.get("/")
async def root():
    return {"message": settings.APP_TITLE}

if __name__ == "__main__":
    uvicorn.run("swiss_engine.main:app", host="127.0.0.1", port=8000)
